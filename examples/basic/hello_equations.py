"""Split text into blocks in 3 lines: zero config, zero deps."""

from mathseg import parse

for block in parse("Euler: $e^{i\\pi} + 1 = 0$, and in display form\n$$e^{i\\pi} = -1$$"):
    print("inline" if block.is_inline else "block ", [(c.type.name, c.text) for c in block])
