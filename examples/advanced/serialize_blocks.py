"""Hand scan results to a renderer as JSON."""

from mathseg import parse
from mathseg.serialization import from_json, to_json

blocks = parse("Area $A = \\pi r^2$\n\\begin{equation}C = 2\\pi r\\end{equation}")
payload = to_json(blocks, indent=2)
print(payload)

assert from_json(payload) == blocks
