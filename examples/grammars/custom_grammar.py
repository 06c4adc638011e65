r"""Register \(...\) as an extra inline equation syntax."""

import re

from mathseg import ComponentType, EquationGrammar, Segmenter, create_registry_with_defaults

PAREN = EquationGrammar(
    name="paren",
    pattern=re.compile(r"\\\(.*?\\\)", re.DOTALL),
    terminator=re.compile(r"\\\)"),
    component_type=ComponentType.INLINE_EQUATION,
    left_terminator=r"\(",
    right_terminator=r"\)",
)

registry = create_registry_with_defaults().register(PAREN).build()
segment = Segmenter(grammar_registry=registry)

for component in segment.parse_components(r"Both \(a^2\) and $b^2$ are inline."):
    print(component.type.name, repr(component.text))
