"""Grouping of components into layout blocks.

Consecutive inline components (plain text and inline equations) form one
block. Every non-inline component (tex-block and named equations) gets a
block of its own. Blocks partition the component sequence: flattening them
gives back the input, in order.

Thread Safety:
Pure functions over immutable components. Safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Iterable

from mathseg.components import Component, ComponentBlock


def group_components(components: Iterable[Component]) -> list[ComponentBlock]:
    """Group components into blocks.

    Args:
        components: Components in source order

    Returns:
        Blocks in source order. Never contains an empty block.

    Example:
        >>> group_components(parse_components("a $x$ $$y$$ b"))
        [ComponentBlock(components=(... 'a ' ..., ... 'x' ..., ... ' ' ...)),
         ComponentBlock(components=(... 'y' ...,)),
         ComponentBlock(components=(... ' b' ...,))]
    """
    blocks: list[ComponentBlock] = []
    pending: list[Component] = []
    for component in components:
        if component.type.is_inline:
            pending.append(component)
            continue
        if pending:
            blocks.append(ComponentBlock(tuple(pending)))
            pending.clear()
        blocks.append(ComponentBlock((component,)))
    if pending:
        blocks.append(ComponentBlock(tuple(pending)))
    return blocks


def flatten_blocks(blocks: Iterable[ComponentBlock]) -> list[Component]:
    """Concatenate the components of all blocks, in order."""
    return [component for block in blocks for component in block.components]


__all__ = [
    "flatten_blocks",
    "group_components",
]
