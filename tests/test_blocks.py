"""Tests for grouping components into layout blocks."""

from mathseg import (
    Component,
    ComponentBlock,
    ComponentType,
    flatten_blocks,
    group_components,
    parse,
    parse_components,
)

TEXT = ComponentType.PLAIN_TEXT
INLINE = ComponentType.INLINE_EQUATION
TEX_BLOCK = ComponentType.TEX_BLOCK_EQUATION
NAMED = ComponentType.NAMED_EQUATION


def _shape(blocks: list[ComponentBlock]) -> list[list[ComponentType]]:
    return [[c.type for c in block] for block in blocks]


class TestGroupComponents:
    """group_components() partitions components into blocks."""

    def test_empty_sequence(self) -> None:
        assert group_components([]) == []

    def test_inline_run_is_one_block(self) -> None:
        components = [Component("a ", TEXT), Component("x", INLINE), Component(" b", TEXT)]
        blocks = group_components(components)
        assert blocks == [ComponentBlock(tuple(components))]

    def test_non_inline_gets_own_block(self) -> None:
        blocks = group_components([Component("y", TEX_BLOCK)])
        assert _shape(blocks) == [[TEX_BLOCK]]

    def test_leading_non_inline_emits_no_empty_block(self) -> None:
        blocks = group_components([Component("y", TEX_BLOCK), Component("a", TEXT)])
        assert _shape(blocks) == [[TEX_BLOCK], [TEXT]]
        assert all(len(block) for block in blocks)

    def test_adjacent_non_inline_components(self) -> None:
        blocks = group_components([Component("a", TEX_BLOCK), Component("b", NAMED)])
        assert _shape(blocks) == [[TEX_BLOCK], [NAMED]]

    def test_mixed_sequence(self) -> None:
        blocks = parse("a $x$ $$y$$ b \\begin{equation}z\\end{equation}")
        assert _shape(blocks) == [[TEXT, INLINE, TEXT], [TEX_BLOCK], [TEXT], [NAMED]]

    def test_accepts_any_iterable(self) -> None:
        blocks = group_components(iter(parse_components("$a$ $$b$$")))
        assert _shape(blocks) == [[INLINE, TEXT], [TEX_BLOCK]]


class TestFlattenBlocks:
    """flatten_blocks() undoes grouping."""

    def test_round_trip(self) -> None:
        source = "Text $a$ more $$b$$ end $c$"
        assert flatten_blocks(parse(source)) == parse_components(source)

    def test_grouping_is_idempotent(self) -> None:
        blocks = parse("Text $a$ more $$b$$ end $c$")
        assert group_components(flatten_blocks(blocks)) == blocks

    def test_empty(self) -> None:
        assert flatten_blocks([]) == []
