"""Property-based tests for the scanner using Hypothesis.

These tests verify invariants that hold for any input:
1. Scanning never raises and never produces empty components
2. Delimited component text reconstructs the input
3. Blocks partition the component sequence and grouping is idempotent
4. RenderingMode.ALL always yields one inline equation

Inputs are built from delimiter fragments so that matches, escapes and
nesting actually occur.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from mathseg import (
    ComponentType,
    RenderingMode,
    flatten_blocks,
    group_components,
    parse,
    parse_components,
)

fragments = st.sampled_from(
    [
        "$",
        "$$",
        "\\",
        "\\begin{equation}",
        "\\end{equation}",
        "a",
        "x^2",
        " ",
        "\n",
    ]
)
markup = st.lists(fragments, max_size=20).map("".join)
any_text = st.one_of(markup, st.text(max_size=40))


class TestScanProperties:
    """Invariants of parse_components()."""

    @given(source=any_text)
    @settings(max_examples=200)
    def test_never_raises(self, source: str) -> None:
        parse_components(source)

    @given(source=any_text)
    @settings(max_examples=200)
    def test_delimited_text_reconstructs_source(self, source: str) -> None:
        components = parse_components(source)
        assert "".join(c.delimited for c in components) == source

    @given(source=any_text)
    @settings(max_examples=200)
    def test_no_empty_components(self, source: str) -> None:
        assert all(c.text for c in parse_components(source))

    @given(source=markup)
    @settings(max_examples=200)
    def test_plain_text_never_adjacent(self, source: str) -> None:
        types = [c.type for c in parse_components(source)]
        for left, right in zip(types, types[1:]):
            assert not (left is ComponentType.PLAIN_TEXT and right is ComponentType.PLAIN_TEXT)

    @given(source=markup)
    @settings(max_examples=100)
    def test_deterministic(self, source: str) -> None:
        assert parse_components(source) == parse_components(source)


class TestBlockProperties:
    """Invariants of parse() and grouping."""

    @given(source=any_text)
    @settings(max_examples=200)
    def test_blocks_flatten_to_components(self, source: str) -> None:
        assert flatten_blocks(parse(source)) == parse_components(source)

    @given(source=markup)
    @settings(max_examples=200)
    def test_grouping_is_idempotent(self, source: str) -> None:
        blocks = parse(source)
        assert group_components(flatten_blocks(blocks)) == blocks

    @given(source=markup)
    @settings(max_examples=200)
    def test_block_shape(self, source: str) -> None:
        blocks = parse(source)
        for block in blocks:
            assert len(block) > 0
            if not block.is_inline:
                assert len(block) == 1
        # Inline runs are maximal
        for left, right in zip(blocks, blocks[1:]):
            assert not (left.is_inline and right.is_inline)

    @given(source=any_text)
    @settings(max_examples=100)
    def test_whole_input_mode(self, source: str) -> None:
        blocks = parse(source, RenderingMode.ALL)
        assert len(blocks) == 1
        assert len(blocks[0]) == 1
        component = blocks[0].components[0]
        assert component.type is ComponentType.INLINE_EQUATION
        assert component.text == source
