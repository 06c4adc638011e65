"""Tests for the top-level API: parse(), parse_components() and Segmenter."""

import pytest

from mathseg import (
    Component,
    ComponentBlock,
    ComponentType,
    GrammarRegistryBuilder,
    RenderingMode,
    Segmenter,
    parse,
    parse_components,
)
from mathseg.grammars import INLINE

TEXT = ComponentType.PLAIN_TEXT
INLINE_EQ = ComponentType.INLINE_EQUATION


class TestParse:
    """parse() returns layout blocks."""

    def test_empty_string(self) -> None:
        assert parse("") == []

    def test_plain_text(self) -> None:
        blocks = parse("hello")
        assert len(blocks) == 1
        assert blocks[0].is_inline

    def test_text_and_block_equation(self) -> None:
        blocks = parse("The area is $\\pi r^2$.\n$$A = \\pi r^2$$")
        assert [block.is_inline for block in blocks] == [True, False]
        assert blocks[1].components[0].text == "A = \\pi r^2"

    def test_mode_as_string(self) -> None:
        assert parse("$x$", "all") == parse("$x$", RenderingMode.ALL)

    def test_invalid_mode(self) -> None:
        with pytest.raises(ValueError):
            parse("x", "never")

    def test_rejects_non_string(self) -> None:
        with pytest.raises(TypeError):
            parse(42)  # type: ignore[arg-type]

    def test_custom_registry(self) -> None:
        registry = GrammarRegistryBuilder().register(INLINE).build()
        blocks = parse("$$a$$", grammar_registry=registry)
        # The inline grammar only sees the empty "$$", so the text stays plain
        assert [[c.type for c in block] for block in blocks] == [[TEXT]]


class TestWholeInputMode:
    """RenderingMode.ALL wraps everything in one inline equation."""

    @pytest.mark.parametrize(
        "source",
        ["x^2", "$x$", "$$y$$", "\\begin{equation}z\\end{equation}", "a $b$ c"],
    )
    def test_single_block_single_component(self, source: str) -> None:
        blocks = parse(source, RenderingMode.ALL)
        assert len(blocks) == 1
        assert len(blocks[0]) == 1
        component = blocks[0].components[0]
        assert component.type is INLINE_EQ
        assert component.text == source

    def test_empty_input(self) -> None:
        assert parse("", RenderingMode.ALL) == [ComponentBlock((Component("", INLINE_EQ),))]


class TestSegmenter:
    """Segmenter holds config across calls."""

    def test_call_matches_parse(self) -> None:
        segment = Segmenter()
        source = "a $x$ $$y$$"
        assert segment(source) == parse(source)

    def test_mode_all(self) -> None:
        segment = Segmenter(mode=RenderingMode.ALL)
        blocks = segment("$$y$$")
        assert blocks[0].components[0].text == "$$y$$"

    def test_mode_from_string(self) -> None:
        assert Segmenter(mode="all").config.mode is RenderingMode.ALL

    def test_invalid_mode(self) -> None:
        with pytest.raises(ValueError):
            Segmenter(mode="never")

    def test_parse_components_ignores_mode(self) -> None:
        segment = Segmenter(mode=RenderingMode.ALL)
        assert segment.parse_components("$x$") == parse_components("$x$")

    def test_registry_is_used(self) -> None:
        registry = GrammarRegistryBuilder().register(INLINE).build()
        segment = Segmenter(grammar_registry=registry)
        assert [c.type for c in segment.parse_components("$$a$$")] == [TEXT]

    def test_parse_many(self) -> None:
        segment = Segmenter()
        results = segment.parse_many(["$a$", "$$b$$", ""])
        assert results == [parse("$a$"), parse("$$b$$"), []]

    def test_config_not_leaked(self) -> None:
        from mathseg import get_scan_config

        Segmenter(mode=RenderingMode.ALL)("x")
        assert get_scan_config().mode is RenderingMode.ONLY_EQUATIONS
