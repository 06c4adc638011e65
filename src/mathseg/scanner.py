r"""Equation scanner.

Splits text into plain-text and equation components. Each step finds the
first match of every registered grammar in the remaining text, drops empty
and escaped candidates, and takes the one that starts earliest (registration
order breaks ties). Recursion-capable grammars extend their span to the last
unescaped terminator in the remaining text, so nested
``\begin{equation}...\end{equation}`` pairs end up in one span.

Scanning never fails. Unterminated or escaped delimiters fall through as
plain text.

Complexity:
    Each step runs every grammar once over the remaining text, and a
    recursion-capable winner rescans it for terminators. Worst case is
    O(n * k) for n characters and k equations.

Thread Safety:
    Scanner holds only an immutable registry. All scan state is local to
    scan(), so one instance can be shared across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from mathseg.components import Component, ComponentType
from mathseg.grammars import EquationGrammar, GrammarRegistry, create_default_registry
from mathseg.profiling import get_scan_accumulator
from mathseg.utils.logger import get_logger

logger = get_logger(__name__)

_ESCAPE = "\\"


@dataclass(frozen=True, slots=True)
class _Candidate:
    """A grammar's first surviving match in the remaining text."""

    grammar: EquationGrammar
    priority: int
    start: int
    end: int


class Scanner:
    """Splits text into a flat sequence of components.

    Usage:
        >>> scanner = Scanner()
        >>> scanner.scan("Euler: $e^{i\\pi} + 1 = 0$")
        [Component(PLAIN_TEXT, 'Euler: '), Component(INLINE_EQUATION, 'e^{i\\pi} + 1 = 0')]

    """

    __slots__ = ("_registry",)

    def __init__(self, grammar_registry: GrammarRegistry | None = None) -> None:
        """Initialize scanner.

        Args:
            grammar_registry: Grammars to scan for (uses defaults if None)
        """
        self._registry = (
            create_default_registry() if grammar_registry is None else grammar_registry
        )

    @property
    def grammar_registry(self) -> GrammarRegistry:
        return self._registry

    def scan(self, source: str) -> list[Component]:
        """Split source into components.

        Args:
            source: Text to scan

        Returns:
            Components in source order. Empty for empty source.

        Raises:
            TypeError: If source is not a str
        """
        if not isinstance(source, str):
            msg = f"Expected str, got {type(source).__name__}"
            raise TypeError(msg)

        components: list[Component] = []
        remaining = source
        while remaining:
            candidate = self._select(remaining)
            if candidate is None:
                components.append(Component(remaining, ComponentType.PLAIN_TEXT))
                break

            grammar = candidate.grammar
            end = candidate.end
            if grammar.supports_recursion:
                end = max(end, self._last_terminator_end(remaining, grammar, default=end))

            if candidate.start:
                components.append(
                    Component(remaining[: candidate.start], ComponentType.PLAIN_TEXT)
                )
            components.append(
                Component.from_match(
                    remaining[candidate.start : end],
                    grammar.component_type,
                    left=grammar.left,
                    right=grammar.right,
                )
            )
            logger.debug(
                "Matched %s span [%d:%d] with grammar %r",
                grammar.component_type.name,
                candidate.start,
                end,
                grammar.name,
            )
            remaining = remaining[end:]

        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(
                source_length=len(source),
                component_count=len(components),
                equation_count=sum(1 for c in components if c.type.is_equation),
            )

        return components

    def _select(self, text: str) -> _Candidate | None:
        """Pick the earliest surviving candidate, ties to the first registered."""
        candidates = [
            candidate
            for priority, grammar in enumerate(self._registry)
            if (candidate := self._first_match(text, grammar, priority)) is not None
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda c: (c.start, c.priority))

    def _first_match(
        self, text: str, grammar: EquationGrammar, priority: int
    ) -> _Candidate | None:
        """Return the grammar's first match unless it is empty or escaped.

        Only the first match is considered. A rejected match does not make
        the grammar look further along the text.
        """
        match = grammar.pattern.search(text)
        if match is None:
            return None
        start, end = match.span()

        body = Component.from_match(
            match.group(), grammar.component_type, left=grammar.left, right=grammar.right
        )
        if not body.text:
            logger.debug("Rejected empty %r match at %d", grammar.name, start)
            return None

        if start > 0 and text[start - 1] == _ESCAPE:
            logger.debug("Rejected %r match at %d: escaped opening", grammar.name, start)
            return None

        # Character just before the closing delimiter
        closing = end - len(grammar.right) - 1
        if closing >= 0 and text[closing] == _ESCAPE:
            logger.debug("Rejected %r match at %d: escaped closing", grammar.name, start)
            return None

        return _Candidate(grammar=grammar, priority=priority, start=start, end=end)

    def _last_terminator_end(self, text: str, grammar: EquationGrammar, *, default: int) -> int:
        """End offset of the last unescaped terminator in text.

        A terminator at offset 0 is never escaped.
        """
        last_end: int | None = None
        for match in grammar.terminator.finditer(text):
            index = match.start()
            if index == 0 or text[index - 1] != _ESCAPE:
                last_end = match.end()

        if last_end is None:
            return default
        if last_end != default:
            logger.debug(
                "Extended %r span from %d to last terminator at %d",
                grammar.name,
                default,
                last_end,
            )
        return last_end


def scan(source: str, grammar_registry: GrammarRegistry | None = None) -> list[Component]:
    """Split source into components with a one-off Scanner.

    Args:
        source: Text to scan
        grammar_registry: Grammars to scan for (uses defaults if None)

    Returns:
        Components in source order
    """
    return Scanner(grammar_registry).scan(source)


__all__ = [
    "Scanner",
    "scan",
]
