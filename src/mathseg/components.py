"""Component and ComponentType definitions.

The scanner produces a flat sequence of Component objects, which are then
grouped into ComponentBlock units for layout.

Thread Safety:
Component and ComponentBlock are frozen (immutable) and safe to share across
threads. ComponentType is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto


class ComponentType(Enum):
    """Kinds of span the scanner can produce.

    PLAIN_TEXT counts as inline so that text and inline equations flow
    together in one block.

    """

    PLAIN_TEXT = auto()  # Anything outside an equation
    INLINE_EQUATION = auto()  # $...$
    TEX_BLOCK_EQUATION = auto()  # $$...$$
    NAMED_EQUATION = auto()  # \begin{equation}...\end{equation}

    @property
    def is_inline(self) -> bool:
        """Whether the span flows with surrounding text."""
        return self in _INLINE_TYPES

    @property
    def is_equation(self) -> bool:
        """Whether the span holds equation source."""
        return self is not ComponentType.PLAIN_TEXT

    @property
    def left_terminator(self) -> str:
        """Literal delimiter text that opens the span."""
        return _TERMINATORS[self][0]

    @property
    def right_terminator(self) -> str:
        """Literal delimiter text that closes the span."""
        return _TERMINATORS[self][1]


_INLINE_TYPES = frozenset({ComponentType.PLAIN_TEXT, ComponentType.INLINE_EQUATION})

_TERMINATORS: dict[ComponentType, tuple[str, str]] = {
    ComponentType.PLAIN_TEXT: ("", ""),
    ComponentType.INLINE_EQUATION: ("$", "$"),
    ComponentType.TEX_BLOCK_EQUATION: ("$$", "$$"),
    ComponentType.NAMED_EQUATION: ("\\begin{equation}", "\\end{equation}"),
}


@dataclass(frozen=True, slots=True)
class Component:
    """A contiguous, typed span of the input.

    For equation types produced by the scanner, ``text`` excludes the
    opening and closing delimiters. Use ``from_match`` to build a component
    from a delimited region and ``delimited`` to get the delimiters back.

    Attributes:
        text: Span content
        type: Kind of span

    """

    text: str
    type: ComponentType

    @classmethod
    def from_match(
        cls,
        raw: str,
        component_type: ComponentType,
        *,
        left: str | None = None,
        right: str | None = None,
    ) -> Component:
        """Build a component from a matched region, trimming its delimiters.

        Trimming is positional: the delimiter lengths are cut from each end
        regardless of the characters found there.

        Args:
            raw: Matched text including delimiters
            component_type: Kind of span the region was matched as
            left: Opening delimiter (defaults to the type's)
            right: Closing delimiter (defaults to the type's)

        Returns:
            Component with delimiters removed from ``text``
        """
        if not component_type.is_equation:
            return cls(raw, component_type)
        if left is None:
            left = component_type.left_terminator
        if right is None:
            right = component_type.right_terminator
        start = len(left)
        end = len(raw) - len(right)
        return cls(raw[start:end] if end > start else "", component_type)

    @property
    def delimited(self) -> str:
        """Text with the type's delimiters re-inserted."""
        return f"{self.type.left_terminator}{self.text}{self.type.right_terminator}"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Component({self.type.name}, {text!r})"


@dataclass(frozen=True, slots=True)
class ComponentBlock:
    """A layout unit of adjacent components.

    A block is either a run of inline components (text and inline
    equations laid out together) or a single non-inline component.

    Attributes:
        components: Components in source order

    """

    components: tuple[Component, ...]

    @property
    def is_inline(self) -> bool:
        """Whether every component in the block is inline."""
        return all(component.type.is_inline for component in self.components)

    @property
    def text(self) -> str:
        """Concatenated component text."""
        return "".join(component.text for component in self.components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)


__all__ = [
    "Component",
    "ComponentBlock",
    "ComponentType",
]
