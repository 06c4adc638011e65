r"""Equation grammars and the registry that orders them.

Each grammar pairs a full-match pattern with an independent terminator
pattern. The scanner never hard-codes delimiter text: adding a span kind
means registering another EquationGrammar.

Registration order is only a tie-break for matches that start at the same
index. Precedence is decided by the earliest match start.

Thread Safety:
EquationGrammar and GrammarRegistry are immutable after creation. Safe to
share. Use GrammarRegistryBuilder for mutable construction.

Example:
    >>> builder = create_registry_with_defaults()
    >>> builder.register(EquationGrammar(
    ...     name="paren",
    ...     pattern=re.compile(r"\\\(.*?\\\)", re.DOTALL),
    ...     terminator=re.compile(r"\\\)"),
    ...     component_type=ComponentType.INLINE_EQUATION,
    ...     left_terminator=r"\(",
    ...     right_terminator=r"\)",
    ... ))
    >>> registry = builder.build()
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from mathseg.components import ComponentType
from mathseg.errors import GrammarError
from mathseg.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class EquationGrammar:
    """How one kind of equation span is recognized.

    Attributes:
        name: Unique registry key
        pattern: Matches the full delimited span
        terminator: Matches the closing delimiter on its own
        component_type: Type of the components this grammar produces
        supports_recursion: Extend matches to the last unescaped terminator
            in the remaining text
        left_terminator: Opening delimiter text (defaults to the type's)
        right_terminator: Closing delimiter text (defaults to the type's)

    """

    name: str
    pattern: re.Pattern[str]
    terminator: re.Pattern[str]
    component_type: ComponentType
    supports_recursion: bool = False
    left_terminator: str | None = None
    right_terminator: str | None = None

    @property
    def left(self) -> str:
        """Opening delimiter text used for trimming."""
        if self.left_terminator is None:
            return self.component_type.left_terminator
        return self.left_terminator

    @property
    def right(self) -> str:
        """Closing delimiter text used for trimming and escape checks."""
        if self.right_terminator is None:
            return self.component_type.right_terminator
        return self.right_terminator


# $...$ (lazy, may span lines)
INLINE = EquationGrammar(
    name="inline",
    pattern=re.compile(r"\$.*?\$", re.DOTALL),
    terminator=re.compile(r"\$"),
    component_type=ComponentType.INLINE_EQUATION,
)

# $$...$$ (lazy, may span lines)
TEX_BLOCK = EquationGrammar(
    name="tex_block",
    pattern=re.compile(r"\$\$.*?\$\$", re.DOTALL),
    terminator=re.compile(r"\$\$"),
    component_type=ComponentType.TEX_BLOCK_EQUATION,
)

# \begin{equation}...\end{equation} (greedy to the last terminator)
NAMED = EquationGrammar(
    name="named",
    pattern=re.compile(r"\\begin\{equation\}.*\\end\{equation\}", re.DOTALL),
    terminator=re.compile(r"\\end\{equation\}"),
    component_type=ComponentType.NAMED_EQUATION,
    supports_recursion=True,
)

# Order matters for same-index ties
DEFAULT_GRAMMARS: tuple[EquationGrammar, ...] = (INLINE, TEX_BLOCK, NAMED)


class GrammarRegistry:
    """Immutable, ordered collection of equation grammars.

    Iteration yields grammars in registration (priority) order.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_grammars", "_by_name")

    def __init__(
        self,
        grammars: tuple[EquationGrammar, ...],
        by_name: dict[str, EquationGrammar],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use GrammarRegistryBuilder to create instances.
        """
        self._grammars = grammars
        self._by_name = by_name

    def get(self, name: str) -> EquationGrammar | None:
        """Get grammar by name.

        Args:
            name: Grammar name (e.g., "inline", "named")

        Returns:
            Grammar if registered, None otherwise
        """
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        """Check if grammar name is registered."""
        return name in self._by_name

    @property
    def names(self) -> tuple[str, ...]:
        """Registered names in priority order."""
        return tuple(grammar.name for grammar in self._grammars)

    @property
    def grammars(self) -> tuple[EquationGrammar, ...]:
        """Registered grammars in priority order."""
        return self._grammars

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __iter__(self) -> Iterator[EquationGrammar]:
        return iter(self._grammars)

    def __len__(self) -> int:
        """Number of registered grammars."""
        return len(self._grammars)


class GrammarRegistryBuilder:
    """Mutable builder for GrammarRegistry.

    Register grammars in priority order, then call build() to create an
    immutable registry.

    Example:
        >>> builder = GrammarRegistryBuilder()
        >>> builder.register(INLINE).register(NAMED)
        >>> registry = builder.build()
    """

    __slots__ = ("_grammars", "_by_name")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._grammars: list[EquationGrammar] = []
        self._by_name: dict[str, EquationGrammar] = {}

    def register(self, grammar: EquationGrammar) -> GrammarRegistryBuilder:
        """Register a grammar after all previously registered ones.

        Args:
            grammar: Grammar to append

        Returns:
            Self for chaining

        Raises:
            GrammarError: If the name is taken, the grammar produces plain
                text, or its closing delimiter is empty
        """
        if grammar.name in self._by_name:
            raise GrammarError(grammar.name, "already registered")
        if not grammar.component_type.is_equation:
            raise GrammarError(grammar.name, "must produce an equation component type")
        if not grammar.right:
            raise GrammarError(grammar.name, "closing delimiter must not be empty")

        self._by_name[grammar.name] = grammar
        self._grammars.append(grammar)
        logger.debug(
            "Registered grammar %r (%s, priority %d)",
            grammar.name,
            grammar.component_type.name,
            len(self._grammars) - 1,
        )
        return self

    def register_all(self, grammars: Iterable[EquationGrammar]) -> GrammarRegistryBuilder:
        """Register multiple grammars in order.

        Args:
            grammars: Grammars to append

        Returns:
            Self for chaining
        """
        for grammar in grammars:
            self.register(grammar)
        return self

    def build(self) -> GrammarRegistry:
        """Build immutable registry from registered grammars.

        Returns:
            Immutable GrammarRegistry
        """
        return GrammarRegistry(
            grammars=tuple(self._grammars),
            by_name=dict(self._by_name),
        )

    def __len__(self) -> int:
        """Number of registered grammars."""
        return len(self._grammars)


# Cached singleton, GrammarRegistry is immutable
_DEFAULT_REGISTRY: GrammarRegistry | None = None


def create_default_registry() -> GrammarRegistry:
    """Get the default grammar registry (cached singleton).

    Returns:
        Registry with inline, tex_block and named grammars, in that order.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY


def create_registry_with_defaults() -> GrammarRegistryBuilder:
    """Create a builder pre-populated with the default grammars.

    Use this to extend the defaults with custom grammars:

        >>> builder = create_registry_with_defaults()
        >>> builder.register(my_grammar)
        >>> registry = builder.build()

    Returns:
        GrammarRegistryBuilder with defaults already registered
    """
    return GrammarRegistryBuilder().register_all(DEFAULT_GRAMMARS)


__all__ = [
    "DEFAULT_GRAMMARS",
    "EquationGrammar",
    "GrammarRegistry",
    "GrammarRegistryBuilder",
    "INLINE",
    "NAMED",
    "TEX_BLOCK",
    "create_default_registry",
    "create_registry_with_defaults",
]
