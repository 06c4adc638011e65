"""
mathseg: equation span segmenter for mixed text and LaTeX

Splits a string into plain text and LaTeX equation spans ($inline$,
$$tex block$$ and \\begin{equation}...\\end{equation}), then groups adjacent
inline spans into layout blocks for a rendering layer. Scanning never fails:
malformed delimiters are kept as plain text.

Quick Start:
    >>> from mathseg import parse
    >>> blocks = parse("The area is $\\pi r^2$.\\n$$A = \\pi r^2$$")
    >>> [block.is_inline for block in blocks]
    [True, False]

    >>> # Flat component list
    >>> from mathseg import parse_components
    >>> parse_components("a $x$ b")
    [Component(PLAIN_TEXT, 'a '), Component(INLINE_EQUATION, 'x'), Component(PLAIN_TEXT, ' b')]

    >>> # Or hold configuration in a Segmenter
    >>> from mathseg import RenderingMode, Segmenter
    >>> segment = Segmenter(mode=RenderingMode.ALL)
    >>> segment("x^2 + y^2")
    [ComponentBlock(components=(Component(INLINE_EQUATION, 'x^2 + y^2'),))]

Custom Grammars:
    >>> from mathseg import EquationGrammar, create_registry_with_defaults
    >>>
    >>> builder = create_registry_with_defaults()
    >>> builder.register(my_grammar)
    >>> segment = Segmenter(grammar_registry=builder.build())
"""

from collections.abc import Iterable

from mathseg.blocks import flatten_blocks, group_components
from mathseg.components import Component, ComponentBlock, ComponentType
from mathseg.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from mathseg.errors import GrammarError, MathsegError
from mathseg.grammars import (
    DEFAULT_GRAMMARS,
    EquationGrammar,
    GrammarRegistry,
    GrammarRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from mathseg.modes import RenderingMode
from mathseg.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from mathseg.scanner import Scanner
from mathseg.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def parse(
    text: str,
    mode: RenderingMode | str | None = None,
    *,
    grammar_registry: GrammarRegistry | None = None,
) -> list[ComponentBlock]:
    """Split text into layout blocks.

    Args:
        text: Document text
        mode: Rendering mode (uses the active ScanConfig if None).
            RenderingMode.ALL wraps the whole text in one inline equation
            without scanning.
        grammar_registry: Grammars to scan for (uses the active ScanConfig,
            then the defaults, if None)

    Returns:
        Blocks in source order. Each block is a run of inline components or
        a single non-inline component.

    Raises:
        TypeError: If text is not a str
        ValueError: If mode does not name a rendering mode

    Example:
        >>> blocks = parse("See $x$ and $$y$$")
        >>> [len(block) for block in blocks]
        [3, 1]
    """
    config = get_scan_config()
    resolved = config.mode if mode is None else RenderingMode.from_value(mode)

    if resolved is RenderingMode.ALL:
        if not isinstance(text, str):
            msg = f"Expected str, got {type(text).__name__}"
            raise TypeError(msg)
        return [ComponentBlock((Component(text, ComponentType.INLINE_EQUATION),))]

    return group_components(parse_components(text, grammar_registry=grammar_registry))


def parse_components(
    text: str,
    *,
    grammar_registry: GrammarRegistry | None = None,
) -> list[Component]:
    """Split text into a flat list of components.

    Args:
        text: Document text
        grammar_registry: Grammars to scan for (uses the active ScanConfig,
            then the defaults, if None)

    Returns:
        Components in source order. Empty for empty text.

    Raises:
        TypeError: If text is not a str
    """
    if grammar_registry is None:
        grammar_registry = get_scan_config().grammar_registry
    return Scanner(grammar_registry).scan(text)


class Segmenter:
    """Reusable segmenter holding an immutable ScanConfig.

    Usage:
        >>> segment = Segmenter()
        >>> blocks = segment("Euler: $e^{i\\pi} = -1$")

        >>> # Batch
        >>> results = segment.parse_many(["$a$", "$$b$$"])

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Segmenter instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        mode: RenderingMode | str = RenderingMode.ONLY_EQUATIONS,
        grammar_registry: GrammarRegistry | None = None,
    ) -> None:
        """Initialize segmenter.

        Args:
            mode: Rendering mode for every call
            grammar_registry: Grammars to scan for (uses defaults if None)

        Raises:
            ValueError: If mode does not name a rendering mode
        """
        self._config = ScanConfig(
            mode=RenderingMode.from_value(mode),
            grammar_registry=grammar_registry,
        )

    @property
    def config(self) -> ScanConfig:
        return self._config

    def __call__(self, text: str) -> list[ComponentBlock]:
        """Split text into layout blocks (same as parse())."""
        return self.parse(text)

    def parse(self, text: str) -> list[ComponentBlock]:
        """Split text into layout blocks using this segmenter's config."""
        with scan_config_context(self._config):
            return parse(text)

    def parse_components(self, text: str) -> list[Component]:
        """Split text into a flat list of components, ignoring the mode."""
        with scan_config_context(self._config):
            return parse_components(text)

    def parse_many(self, texts: Iterable[str]) -> list[list[ComponentBlock]]:
        """Split several texts into blocks.

        Sets config once for the whole batch.

        Args:
            texts: Iterable of document texts

        Returns:
            One block list per text, in order
        """
        with scan_config_context(self._config):
            return [parse(text) for text in texts]


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_components",
    "group_components",
    "flatten_blocks",
    # Components
    "Component",
    "ComponentBlock",
    "ComponentType",
    # Modes
    "RenderingMode",
    # Grammar extensibility
    "DEFAULT_GRAMMARS",
    "EquationGrammar",
    "GrammarRegistry",
    "GrammarRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    # Scanner
    "Scanner",
    # Errors
    "MathsegError",
    "GrammarError",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # High-level
    "Segmenter",
]
