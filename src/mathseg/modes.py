"""Rendering modes.

The rendering mode decides whether the scanner looks for equation
delimiters at all:
- ONLY_EQUATIONS: Scan for delimited equations, everything else is text
- ALL: Treat the whole input as a single inline equation
"""

from __future__ import annotations

from enum import Enum


class RenderingMode(Enum):
    """How input text is split into components."""

    ONLY_EQUATIONS = "onlyEquations"  # Scan for delimited equations
    ALL = "all"  # Whole input is one inline equation

    @classmethod
    def from_value(cls, value: RenderingMode | str) -> RenderingMode:
        """Coerce an enum member, value or member name to a RenderingMode.

        Args:
            value: A RenderingMode, its value (``"all"``) or its name
                (``"ALL"``, case-insensitive)

        Returns:
            Matching RenderingMode

        Raises:
            ValueError: If value does not name a mode
        """
        if isinstance(value, cls):
            return value
        for mode in cls:
            if value == mode.value or value.upper() == mode.name:
                return mode
        valid = ", ".join(repr(mode.value) for mode in cls)
        msg = f"Unknown rendering mode {value!r} (expected one of {valid})"
        raise ValueError(msg)
