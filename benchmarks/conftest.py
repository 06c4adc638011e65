"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large document (~100KB) of text and equations."""
    sections = []
    for i in range(400):
        sections.append(f"""
Section {i} discusses $x_{i}^2 + y_{i}^2 = r^2$ and the cost of \\$5 items.
The total is given by
$$\\sum_{{k=0}}^{{{i}}} k = \\frac{{{i}({i}+1)}}{{2}}$$
with a named result
\\begin{{equation}}E_{i} = m c^2\\end{{equation}}
and nothing else.
""")
    return "\n".join(sections)


@pytest.fixture
def nested_named_document() -> str:
    """Named equations nested inside each other, with stray terminators."""
    body = "\\begin{equation}a" * 50 + "\\end{equation}" * 50
    return ("filler $x$ " * 200) + body + (" tail \\end{equation}" * 20)


@pytest.fixture
def real_world_docs() -> list[str]:
    """Collection of short, human-authored snippets."""
    return [
        "Hello $x$!",
        "Euler's identity: $e^{i\\pi} + 1 = 0$.",
        "The Gaussian integral\n$$\\int_{-\\infty}^{\\infty} e^{-x^2} dx = \\sqrt{\\pi}$$\nis classic.",
        "\\begin{equation}\n\\nabla \\cdot E = \\frac{\\rho}{\\varepsilon_0}\n\\end{equation}",
        "Prices: \\$5 and \\$10, no math here.",
        "Mixed $a$ then $$b$$ then \\begin{equation}c\\end{equation} then $d$.",
    ]
