#  Copyright (c) 2025 Tom Villani, Ph.D.

# mdlatex/options/latex.py
"""Configuration options for LaTeX rendering.

This module defines options for AST-to-LaTeX fragment rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdlatex.constants import (
    DEFAULT_LATEX_HARD_WRAP,
    DEFAULT_LATEX_HEADING_ANCHORS,
    DEFAULT_LATEX_NESTING_LEVEL,
)
from mdlatex.options.base import BaseRendererOptions


@dataclass(frozen=True)
class LatexRendererOptions(BaseRendererOptions):
    r"""Configuration options for AST-to-LaTeX rendering.

    The renderer always produces a fragment meant for inclusion in a larger
    document; it never writes a preamble.

    Parameters
    ----------
    hard_wrap : bool, default False
        Turn every newline inside a paragraph into an explicit ``\\`` line
        break, except a newline at the very end of the paragraph.
    heading_anchors : bool, default False
        Emit a ``\label{...}`` after each heading so it can be targeted by
        ``#anchor`` links.
    nesting_level : int, default 0
        Deepest heading level that receives a label when ``heading_anchors``
        is enabled. 0 labels every level.

    """

    hard_wrap: bool = field(
        default=DEFAULT_LATEX_HARD_WRAP,
        metadata={
            "help": "Render newlines inside paragraphs as explicit line breaks",
            "cli_name": "hard-wrap",
            "importance": "core",
        },
    )
    heading_anchors: bool = field(
        default=DEFAULT_LATEX_HEADING_ANCHORS,
        metadata={
            "help": "Emit \\label{} commands after headings",
            "cli_name": "heading-anchors",
            "importance": "core",
        },
    )
    nesting_level: int = field(
        default=DEFAULT_LATEX_NESTING_LEVEL,
        metadata={
            "help": "Deepest heading level that receives a label (0 = all levels)",
            "type": int,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for LaTeX renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.nesting_level < 0:
            raise ValueError(f"nesting_level must be non-negative, got {self.nesting_level}")
