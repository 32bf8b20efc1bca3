#  Copyright (c) 2025 Tom Villani, Ph.D.

# mdlatex/options/markdown.py
"""Configuration options for Markdown parsing.

This module defines options for parsing Markdown documents into the AST.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdlatex.constants import (
    DEFAULT_MARKDOWN_PARSE_FOOTNOTES,
    DEFAULT_MARKDOWN_PARSE_HIGHLIGHT,
    DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH,
    DEFAULT_MARKDOWN_PARSE_SUPERSCRIPT,
    DEFAULT_MARKDOWN_PARSE_TABLES,
    DEFAULT_MARKDOWN_PARSE_UNDERLINE,
    DEFAULT_MARKDOWN_SMART_QUOTES,
)
from mdlatex.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Each ``parse_*`` flag enables the matching mistune plugin.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_highlight : bool, default True
        Whether to parse highlight syntax (==text==).
    parse_underline : bool, default True
        Whether to parse underline (insert) syntax (^^text^^).
    parse_superscript : bool, default True
        Whether to parse superscript syntax (^text^).
    smart_quotes : bool, default False
        Whether to turn straight double-quoted text ("text") into Quote nodes.

    """

    parse_tables: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "cli_name": "no-tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "cli_name": "no-strikethrough",
            "importance": "core",
        },
    )
    parse_footnotes: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_FOOTNOTES,
        metadata={
            "help": "Parse footnote references and definitions",
            "cli_name": "no-footnotes",
            "importance": "core",
        },
    )
    parse_highlight: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_HIGHLIGHT,
        metadata={"help": "Parse highlight syntax (==text==)", "cli_name": "no-highlight", "importance": "advanced"},
    )
    parse_underline: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_UNDERLINE,
        metadata={"help": "Parse underline syntax (^^text^^)", "cli_name": "no-underline", "importance": "advanced"},
    )
    parse_superscript: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_SUPERSCRIPT,
        metadata={
            "help": "Parse superscript syntax (^text^)",
            "cli_name": "no-superscript",
            "importance": "advanced",
        },
    )
    smart_quotes: bool = field(
        default=DEFAULT_MARKDOWN_SMART_QUOTES,
        metadata={
            "help": 'Render "double-quoted" text with LaTeX quotation marks',
            "cli_name": "smart-quotes",
            "importance": "advanced",
        },
    )
