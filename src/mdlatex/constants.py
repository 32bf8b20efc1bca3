#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdlatex library.

This module centralizes hardcoded values and default configuration constants
used across mdlatex.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. LaTeX Output - Command names and fixed output fragments
3. Renderer Defaults - Default values for LatexRendererOptions
4. Parser Defaults - Default values for MarkdownParserOptions
5. Dependencies - Package requirements checked at call time
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Alignment = Literal["left", "center", "right"]

# =============================================================================
# LaTeX Output
# =============================================================================

# Sectioning commands by heading level; deeper levels use a plain brace group
LATEX_HEADING_COMMANDS: dict[int, str] = {
    1: "section",
    2: "subsection",
    3: "subsubsection",
    4: "paragraph",
    5: "subparagraph",
}

# Column specifier per table alignment
LATEX_ALIGNMENT_SPECS: dict[str, str] = {
    "left": "l",
    "center": "c",
    "right": "r",
}
LATEX_DEFAULT_ALIGNMENT_SPEC = "r"

LATEX_CODE_ENV_HIGHLIGHTED = "minted"
LATEX_CODE_ENV_PLAIN = "verbatim"
LATEX_QUOTE_ENV = "quotation"
LATEX_LINE_BREAK = "\\\\\n"
LATEX_HORIZONTAL_RULE = "\\hrule\\vskip\\baselineskip\n"
LATEX_ROW_TERMINATOR = " \\\\\n\\hline\n"
LATEX_CELL_SEPARATOR = " & "
LATEX_COLUMN_SEPARATOR = "|"

# Single-argument wrapping commands for the inline emphasis family
LATEX_EMPHASIS = "emph"
LATEX_STRONG = "textbf"
LATEX_UNDERLINE = "underline"
LATEX_STRIKETHROUGH = "sout"
LATEX_HIGHLIGHT = "hl"
LATEX_SUPERSCRIPT = "textsuperscript"
LATEX_FOOTNOTE_REFERENCE = "textsuperscript"
LATEX_CODE_SPAN = "texttt"

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_LATEX_HARD_WRAP = False
DEFAULT_LATEX_HEADING_ANCHORS = False
DEFAULT_LATEX_NESTING_LEVEL = 0
DEFAULT_FAIL_ON_RESOURCE_ERRORS = False
DEFAULT_OUTPUT_ENCODING = "utf-8"

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_MARKDOWN_PARSE_TABLES = True
DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH = True
DEFAULT_MARKDOWN_PARSE_FOOTNOTES = True
DEFAULT_MARKDOWN_PARSE_HIGHLIGHT = True
DEFAULT_MARKDOWN_PARSE_UNDERLINE = True
DEFAULT_MARKDOWN_PARSE_SUPERSCRIPT = True
DEFAULT_MARKDOWN_SMART_QUOTES = False

# Strict UTF-8 is tried before detection; utf-8-sig also strips a byte order mark
UTF8_INPUT_ENCODING = "utf-8-sig"

# Tried in order when the input is not UTF-8 and detection is not confident.
# cp1252 rejects only five byte values, latin-1 accepts everything.
DEFAULT_INPUT_ENCODINGS = ["cp1252", "latin-1"]

# chardet sampling for non-UTF-8 input
DEFAULT_CHARDET_SAMPLE_SIZE = 8192
DEFAULT_CHARDET_CONFIDENCE_THRESHOLD = 0.7

# Longest string that is still probed as a filesystem path
MAX_PATH_PROBE_LENGTH = 260

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
