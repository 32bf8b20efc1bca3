#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/__init__.py
"""mdlatex - Markdown to LaTeX fragment conversion.

mdlatex parses Markdown with mistune into a small document AST and renders
that tree into a LaTeX fragment suitable for ``\\input`` into a larger
document. No preamble is ever produced.

Rendering is table driven: every node kind is bound to one emission rule and
a depth-first walker renders each node's children before handing their text
to the node's rule.

Requirements
------------
- Python 3.10+
- mistune 3 for Markdown parsing

Examples
--------
Convert Markdown text:

    >>> from mdlatex import to_latex
    >>> print(to_latex("# Results\\n\\nWe saw a 5% gain."))
    \\section{Results}
    <BLANKLINE>
    We saw a 5\\% gain.
    <BLANKLINE>

Work with the AST directly:

    >>> from mdlatex import LatexRenderer, LatexRendererOptions
    >>> from mdlatex.ast import Document, Heading, Text
    >>> doc = Document(children=[Heading(level=2, content=[Text(content="Setup")])])
    >>> with LatexRenderer(LatexRendererOptions(heading_anchors=True)) as renderer:
    ...     print(renderer.render_to_string(doc), end="")
    \\subsection{Setup}\\label{Setup}

"""

__version__ = "0.1.0"

from mdlatex.api import from_ast, to_ast, to_latex
from mdlatex.exceptions import (
    DependencyError,
    InvalidOptionsError,
    MdlatexError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdlatex.options import LatexRendererOptions, MarkdownParserOptions
from mdlatex.parsers import MarkdownParser
from mdlatex.renderers import LatexFlags, LatexRenderer, create_renderer, destroy_renderer

__all__ = [
    "__version__",
    # API
    "to_latex",
    "to_ast",
    "from_ast",
    # Components
    "MarkdownParser",
    "LatexRenderer",
    "LatexFlags",
    "create_renderer",
    "destroy_renderer",
    # Options
    "LatexRendererOptions",
    "MarkdownParserOptions",
    # Exceptions
    "MdlatexError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "DependencyError",
]
