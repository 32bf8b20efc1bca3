#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/renderers/latex.py
"""LaTeX rendering from AST.

This module provides the LatexRenderer class which converts AST nodes to a
LaTeX fragment meant for ``\\input`` into a larger document. Rendering is
driven by a :class:`~mdlatex.ast.walker.DocumentWalker` over a dispatch table
that binds every :class:`~mdlatex.ast.nodes.NodeKind` to one emission rule.

"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import IO, Mapping, Optional, Union

from mdlatex.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    FootnoteReference,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Node,
    NodeKind,
    Paragraph,
    Table,
    TableCell,
    Text,
)
from mdlatex.ast.walker import DocumentWalker, EmissionRule
from mdlatex.constants import (
    LATEX_ALIGNMENT_SPECS,
    LATEX_CELL_SEPARATOR,
    LATEX_CODE_ENV_HIGHLIGHTED,
    LATEX_CODE_ENV_PLAIN,
    LATEX_CODE_SPAN,
    LATEX_COLUMN_SEPARATOR,
    LATEX_DEFAULT_ALIGNMENT_SPEC,
    LATEX_EMPHASIS,
    LATEX_FOOTNOTE_REFERENCE,
    LATEX_HEADING_COMMANDS,
    LATEX_HIGHLIGHT,
    LATEX_HORIZONTAL_RULE,
    LATEX_LINE_BREAK,
    LATEX_QUOTE_ENV,
    LATEX_ROW_TERMINATOR,
    LATEX_STRIKETHROUGH,
    LATEX_STRONG,
    LATEX_SUPERSCRIPT,
    LATEX_UNDERLINE,
)
from mdlatex.exceptions import RenderingError
from mdlatex.options.latex import LatexRendererOptions
from mdlatex.renderers.base import BaseRenderer
from mdlatex.utils.buffer import OutputBuffer
from mdlatex.utils.decorators import debug_timer
from mdlatex.utils.escape import escape_href, escape_latex

logger = logging.getLogger(__name__)


class LatexFlags(enum.Flag):
    """Behavior switches for a LaTeX render pass."""

    HARD_WRAP = enum.auto()
    HEADING_ANCHORS = enum.auto()


@dataclass
class RendererState:
    """Mutable state owned by a single renderer.

    Parameters
    ----------
    flags : LatexFlags
        Behavior switches, fixed at construction
    nesting_level : int
        Deepest heading level that receives a label (0 = all levels), fixed
        at construction
    heading_count : int
        Headings seen during the current pass
    current_level : int
        Level of the most recent heading
    level_offset : int
        Level of the first heading minus one

    """

    flags: LatexFlags = LatexFlags(0)
    nesting_level: int = 0
    heading_count: int = 0
    current_level: int = 0
    level_offset: int = 0

    def reset_counters(self) -> None:
        """Zero the heading counters before a new pass."""
        self.heading_count = 0
        self.current_level = 0
        self.level_offset = 0


class LatexRenderer(BaseRenderer):
    r"""Render AST nodes to a LaTeX fragment.

    Parameters
    ----------
    options : LatexRendererOptions or None, default = None
        LaTeX rendering options

    Examples
    --------
    Basic usage:

        >>> from mdlatex.ast import Document, Heading, Text
        >>> from mdlatex.renderers.latex import LatexRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> renderer = LatexRenderer()
        >>> print(renderer.render_to_string(doc))
        \section{Title}
        <BLANKLINE>

    With heading labels:

        >>> from mdlatex.options import LatexRendererOptions
        >>> renderer = LatexRenderer(LatexRendererOptions(heading_anchors=True))
        >>> renderer.render_to_string(doc)
        '\\section{Title}\\label{Title}\n'

    """

    def __init__(self, options: LatexRendererOptions | None = None):
        """Initialize the LaTeX renderer with options."""
        BaseRenderer._validate_options_type(options, LatexRendererOptions, "latex")
        options = options or LatexRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: LatexRendererOptions = options

        flags = LatexFlags(0)
        if options.hard_wrap:
            flags |= LatexFlags.HARD_WRAP
        if options.heading_anchors:
            flags |= LatexFlags.HEADING_ANCHORS

        self._state: Optional[RendererState] = RendererState(flags=flags, nesting_level=options.nesting_level)
        self._dispatch: Optional[Mapping[NodeKind, EmissionRule]] = self._build_dispatch_table()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        """Return True once the renderer has been closed."""
        return self._dispatch is None

    @property
    def state(self) -> RendererState:
        """Return the renderer state.

        Raises
        ------
        RenderingError
            If the renderer has been closed

        """
        if self._state is None:
            raise RenderingError("Renderer has been closed", rendering_stage="lifecycle")
        return self._state

    @property
    def dispatch_table(self) -> Mapping[NodeKind, EmissionRule]:
        """Return the read-only mapping from node kind to emission rule.

        Raises
        ------
        RenderingError
            If the renderer has been closed

        """
        if self._dispatch is None:
            raise RenderingError("Renderer has been closed", rendering_stage="lifecycle")
        return self._dispatch

    def close(self) -> None:
        """Release the renderer state and dispatch table."""
        self._state = None
        self._dispatch = None

    def __enter__(self) -> LatexRenderer:
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()

    def _build_dispatch_table(self) -> Mapping[NodeKind, EmissionRule]:
        """Bind every node kind to its emission rule.

        Raises
        ------
        RenderingError
            If any node kind is left without a rule

        """
        table: dict[NodeKind, EmissionRule] = {
            # Block rules
            NodeKind.DOCUMENT: self._render_document,
            NodeKind.PARAGRAPH: self._render_paragraph,
            NodeKind.HEADING: self._render_heading,
            NodeKind.BLOCK_QUOTE: self._render_block_quote,
            NodeKind.CODE_BLOCK: self._render_code_block,
            NodeKind.LIST: self._render_list,
            NodeKind.LIST_ITEM: self._render_list_item,
            NodeKind.HORIZONTAL_RULE: self._render_horizontal_rule,
            NodeKind.TABLE: self._render_table,
            NodeKind.TABLE_HEADER: self._render_passthrough,
            NodeKind.TABLE_BODY: self._render_passthrough,
            NodeKind.TABLE_ROW: self._render_table_row,
            NodeKind.TABLE_CELL: self._render_table_cell,
            NodeKind.FOOTNOTE_CONTAINER: self._render_unsupported,
            NodeKind.FOOTNOTE_DEFINITION: self._render_unsupported,
            NodeKind.RAW_BLOCK: self._render_unsupported,
            # Inline rules
            NodeKind.TEXT: self._render_text,
            NodeKind.CODE_SPAN: self._render_code_span,
            NodeKind.EMPHASIS: self._render_emphasis,
            NodeKind.STRONG: self._render_strong,
            NodeKind.STRONG_EMPHASIS: self._render_strong_emphasis,
            NodeKind.UNDERLINE: self._render_underline,
            NodeKind.STRIKETHROUGH: self._render_strikethrough,
            NodeKind.HIGHLIGHT: self._render_highlight,
            NodeKind.QUOTE: self._render_quote,
            NodeKind.LINE_BREAK: self._render_line_break,
            NodeKind.LINK: self._render_link,
            NodeKind.IMAGE: self._render_image,
            NodeKind.SUPERSCRIPT: self._render_superscript,
            NodeKind.FOOTNOTE_REFERENCE: self._render_footnote_reference,
            NodeKind.RAW_INLINE: self._render_unsupported,
        }

        unbound = [kind.value for kind in NodeKind if kind not in table]
        if unbound:
            raise RenderingError(f"No emission rule bound for: {', '.join(unbound)}", rendering_stage="setup")

        return MappingProxyType(table)

    # ------------------------------------------------------------------
    # Rendering entry points
    # ------------------------------------------------------------------

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to a LaTeX fragment.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            LaTeX text

        Raises
        ------
        RenderingError
            If the renderer has been closed or the tree holds a non-node object

        """
        walker = DocumentWalker(self.dispatch_table)
        self.state.reset_counters()

        with debug_timer(logger, "Rendering (latex)"):
            result = walker.walk(document)

        logger.debug(f"Rendered {self.state.heading_count} headings, {len(result)} characters")
        return result

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render AST to LaTeX and write to output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        latex_text = self.render_to_string(doc)
        self.write_text_output(latex_text, output)

    # ------------------------------------------------------------------
    # Block rules
    # ------------------------------------------------------------------

    @staticmethod
    def _block_separator(out: OutputBuffer) -> None:
        """Start a new block on a fresh line when something precedes it."""
        if out:
            out.putc("\n")

    def _render_document(self, out: OutputBuffer, node: Document, content: str) -> None:
        out.put(content)

    def _render_paragraph(self, out: OutputBuffer, node: Paragraph, content: str) -> None:
        """Render a paragraph, optionally turning newlines into line breaks."""
        text = content.lstrip()
        if not text:
            return

        self._block_separator(out)

        if LatexFlags.HARD_WRAP in self.state.flags:
            size = len(text)
            i = 0
            while i < size:
                end = text.find("\n", i)
                if end == -1:
                    end = size
                out.put(text[i:end])
                # The trailing newline of a paragraph gets no break
                if end >= size - 1:
                    break
                out.put(LATEX_LINE_BREAK)
                i = end + 1
        else:
            out.put(text.rstrip("\n"))

        out.putc("\n")

    def _render_heading(self, out: OutputBuffer, node: Heading, content: str) -> None:
        """Render a sectioning command, with an optional label."""
        state = self.state
        state.heading_count += 1
        state.current_level = node.level
        if state.heading_count == 1:
            state.level_offset = node.level - 1

        self._block_separator(out)

        command = LATEX_HEADING_COMMANDS.get(node.level)
        if command:
            out.put(f"\\{command}{{{content}}}")
        else:
            out.put(f"{{{content}}}")

        if LatexFlags.HEADING_ANCHORS in state.flags:
            if state.nesting_level == 0 or node.level <= state.nesting_level:
                # The label key is the rendered heading text, so links must target it verbatim
                out.put(f"\\label{{{content}}}")

        out.putc("\n")

    def _render_block_quote(self, out: OutputBuffer, node: BlockQuote, content: str) -> None:
        self._block_separator(out)
        out.put(f"\\begin{{{LATEX_QUOTE_ENV}}}\n")
        out.put(content)
        out.put(f"\\end{{{LATEX_QUOTE_ENV}}}\n")

    def _render_code_block(self, out: OutputBuffer, node: CodeBlock, content: str) -> None:
        """Render a code block with its content unescaped."""
        self._block_separator(out)

        if node.language:
            environment = LATEX_CODE_ENV_HIGHLIGHTED
            out.put(f"\\begin{{{environment}}}{{{escape_latex(node.language)}}}\n")
        else:
            environment = LATEX_CODE_ENV_PLAIN
            out.put(f"\\begin{{{environment}}}\n")

        code = node.content
        out.put(code)
        if code and not code.endswith("\n"):
            out.putc("\n")

        out.put(f"\\end{{{environment}}}\n")

    def _render_list(self, out: OutputBuffer, node: List, content: str) -> None:
        self._block_separator(out)
        environment = "enumerate" if node.ordered else "itemize"
        out.put(f"\\begin{{{environment}}}\n")
        if node.ordered and node.start != 1:
            # \@enumctr names the counter of the current nesting depth
            out.put(f"\\setcounter{{\\csname @enumctr\\endcsname}}{{{node.start - 1}}}\n")
        out.put(content)
        out.put(f"\\end{{{environment}}}\n")

    def _render_list_item(self, out: OutputBuffer, node: ListItem, content: str) -> None:
        out.put("\\item ")
        out.put(content.rstrip("\n"))
        out.putc("\n")

    def _render_horizontal_rule(self, out: OutputBuffer, node: Node, content: str) -> None:
        self._block_separator(out)
        out.put(LATEX_HORIZONTAL_RULE)

    def _render_table(self, out: OutputBuffer, node: Table, content: str) -> None:
        """Render a bordered tabular with one column spec per declared alignment."""
        self._block_separator(out)

        column_specs = "".join(
            LATEX_ALIGNMENT_SPECS.get(alignment or "", LATEX_DEFAULT_ALIGNMENT_SPEC) + LATEX_COLUMN_SEPARATOR
            for alignment in node.alignments
        )
        out.put(f"\\begin{{tabular}}{{{LATEX_COLUMN_SEPARATOR}{column_specs}}}\n\\hline\n")
        out.put(content)
        out.put("\\end{tabular}\n")

    def _render_passthrough(self, out: OutputBuffer, node: Node, content: str) -> None:
        out.put(content)

    def _render_table_row(self, out: OutputBuffer, node: Node, content: str) -> None:
        out.put(content)
        out.put(LATEX_ROW_TERMINATOR)

    def _render_table_cell(self, out: OutputBuffer, node: TableCell, content: str) -> None:
        if node.column > 0:
            out.put(LATEX_CELL_SEPARATOR)
        out.put(content)

    def _render_unsupported(self, out: OutputBuffer, node: Node, content: str) -> None:
        logger.debug(f"Skipping unsupported {node.kind.value} node")

    # ------------------------------------------------------------------
    # Inline rules
    # ------------------------------------------------------------------

    @staticmethod
    def _wrap(out: OutputBuffer, command: str, content: str) -> bool:
        """Wrap rendered content in a single-argument command."""
        if not content:
            return False
        out.put(f"\\{command}{{{content}}}")
        return True

    def _render_text(self, out: OutputBuffer, node: Text, content: str) -> bool:
        out.put(escape_latex(node.content))
        return True

    def _render_code_span(self, out: OutputBuffer, node: Code, content: str) -> bool:
        return self._wrap(out, LATEX_CODE_SPAN, escape_latex(node.content))

    def _render_emphasis(self, out: OutputBuffer, node: Node, content: str) -> bool:
        return self._wrap(out, LATEX_EMPHASIS, content)

    def _render_strong(self, out: OutputBuffer, node: Node, content: str) -> bool:
        return self._wrap(out, LATEX_STRONG, content)

    def _render_strong_emphasis(self, out: OutputBuffer, node: Node, content: str) -> bool:
        if not content:
            return False
        out.put(f"\\{LATEX_STRONG}{{\\{LATEX_EMPHASIS}{{{content}}}}}")
        return True

    def _render_underline(self, out: OutputBuffer, node: Node, content: str) -> bool:
        return self._wrap(out, LATEX_UNDERLINE, content)

    def _render_strikethrough(self, out: OutputBuffer, node: Node, content: str) -> bool:
        return self._wrap(out, LATEX_STRIKETHROUGH, content)

    def _render_highlight(self, out: OutputBuffer, node: Node, content: str) -> bool:
        return self._wrap(out, LATEX_HIGHLIGHT, content)

    def _render_superscript(self, out: OutputBuffer, node: Node, content: str) -> bool:
        return self._wrap(out, LATEX_SUPERSCRIPT, content)

    def _render_quote(self, out: OutputBuffer, node: Node, content: str) -> bool:
        if not content:
            return False
        out.put(f"``{content}''")
        return True

    def _render_line_break(self, out: OutputBuffer, node: Node, content: str) -> bool:
        out.put(LATEX_LINE_BREAK)
        return True

    def _render_footnote_reference(self, out: OutputBuffer, node: FootnoteReference, content: str) -> bool:
        return self._wrap(out, LATEX_FOOTNOTE_REFERENCE, str(node.ordinal))

    def _render_link(self, out: OutputBuffer, node: Link, content: str) -> bool:
        """Render an internal cross-reference or an external hyperlink."""
        if not node.url:
            return False

        if node.url.startswith("#"):
            out.put(f"\\hyperref[{node.url[1:]}]{{{content}}}")
            return True

        title = escape_latex(node.title) if node.title else ""
        out.put(f"\\hyperref{{{escape_href(node.url)}}}{{}}{{{title}}}{{{content}}}")
        return True

    def _render_image(self, out: OutputBuffer, node: Image, content: str) -> bool:
        """Render a full-width figure."""
        if not node.url:
            return False

        out.put("\\begin{figure*}\n")
        out.put(f"\\includegraphics*[width=\\textwidth]{{{escape_href(node.url)}}}\n")
        if node.alt_text:
            out.put(f"\\caption{{{escape_latex(node.alt_text)}}}\n")
        if node.title:
            out.put(escape_latex(node.title))
            out.putc("\n")
        out.put("\\end{figure*}")
        return True


def create_renderer(flags: LatexFlags = LatexFlags(0), nesting_level: int = 0) -> LatexRenderer:
    """Create a renderer from behavior flags.

    Parameters
    ----------
    flags : LatexFlags, default = LatexFlags(0)
        Behavior switches for the render pass
    nesting_level : int, default = 0
        Deepest heading level that receives a label (0 = all levels)

    Returns
    -------
    LatexRenderer
        A renderer with zeroed heading counters

    Examples
    --------
        >>> renderer = create_renderer(LatexFlags.HARD_WRAP)
        >>> renderer.options.hard_wrap
        True
        >>> destroy_renderer(renderer)
        >>> renderer.closed
        True

    """
    options = LatexRendererOptions(
        hard_wrap=LatexFlags.HARD_WRAP in flags,
        heading_anchors=LatexFlags.HEADING_ANCHORS in flags,
        nesting_level=nesting_level,
    )
    return LatexRenderer(options)


def destroy_renderer(renderer: LatexRenderer) -> None:
    """Release a renderer created by :func:`create_renderer`."""
    renderer.close()


__all__ = [
    "LatexFlags",
    "LatexRenderer",
    "RendererState",
    "create_renderer",
    "destroy_renderer",
]
