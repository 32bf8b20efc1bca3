#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/parsers/markdown.py
"""Markdown to AST parser.

This module provides conversion from Markdown documents to the mdlatex AST
using the mistune parser. mistune runs without a renderer so that it returns
its token stream, which is then mapped onto AST nodes.

"""

from __future__ import annotations

import logging
from typing import Any, Callable

from mdlatex.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteContainer,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Highlight,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Quote,
    Strikethrough,
    Strong,
    StrongEmphasis,
    Superscript,
    Table,
    TableBody,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    ThematicBreak,
    Underline,
    extract_text,
)
from mdlatex.constants import DEPS_MARKDOWN
from mdlatex.exceptions import ParsingError
from mdlatex.options.markdown import MarkdownParserOptions
from mdlatex.parsers.base import BaseParser
from mdlatex.utils.decorators import debug_timer, requires_dependencies
from mdlatex.utils.io_utils import InputSource

logger = logging.getLogger(__name__)

# Block tokens that carry no content of their own
_SILENT_BLOCK_TOKENS = frozenset({"blank_line"})


class MarkdownParser(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Title\n\nSome *text*.")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: InputSource) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markdown input to parse. Can be:
            - File path (str or Path)
            - File-like object
            - Raw markdown bytes
            - Markdown string

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune fails on the input
        DependencyError
            If mistune is not installed

        """
        markdown_content = self._load_text_content(input_data)

        import mistune

        markdown = mistune.create_markdown(plugins=self._plugin_names(), renderer=None)

        with debug_timer(logger, "Parsing (markdown)"):
            try:
                tokens, _state = markdown.parse(markdown_content)
            except Exception as e:
                raise ParsingError(f"Failed to parse Markdown: {e}", parsing_stage="tokenize", original_error=e) from e

            children = self._process_tokens(tokens) if isinstance(tokens, list) else []

        return Document(children=children)

    def _plugin_names(self) -> list[str]:
        """Return the mistune plugins enabled by the options."""
        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_highlight:
            plugins.append("mark")
        if self.options.parse_underline:
            plugins.append("insert")
        if self.options.parse_superscript:
            plugins.append("superscript")
        return plugins

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries

        Returns
        -------
        list of Node
            AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for tokens that produce nothing

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))
        elif token_type == "footnotes":
            return self._process_footnotes(token)
        elif token_type in _SILENT_BLOCK_TOKENS:
            return None

        logger.debug(f"Dropping unsupported block token: {token_type}")
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token."""
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1

        if not isinstance(level, int) or level < 1:
            level = 1

        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        The language is the first word of the fence info string; the rest of
        the info string is kept in the node metadata.

        """
        code_content = token.get("raw", "")
        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None

        metadata: dict[str, Any] = {}
        language = None

        if info_string:
            info_string = info_string.strip()
            parts = info_string.split(maxsplit=1)
            if parts:
                language = parts[0]
                if len(parts) > 1:
                    metadata["info_attrs"] = parts[1]

        return CodeBlock(content=code_content, language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "list_item"
        ]

        return List(ordered=ordered, items=items, start=start)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        The header row's cell alignments become the table's declared column
        alignments.

        Parameters
        ----------
        token : dict
            Table token with 'table_head' and 'table_body' children

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        body = None
        alignments = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # Header cells are direct children of table_head
                cells = self._process_table_cells(section.get("children", []))
                alignments = [cell.alignment for cell in cells]
                header = TableHeader(rows=[TableRow(cells=cells)])
            elif section_type == "table_body":
                rows = [
                    TableRow(cells=self._process_table_cells(row.get("children", [])))
                    for row in section.get("children", [])
                    if row.get("type") == "table_row"
                ]
                body = TableBody(rows=rows)

        return Table(header=header, body=body, alignments=alignments)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        """Process table cells, numbering columns from zero."""
        cells = []
        for column, cell_token in enumerate(tok for tok in cell_tokens if tok.get("type") == "table_cell"):
            attrs = cell_token.get("attrs", {})
            cells.append(
                TableCell(
                    content=self._process_inline_tokens(cell_token.get("children", [])),
                    column=column,
                    alignment=attrs.get("align"),
                )
            )
        return cells

    def _process_footnotes(self, token: dict[str, Any]) -> FootnoteContainer:
        """Process the footnotes token appended after the document body."""
        definitions = []
        for item in token.get("children", []):
            if item.get("type") != "footnote_item":
                continue
            attrs = item.get("attrs", {})
            definitions.append(
                FootnoteDefinition(
                    identifier=attrs.get("key", ""),
                    ordinal=attrs.get("index", 0),
                    children=self._process_tokens(item.get("children", [])),
                )
            )
        return FootnoteContainer(definitions=definitions)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)

        if self.options.smart_quotes:
            nodes = self._apply_smart_quotes(nodes)

        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Callable[[dict[str, Any]], Node]] = {
            "text": self._handle_text_token,
            "softbreak": self._handle_softbreak_token,
            "linebreak": self._handle_linebreak_token,
            "codespan": self._handle_codespan_token,
            "emphasis": self._handle_emphasis_token,
            "strong": self._handle_strong_token,
            "strikethrough": self._handle_strikethrough_token,
            "mark": self._handle_mark_token,
            "insert": self._handle_insert_token,
            "superscript": self._handle_superscript_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "footnote_ref": self._handle_footnote_ref_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug(f"Dropping unsupported inline token: {token_type}")
        return None

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token."""
        return Text(content=token.get("raw", ""))

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Text:
        """Handle softbreak token as a literal newline."""
        return Text(content="\n")

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle hard linebreak token."""
        return LineBreak()

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        """Handle codespan token."""
        return Code(content=token.get("raw", ""))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Node:
        """Handle emphasis token, folding ``***text***`` into StrongEmphasis."""
        children = token.get("children", [])
        if len(children) == 1 and children[0].get("type") == "strong":
            return StrongEmphasis(content=self._process_inline_tokens(children[0].get("children", [])))
        return Emphasis(content=self._process_inline_tokens(children))

    def _handle_strong_token(self, token: dict[str, Any]) -> Node:
        """Handle strong token, folding a lone emphasis child into StrongEmphasis."""
        children = token.get("children", [])
        if len(children) == 1 and children[0].get("type") == "emphasis":
            return StrongEmphasis(content=self._process_inline_tokens(children[0].get("children", [])))
        return Strong(content=self._process_inline_tokens(children))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        """Handle strikethrough token."""
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_mark_token(self, token: dict[str, Any]) -> Highlight:
        """Handle mark (==text==) token."""
        return Highlight(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_insert_token(self, token: dict[str, Any]) -> Underline:
        """Handle insert (^^text^^) token."""
        return Underline(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_superscript_token(self, token: dict[str, Any]) -> Superscript:
        """Handle superscript (^text^) token."""
        return Superscript(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        # Alt text is the plain text of the children, formatting dropped
        alt_text = extract_text(self._process_inline_tokens(token.get("children", [])))
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        """Handle footnote_ref token; the ordinal is mistune's reference index."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return FootnoteReference(identifier=token.get("raw", ""), ordinal=attrs.get("index", 0))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        """Handle inline_html token."""
        return HTMLInline(content=token.get("raw", ""))

    @staticmethod
    def _apply_smart_quotes(nodes: list[Node]) -> list[Node]:
        """Group nodes between pairs of straight double quotes into Quote nodes.

        Quotes are paired within one run of sibling nodes. An unmatched
        opening quote is kept as literal text.

        Parameters
        ----------
        nodes : list of Node
            Sibling inline nodes

        Returns
        -------
        list of Node
            Nodes with quoted runs wrapped in Quote

        """
        result: list[Node] = []
        open_at: int | None = None

        for node in nodes:
            if not isinstance(node, Text) or '"' not in node.content:
                result.append(node)
                continue

            for i, part in enumerate(node.content.split('"')):
                if i > 0:
                    if open_at is None:
                        open_at = len(result)
                    else:
                        quoted = result[open_at:]
                        del result[open_at:]
                        result.append(Quote(content=quoted) if quoted else Text(content='""'))
                        open_at = None
                if part:
                    result.append(Text(content=part))

        if open_at is not None:
            result.insert(open_at, Text(content='"'))

        return result


def markdown_to_ast(markdown_content: InputSource, options: MarkdownParserOptions | None = None) -> Document:
    """Parse Markdown into an AST document.

    Parameters
    ----------
    markdown_content : str, Path, IO[bytes], IO[str], or bytes
        Markdown source
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    Document
        AST document node

    """
    return MarkdownParser(options).parse(markdown_content)


__all__ = ["MarkdownParser", "markdown_to_ast"]
