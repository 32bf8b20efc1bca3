#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_markdown_parser.py
"""Unit tests for the Markdown to AST parser.

Tests cover:
- Block structure (headings, paragraphs, code, quotes, lists, tables, rules)
- Inline formatting and the plugin-backed spans
- Links, images and footnotes
- Raw HTML
- Plugin switches and smart quotes
- Input types and error handling
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from mdlatex.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    FootnoteContainer,
    FootnoteReference,
    Heading,
    Highlight,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    Paragraph,
    Quote,
    Strikethrough,
    Strong,
    StrongEmphasis,
    Superscript,
    Table,
    Text,
    ThematicBreak,
    Underline,
    extract_text,
)
from mdlatex.exceptions import InvalidOptionsError, ParsingError
from mdlatex.options.latex import LatexRendererOptions
from mdlatex.options.markdown import MarkdownParserOptions
from mdlatex.parsers.markdown import MarkdownParser, markdown_to_ast


def first_paragraph_content(markdown: str, **options) -> list:
    """Parse Markdown and return the inline nodes of its first paragraph."""
    doc = MarkdownParser(MarkdownParserOptions(**options)).parse(markdown)
    para = doc.children[0]
    assert isinstance(para, Paragraph)
    return para.content


@pytest.mark.unit
class TestMarkdownBlocks:
    """Tests for block-level tokens."""

    def test_heading(self) -> None:
        """Test ATX heading level and text."""
        doc = markdown_to_ast("## Methods")
        heading = doc.children[0]

        assert isinstance(heading, Heading)
        assert heading.level == 2
        assert extract_text(heading) == "Methods"

    def test_paragraphs(self) -> None:
        """Test blank lines separate paragraphs."""
        doc = markdown_to_ast("one\n\ntwo")

        assert [extract_text(child) for child in doc.children] == ["one", "two"]
        assert all(isinstance(child, Paragraph) for child in doc.children)

    def test_fenced_code_with_info(self) -> None:
        """Test the first info word is the language."""
        doc = markdown_to_ast("```python linenos\nx = 1\n```\n")
        block = doc.children[0]

        assert isinstance(block, CodeBlock)
        assert block.language == "python"
        assert block.content == "x = 1\n"
        assert block.metadata["info_attrs"] == "linenos"

    def test_fenced_code_without_info(self) -> None:
        """Test a bare fence has no language."""
        block = markdown_to_ast("```\nplain\n```\n").children[0]

        assert isinstance(block, CodeBlock)
        assert block.language is None

    def test_block_quote(self) -> None:
        """Test block quote children."""
        quote = markdown_to_ast("> quoted").children[0]

        assert isinstance(quote, BlockQuote)
        assert extract_text(quote) == "quoted"

    def test_ordered_list(self) -> None:
        """Test ordered list attributes and items."""
        lst = markdown_to_ast("3. a\n4. b\n").children[0]

        assert isinstance(lst, List)
        assert lst.ordered is True
        assert lst.start == 3
        assert [extract_text(item) for item in lst.items] == ["a", "b"]

    def test_unordered_list_items_hold_paragraphs(self) -> None:
        """Test tight list items wrap their text in a paragraph."""
        lst = markdown_to_ast("- a\n- b\n").children[0]

        assert isinstance(lst, List)
        assert lst.ordered is False
        assert isinstance(lst.items[0].children[0], Paragraph)

    def test_thematic_break(self) -> None:
        """Test a horizontal rule between paragraphs."""
        doc = markdown_to_ast("a\n\n***\n\nb")

        assert isinstance(doc.children[1], ThematicBreak)

    def test_table(self) -> None:
        """Test table sections, alignments and column indexes."""
        table = markdown_to_ast("| a | b |\n|:--|--:|\n| 1 | 2 |\n").children[0]

        assert isinstance(table, Table)
        assert table.alignments == ["left", "right"]
        assert table.header is not None and table.body is not None
        header_cells = table.header.rows[0].cells
        assert [extract_text(cell) for cell in header_cells] == ["a", "b"]
        assert [cell.alignment for cell in header_cells] == ["left", "right"]
        body_cells = table.body.rows[0].cells
        assert [cell.column for cell in body_cells] == [0, 1]
        assert [extract_text(cell) for cell in body_cells] == ["1", "2"]

    def test_block_html(self) -> None:
        """Test raw HTML blocks are kept as raw nodes."""
        block = markdown_to_ast("<div>\nx\n</div>\n").children[0]

        assert isinstance(block, HTMLBlock)
        assert "<div>" in block.content


@pytest.mark.unit
class TestMarkdownInline:
    """Tests for inline tokens."""

    def test_emphasis_and_strong(self) -> None:
        """Test single and double markers."""
        content = first_paragraph_content("*a* and **b**")

        assert isinstance(content[0], Emphasis)
        assert isinstance(content[-1], Strong)

    def test_strong_emphasis(self) -> None:
        """Test triple markers fold into one node."""
        content = first_paragraph_content("***both***")

        assert len(content) == 1
        assert isinstance(content[0], StrongEmphasis)
        assert extract_text(content[0]) == "both"

    def test_code_span(self) -> None:
        """Test code span content is raw."""
        content = first_paragraph_content("use `a_b`")

        assert content[-1] == Code(content="a_b")

    def test_softbreak_is_newline_text(self) -> None:
        """Test a soft line break becomes a newline."""
        content = first_paragraph_content("a\nb")

        assert Text(content="\n") in content
        assert not any(isinstance(node, LineBreak) for node in content)

    def test_hard_line_break(self) -> None:
        """Test two trailing spaces make a hard break."""
        content = first_paragraph_content("a  \nb")

        assert any(isinstance(node, LineBreak) for node in content)

    def test_strikethrough(self) -> None:
        """Test ~~text~~."""
        assert isinstance(first_paragraph_content("~~gone~~")[0], Strikethrough)

    def test_highlight(self) -> None:
        """Test ==text==."""
        assert isinstance(first_paragraph_content("==key==")[0], Highlight)

    def test_underline(self) -> None:
        """Test ^^text^^."""
        assert isinstance(first_paragraph_content("^^under^^")[0], Underline)

    def test_superscript(self) -> None:
        """Test ^text^."""
        content = first_paragraph_content("mc^2^")

        assert any(isinstance(node, Superscript) for node in content)

    def test_link(self) -> None:
        """Test link target and text."""
        link = first_paragraph_content("[see](#results)")[0]

        assert isinstance(link, Link)
        assert link.url == "#results"
        assert extract_text(link) == "see"

    def test_link_title(self) -> None:
        """Test link title attribute."""
        link = first_paragraph_content('[x](https://example.com "Example")')[0]

        assert isinstance(link, Link)
        assert link.title == "Example"

    def test_image(self) -> None:
        """Test image target, alt text and title."""
        image = first_paragraph_content('![A plot](plot.png "Figure")')[0]

        assert isinstance(image, Image)
        assert image.url == "plot.png"
        assert image.alt_text == "A plot"
        assert image.title == "Figure"

    def test_image_formatted_alt_text(self) -> None:
        """Test emphasis and code spans in alt text keep their words."""
        image = first_paragraph_content("![alt _x_ and `y_z`](p.png)")[0]

        assert isinstance(image, Image)
        assert image.alt_text == "alt x and y_z"

    def test_inline_html(self) -> None:
        """Test inline HTML is kept as a raw node."""
        content = first_paragraph_content("a <b>x</b>")

        assert any(isinstance(node, HTMLInline) for node in content)

    def test_footnotes(self) -> None:
        """Test references carry their ordinal and definitions are collected."""
        doc = markdown_to_ast("Claim[^src].\n\n[^src]: Source.\n")

        refs = [node for node in doc.children[0].content if isinstance(node, FootnoteReference)]
        assert len(refs) == 1
        assert refs[0].ordinal == 1
        container = doc.children[-1]
        assert isinstance(container, FootnoteContainer)
        assert container.definitions[0].ordinal == 1
        assert extract_text(container.definitions[0]) == "Source."


@pytest.mark.unit
class TestMarkdownOptions:
    """Tests for parser options."""

    def test_tables_disabled(self) -> None:
        """Test pipe tables stay paragraphs without the table plugin."""
        doc = MarkdownParser(MarkdownParserOptions(parse_tables=False)).parse("| a |\n|---|\n| 1 |\n")

        assert not any(isinstance(child, Table) for child in doc.children)

    def test_strikethrough_disabled(self) -> None:
        """Test tildes stay literal without the plugin."""
        content = first_paragraph_content("~~x~~", parse_strikethrough=False)

        assert extract_text(content) == "~~x~~"

    def test_smart_quotes(self) -> None:
        """Test straight double quotes become a Quote node."""
        content = first_paragraph_content('He said "hi" twice', smart_quotes=True)

        quotes = [node for node in content if isinstance(node, Quote)]
        assert len(quotes) == 1
        assert extract_text(quotes[0]) == "hi"
        assert extract_text(content) == "He said hi twice"

    def test_smart_quotes_unmatched(self) -> None:
        """Test a lone quote stays literal."""
        content = first_paragraph_content('a "b', smart_quotes=True)

        assert not any(isinstance(node, Quote) for node in content)
        assert extract_text(content) == 'a "b'

    def test_smart_quotes_off_by_default(self) -> None:
        """Test quotes are literal unless enabled."""
        content = first_paragraph_content('"hi"')

        assert extract_text(content) == '"hi"'

    def test_invalid_options_type(self) -> None:
        """Test renderer options are rejected."""
        with pytest.raises(InvalidOptionsError):
            MarkdownParser(LatexRendererOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestMarkdownInput:
    """Tests for input handling and errors."""

    def test_bytes_input(self) -> None:
        """Test UTF-8 bytes are decoded."""
        doc = MarkdownParser().parse("# Café".encode("utf-8"))

        assert extract_text(doc.children[0]) == "Café"

    def test_path_input(self, tmp_path: Path) -> None:
        """Test a file path is read."""
        source = tmp_path / "doc.md"
        source.write_text("# From file\n", encoding="utf-8")

        assert extract_text(MarkdownParser().parse(source).children[0]) == "From file"

    def test_empty_input(self) -> None:
        """Test empty Markdown gives an empty document."""
        assert markdown_to_ast("").children == []

    def test_tokenizer_failure_wrapped(self) -> None:
        """Test errors raised by mistune surface as ParsingError."""
        with patch("mistune.create_markdown") as mock_create:
            mock_create.return_value.parse.side_effect = RuntimeError("boom")

            with pytest.raises(ParsingError) as exc_info:
                MarkdownParser().parse("text")

        assert exc_info.value.parsing_stage == "tokenize"
        assert isinstance(exc_info.value.original_error, RuntimeError)
