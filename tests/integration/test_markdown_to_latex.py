#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_markdown_to_latex.py
"""End-to-end tests: Markdown source through the parser and LaTeX renderer."""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from mdlatex import (
    LatexRendererOptions,
    MarkdownParserOptions,
    OutputWriteError,
    from_ast,
    to_ast,
    to_latex,
)
from mdlatex.ast import Heading

EXPECTED_SAMPLE = (
    "\\section{Introduction}\n"
    "\n"
    "Some \\emph{emphasis}, \\textbf{strong} text and \\texttt{code\\_span}.\n"
    "\n"
    "\\begin{itemize}\n"
    "\\item first\n"
    "\\item second\n"
    "\\end{itemize}\n"
    "\n"
    "\\begin{quotation}\n"
    "quoted\n"
    "\\end{quotation}\n"
    "\n"
    "\\begin{minted}{python}\n"
    "print('hi')\n"
    "\\end{minted}\n"
    "\n"
    "\\begin{tabular}{|l|r|}\n"
    "\\hline\n"
    "a & b \\\\\n"
    "\\hline\n"
    "1 & 2 \\\\\n"
    "\\hline\n"
    "\\end{tabular}\n"
)


@pytest.mark.integration
class TestMarkdownToLatex:
    """Full conversions through the public API."""

    def test_sample_document(self, sample_markdown: str) -> None:
        """Test a document covering most block kinds."""
        assert to_latex(sample_markdown) == EXPECTED_SAMPLE

    def test_no_preamble(self, sample_markdown: str) -> None:
        """Test the output is a fragment."""
        result = to_latex(sample_markdown)

        assert "\\documentclass" not in result
        assert "\\begin{document}" not in result

    def test_heading_levels_and_anchors(self) -> None:
        """Test labels stop below the nesting level."""
        markdown = "# One\n\n## Two\n\n### Three\n"

        result = to_latex(markdown, heading_anchors=True, nesting_level=2)

        assert result == (
            "\\section{One}\\label{One}\n"
            "\n"
            "\\subsection{Two}\\label{Two}\n"
            "\n"
            "\\subsubsection{Three}\n"
        )

    def test_internal_link_targets_heading_label(self) -> None:
        """Test a fragment link refers to the heading label."""
        result = to_latex("# Results\n\nSee [results](#Results).", heading_anchors=True)

        assert "\\label{Results}" in result
        assert "\\hyperref[Results]{results}" in result

    def test_ordered_list_start(self) -> None:
        """Test an ordered list starting at 3 renders items 3 and 4."""
        assert to_latex("3. a\n4. b\n") == (
            "\\begin{enumerate}\n"
            "\\setcounter{\\csname @enumctr\\endcsname}{2}\n"
            "\\item a\n"
            "\\item b\n"
            "\\end{enumerate}\n"
        )

    def test_hard_wrap(self) -> None:
        """Test soft line breaks become explicit breaks."""
        assert to_latex("a\nb\nc", hard_wrap=True) == "a\\\\\nb\\\\\nc\n"

    def test_soft_breaks_kept_without_hard_wrap(self) -> None:
        """Test soft line breaks stay newlines."""
        assert to_latex("a\nb") == "a\nb\n"

    def test_extensions(self) -> None:
        """Test the plugin-backed spans reach their LaTeX commands."""
        result = to_latex("~~old~~ ==key== ^^under^^ mc^2^")

        assert "\\sout{old}" in result
        assert "\\hl{key}" in result
        assert "\\underline{under}" in result
        assert "\\textsuperscript{2}" in result

    def test_footnotes(self) -> None:
        """Test references become ordinals and definitions are dropped."""
        result = to_latex("Claim[^a].\n\n[^a]: Hidden note.\n")

        assert result == "Claim\\textsuperscript{1}.\n"

    def test_raw_html_dropped(self) -> None:
        """Test raw HTML never reaches the output."""
        result = to_latex("<div>\nraw\n</div>\n\ntext")

        assert "div" not in result
        assert result == "text\n"

    def test_image(self) -> None:
        """Test an image becomes a figure."""
        result = to_latex('![A plot](plots/fig1.png "Figure one")')

        assert "\\includegraphics*[width=\\textwidth]{plots/fig1.png}" in result
        assert "\\caption{A plot}" in result
        assert "Figure one\n" in result

    def test_image_caption_keeps_formatted_words(self) -> None:
        """Test formatted alt text reaches the caption as escaped plain text."""
        result = to_latex('para ![alt _x_](fig.png "t&") end')

        assert "\\caption{alt x}\n" in result
        assert "t\\&\n" in result

    def test_smart_quotes(self) -> None:
        """Test straight quotes become LaTeX quotes when enabled."""
        assert to_latex('say "hi"', smart_quotes=True) == "say ``hi''\n"

    def test_tables_disabled(self) -> None:
        """Test tables are left as text when the extension is off."""
        result = to_latex("| a |\n|---|\n| 1 |\n", parse_tables=False)

        assert "tabular" not in result

    def test_code_block_not_escaped(self) -> None:
        """Test code keeps reserved characters verbatim."""
        result = to_latex("```\n50% & $x_1$\n```\n")

        assert result == "\\begin{verbatim}\n50% & $x_1$\n\\end{verbatim}\n"

    def test_options_objects_and_kwargs(self) -> None:
        """Test keyword arguments override explicit options."""
        result = to_latex(
            "a\nb",
            parser_options=MarkdownParserOptions(),
            renderer_options=LatexRendererOptions(hard_wrap=False),
            hard_wrap=True,
        )

        assert result == "a\\\\\nb\n"


@pytest.mark.integration
class TestInputsAndOutputs:
    """Tests for the supported sources and destinations."""

    def test_path_source(self, tmp_path: Path) -> None:
        """Test converting a file on disk."""
        source = tmp_path / "in.md"
        source.write_text("# Title\n", encoding="utf-8")

        assert to_latex(source) == "\\section{Title}\n"

    def test_bytes_source(self) -> None:
        """Test converting encoded bytes."""
        assert to_latex("*über*".encode("utf-8")) == "\\emph{über}\n"

    def test_cp1252_bytes_source(self) -> None:
        """Test Windows-1252 input reaches the fragment as real characters."""
        text = "The “quoted” café serves crème brûlée on a naïve façade – every day."

        assert to_latex(text.encode("cp1252")) == text + "\n"

    def test_file_like_source(self) -> None:
        """Test converting a text stream."""
        assert to_latex(StringIO("plain")) == "plain\n"

    def test_path_output(self, tmp_path: Path) -> None:
        """Test writing to a path returns None."""
        out = tmp_path / "out.tex"

        assert to_latex("# T", out) is None
        assert out.read_text(encoding="utf-8") == "\\section{T}\n"

    def test_binary_stream_output(self) -> None:
        """Test writing UTF-8 bytes to a binary stream."""
        buffer = BytesIO()

        to_latex("café", buffer)

        assert buffer.getvalue() == "café\n".encode("utf-8")

    def test_failed_write_raises_when_requested(self, tmp_path: Path) -> None:
        """Test unwritable destinations raise with fail_on_resource_errors."""
        with pytest.raises(OutputWriteError):
            to_latex("x", tmp_path / "missing" / "out.tex", fail_on_resource_errors=True)

    def test_ast_round_trip_through_api(self) -> None:
        """Test to_ast and from_ast compose into to_latex."""
        doc = to_ast("## Methods\n\nText.")

        assert isinstance(doc.children[0], Heading)
        assert from_ast(doc) == to_latex("## Methods\n\nText.")
