"""
Tests for the digest converters.

Covers inline link parsing and the line-by-line block conversion of digest
markup.
"""

import unittest
from unittest.mock import Mock

from morningbrief.converters import BaseConverter, BlockConverter, RichTextParser, parse_rich_text
from morningbrief.models import BulletItem, Heading, Link, Paragraph, PlainText


def plain(*parts):
    return [PlainText(content=part) for part in parts]


def surface_text(spans):
    """Rebuild the source text of a span list."""
    return "".join(
        f"[{span.content}]({span.url})" if isinstance(span, Link) else span.content
        for span in spans
    )


class TestRichTextParser(unittest.TestCase):
    """Test inline link parsing."""

    def test_text_with_link(self):
        """Test splitting a line around one link."""
        spans = parse_rich_text("see [docs](http://x)  more")

        self.assertEqual(spans, [
            PlainText(content="see "),
            Link(content="docs", url="http://x"),
            PlainText(content="  more"),
        ])

    def test_plain_line(self):
        """Test a line without links yields a single plain span."""
        self.assertEqual(parse_rich_text("just words"), plain("just words"))

    def test_empty_line(self):
        """Test an empty line yields one empty plain span."""
        self.assertEqual(parse_rich_text(""), plain(""))

    def test_adjacent_links_keep_empty_spans(self):
        """Test empty strings between and around adjacent links are kept."""
        spans = parse_rich_text("[a](http://a)[b](http://b)")

        self.assertEqual(spans, [
            PlainText(content=""),
            Link(content="a", url="http://a"),
            PlainText(content=""),
            Link(content="b", url="http://b"),
            PlainText(content=""),
        ])

    def test_links_are_non_greedy(self):
        """Test two links on a line stay separate."""
        spans = parse_rich_text("[one](http://1) and [two](http://2)")
        links = [span for span in spans if isinstance(span, Link)]

        self.assertEqual([(l.content, l.url) for l in links], [("one", "http://1"), ("two", "http://2")])

    def test_extra_link_separator_cuts_url(self):
        """Test a second '](' inside a link ends the URL at the first piece."""
        spans = parse_rich_text("[a](b](c)")

        self.assertEqual(spans, [
            PlainText(content=""),
            Link(content="a", url="b"),
            PlainText(content=""),
        ])

    def test_malformed_links_stay_plain(self):
        """Test unbalanced link syntax falls through to plain text."""
        for line in ["[broken](http://x", "[no url]", "text](http://x)", "[a] (http://x)"]:
            with self.subTest(line=line):
                self.assertEqual(parse_rich_text(line), plain(line))

    def test_surface_text_round_trip(self):
        """Test joining spans with link decoration restores the line."""
        lines = [
            "see [docs](http://x)  more",
            "[a](http://a)[b](http://b) tail",
            "  leading and trailing  ",
            "(parens) and [brackets] without links",
        ]
        for line in lines:
            with self.subTest(line=line):
                self.assertEqual(surface_text(parse_rich_text(line)), line)

    def test_parser_object(self):
        """Test the parser class delegates to parse_rich_text."""
        parser = RichTextParser()
        self.assertEqual(parser.parse("x [y](z)"), parse_rich_text("x [y](z)"))
        self.assertEqual(parser("x"), plain("x"))


class TestBlockConverter(unittest.TestCase):
    """Test conversion of digest markup into content blocks."""

    def setUp(self):
        """Set up the converter."""
        self.converter = BlockConverter()

    def test_is_a_converter(self):
        """Test BlockConverter implements the converter interface."""
        self.assertIsInstance(self.converter, BaseConverter)

    def test_no_separator_yields_nothing(self):
        """Test content without a '---' line converts to no blocks."""
        content = "# Heading\n- bullet\nParagraph text\n\n## More"
        self.assertEqual(self.converter.convert(content), [])
        self.assertEqual(self.converter.convert(""), [])

    def test_heading_and_paragraph(self):
        """Test the basic heading followed by a paragraph."""
        blocks = self.converter.convert("preamble\n---\n# Title\nBody text")

        self.assertEqual(blocks, [
            Heading(level=1, text=plain("Title")),
            Paragraph(text=plain("Body text")),
        ])

    def test_introduction_is_skipped(self):
        """Test everything up to and including the separator is dropped."""
        content = "# Intro heading\n- intro bullet\nIntro text\n  ---  \n## Body"
        blocks = self.converter.convert(content)

        self.assertEqual(blocks, [Heading(level=2, text=plain("Body"))])

    def test_later_separators_are_paragraph_text(self):
        """Test only the first separator ends the introduction."""
        blocks = self.converter.convert("---\n---\n")
        self.assertEqual(blocks, [Paragraph(text=plain("---"))])

    def test_heading_levels(self):
        """Test the three heading levels and their prefixes."""
        blocks = self.converter.convert("---\n# One\n## Two\n### Three\n#### Four")

        self.assertEqual(blocks, [
            Heading(level=1, text=plain("One")),
            Heading(level=2, text=plain("Two")),
            Heading(level=3, text=plain("Three")),
            Paragraph(text=plain("#### Four")),
        ])

    def test_heading_placeholder_removed_and_trimmed(self):
        """Test mention placeholders are stripped from headings before trimming."""
        blocks = self.converter.convert("---\n##   Market news @([Reuters](https://reuters.com))  ")

        self.assertEqual(blocks, [Heading(level=2, text=plain("Market news"))])

    def test_heading_links_are_parsed(self):
        """Test headings keep ordinary links."""
        blocks = self.converter.convert("---\n# Read [this](http://x)")

        self.assertEqual(blocks[0].text, [
            PlainText(content="Read "),
            Link(content="this", url="http://x"),
            PlainText(content=""),
        ])

    def test_placeholder_kept_outside_headings(self):
        """Test bullets and paragraphs are not placeholder-filtered."""
        blocks = self.converter.convert("---\n- item @([src](http://s))\ntext @([src](http://s))")

        self.assertEqual(surface_text(blocks[0].text), "item @([src](http://s))")
        self.assertEqual(surface_text(blocks[1].text), "text @([src](http://s))")

    def test_bullets_without_trailing_paragraph(self):
        """Test a bullet list ending in a newline adds no empty paragraph."""
        blocks = self.converter.convert("---\n- a\n- b\n")

        self.assertEqual(blocks, [
            BulletItem(text=plain("a")),
            BulletItem(text=plain("b")),
        ])

    def test_bullet_text_is_not_trimmed(self):
        """Test the rest of a bullet line is kept verbatim."""
        blocks = self.converter.convert("---\n-  spaced  ")
        self.assertEqual(blocks, [BulletItem(text=plain(" spaced  "))])

    def test_paragraph_lines_join_without_separator(self):
        """Test consecutive lines are concatenated as-is."""
        blocks = self.converter.convert("---\nfirst line\nsecond line\n\nnext")

        self.assertEqual(blocks, [
            Paragraph(text=plain("first linesecond line")),
            Paragraph(text=plain("next")),
        ])

    def test_heading_flushes_paragraph(self):
        """Test a heading or bullet right after text closes the paragraph first."""
        blocks = self.converter.convert("---\nsome text\n# Heading\nmore text\n- bullet")

        self.assertEqual(blocks, [
            Paragraph(text=plain("some text")),
            Heading(level=1, text=plain("Heading")),
            Paragraph(text=plain("more text")),
            BulletItem(text=plain("bullet")),
        ])

    def test_consecutive_blank_lines(self):
        """Test several blank lines produce a single paragraph break."""
        blocks = self.converter.convert("---\none\n\n\n   \n\ntwo\n\n")

        self.assertEqual(blocks, [
            Paragraph(text=plain("one")),
            Paragraph(text=plain("two")),
        ])

    def test_ai_summarized_paragraph_dropped(self):
        """Test paragraphs mentioning 'AI Summarized' are removed entirely."""
        content = "---\n# News\nKeep this.\n\nThis part is\nAI Summarized by the tool.\n\nAnd this."
        blocks = self.converter.convert(content)

        self.assertEqual(blocks, [
            Heading(level=1, text=plain("News")),
            Paragraph(text=plain("Keep this.")),
            Paragraph(text=plain("And this.")),
        ])
        for block in blocks:
            self.assertNotIn("AI Summarized", surface_text(block.text))

    def test_ai_summarized_only_filters_paragraphs(self):
        """Test the marker does not drop headings or bullets."""
        blocks = self.converter.convert("---\n# AI Summarized\n- AI Summarized")

        self.assertEqual(blocks, [
            Heading(level=1, text=plain("AI Summarized")),
            BulletItem(text=plain("AI Summarized")),
        ])

    def test_paragraph_links(self):
        """Test links inside paragraphs become link spans."""
        blocks = self.converter.convert("---\nRead [the post](https://example.com/post) today")

        self.assertEqual(blocks, [Paragraph(text=[
            PlainText(content="Read "),
            Link(content="the post", url="https://example.com/post"),
            PlainText(content=" today"),
        ])])

    def test_full_digest(self):
        """Test a realistic digest end to end."""
        content = "\n".join([
            "Good morning! Here is your digest for today.",
            "",
            "---",
            "",
            "# Tech @([Hacker News](https://news.ycombinator.com))",
            "",
            "## [Rust 2.0 announced](https://example.com/rust)",
            "The release brings",
            " many changes.",
            "",
            "- [Changelog](https://example.com/changelog)",
            "- Migration guide",
            "",
            "AI Summarized",
            "",
            "### Misc",
        ])
        blocks = self.converter.convert(content)

        self.assertEqual([type(b) for b in blocks], [Heading, Heading, Paragraph, BulletItem, BulletItem, Heading])
        self.assertEqual(blocks[0].text, plain("Tech"))
        self.assertIsInstance(blocks[1].text[1], Link)
        self.assertEqual(blocks[2].text, plain("The release brings many changes."))
        self.assertEqual(blocks[5].level, 3)

    def test_uses_injected_parser(self):
        """Test the converter routes inline text through its parser."""
        parser = Mock()
        parser.parse.return_value = plain("parsed")
        converter = BlockConverter(rich_text_parser=parser)

        blocks = converter.convert("---\n# A\n- b\nc")

        self.assertEqual(len(blocks), 3)
        self.assertEqual([c.args[0] for c in parser.parse.call_args_list], ["A", "b", "c"])


if __name__ == '__main__':
    unittest.main()
