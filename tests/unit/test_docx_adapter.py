"""
Tests for AST → word-processor rendering

These tests verify:
1. Heading sizes and spacing follow the body size
2. Bold-led paragraphs are promoted to subheadings
3. Nested lists get their own markers and deeper indents
4. Code blocks keep one run per line in the monospace family
5. Inline styles accumulate through nesting
"""

import pytest

from multiformat_export.rendering.ast_builder import parse_markdown
from multiformat_export.rendering.docx_adapter import DocxRenderer, DocxParagraph, DocxRun
from multiformat_export.rendering.markdown_ast import (
    Root,
    Heading,
    Paragraph,
    List,
    ListItem,
    Code,
    Text,
    Strong,
    Emphasis,
    InlineCode,
    Break,
    Unsupported,
)


def render_one(renderer, node):
    return renderer.render(Root(children=[node]))


class TestModel:

    def test_paragraph_text_shows_breaks(self):
        para = DocxParagraph()
        para.add_run(DocxRun(text="a"))
        para.add_run(DocxRun(line_break=True))
        para.add_run(DocxRun(text="b"))
        assert para.text == "a\nb"
        assert [r.text for r in para.text_runs] == ["a", "b"]


class TestHeadings:

    def test_heading_size_and_spacing(self, docx_renderer):
        paras = render_one(docx_renderer, Heading(depth=1, children=[Text(value="Title")]))
        assert len(paras) == 1
        para = paras[0]
        assert (para.spacing_before, para.spacing_after) == (360, 180)
        assert para.runs == [DocxRun(text="Title", size=35)]

    def test_heading_not_forced_bold(self, docx_renderer):
        paras = render_one(docx_renderer, Heading(depth=3, children=[Text(value="Plain")]))
        assert paras[0].runs[0].bold is False
        assert paras[0].runs[0].size == 29

    def test_heading_keeps_source_bold(self, docx_renderer):
        heading = Heading(depth=2, children=[Strong(children=[Text(value="Loud")])])
        run = render_one(docx_renderer, heading)[0].runs[0]
        assert run.bold is True
        assert run.size == 32

    def test_heading_scales_with_body(self):
        renderer = DocxRenderer(default_font_size=44)
        para = render_one(renderer, Heading(depth=1, children=[Text(value="Big")]))[0]
        assert para.runs[0].size == 70
        assert (para.spacing_before, para.spacing_after) == (720, 360)


class TestPromotion:
    """Bold first line → subheading"""

    def test_lone_bold_paragraph(self, docx_renderer):
        paras = docx_renderer.render(parse_markdown("**Attendees**"))
        assert len(paras) == 1
        para = paras[0]
        assert (para.spacing_before, para.spacing_after) == (320, 160)
        assert para.runs == [DocxRun(text="Attendees", bold=True, size=32)]

    def test_bold_line_then_body(self, docx_renderer):
        paras = docx_renderer.render(parse_markdown("**Attendees**\nAlice, Bob"))
        assert len(paras) == 2
        heading, body = paras
        assert heading.text == "Attendees"
        assert heading.runs[0].bold is True
        assert body.runs == [DocxRun(text="Alice, Bob")]
        assert (body.spacing_before, body.spacing_after) == (0, 160)

    def test_body_keeps_inner_newlines(self, docx_renderer):
        paras = docx_renderer.render(parse_markdown("**Notes**\nline one\nline two"))
        assert paras[1].text == "line one\nline two"

    def test_only_newlines_after_bold(self, docx_renderer):
        para = Paragraph(children=[Strong(children=[Text(value="Solo")]), Text(value="\n")])
        assert len(render_one(docx_renderer, para)) == 1

    def test_bold_inline_is_not_promoted(self, docx_renderer):
        paras = docx_renderer.render(parse_markdown("**Note** this is inline"))
        assert len(paras) == 1
        assert [r.bold for r in paras[0].runs] == [True, False]
        assert paras[0].runs[0].size == 22


class TestParagraphs:

    def test_soft_break_becomes_line_break(self, docx_renderer):
        para = render_one(docx_renderer, Paragraph(children=[Text(value="a\nb")]))[0]
        assert [r.line_break for r in para.runs] == [False, True, False]
        assert para.text == "a\nb"

    def test_hard_break(self, docx_renderer):
        para = render_one(docx_renderer, Paragraph(children=[
            Text(value="a"), Break(), Text(value="b"),
        ]))[0]
        assert para.runs[1].line_break is True
        assert para.runs[1].size == 22

    def test_nested_styles_accumulate(self, docx_renderer):
        node = Paragraph(children=[
            Emphasis(children=[Strong(children=[
                Text(value="both"),
                InlineCode(value="code"),
            ])]),
        ])
        runs = render_one(docx_renderer, node)[0].runs
        assert runs[0] == DocxRun(text="both", bold=True, italic=True)
        assert runs[1].bold and runs[1].italic and runs[1].monospace
        assert runs[1].font_family == "Courier New"

    def test_empty_inline_code_skipped(self, docx_renderer):
        para = render_one(docx_renderer, Paragraph(children=[InlineCode(value="")]))[0]
        assert para.runs == []

    def test_unsupported_inline_flattens_text(self, docx_renderer):
        node = Paragraph(children=[
            Unsupported(name="link", children=[Text(value="docs "), Emphasis(children=[Text(value="page")])]),
        ])
        runs = render_one(docx_renderer, node)[0].runs
        assert runs == [DocxRun(text="docs page")]

    def test_bare_inline_at_block_level(self, docx_renderer):
        paras = render_one(docx_renderer, Text(value="stray"))
        assert len(paras) == 1
        assert paras[0].text == "stray"
        assert paras[0].spacing_after == 160

    def test_unsupported_block_skipped(self, docx_renderer):
        assert docx_renderer.render(parse_markdown("> quoted")) == []

    def test_tiny_body_size_clamped(self):
        para = render_one(DocxRenderer(default_font_size=0), Paragraph(children=[Text(value="x")]))[0]
        assert para.runs[0].size == 2


class TestCodeBlocks:

    def test_one_run_per_line(self, docx_renderer):
        para = render_one(docx_renderer, Code(value="a\nb\nc", language="python"))[0]
        assert para.text == "a\nb\nc"
        assert len(para.text_runs) == 3
        assert all(r.monospace and r.font_family == "Courier New" for r in para.text_runs)
        assert para.left_indent == 0

    def test_blank_lines_kept(self, docx_renderer):
        para = render_one(docx_renderer, Code(value="a\n\nb"))[0]
        assert para.text == "a\n\nb"

    def test_empty_code(self, docx_renderer):
        para = render_one(docx_renderer, Code(value=""))[0]
        assert para.runs == []

    def test_custom_mono_family(self):
        renderer = DocxRenderer(mono_font_family="Fira Mono")
        para = render_one(renderer, Code(value="x"))[0]
        assert para.runs[0].font_family == "Fira Mono"


class TestLists:

    def test_nested_ordered_markers(self, docx_renderer):
        paras = docx_renderer.render(parse_markdown("1. A\n   1. B\n2. C"))
        assert [p.runs[0].text for p in paras] == ["1. ", "1. ", "2. "]
        assert [p.text_runs[1].text for p in paras] == ["A", "B", "C"]
        assert paras[1].left_indent > paras[0].left_indent
        assert [p.left_indent for p in paras] == [720, 1080, 720]
        assert all(p.hanging_indent == 360 for p in paras)

    def test_marker_is_bold_body_font(self, docx_renderer):
        marker = docx_renderer.render(parse_markdown("1. A"))[0].runs[0]
        assert marker.bold is True
        assert marker.font_family == "Times New Roman"
        assert marker.size == 22

    def test_bullets(self, docx_renderer):
        paras = docx_renderer.render(parse_markdown("- x\n- y"))
        assert [p.text for p in paras] == ["• x", "• y"]

    def test_start_number(self, docx_renderer):
        paras = docx_renderer.render(parse_markdown("3. a\n4. b"))
        assert [p.runs[0].text for p in paras] == ["3. ", "4. "]

    def test_item_continuation_paragraph(self, docx_renderer):
        paras = docx_renderer.render(parse_markdown("- first\n\n  second"))
        assert len(paras) == 2
        assert paras[0].text == "• first"
        assert paras[1].text == "second"
        assert paras[1].left_indent == 720
        assert paras[1].hanging_indent is None

    def test_code_in_item(self, docx_renderer):
        paras = docx_renderer.render(parse_markdown("- item\n\n  ```\n  code\n  ```"))
        assert len(paras) == 2
        assert paras[1].runs[0].monospace is True
        assert paras[1].text == "code"

    def test_list_item_inline_styles(self, docx_renderer):
        para = docx_renderer.render(parse_markdown("- **bold** item"))[0]
        assert para.runs[1] == DocxRun(text="bold", bold=True)
        assert para.runs[2] == DocxRun(text=" item")

    def test_empty_list(self, docx_renderer):
        assert render_one(docx_renderer, List(ordered=True, start=1)) == []

    def test_non_item_children_ignored(self, docx_renderer):
        node = List(ordered=False, children=[Text(value="x"), ListItem(children=[
            Paragraph(children=[Text(value="y")]),
        ])])
        paras = render_one(docx_renderer, node)
        assert [p.text for p in paras] == ["• y"]


class TestMeeting:

    def test_meeting_notes(self, docx_renderer):
        md = "# Weekly Sync\n\n**Attendees**\nAlice, Bob\n\n## Action items\n\n1. Ship\n2. Review\n"
        paras = docx_renderer.render(parse_markdown(md))
        assert [p.text for p in paras] == [
            "Weekly Sync", "Attendees", "Alice, Bob", "Action items", "1. Ship", "2. Review",
        ]
        # Promoted subheading matches a real H2
        assert paras[1].runs[0].size == paras[3].runs[0].size == 32


class TestCodeLineSplitting:
    """Code lines break on newlines only"""

    @pytest.mark.parametrize("separator", ["\f", "\v", "\x1c", "\x85", "\u2028"])
    def test_other_separators_stay_in_line(self, docx_renderer, separator):
        para = render_one(docx_renderer, Code(value=f"a{separator}b\nc"))[0]
        assert [r.text for r in para.text_runs] == [f"a{separator}b", "c"]

    def test_crlf(self, docx_renderer):
        para = render_one(docx_renderer, Code(value="a\r\nb\r\n"))[0]
        assert para.text == "a\nb"

    def test_single_newline(self, docx_renderer):
        para = render_one(docx_renderer, Code(value="\n"))[0]
        assert [r.text for r in para.text_runs] == [""]
