"""Tests for the depth-first tree renderer."""

import io

import pytest

from mdgrip.markdown import TreeRenderer, WalkStatus, parse_markdown
from mdgrip.markdown.parser import get_parser


def decline(out, node, entering):
    return WalkStatus.GO_TO_NEXT, False


class TestDefaultOutput:
    """Nodes the hook declines render exactly like MarkdownIt.render."""

    @pytest.mark.parametrize(
        "md",
        [
            "Hello *world*",
            "# Title\n\nBody",
            "> quote\n>\n> more",
            "- a\n- b\n\n1. one\n2. two",
            "- loose\n\n- list",
            "3. starts at three",
            "```python\nx = 1\n```",
            "    indented code",
            "| a | b |\n|---|---|\n| 1 | 2 |",
            "~~gone~~ and https://example.com",
            "![alt text](img.png \"title\")",
            "line one\\\nline two",
            "<div>raw html</div>\n\ntext",
            "$x^2$ and\n\n$$\ny = 1\n$$",
            "***",
            "",
        ],
    )
    def test_matches_markdown_it(self, md):
        md_it = get_parser()
        assert TreeRenderer(md_it, decline).render(parse_markdown(md)) == md_it.render(md)

    def test_image_alt_rendered_once(self):
        html = TreeRenderer(get_parser(), decline).render(parse_markdown("![alt text](img.png)"))
        assert html.count("alt text") == 1


class TestWalk:
    def test_visit_order(self):
        visits = []

        def record(out, node, entering):
            visits.append((node.type, entering))
            return WalkStatus.GO_TO_NEXT, False

        TreeRenderer(get_parser(), record).render(parse_markdown("> a"))

        # text is a leaf: visited on entry only; inline containers are never visited
        assert visits == [
            ("blockquote", True),
            ("paragraph", True),
            ("text", True),
            ("paragraph", False),
            ("blockquote", False),
        ]

    def test_consumed_suppresses_default(self):
        def upper_paragraphs(out, node, entering):
            if node.type != "paragraph":
                return WalkStatus.GO_TO_NEXT, False
            out.write("<P>" if entering else "</P>")
            return WalkStatus.GO_TO_NEXT, True

        html = TreeRenderer(get_parser(), upper_paragraphs).render(parse_markdown("Hello"))
        assert html == "<P>Hello</P>"

    def test_skip_children(self):
        def skip_blockquotes(out, node, entering):
            if node.type == "blockquote" and entering:
                return WalkStatus.SKIP_CHILDREN, False
            return WalkStatus.GO_TO_NEXT, False

        html = TreeRenderer(get_parser(), skip_blockquotes).render(parse_markdown("> hidden"))
        assert html == "<blockquote>\n</blockquote>\n"

    def test_terminate(self):
        def stop_at_second(out, node, entering):
            if node.type == "text" and node.content == "second":
                return WalkStatus.TERMINATE, False
            return WalkStatus.GO_TO_NEXT, False

        html = TreeRenderer(get_parser(), stop_at_second).render(parse_markdown("first\n\nsecond\n\nthird"))
        assert html == "<p>first</p>\n<p>second"

    def test_walk_returns_false_when_terminated(self):
        root = parse_markdown("a")
        renderer = TreeRenderer(get_parser(), lambda out, node, entering: (WalkStatus.TERMINATE, True))
        renderer.render(root)
        assert renderer.walk(root, io.StringIO()) is False

    def test_renderer_reusable(self):
        renderer = TreeRenderer(get_parser(), decline)
        first = renderer.render(parse_markdown("# One"))
        second = renderer.render(parse_markdown("# Two"))
        assert "One" in first
        assert "One" not in second
