"""Markdown parsing using markdown-it-py, and the Markdown -> HTML preview converter.

Configures markdown-it with the extensions a GitHub README needs:
- CommonMark base (fenced code, backslash line breaks, ordered list start)
- GFM tables and strikethrough
- Bare URL autolinking (linkify)
- Dollar math ($inline$ and $$display$$)
- Heading IDs: automatic slugs, or an explicit trailing `{#id}`
"""

import re
from functools import lru_cache

from loguru import logger
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.dollarmath import dollarmath_plugin

from mdgrip.config import Settings, Theme
from mdgrip.markdown.highlight import DEFAULT_STYLE, get_style_css
from mdgrip.markdown.hooks import RenderHooks
from mdgrip.markdown.preprocess import normalize_list_boundaries
from mdgrip.markdown.renderer import TreeRenderer

# "## Install {#setup}" -> id="setup"
_EXPLICIT_HEADING_ID = re.compile(r"\s*\{#([A-Za-z][\w.:-]*)\}\s*$")


def _explicit_heading_ids(state: StateCore) -> None:
    for idx, token in enumerate(state.tokens):
        if token.type != "heading_open":
            continue
        inline = state.tokens[idx + 1]
        last = next((child for child in reversed(inline.children or []) if child.content), None)
        if last is None or last.type != "text":
            continue
        m = _EXPLICIT_HEADING_ID.search(last.content)
        if m is None:
            continue
        last.content = last.content[: m.start()]
        inline.content = _EXPLICIT_HEADING_ID.sub("", inline.content)
        token.attrSet("id", m.group(1))


def heading_id_plugin(md: MarkdownIt) -> None:
    """Let a trailing `{#id}` set the heading ID; must be added after anchors_plugin."""
    md.core.ruler.push("explicit_heading_id", _explicit_heading_ids)


def create_parser() -> MarkdownIt:
    """Create configured markdown-it parser."""
    md = MarkdownIt("commonmark", {"linkify": True})
    md.enable(["table", "strikethrough", "linkify"])
    dollarmath_plugin(md)
    anchors_plugin(md, min_level=1, max_level=6)
    heading_id_plugin(md)
    return md


@lru_cache(maxsize=1)
def get_parser() -> MarkdownIt:
    """Shared parser; its configuration never changes after creation."""
    return create_parser()


def parse_markdown(text: str) -> SyntaxTreeNode:
    """Parse `text` into a syntax tree (root node) with the shared parser."""
    return SyntaxTreeNode(get_parser().parse(text))


class Parser:
    """Converts Markdown documents into HTML fragments for preview.

    Holds only presentation options, so one instance can be reused for any
    number of conversions.
    """

    def __init__(self, theme: str = Theme.AUTO, code_style: str = DEFAULT_STYLE):
        self.theme = str(theme)
        self.code_style = code_style

    @classmethod
    def from_settings(cls, settings: Settings) -> "Parser":
        return cls(theme=settings.theme, code_style=settings.code_style)

    def md_to_html(self, source: bytes | str) -> bytes:
        """Render a Markdown document to a UTF-8 encoded HTML fragment.

        Args:
            source: Markdown text, raw UTF-8 bytes or str

        Returns:
            HTML fragment (no <html>/<head> wrapper)
        """
        text = source.decode("utf-8", errors="replace") if isinstance(source, bytes) else source
        ast = parse_markdown(normalize_list_boundaries(text))
        hooks = RenderHooks(theme=self.theme, code_style=self.code_style)
        html = TreeRenderer(get_parser(), hooks).render(ast)
        logger.debug(f"Rendered {len(text)} chars of markdown to {len(html)} chars of HTML")
        return html.encode("utf-8")

    def highlight_css(self) -> str:
        """CSS for the code highlighting classes used by md_to_html."""
        return get_style_css(self.code_style)


def md_to_html(source: bytes | str, theme: str = Theme.AUTO) -> bytes:
    """Render `source` with a throwaway Parser; see Parser.md_to_html."""
    return Parser(theme=theme).md_to_html(source)
