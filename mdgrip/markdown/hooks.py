"""Render hooks: GitHub-flavored overrides of markdown-it's default HTML.

The dispatcher is called by TreeRenderer for every node and routes a closed
set of node kinds to a handler:

- code blocks: Pygments highlighting, or a mermaid container for `mermaid` fences
- block quotes / paragraphs: `> [!NOTE]` style alert boxes
- text: emoji shortcodes, alert prefix removal, task list checkboxes
- list items: `task-list-item` class for `[ ]` / `[x]` items

Handlers write HTML directly to the output stream and report whether the
default rendering of the node is suppressed. Failures are logged and never
abort the render.
"""

import re
from collections.abc import Callable
from typing import TextIO

from loguru import logger
from markdown_it.common.utils import escapeHtml
from markdown_it.tree import SyntaxTreeNode

from mdgrip.exceptions import RenderError, TemplateRenderError
from mdgrip.markdown.emoji import replace_emoji
from mdgrip.markdown.highlight import DEFAULT_STYLE, format_code, resolve_lexer
from mdgrip.markdown.models import AlertKind, HookResult, NodeKind, WalkStatus
from mdgrip.markdown.nodes import first_child, leading_text, node_kind, parent
from mdgrip.markdown.renderer import write
from mdgrip.markdown.templates import render_alert_start, render_mermaid

MERMAID_INFO = "mermaid"

_ALERT_PREFIX = re.compile(r"\[!([A-Za-z]+)\]")

TASK_UNCHECKED = "[ ]"
TASK_CHECKED = ("[x]", "[X]")
_CHECKBOX = '<input type="checkbox" disabled class="task-list-item-checkbox">'
_CHECKBOX_CHECKED = '<input type="checkbox" disabled class="task-list-item-checkbox" checked>'

_DECLINE: HookResult = (WalkStatus.GO_TO_NEXT, False)
_CONSUMED: HookResult = (WalkStatus.GO_TO_NEXT, True)

Handler = Callable[[TextIO, SyntaxTreeNode, bool], HookResult]


def match_alert(content: str) -> tuple[AlertKind, int] | None:
    """Match a leading `[!KIND]` token (case-insensitive).

    Returns the alert kind and the length of the prefix, or None.
    """
    m = _ALERT_PREFIX.match(content)
    if m is None:
        return None
    try:
        return AlertKind(m.group(1).lower()), m.end()
    except ValueError:
        return None


def task_state(content: str) -> bool | None:
    """True for a checked task marker, False for an unchecked one, None for no marker."""
    if content.startswith(TASK_UNCHECKED):
        return False
    if content.startswith(TASK_CHECKED):
        return True
    return None


def paragraph_alert(paragraph: SyntaxTreeNode) -> AlertKind | None:
    """Alert kind announced by the paragraph's leading text, if any."""
    text = leading_text(paragraph)
    if text is None:
        return None
    matched = match_alert(text.content)
    return matched[0] if matched else None


def blockquote_alert(blockquote: SyntaxTreeNode) -> AlertKind | None:
    paragraph = first_child(blockquote)
    if node_kind(paragraph) is not NodeKind.PARAGRAPH:
        return None
    return paragraph_alert(paragraph)


def is_task_item(list_item: SyntaxTreeNode) -> bool:
    paragraph = first_child(list_item)
    if node_kind(paragraph) is not NodeKind.PARAGRAPH:
        return False
    text = leading_text(paragraph)
    return text is not None and task_state(text.content) is not None


class RenderHooks:
    """Render hook dispatcher carrying the per-conversion presentation options."""

    def __init__(self, theme: str, code_style: str = DEFAULT_STYLE):
        self.theme = theme
        self.code_style = code_style
        # Opening markup of each alert box, keyed by id() of its block quote node
        self._alert_openings: dict[int, str] = {}

    def _alert_opening(self, paragraph: SyntaxTreeNode) -> str | None:
        """Opening markup if `paragraph` is the first paragraph of a rendered alert."""
        blockquote = parent(paragraph)
        if node_kind(blockquote) is not NodeKind.BLOCK_QUOTE or first_child(blockquote) is not paragraph:
            return None
        return self._alert_openings.get(id(blockquote))

    def __call__(self, out: TextIO, node: SyntaxTreeNode, entering: bool) -> HookResult:
        handler: Handler
        match node_kind(node):
            case NodeKind.CODE_BLOCK:
                handler = self._render_code_block
            case NodeKind.BLOCK_QUOTE:
                handler = self._render_blockquote
            case NodeKind.PARAGRAPH:
                handler = self._render_paragraph
            case NodeKind.TEXT:
                handler = self._render_text
            case NodeKind.LIST_ITEM:
                handler = self._render_list_item
            case _:
                return _DECLINE

        try:
            return handler(out, node, entering)
        except RenderError:
            logger.exception(f"Failed to render {node.type} node, leaving it out")
            return _CONSUMED

    def _render_code_block(self, out: TextIO, node: SyntaxTreeNode, entering: bool) -> HookResult:
        info = node.info.strip()
        code = node.content

        if info == MERMAID_INFO:
            write(out, render_mermaid(code, self.theme))
            return _CONSUMED

        lexer = resolve_lexer(info, code)
        try:
            format_code(code, lexer, out, style=self.code_style)
        except (OSError, ValueError):
            logger.exception(f"Failed to format {lexer.name} code block")
        return _CONSUMED

    def _render_blockquote(self, out: TextIO, node: SyntaxTreeNode, entering: bool) -> HookResult:
        if not entering:
            return _CONSUMED if id(node) in self._alert_openings else _DECLINE

        alert = blockquote_alert(node)
        if alert is None:
            return _DECLINE
        try:
            self._alert_openings[id(node)] = render_alert_start(alert)
        except TemplateRenderError:
            logger.exception(f"Failed to render {alert} alert, keeping the block quote")
            return _DECLINE

        # Alerts replace the <blockquote> wrapper; the first paragraph draws the box.
        return _CONSUMED

    def _render_paragraph(self, out: TextIO, node: SyntaxTreeNode, entering: bool) -> HookResult:
        opening = self._alert_opening(node)
        if opening is None:
            return _DECLINE

        write(out, opening if entering else "</div>")
        return _CONSUMED

    def _render_text(self, out: TextIO, node: SyntaxTreeNode, entering: bool) -> HookResult:
        content = replace_emoji(escapeHtml(node.content))

        paragraph = parent(node)
        if node_kind(paragraph) is not NodeKind.PARAGRAPH:
            write(out, content)
            return _CONSUMED

        # Alert prefixes and task markers only count at the very start of a paragraph
        if first_child(paragraph) is node:
            container = parent(paragraph)
            match node_kind(container):
                case NodeKind.BLOCK_QUOTE if self._alert_opening(paragraph) is not None:
                    if matched := match_alert(content):
                        content = content[matched[1] :]
                case NodeKind.LIST_ITEM if first_child(container) is paragraph:
                    checked = task_state(content)
                    if checked is not None:
                        content = (_CHECKBOX_CHECKED if checked else _CHECKBOX) + content[len(TASK_UNCHECKED) :]

        write(out, content)
        return _CONSUMED

    def _render_list_item(self, out: TextIO, node: SyntaxTreeNode, entering: bool) -> HookResult:
        if not is_task_item(node):
            return _DECLINE

        write(out, '<li class="task-list-item">' if entering else "</li>")
        return _CONSUMED
