"""Depth-first HTML renderer over a SyntaxTreeNode tree with a per-node hook.

markdown-it renders flat token streams. To give render hooks the structural
context they need (parents, first children), we walk the syntax tree instead
and fall back to markdown-it's own render rules for every node the hook does
not consume. Rules are evaluated against the token's real position in its
token stream, so default output is identical to `MarkdownIt.render`.
"""

import io
from collections.abc import Sequence
from typing import Protocol, TextIO

from loguru import logger
from markdown_it import MarkdownIt
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode
from markdown_it.utils import EnvType

from mdgrip.markdown.models import HookResult, WalkStatus
from mdgrip.markdown.nodes import is_transparent


class RenderHook(Protocol):
    """Called on entry and exit of nesting nodes, and on entry of leaf nodes."""

    def __call__(self, out: TextIO, node: SyntaxTreeNode, entering: bool) -> HookResult: ...


def write(out: TextIO, fragment: str) -> None:
    """Write `fragment` to `out`; failures are logged and the fragment dropped."""
    if not fragment:
        return
    try:
        out.write(fragment)
    except (OSError, ValueError):
        logger.exception("Failed to write rendered HTML fragment")


def _index_tokens(tokens: Sequence[Token], positions: dict[int, tuple[Sequence[Token], int]]) -> None:
    for idx, token in enumerate(tokens):
        positions[id(token)] = (tokens, idx)
        if token.children:
            _index_tokens(token.children, positions)


class TreeRenderer:
    """Renders one document; create a new instance per render call."""

    def __init__(self, md: MarkdownIt, hook: RenderHook, env: EnvType | None = None):
        self._md = md
        self._hook = hook
        self._env: EnvType = env if env is not None else {}
        self._positions: dict[int, tuple[Sequence[Token], int]] = {}

    def render(self, root: SyntaxTreeNode) -> str:
        """Render the tree rooted at `root` to an HTML fragment."""
        # to_tokens() hands back the very Token objects the tree was built from
        self._positions = {}
        _index_tokens(root.to_tokens(), self._positions)

        out = io.StringIO()
        self.walk(root, out)
        return out.getvalue()

    def walk(self, node: SyntaxTreeNode, out: TextIO) -> bool:
        """Render `node` and its subtree into `out`. Returns False once the walk is terminated."""
        if is_transparent(node):
            return all(self.walk(child, out) for child in node.children)

        status, consumed = self._hook(out, node, True)
        if not consumed:
            write(out, self._render_default(node, entering=True))
        if status is WalkStatus.TERMINATE:
            return False

        # Leaf tokens render completely on entry (an image rule renders its own alt text)
        if not node.is_nested:
            return True

        if status is not WalkStatus.SKIP_CHILDREN:
            for child in node.children:
                if not self.walk(child, out):
                    return False

        status, consumed = self._hook(out, node, False)
        if not consumed:
            write(out, self._render_default(node, entering=False))
        return status is not WalkStatus.TERMINATE

    def _render_default(self, node: SyntaxTreeNode, entering: bool) -> str:
        if node.nester_tokens is not None:
            return self._render_token(node.nester_tokens.opening if entering else node.nester_tokens.closing)
        if node.token is not None:
            return self._render_token(node.token)
        # root has no token of its own
        return ""

    def _render_token(self, token: Token) -> str:
        tokens, idx = self._positions[id(token)]
        renderer = self._md.renderer
        rule = renderer.rules.get(token.type)
        if rule is not None:
            return rule(tokens, idx, self._md.options, self._env)
        return renderer.renderToken(tokens, idx, self._md.options, self._env)
