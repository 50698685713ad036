"""Markdown parsing and GitHub-flavored HTML rendering."""

from mdgrip.markdown.emoji import EMOJI, replace_emoji
from mdgrip.markdown.hooks import RenderHooks
from mdgrip.markdown.models import AlertKind, HookResult, NodeKind, WalkStatus
from mdgrip.markdown.parser import Parser, create_parser, md_to_html, parse_markdown
from mdgrip.markdown.preprocess import is_list_start, normalize_list_boundaries, preprocess_markdown
from mdgrip.markdown.renderer import TreeRenderer

__all__ = [
    # Parser
    "Parser",
    "create_parser",
    "parse_markdown",
    "md_to_html",
    # Preprocessing
    "is_list_start",
    "normalize_list_boundaries",
    "preprocess_markdown",
    # Rendering
    "TreeRenderer",
    "RenderHooks",
    "replace_emoji",
    "EMOJI",
    # Models
    "NodeKind",
    "AlertKind",
    "WalkStatus",
    "HookResult",
]
