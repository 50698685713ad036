"""Syntax highlighting of code blocks using Pygments."""

from typing import TextIO

from loguru import logger
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

DEFAULT_STYLE = "default"
CSS_CLASS = "highlight"


def get_lexer(name: str) -> Lexer | None:
    """Return the lexer registered under `name` (alias or language name), or None."""
    try:
        return get_lexer_by_name(name)
    except ClassNotFound:
        return None


def analyse_lexer(code: str) -> Lexer | None:
    """Infer a lexer from the shape of `code`, or None if nothing matches."""
    try:
        return guess_lexer(code)
    except ClassNotFound:
        return None


def resolve_lexer(info: str, code: str) -> Lexer:
    """Pick a lexer for a code block; never returns None.

    The first word of the info string names the language (`python {linenos}`
    -> `python`). Without an info string the language is guessed from the
    content. Anything unresolved is rendered as plain text.
    """
    words = info.split(maxsplit=1)
    lexer = get_lexer(words[0]) if words else analyse_lexer(code)
    return lexer or TextLexer()


def _formatter(style: str) -> HtmlFormatter:
    try:
        return HtmlFormatter(style=style, cssclass=CSS_CLASS)
    except ClassNotFound:
        logger.warning(f"Unknown Pygments style {style!r}, using {DEFAULT_STYLE!r}")
        return HtmlFormatter(style=DEFAULT_STYLE, cssclass=CSS_CLASS)


def format_code(code: str, lexer: Lexer, out: TextIO, style: str = DEFAULT_STYLE) -> None:
    """Tokenize `code` and write class-based HTML to `out`."""
    _formatter(style).format(lexer.get_tokens(code), out)


def get_style_css(style: str = DEFAULT_STYLE) -> str:
    """CSS rules for the token classes emitted by format_code."""
    return _formatter(style).get_style_defs(f".{CSS_CLASS}")
