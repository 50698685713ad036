"""List-boundary normalization applied before parsing.

CommonMark only lets an ordered list starting at 1 (or any bullet list)
interrupt a paragraph in some cases, while GitHub renders a list directly
under a line of text. We insert a blank line in front of every list start
that directly follows a non-blank, non-list line, leaving fenced code alone.
Inside block quotes the inserted line carries the quote markers (`>`), so
the quote is not split in two.
"""

import re

_FENCE_MARKERS = ("```", "~~~")
_QUOTE_MARKER = re.compile(r"^(?:>[ \t]*)+")
# "- ", "* ", "+ " or "1. ", "12) "
_LIST_MARKER = re.compile(r"(?:[-*+]|[0-9]+[.)]) ")


def _unquote(line: str) -> str:
    return _QUOTE_MARKER.sub("", line)


def is_list_start(line: str) -> bool:
    """Check if a line opens a list item, also when nested in block quotes."""
    line = _unquote(line)
    if not line:
        return False
    return _LIST_MARKER.match(line) is not None


def _is_fence(stripped: str) -> bool:
    return _unquote(stripped).startswith(_FENCE_MARKERS)


def _blank_line_for(stripped: str) -> str:
    """Empty line, or a bare quote marker line (`>`, `> >`) inside a block quote."""
    m = _QUOTE_MARKER.match(stripped)
    return m.group().rstrip() if m else ""


def normalize_list_boundaries(text: str) -> str:
    """Insert blank lines before list starts that directly follow a paragraph line.

    Every original line is kept unchanged and in order; lines inside fenced
    code regions (and the fence lines themselves, quoted or not) never
    trigger an insertion.
    """
    lines = text.split("\n")
    result: list[str] = []
    in_fence = False

    for i, line in enumerate(lines):
        stripped = line.strip()

        if _is_fence(stripped):
            in_fence = not in_fence
            result.append(line)
            continue

        if in_fence:
            result.append(line)
            continue

        if i > 0:
            prev_stripped = lines[i - 1].strip()
            # a line holding only quote markers is blank within its quote
            if _unquote(prev_stripped).strip() and is_list_start(stripped) and not is_list_start(prev_stripped):
                result.append(_blank_line_for(stripped))

        result.append(line)

    return "\n".join(result)


def preprocess_markdown(source: bytes) -> bytes:
    """Byte-level variant of normalize_list_boundaries for raw UTF-8 documents."""
    text = source.decode("utf-8", errors="surrogateescape")
    return normalize_list_boundaries(text).encode("utf-8", errors="surrogateescape")
