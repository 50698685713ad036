"""Value types shared by the tree renderer and the render hooks."""

from enum import Enum, StrEnum, auto


class NodeKind(StrEnum):
    """Closed set of node kinds the render hooks distinguish."""

    BLOCK_QUOTE = auto()
    PARAGRAPH = auto()
    TEXT = auto()
    LIST_ITEM = auto()
    CODE_BLOCK = auto()
    OTHER = auto()


class AlertKind(StrEnum):
    """Callout styles recognized from a `[!KIND]` block quote prefix.

    The value addresses the fragment template `alert/<value>.html`.
    """

    NOTE = auto()
    TIP = auto()
    IMPORTANT = auto()
    WARNING = auto()
    CAUTION = auto()
    BLOCKQUOTE = auto()


class WalkStatus(Enum):
    GO_TO_NEXT = auto()
    SKIP_CHILDREN = auto()  # entry visit only: do not descend
    TERMINATE = auto()


# (walk decision, consumed) - consumed=True suppresses the default HTML for the node
HookResult = tuple[WalkStatus, bool]
