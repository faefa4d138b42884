"""Document host contract and the word replacement engine."""

from .document import CHANGE, RENDER, SELECTION_CHANGE, Block, BlockDocument, EventBus
from .host import DocumentHost
from .replace import ReplacementEngine

__all__ = [
    "Block",
    "BlockDocument",
    "CHANGE",
    "DocumentHost",
    "EventBus",
    "RENDER",
    "ReplacementEngine",
    "SELECTION_CHANGE",
]
