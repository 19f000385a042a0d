"""Page persistence sinks."""

from .atom import AtomFeedWriter
from .memory import InMemoryPageStore

__all__ = ["AtomFeedWriter", "InMemoryPageStore"]
