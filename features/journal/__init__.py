"""Journal entries and companion chat history."""

from .repository import JournalStore
from .schemas import ChatMessage, EntryAnalysis, JournalEntry
from .service import JournalService

__all__ = ["ChatMessage", "EntryAnalysis", "JournalEntry", "JournalService", "JournalStore"]
