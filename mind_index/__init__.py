from .memory_store import InMemoryNoteRepository
from .records import normalize_notes, note_from_record, note_to_record

__all__ = [
    "InMemoryNoteRepository",
    "normalize_notes",
    "note_from_record",
    "note_to_record",
]
