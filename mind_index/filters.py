from typing import Callable

from mind_core.types import Note

NotePredicate = Callable[[Note], bool]


def has_embedding(note: Note) -> bool:
    return note.embedding is not None


def missing_embedding(note: Note) -> bool:
    return note.embedding is None


def contains_text(query: str) -> NotePredicate:
    needle = (query or "").lower()

    def _pred(note: Note) -> bool:
        return needle in note.content.lower()

    return _pred
