from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from mind_core.types import Note

from .filters import contains_text, has_embedding, missing_embedding


class InMemoryNoteRepository:
    """
    Ordered, in-memory note collection.

    Newly added notes go to the front, merged notes to the back.
    `get_corpus()` hands out an immutable snapshot, so callers can run
    relatedness queries while the repository keeps changing.
    """

    def __init__(self, notes: Optional[Iterable[Note]] = None):
        self._notes: List[Note] = []
        if notes:
            self.merge(notes)

    def __len__(self) -> int:
        return len(self._notes)

    # ----------------------------
    # Read path
    # ----------------------------

    def get_corpus(self) -> Tuple[Note, ...]:
        return tuple(self._notes)

    def get(self, note_id: str) -> Optional[Note]:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def pending_embedding(self) -> List[Note]:
        return [n for n in self._notes if missing_embedding(n)]

    @property
    def embedded_count(self) -> int:
        return sum(1 for n in self._notes if has_embedding(n))

    def search(self, query: str) -> List[Note]:
        matches = contains_text(query)
        return [n for n in self._notes if matches(n)]

    # ----------------------------
    # Write path
    # ----------------------------

    def add(self, note: Note) -> None:
        if self._index_of(note.id) is not None:
            raise ValueError(f"Note id already exists: {note.id}")
        self._notes.insert(0, note)

    def replace(self, note: Note) -> None:
        idx = self._index_of(note.id)
        if idx is None:
            raise KeyError(note.id)
        self._notes[idx] = note

    def remove(self, note_id: str) -> bool:
        idx = self._index_of(note_id)
        if idx is None:
            return False
        del self._notes[idx]
        return True

    def record_view(self, note_id: str) -> Optional[Note]:
        """
        Bump the view counter of a note that was opened. Position is kept.
        """
        idx = self._index_of(note_id)
        if idx is None:
            return None
        note = self._notes[idx]
        viewed = replace(note, view_count=note.view_count + 1)
        self._notes[idx] = viewed
        return viewed

    def merge(self, notes: Iterable[Note]) -> int:
        """
        Append notes whose id is not present yet. Returns how many were added.
        """
        seen = {n.id for n in self._notes}
        added = 0
        for note in notes:
            if note.id in seen:
                continue
            self._notes.append(note)
            seen.add(note.id)
            added += 1
        return added

    def _index_of(self, note_id: str) -> Optional[int]:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        return None
