from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Sequence, Tuple

Vector = Sequence[float]


@dataclass(frozen=True)
class Note:
    """
    A single free-text note.
    The embedding is either absent (None) or a fixed-length tuple of floats.
    """
    id: str
    content: str
    created_at: Optional[datetime] = None
    embedding: Optional[Tuple[float, ...]] = None
    view_count: int = 0

    def __post_init__(self) -> None:
        if self.embedding is not None and not isinstance(self.embedding, tuple):
            object.__setattr__(self, "embedding", tuple(self.embedding))

    def with_embedding(self, embedding: Optional[Vector]) -> "Note":
        return replace(self, embedding=None if embedding is None else tuple(embedding))


@dataclass(frozen=True)
class Candidate:
    """
    A note paired with its similarity to one target note.
    Valid for a single query only.
    """
    note: Note
    similarity: float


@dataclass(frozen=True)
class RelatedNote:
    """
    Result returned by the relatedness engine.
    """
    note: Note
    similarity: float

    @property
    def note_id(self) -> str:
        return self.note.id

    @property
    def percent(self) -> int:
        return round(self.similarity * 100)
