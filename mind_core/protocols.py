from typing import Protocol, Sequence, runtime_checkable

from .types import Note, Vector


@runtime_checkable
class Embedder(Protocol):
    """
    Turns text into a fixed-length vector.
    Implementations may also provide `embed_batch(texts)`.
    """

    def embed(self, text: str) -> Vector:
        ...


@runtime_checkable
class NoteRepository(Protocol):
    """
    Supplies the corpus in a stable order.
    """

    def get_corpus(self) -> Sequence[Note]:
        ...
