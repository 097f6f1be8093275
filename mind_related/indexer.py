import logging
from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, List, Optional

from mind_core.errors import ValidationError
from mind_core.protocols import Embedder
from mind_core.types import Note, Vector
from mind_core.validators import validate_batch, validate_vector
from mind_index.memory_store import InMemoryNoteRepository

logger = logging.getLogger(__name__)


def _batch(iterable: Iterable, size: int):
    it = iter(iterable)
    while True:
        chunk = list(islice(it, size))
        if not chunk:
            return
        yield chunk


@dataclass
class BackfillReport:
    processed: int = 0
    succeeded: int = 0
    failed_ids: List[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failed_ids)


class EmbeddingBackfill:
    """
    Attaches embeddings to notes that do not have one yet.

    Runs outside the relatedness engine: it talks to the embedding provider
    and writes updated notes back to the repository. A failure on one note
    is logged and counted, and the run carries on.
    """

    def __init__(
        self,
        *,
        embedder: Embedder,
        repository: InMemoryNoteRepository,
        batch_size: int = 64,
    ):
        if batch_size <= 0:
            raise ValueError("batch_size must be a positive integer")
        self.embedder = embedder
        self.repository = repository
        self.batch_size = batch_size

    def run(self) -> BackfillReport:
        report = BackfillReport()
        pending = self.repository.pending_embedding()
        logger.info("Embedding backfill: %d notes pending", len(pending))

        for chunk in _batch(pending, self.batch_size):
            vectors = self._embed_chunk(chunk)
            for note, vector in zip(chunk, vectors):
                report.processed += 1
                if self._store(note, vector):
                    report.succeeded += 1
                else:
                    report.failed_ids.append(note.id)

        logger.info(
            "Embedding backfill done: %d/%d succeeded",
            report.succeeded,
            report.processed,
        )
        return report

    def reembed(self, note_id: str) -> Optional[Note]:
        """
        Refresh one note's embedding, e.g. after its content was edited.
        Returns the updated note, or None if the note is unknown or the
        provider failed.
        """
        note = self.repository.get(note_id)
        if note is None:
            return None
        vector = self._embed_one(note)
        if not self._store(note, vector):
            return None
        return self.repository.get(note_id)

    # ----------------------------
    # Provider calls
    # ----------------------------

    def _embed_chunk(self, chunk: List[Note]) -> List[Optional[Vector]]:
        embed_batch = getattr(self.embedder, "embed_batch", None)
        if embed_batch is None:
            return [self._embed_one(n) for n in chunk]

        try:
            vectors = list(embed_batch([n.content for n in chunk]))
        except Exception as e:
            logger.warning("Batch embedding failed, retrying one by one: %s", e)
            return [self._embed_one(n) for n in chunk]

        if len(vectors) != len(chunk):
            logger.warning(
                "Embedder returned %d vectors for %d notes, retrying one by one",
                len(vectors),
                len(chunk),
            )
            return [self._embed_one(n) for n in chunk]

        try:
            validate_batch(vectors)
        except ValidationError as e:
            logger.warning("Batch embedding rejected, retrying one by one: %s", e)
            return [self._embed_one(n) for n in chunk]
        return vectors

    def _embed_one(self, note: Note) -> Optional[Vector]:
        try:
            return self.embedder.embed(note.content)
        except Exception as e:
            logger.warning("Embedding failed for note %s: %s", note.id, e)
            return None

    def _store(self, note: Note, vector: Optional[Vector]) -> bool:
        if vector is None:
            return False
        try:
            validate_vector(vector)
        except ValidationError as e:
            logger.warning("Discarding embedding for note %s: %s", note.id, e)
            return False
        self.repository.replace(note.with_embedding([float(x) for x in vector]))
        return True
