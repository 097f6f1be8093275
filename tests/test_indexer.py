import pytest

from mind_core.types import Note
from mind_index.memory_store import InMemoryNoteRepository
from mind_related.indexer import EmbeddingBackfill


class DummyEmbedder:
    def __init__(self, vec=None):
        self.vec = vec or [0.1, 0.2, 0.3]
        self.calls = []

    def embed(self, text: str):
        self.calls.append(text)
        return list(self.vec)


class BatchEmbedder(DummyEmbedder):
    def __init__(self, vec=None):
        super().__init__(vec)
        self.batches = []

    def embed_batch(self, texts):
        self.batches.append(list(texts))
        return [list(self.vec) for _ in texts]


class FlakyEmbedder:
    """Fails on any text containing 'bad'; batch calls always fail."""

    def embed(self, text: str):
        if "bad" in text:
            raise RuntimeError("provider error")
        return [1.0, 0.0]

    def embed_batch(self, texts):
        raise RuntimeError("batch endpoint down")


class GarbageEmbedder:
    def embed(self, text: str):
        return []


def make_repo(*contents, embedded=()):
    notes = [
        Note(id=str(i), content=c, embedding=(1.0, 1.0) if str(i) in embedded else None)
        for i, c in enumerate(contents)
    ]
    return InMemoryNoteRepository(notes)


def test_backfill_embeds_pending_notes_only():
    repo = make_repo("a", "b", "c", embedded=("1",))
    embedder = DummyEmbedder()

    report = EmbeddingBackfill(embedder=embedder, repository=repo).run()

    assert report.processed == 2
    assert report.succeeded == 2
    assert report.failed == 0
    assert embedder.calls == ["a", "c"]
    assert repo.get("0").embedding == (0.1, 0.2, 0.3)
    assert repo.get("1").embedding == (1.0, 1.0)
    assert repo.pending_embedding() == []


def test_backfill_uses_batches():
    repo = make_repo("a", "b", "c", "d", "e")
    embedder = BatchEmbedder()

    report = EmbeddingBackfill(embedder=embedder, repository=repo, batch_size=2).run()

    assert report.succeeded == 5
    assert embedder.batches == [["a", "b"], ["c", "d"], ["e"]]
    assert embedder.calls == []


def test_backfill_failures_do_not_abort_run():
    repo = make_repo("good one", "bad one", "good two")

    report = EmbeddingBackfill(embedder=FlakyEmbedder(), repository=repo).run()

    assert report.processed == 3
    assert report.succeeded == 2
    assert report.failed_ids == ["1"]
    assert repo.get("1").embedding is None
    assert repo.get("2").embedding == (1.0, 0.0)


def test_backfill_discards_invalid_vectors():
    repo = make_repo("a")

    report = EmbeddingBackfill(embedder=GarbageEmbedder(), repository=repo).run()

    assert report.failed == 1
    assert repo.get("0").embedding is None


def test_backfill_nothing_pending():
    repo = make_repo("a", embedded=("0",))
    embedder = DummyEmbedder()

    report = EmbeddingBackfill(embedder=embedder, repository=repo).run()

    assert report.processed == 0
    assert embedder.calls == []


def test_backfill_keeps_note_order():
    repo = make_repo("a", "b", "c")

    EmbeddingBackfill(embedder=DummyEmbedder(), repository=repo).run()

    assert [n.id for n in repo.get_corpus()] == ["0", "1", "2"]


def test_reembed_refreshes_existing_embedding():
    repo = make_repo("edited text", embedded=("0",))
    backfill = EmbeddingBackfill(embedder=DummyEmbedder([0.5, 0.5]), repository=repo)

    updated = backfill.reembed("0")

    assert updated.embedding == (0.5, 0.5)
    assert repo.get("0").embedding == (0.5, 0.5)


def test_reembed_failure_keeps_old_embedding():
    repo = make_repo("bad text", embedded=("0",))
    backfill = EmbeddingBackfill(embedder=FlakyEmbedder(), repository=repo)

    assert backfill.reembed("0") is None
    assert repo.get("0").embedding == (1.0, 1.0)


def test_reembed_unknown_note():
    backfill = EmbeddingBackfill(embedder=DummyEmbedder(), repository=make_repo())
    assert backfill.reembed("nope") is None


def test_backfill_rejects_bad_batch_size():
    with pytest.raises(ValueError):
        EmbeddingBackfill(embedder=DummyEmbedder(), repository=make_repo(), batch_size=0)


class MixedDimBatchEmbedder(DummyEmbedder):
    """Batch endpoint returns vectors of inconsistent width."""

    def embed_batch(self, texts):
        return [[0.1] * (i + 1) for i, _ in enumerate(texts)]


def test_backfill_rejected_batch_falls_back_to_single_embeds():
    repo = make_repo("a", "b")
    embedder = MixedDimBatchEmbedder([0.5, 0.5])

    report = EmbeddingBackfill(embedder=embedder, repository=repo).run()

    assert report.succeeded == 2
    assert embedder.calls == ["a", "b"]
    assert repo.get("1").embedding == (0.5, 0.5)


def test_backfill_empty_vector_in_batch_falls_back():
    class HoleyBatchEmbedder(DummyEmbedder):
        def embed_batch(self, texts):
            return [[] for _ in texts]

    repo = make_repo("a")
    embedder = HoleyBatchEmbedder()

    report = EmbeddingBackfill(embedder=embedder, repository=repo).run()

    assert report.succeeded == 1
    assert embedder.calls == ["a"]
