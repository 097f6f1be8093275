import logging
import os
import sys

# Disable HF tokenizer fork warning
os.environ["TOKENIZERS_PARALLELISM"] = "false"

# Ensure the packages are importable when running from the repo root
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mind_index.memory_store import InMemoryNoteRepository
from mind_index.records import normalize_notes
from mind_related.config import EngineConfig
from mind_related.embedders import SentenceTransformerEmbedder
from mind_related.engine import RelatednessEngine
from mind_related.indexer import EmbeddingBackfill

RAW_NOTES = [
    {"id": "1", "content": "Cosine similarity compares the direction of two vectors."},
    {"id": "2", "content": "Sentence embeddings map text to points in a vector space."},
    {"id": "3", "content": "Tomatoes need six hours of direct sunlight a day."},
    {"id": "4", "content": "Water the basil in the morning, not at night."},
    {"id": "5", "content": "Nearest-neighbour search finds vectors close to a query."},
]


def main():
    logging.basicConfig(level=logging.INFO)
    config = EngineConfig()

    repo = InMemoryNoteRepository(normalize_notes(RAW_NOTES))
    embedder = SentenceTransformerEmbedder(
        config.embedding_model,
        batch_size=config.embed_batch_size,
    )

    report = EmbeddingBackfill(
        embedder=embedder,
        repository=repo,
        batch_size=config.embed_batch_size,
    ).run()
    print(f"Embedded {report.succeeded}/{report.processed} notes")

    engine = RelatednessEngine(config)
    for note in repo.get_corpus():
        decision = engine.explain(note, repo.get_corpus())
        print(f"\n[{note.id}] {note.content}")
        print(f"  rule: {decision.rule.value}")
        for c in decision.selected:
            print(f"  -> [{c.note.id}] {c.similarity * 100:.0f}%  {c.note.content[:90]}")


if __name__ == "__main__":
    main()
