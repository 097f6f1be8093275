from typing import List, Optional

from sentence_transformers import SentenceTransformer

from mind_core.types import Vector


class SentenceTransformerEmbedder:
    """
    Local embedder backed by sentence-transformers.
    """

    def __init__(
        self,
        model_name: str = "all-MiniLM-L6-v2",
        *,
        model: Optional[SentenceTransformer] = None,
        batch_size: int = 64,
    ):
        self.model_name = model_name
        self.model = model if model is not None else SentenceTransformer(model_name)
        self.batch_size = batch_size

    @staticmethod
    def _prepare(text: str) -> str:
        return text.replace("\n", " ")

    def embed(self, text: str) -> Vector:
        return self.model.encode(self._prepare(text)).tolist()

    def embed_batch(self, texts: List[str]) -> List[Vector]:
        return self.model.encode(
            [self._prepare(t) for t in texts],
            batch_size=self.batch_size,
            show_progress_bar=False,
        ).tolist()
