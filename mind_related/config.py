from dataclasses import dataclass, field

from .policies import RelatednessPolicy


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for related-note discovery.
    """
    policy: RelatednessPolicy = field(default_factory=RelatednessPolicy)
    embedding_model: str = "all-MiniLM-L6-v2"
    embed_batch_size: int = 64

    def __post_init__(self) -> None:
        if not self.embedding_model or not self.embedding_model.strip():
            raise ValueError("embedding_model must be a non-empty string")
        if self.embed_batch_size <= 0:
            raise ValueError("embed_batch_size must be a positive integer")
