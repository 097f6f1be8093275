import logging
from typing import Iterable, List, Optional

from mind_core.protocols import NoteRepository
from mind_core.types import Note, RelatedNote

from .config import EngineConfig
from .policies import RelatednessPolicy
from .selector import select_candidates
from .thresholds import Rule, ThresholdDecision, select_related

logger = logging.getLogger(__name__)


class RelatednessEngine:
    """
    Finds the notes worth showing next to a target note.
    Deterministic, synchronous, and free of side effects: the corpus and
    the target are only read, and embeddings are never generated here.
    """

    __slots__ = ("config",)

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    @property
    def policy(self) -> RelatednessPolicy:
        return self.config.policy

    def explain(
        self,
        target: Note,
        corpus: Iterable[Note],
        *,
        policy: Optional[RelatednessPolicy] = None,
    ) -> ThresholdDecision:
        policy = policy or self.config.policy

        if target.embedding is None:
            logger.debug("Note %s has no embedding, skipping", target.id)
            return ThresholdDecision(rule=Rule.NONE_FOUND, selected=())

        candidates = select_candidates(
            target,
            corpus,
            noise_floor=policy.noise_floor,
        )
        decision = select_related(candidates, policy)

        logger.debug(
            "Note %s: rule=%s selected=%d top=%.3f second=%.3f avg=%.3f",
            target.id,
            decision.rule.value,
            len(decision.selected),
            decision.top,
            decision.second,
            decision.average,
        )
        return decision

    def compute_related(
        self,
        target: Note,
        corpus: Iterable[Note],
        *,
        policy: Optional[RelatednessPolicy] = None,
    ) -> List[RelatedNote]:
        decision = self.explain(target, corpus, policy=policy)
        return [
            RelatedNote(note=c.note, similarity=c.similarity)
            for c in decision.selected
        ]

    def related_to(
        self,
        note_id: str,
        repository: NoteRepository,
        *,
        policy: Optional[RelatednessPolicy] = None,
    ) -> List[RelatedNote]:
        """
        Look up `note_id` in a snapshot of the repository and compute its
        related notes against that same snapshot.
        """
        corpus = tuple(repository.get_corpus())
        target = next((n for n in corpus if n.id == note_id), None)
        if target is None:
            logger.debug("Note %s not found in corpus", note_id)
            return []
        return self.compute_related(target, corpus, policy=policy)
