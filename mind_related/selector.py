import logging
from typing import Iterable, List

from mind_core.types import Candidate, Note
from mind_core.vectors import cosine_similarity

from .policies import DEFAULT_POLICY

logger = logging.getLogger(__name__)


def select_candidates(
    target: Note,
    corpus: Iterable[Note],
    *,
    noise_floor: float = DEFAULT_POLICY.noise_floor,
) -> List[Candidate]:
    """
    Score every other embedded note against `target`.

    The target is excluded by id, notes without an embedding are skipped,
    and anything at or below `noise_floor` is dropped. The result is sorted
    by similarity, highest first; equal scores keep corpus order.
    """
    if target.embedding is None:
        return []

    candidates: List[Candidate] = []
    for note in corpus:
        if note.id == target.id or note.embedding is None:
            continue
        similarity = cosine_similarity(target.embedding, note.embedding)
        if similarity > noise_floor:
            candidates.append(Candidate(note=note, similarity=similarity))

    # sorted() is stable, which gives the corpus-order tie break
    candidates = sorted(candidates, key=lambda c: c.similarity, reverse=True)

    logger.debug(
        "Note %s: %d candidates above noise floor %.2f",
        target.id,
        len(candidates),
        noise_floor,
    )
    return candidates
