"""Adaptive threshold selection over ranked candidates.

A fixed cutoff cannot tell apart one note standing out from a mediocre
field, several notes that are all strongly related, and a field that only
just clears the noise floor. The selector looks at the top of the ranked
list and applies these rules in order:

1. no candidates                          -> nothing
2. exactly one candidate above lone_match -> that candidate
3. top - second above standout_gap        -> the top candidate only
4. mean of the top window above
   cluster_average                        -> the whole window
5. otherwise                              -> nothing

Only the first `max_results` candidates are ever inspected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

from mind_core.types import Candidate

from .policies import DEFAULT_POLICY, RelatednessPolicy


class Rule(str, Enum):
    NONE_FOUND = "none_found"
    LONE_MATCH = "lone_match"
    STANDOUT = "standout"
    CLUSTER = "cluster"
    NOT_CONFIDENT = "not_confident"


@dataclass(frozen=True)
class ThresholdDecision:
    rule: Rule
    selected: Tuple[Candidate, ...]
    top: float = 0.0
    second: float = 0.0
    average: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.selected


def select_related(
    candidates: Sequence[Candidate],
    policy: RelatednessPolicy = DEFAULT_POLICY,
) -> ThresholdDecision:
    """
    Decide which of the ranked `candidates` to surface.
    `candidates` must already be sorted by similarity, highest first.
    """
    n = len(candidates)
    if n == 0:
        return ThresholdDecision(rule=Rule.NONE_FOUND, selected=())

    window = candidates[: policy.max_results]
    top = window[0].similarity
    second = window[1].similarity if n > 1 else 0.0
    average = sum(c.similarity for c in window) / len(window)

    def decide(rule: Rule, selected: Sequence[Candidate]) -> ThresholdDecision:
        return ThresholdDecision(
            rule=rule,
            selected=tuple(selected),
            top=top,
            second=second,
            average=average,
        )

    if n == 1 and top > policy.lone_match:
        return decide(Rule.LONE_MATCH, window[:1])
    if top - second > policy.standout_gap:
        return decide(Rule.STANDOUT, window[:1])
    if average > policy.cluster_average:
        return decide(Rule.CLUSTER, window)
    return decide(Rule.NOT_CONFIDENT, ())
