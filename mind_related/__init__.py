from .config import EngineConfig
from .engine import RelatednessEngine
from .policies import DEFAULT_POLICY, RelatednessPolicy
from .selector import select_candidates
from .thresholds import Rule, ThresholdDecision, select_related

__all__ = [
    "DEFAULT_POLICY",
    "EngineConfig",
    "RelatednessEngine",
    "RelatednessPolicy",
    "Rule",
    "ThresholdDecision",
    "select_candidates",
    "select_related",
]
