from dataclasses import dataclass


@dataclass(frozen=True)
class RelatednessPolicy:
    """
    Tunables of the adaptive threshold selector.

    noise_floor:      candidates must score strictly above this to be considered
    lone_match:       a single surviving candidate is shown when above this
    standout_gap:     top - second above this shows the top candidate alone
    cluster_average:  mean of the top `max_results` above this shows all of them
    max_results:      averaging window and result cap for the cluster rule

    The defaults were calibrated against one embedding model's score
    distribution; other providers may need their own policy.
    """
    noise_floor: float = 0.3
    lone_match: float = 0.6
    standout_gap: float = 0.15
    cluster_average: float = 0.65
    max_results: int = 3

    def __post_init__(self) -> None:
        for name in ("noise_floor", "lone_match", "cluster_average"):
            value = getattr(self, name)
            if not -1.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [-1, 1]")
        if not 0.0 <= self.standout_gap <= 2.0:
            raise ValueError("standout_gap must be within [0, 2]")
        if isinstance(self.max_results, bool) or not isinstance(self.max_results, int):
            raise ValueError("max_results must be an integer")
        if self.max_results <= 0:
            raise ValueError("max_results must be a positive integer")


DEFAULT_POLICY = RelatednessPolicy()
