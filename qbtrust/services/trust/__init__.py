from qbtrust.services.trust.movement import (
    MOVEMENT_WINDOW_DAYS,
    compute_movement,
    pick_baseline_snapshot,
)
from qbtrust.services.trust.score import (
    DEFAULT_SCORE,
    HALF_LIFE_DAYS,
    PRIOR_STRENGTH,
    compute_trust_score,
    count_recent_votes,
    vote_weight,
)

__all__ = [
    "DEFAULT_SCORE",
    "HALF_LIFE_DAYS",
    "MOVEMENT_WINDOW_DAYS",
    "PRIOR_STRENGTH",
    "compute_movement",
    "compute_trust_score",
    "count_recent_votes",
    "pick_baseline_snapshot",
    "vote_weight",
]
