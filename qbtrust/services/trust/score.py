"""Time-decayed, prior-smoothed trust score.

Every vote is worth 100 (more) or 0 (less) and is weighted by
``0.5 ** (age_days / HALF_LIFE_DAYS)``.  ``PRIOR_STRENGTH`` virtual votes at
``DEFAULT_SCORE`` are blended in so a handful of votes cannot swing a
quarterback far from neutral.
"""

from qbtrust.models.vote import VoteDirection

HALF_LIFE_DAYS = 7
PRIOR_STRENGTH = 20
DEFAULT_SCORE = 50

VOTE_VALUES = {
    VoteDirection.INCREASE: 100.0,
    VoteDirection.DECREASE: 0.0,
}

SECONDS_PER_DAY = 86400.0


def vote_age_days(created_at, now):
    age = (now - created_at).total_seconds() / SECONDS_PER_DAY
    # Votes stamped slightly ahead of "now" count as brand new.
    return max(age, 0.0)


def vote_weight(created_at, now, half_life_days=HALF_LIFE_DAYS):
    return 0.5 ** (vote_age_days(created_at, now) / half_life_days)


def compute_trust_score(votes, now):
    """Return the score in [0, 100] for one quarterback's votes at ``now``.

    ``votes`` is any iterable of objects with ``direction`` and
    ``created_at``. The result is rounded to one decimal place and is
    exactly ``DEFAULT_SCORE`` for an empty ledger.
    """
    weighted_sum = 0.0
    total_weight = 0.0

    for vote in votes:
        value = VOTE_VALUES[VoteDirection(vote.direction)]
        weight = vote_weight(vote.created_at, now)
        weighted_sum += value * weight
        total_weight += weight

    score = (weighted_sum + PRIOR_STRENGTH * DEFAULT_SCORE) / (
        total_weight + PRIOR_STRENGTH
    )
    return round(score, 1)


def count_recent_votes(votes, window_days, now):
    return sum(
        1 for vote in votes if vote_age_days(vote.created_at, now) <= window_days
    )
