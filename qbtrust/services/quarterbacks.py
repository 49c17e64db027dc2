import re
from datetime import timedelta

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from qbtrust.extensions import db
from qbtrust.models import Quarterback
from qbtrust.services.errors import QuarterbackNotFound
from qbtrust.services.snapshots import (
    earliest_snapshots,
    latest_snapshots_on_or_before,
    upsert_snapshot,
)
from qbtrust.services.trust import (
    HALF_LIFE_DAYS,
    MOVEMENT_WINDOW_DAYS,
    compute_movement,
    compute_trust_score,
    count_recent_votes,
)
from qbtrust.services.votes import (
    append_vote,
    load_votes,
    parse_direction,
    votes_by_quarterback,
)
from qbtrust.timeutils import utcnow

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def slugify_name(name):
    return _SLUG_SEPARATORS.sub("-", (name or "").lower()).strip("-")


def get_quarterback(qb_id):
    quarterback = db.session.get(Quarterback, qb_id)
    if quarterback is None:
        raise QuarterbackNotFound(qb_id)
    return quarterback


def get_quarterback_by_slug(slug):
    wanted = slugify_name(slug)
    matches = [
        qb
        for qb in Quarterback.query.order_by(Quarterback.id).all()
        if slugify_name(qb.name) == wanted
    ]
    if not matches:
        raise QuarterbackNotFound(slug)

    active = [qb for qb in matches if qb.is_active]
    return (active or matches)[0]


def _score_row(quarterback, votes, now):
    return {
        "quarterback": quarterback,
        "trust_score": compute_trust_score(votes, now),
        "recent_vote_count": count_recent_votes(votes, HALF_LIFE_DAYS, now),
    }


def _refresh_cached_scores(rows):
    changed = False
    for row in rows:
        quarterback = row["quarterback"]
        if quarterback.trust_score != row["trust_score"]:
            quarterback.trust_score = row["trust_score"]
            changed = True
    if changed:
        db.session.commit()


def get_quarterback_detail(qb_id, now=None):
    now = now or utcnow()
    quarterback = get_quarterback(qb_id)
    row = _score_row(quarterback, load_votes(quarterback.id), now)
    _refresh_cached_scores([row])
    return row


def list_active_quarterbacks(now=None):
    now = now or utcnow()
    quarterbacks = (
        Quarterback.query.filter_by(is_active=True).order_by(Quarterback.name).all()
    )
    votes_map = votes_by_quarterback([qb.id for qb in quarterbacks])

    rows = [_score_row(qb, votes_map[qb.id], now) for qb in quarterbacks]
    _refresh_cached_scores(rows)
    return rows


def record_vote(qb_id, direction, now=None):
    direction = parse_direction(direction)
    now = now or utcnow()
    quarterback = get_quarterback(qb_id)

    append_vote(quarterback.id, direction, now)

    row = _score_row(quarterback, load_votes(quarterback.id), now)
    try:
        quarterback.trust_score = row["trust_score"]
        upsert_snapshot(quarterback.id, row["trust_score"], now.date())
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(
            "Snapshot update failed after vote for quarterback %s", quarterback.id
        )

    return row


def quarterbacks_with_movement(now=None):
    now = now or utcnow()
    rows = list_active_quarterbacks(now)

    cutoff = (now - timedelta(days=MOVEMENT_WINDOW_DAYS)).date()
    baselines = latest_snapshots_on_or_before(cutoff)
    earliest = earliest_snapshots()

    for row in rows:
        qb_id = row["quarterback"].id
        candidates = [
            snapshot
            for snapshot in (baselines.get(qb_id), earliest.get(qb_id))
            if snapshot is not None
        ]
        row["movement"] = compute_movement(row["trust_score"], candidates, now)

    return rows


def top_movers(now=None, limit=3):
    rows = quarterbacks_with_movement(now)
    ordered = sorted(rows, key=lambda row: -row["movement"])

    risers = [row for row in ordered[:limit] if row["movement"] > 0]
    fallers = [row for row in reversed(ordered[-limit:]) if row["movement"] < 0]
    return {"risers": risers, "fallers": fallers}
