from flask import current_app
from sqlalchemy import and_, func

from qbtrust.extensions import db
from qbtrust.models import Quarterback, TrustSnapshot
from qbtrust.services.trust import compute_trust_score
from qbtrust.services.votes import votes_by_quarterback
from qbtrust.timeutils import utc_today, utcnow


def upsert_snapshot(qb_id, score, snapshot_date=None):
    snapshot_date = snapshot_date or utc_today()
    snapshot = TrustSnapshot.query.filter_by(
        qb_id=qb_id, snapshot_date=snapshot_date
    ).first()

    if snapshot:
        snapshot.score = score
    else:
        snapshot = TrustSnapshot(qb_id=qb_id, score=score, snapshot_date=snapshot_date)
        db.session.add(snapshot)

    db.session.commit()
    return snapshot


def get_trust_history(qb_id, limit=30):
    recent = (
        TrustSnapshot.query.filter_by(qb_id=qb_id)
        .order_by(TrustSnapshot.snapshot_date.desc())
        .limit(limit)
        .all()
    )
    return list(reversed(recent))


def build_history_points(snapshots, current_score, now):
    points = [
        {
            "snapshot_date": snapshot.snapshot_date.isoformat(),
            "score": snapshot.score,
            "live": False,
        }
        for snapshot in snapshots
    ]

    if not points or points[-1]["score"] != current_score:
        points.append(
            {
                "snapshot_date": now.date().isoformat(),
                "score": current_score,
                "live": True,
            }
        )
    return points


def _snapshots_matching(dates):
    rows = TrustSnapshot.query.join(
        dates,
        and_(
            TrustSnapshot.qb_id == dates.c.qb_id,
            TrustSnapshot.snapshot_date == dates.c.snapshot_date,
        ),
    ).all()
    return {row.qb_id: row for row in rows}


def latest_snapshots_on_or_before(cutoff_date):
    latest = (
        db.session.query(
            TrustSnapshot.qb_id,
            func.max(TrustSnapshot.snapshot_date).label("snapshot_date"),
        )
        .filter(TrustSnapshot.snapshot_date <= cutoff_date)
        .group_by(TrustSnapshot.qb_id)
        .subquery()
    )
    return _snapshots_matching(latest)


def earliest_snapshots():
    earliest = (
        db.session.query(
            TrustSnapshot.qb_id,
            func.min(TrustSnapshot.snapshot_date).label("snapshot_date"),
        )
        .group_by(TrustSnapshot.qb_id)
        .subquery()
    )
    return _snapshots_matching(earliest)


def snapshot_all_quarterbacks(now=None):
    now = now or utcnow()
    today = now.date()

    quarterbacks = Quarterback.query.order_by(Quarterback.id).all()
    votes_map = votes_by_quarterback([qb.id for qb in quarterbacks])
    historied_ids = {
        row.qb_id for row in db.session.query(TrustSnapshot.qb_id).distinct()
    }

    created = []
    for quarterback in quarterbacks:
        votes = votes_map[quarterback.id]
        if not quarterback.is_active and not votes and quarterback.id not in historied_ids:
            continue

        score = compute_trust_score(votes, now)
        quarterback.trust_score = score
        upsert_snapshot(quarterback.id, score, today)
        created.append(
            {
                "qb_id": quarterback.id,
                "name": quarterback.name,
                "score": score,
                "snapshot_date": today.isoformat(),
            }
        )

    current_app.logger.info(
        "Created %d trust snapshots for %s", len(created), today.isoformat()
    )
    return created


def seed_initial_snapshots(now=None):
    now = now or utcnow()
    historied_ids = {
        row.qb_id for row in db.session.query(TrustSnapshot.qb_id).distinct()
    }
    fresh = [
        qb for qb in Quarterback.query.all() if qb.id not in historied_ids
    ]

    votes_map = votes_by_quarterback([qb.id for qb in fresh])
    for quarterback in fresh:
        score = compute_trust_score(votes_map[quarterback.id], now)
        db.session.add(
            TrustSnapshot(qb_id=quarterback.id, score=score, snapshot_date=now.date())
        )

    db.session.commit()
    return len(fresh)
