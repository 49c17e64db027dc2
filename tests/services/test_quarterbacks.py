from datetime import timedelta

import pytest
from sqlalchemy.exc import SQLAlchemyError

from qbtrust.models import TrustSnapshot, Vote
from qbtrust.services import quarterbacks as quarterback_service
from qbtrust.services.errors import InvalidVoteDirection, QuarterbackNotFound
from qbtrust.services.quarterbacks import (
    get_quarterback_by_slug,
    get_quarterback_detail,
    list_active_quarterbacks,
    record_vote,
    slugify_name,
    top_movers,
)
from qbtrust.services.snapshots import upsert_snapshot
from qbtrust.services.trust import PRIOR_STRENGTH, vote_weight


def test_vote_scenario_end_to_end(db_session, quarterback, now):
    assert get_quarterback_detail(quarterback.id, now)["trust_score"] == 50.0

    row = record_vote(quarterback.id, "more", now=now)
    assert row["trust_score"] == 52.4
    assert row["recent_vote_count"] == 1

    later = now + timedelta(days=1)
    row = record_vote(quarterback.id, "less", now=later)

    first_weight = vote_weight(now, later)
    expected = round(
        (100 * first_weight + 0 * 1.0 + PRIOR_STRENGTH * 50)
        / (first_weight + 1.0 + PRIOR_STRENGTH),
        1,
    )
    assert row["trust_score"] == expected
    assert row["recent_vote_count"] == 2

    snapshots = TrustSnapshot.query.order_by(TrustSnapshot.snapshot_date).all()
    assert [(s.snapshot_date, s.score) for s in snapshots] == [
        (now.date(), 52.4),
        (later.date(), expected),
    ]
    assert quarterback.trust_score == expected


def test_invalid_direction_writes_nothing(db_session, quarterback, now):
    for bad in ("sideways", "", "  MORE ", "Less", None, 1):
        with pytest.raises(InvalidVoteDirection):
            record_vote(quarterback.id, bad, now=now)

    assert Vote.query.count() == 0
    assert TrustSnapshot.query.count() == 0


def test_vote_for_unknown_quarterback(db_session, now):
    with pytest.raises(QuarterbackNotFound):
        record_vote(999, "more", now=now)
    assert Vote.query.count() == 0


def test_snapshot_failure_does_not_fail_vote(db_session, quarterback, now, monkeypatch):
    def broken_upsert(*args, **kwargs):
        raise SQLAlchemyError("snapshot table unavailable")

    monkeypatch.setattr(quarterback_service, "upsert_snapshot", broken_upsert)

    row = record_vote(quarterback.id, "more", now=now)
    assert row["trust_score"] == 52.4
    assert Vote.query.count() == 1
    assert TrustSnapshot.query.count() == 0


def test_failed_vote_commit_propagates_without_score(
    db_session, quarterback, now, monkeypatch
):
    def broken_commit():
        raise SQLAlchemyError("votes table unavailable")

    monkeypatch.setattr(db_session, "commit", broken_commit)

    with pytest.raises(SQLAlchemyError):
        record_vote(quarterback.id, "more", now=now)

    monkeypatch.undo()
    db_session.rollback()

    assert Vote.query.count() == 0
    assert TrustSnapshot.query.count() == 0
    assert quarterback.trust_score == 50.0


def test_slug_lookup_prefers_active(db_session, make_quarterback):
    assert slugify_name("Aidan O'Connell") == "aidan-o-connell"
    assert slugify_name("C.J. Stroud") == "c-j-stroud"

    make_quarterback(name="C.J. Stroud", is_active=False)
    active = make_quarterback(name="C.J. Stroud")

    assert get_quarterback_by_slug("c-j-stroud").id == active.id
    with pytest.raises(QuarterbackNotFound):
        get_quarterback_by_slug("nobody-home")


def test_listing_skips_inactive_and_refreshes_cache(db_session, make_quarterback, now):
    starter = make_quarterback(name="Patrick Mahomes")
    make_quarterback(name="Backup Guy", is_active=False)
    db_session.add(Vote(qb_id=starter.id, direction="more", created_at=now))
    db_session.commit()

    rows = list_active_quarterbacks(now)
    assert [row["quarterback"].name for row in rows] == ["Patrick Mahomes"]
    assert rows[0]["trust_score"] == 52.4
    assert starter.trust_score == 52.4


def test_top_movers_splits_risers_and_fallers(db_session, make_quarterback, now):
    riser = make_quarterback(name="Bo Nix")
    faller = make_quarterback(name="Will Levis")
    make_quarterback(name="Geno Smith")

    week_ago = (now - timedelta(days=8)).date()
    upsert_snapshot(riser.id, 40.0, week_ago)
    upsert_snapshot(faller.id, 60.0, week_ago)

    db_session.add(Vote(qb_id=riser.id, direction="more", created_at=now))
    db_session.add(Vote(qb_id=faller.id, direction="less", created_at=now))
    db_session.commit()

    movers = top_movers(now)
    assert [row["quarterback"].id for row in movers["risers"]] == [riser.id]
    assert [row["quarterback"].id for row in movers["fallers"]] == [faller.id]
    assert movers["risers"][0]["movement"] == 12.4
    assert movers["fallers"][0]["movement"] == -12.4
