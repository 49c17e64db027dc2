from qbtrust.extensions import db
from qbtrust.models import Vote, VoteDirection
from qbtrust.services.errors import InvalidVoteDirection


def parse_direction(value):
    if isinstance(value, VoteDirection):
        return value
    if not isinstance(value, str):
        raise InvalidVoteDirection(value)
    try:
        return VoteDirection(value)
    except ValueError:
        raise InvalidVoteDirection(value) from None


def append_vote(qb_id, direction, created_at):
    vote = Vote(qb_id=qb_id, direction=direction.value, created_at=created_at)
    db.session.add(vote)
    db.session.commit()
    return vote


def load_votes(qb_id):
    return Vote.query.filter_by(qb_id=qb_id).all()


def votes_by_quarterback(qb_ids):
    grouped = {qb_id: [] for qb_id in qb_ids}
    if not grouped:
        return grouped

    for vote in Vote.query.filter(Vote.qb_id.in_(list(grouped))).all():
        grouped[vote.qb_id].append(vote)
    return grouped
