import enum

from qbtrust.extensions import db
from qbtrust.timeutils import utcnow


class VoteDirection(str, enum.Enum):
    INCREASE = "more"
    DECREASE = "less"


class Vote(db.Model):
    __tablename__ = "votes"

    id = db.Column(db.Integer, primary_key=True)
    qb_id = db.Column(
        db.Integer, db.ForeignKey("quarterbacks.id"), nullable=False, index=True
    )
    direction = db.Column(db.String(10), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
