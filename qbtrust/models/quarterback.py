from qbtrust.extensions import db
from qbtrust.timeutils import utcnow


class Quarterback(db.Model):
    __tablename__ = "quarterbacks"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    team = db.Column(db.String(200), nullable=False)
    espn_id = db.Column(db.String(50), unique=True, nullable=False)
    headshot_url = db.Column(db.String(500), nullable=True)
    # Denormalized cache of the computed score, used for sorting only.
    trust_score = db.Column(db.Float, nullable=False, default=50.0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    votes = db.relationship("Vote", backref="quarterback", lazy=True)
    snapshots = db.relationship(
        "TrustSnapshot",
        backref="quarterback",
        lazy=True,
        order_by="TrustSnapshot.snapshot_date",
    )
