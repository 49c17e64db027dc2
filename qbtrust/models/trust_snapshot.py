from qbtrust.extensions import db


class TrustSnapshot(db.Model):
    __tablename__ = "trust_snapshots"
    __table_args__ = (
        db.UniqueConstraint("qb_id", "snapshot_date", name="uq_trust_snapshot_qb_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    qb_id = db.Column(
        db.Integer, db.ForeignKey("quarterbacks.id"), nullable=False, index=True
    )
    score = db.Column(db.Float, nullable=False)
    snapshot_date = db.Column(db.Date, nullable=False, index=True)
