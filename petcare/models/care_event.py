from ..extensions import db


class CareEvent(db.Model):
    __tablename__ = "care_events"

    id = db.Column(db.Integer, primary_key=True)
    pet_id = db.Column(
        db.Integer,
        db.ForeignKey("pets.id"),
        nullable=False,
        index=True,
    )

    type = db.Column(db.String(80), nullable=False)  # bath, checkup, deworming...
    description = db.Column(db.Text, nullable=True)
    date = db.Column(db.String(10), nullable=False)
