from ..extensions import db


class Vaccine(db.Model):
    __tablename__ = "vaccines"

    id = db.Column(db.Integer, primary_key=True)
    pet_id = db.Column(
        db.Integer,
        db.ForeignKey("pets.id"),
        nullable=False,
        index=True,
    )

    name = db.Column(db.String(120), nullable=False)
    # ISO YYYY-MM-DD, so lexical order is chronological order
    application_date = db.Column(db.String(10), nullable=False)
