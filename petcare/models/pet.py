from sqlalchemy import CheckConstraint
from ..extensions import db


class Pet(db.Model):
    __tablename__ = "pets"

    id = db.Column(db.Integer, primary_key=True)
    owner_id = db.Column(
        db.Integer,
        db.ForeignKey("owners.id"),
        nullable=False,
        index=True,
    )

    name = db.Column(db.String(120), nullable=False)
    species = db.Column(db.String(50), nullable=False)
    breed = db.Column(db.String(120), nullable=True)
    age = db.Column(db.Integer, nullable=True)
    weight = db.Column(db.Numeric(6, 2), nullable=True)
    health_condition = db.Column(db.String(255), nullable=True)

    __table_args__ = (
        CheckConstraint("age IS NULL OR age >= 0", name="ck_pet_age_non_negative"),
        CheckConstraint(
            "weight IS NULL OR weight >= 0", name="ck_pet_weight_non_negative"
        ),
    )
