from flask_wtf import FlaskForm
from wtforms import FloatField, IntegerField, SelectField, StringField, SubmitField, TextAreaField
from wtforms.fields import DateField, EmailField
from wtforms.validators import DataRequired, Length, NumberRange, Optional


class OwnerForm(FlaskForm):
    name = StringField("Name", validators=[DataRequired(), Length(max=120)])
    email = EmailField("Email", validators=[DataRequired(), Length(max=255)])
    phone = StringField("Phone", validators=[Optional(), Length(max=40)])
    submit = SubmitField("Save")

    def to_payload(self) -> dict:
        return {
            "name": self.name.data,
            "email": self.email.data,
            "phone": self.phone.data or None,
        }


class PetForm(FlaskForm):
    name = StringField("Name", validators=[DataRequired(), Length(max=120)])
    species = StringField("Species", validators=[DataRequired(), Length(max=50)])
    breed = StringField("Breed", validators=[Optional(), Length(max=120)])
    age = IntegerField("Age (years)", validators=[Optional(), NumberRange(min=0)])
    weight = FloatField("Weight (kg)", validators=[Optional(), NumberRange(min=0)])
    health_condition = StringField(
        "Health condition", validators=[Optional(), Length(max=255)]
    )
    owner_id = SelectField("Owner", coerce=int, validators=[DataRequired()])
    submit = SubmitField("Save")

    def set_owner_choices(self, owners) -> None:
        self.owner_id.choices = [(0, "-- Select an owner --")] + [
            (o["id"], o["name"]) for o in owners
        ]

    def to_payload(self) -> dict:
        return {
            "name": self.name.data,
            "species": self.species.data,
            "breed": self.breed.data or None,
            "age": self.age.data,
            "weight": self.weight.data,
            "health_condition": self.health_condition.data or None,
            "owner_id": self.owner_id.data,
        }


class VaccineForm(FlaskForm):
    name = StringField("Vaccine", validators=[DataRequired(), Length(max=120)])
    application_date = DateField("Application date", validators=[DataRequired()])
    submit = SubmitField("Save vaccine")

    def to_payload(self) -> dict:
        return {
            "name": self.name.data,
            "application_date": self.application_date.data.isoformat(),
        }


class CareEventForm(FlaskForm):
    type = StringField("Type", validators=[DataRequired(), Length(max=80)])
    description = TextAreaField("Description", validators=[Optional()])
    date = DateField("Date", validators=[DataRequired()])
    submit = SubmitField("Save care event")

    def to_payload(self) -> dict:
        return {
            "type": self.type.data,
            "description": self.description.data or None,
            "date": self.date.data.isoformat(),
        }
