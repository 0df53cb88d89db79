from flask import Blueprint, current_app, jsonify

from ..validation import read_json

vaccines_bp = Blueprint("vaccines", __name__)


def _service():
    return current_app.services["vaccines"]


@vaccines_bp.route("/vaccines", methods=["POST"])
def create_vaccine():
    vaccine_id = _service().create_vaccine(read_json())
    return jsonify({"message": "Vaccine recorded", "id": vaccine_id}), 201


@vaccines_bp.route("/vaccines/pet/<row_id:pet_id>", methods=["GET"])
def list_pet_vaccines(pet_id):
    """Vaccines of one pet, most recent application first."""
    return jsonify(_service().list_for_pet(pet_id))


@vaccines_bp.route("/vaccines/<row_id:vaccine_id>", methods=["PUT"])
def update_vaccine(vaccine_id):
    _service().update_vaccine(vaccine_id, read_json())
    return jsonify({"message": "Vaccine updated"})


@vaccines_bp.route("/vaccines/<row_id:vaccine_id>", methods=["DELETE"])
def delete_vaccine(vaccine_id):
    _service().delete_vaccine(vaccine_id)
    return jsonify({"message": "Vaccine deleted"})
