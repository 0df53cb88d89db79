from flask import Blueprint, current_app, jsonify

from ..validation import read_json

pets_bp = Blueprint("pets", __name__)


def _service():
    return current_app.services["pets"]


@pets_bp.route("/pets", methods=["POST"])
def create_pet():
    pet_id = _service().create_pet(read_json())
    return jsonify({"message": "Pet created", "id": pet_id}), 201


@pets_bp.route("/pets", methods=["GET"])
def list_pets():
    return jsonify(_service().list_pets())


@pets_bp.route("/pets/<row_id:pet_id>", methods=["GET"])
def get_pet(pet_id):
    return jsonify(_service().get_pet(pet_id))


@pets_bp.route("/pets/<row_id:pet_id>", methods=["PUT"])
def update_pet(pet_id):
    _service().update_pet(pet_id, read_json())
    return jsonify({"message": "Pet updated"})


@pets_bp.route("/pets/<row_id:pet_id>", methods=["DELETE"])
def delete_pet(pet_id):
    _service().delete_pet(pet_id)
    return jsonify({"message": "Pet deleted"})
