from flask import Blueprint, current_app, jsonify

from ..validation import read_json

owners_bp = Blueprint("owners", __name__)


def _service():
    return current_app.services["owners"]


@owners_bp.route("/owners", methods=["POST"])
def create_owner():
    owner_id = _service().create_owner(read_json())
    return jsonify({"message": "Owner created", "id": owner_id}), 201


@owners_bp.route("/owners", methods=["GET"])
def list_owners():
    return jsonify(_service().list_owners())


@owners_bp.route("/owners/<row_id:owner_id>", methods=["PUT"])
def update_owner(owner_id):
    _service().update_owner(owner_id, read_json())
    return jsonify({"message": "Owner updated"})


@owners_bp.route("/owners/<row_id:owner_id>", methods=["DELETE"])
def delete_owner(owner_id):
    _service().delete_owner(owner_id)
    return jsonify({"message": "Owner deleted"})
