from flask import Blueprint, current_app, jsonify

from ..validation import read_json

care_events_bp = Blueprint("care_events", __name__)


def _service():
    return current_app.services["care_events"]


@care_events_bp.route("/care-events", methods=["POST"])
def create_care_event():
    event_id = _service().create_care_event(read_json())
    return jsonify({"message": "Care event recorded", "id": event_id}), 201


@care_events_bp.route("/care-events/pet/<row_id:pet_id>", methods=["GET"])
def list_pet_care_events(pet_id):
    return jsonify(_service().list_for_pet(pet_id))


@care_events_bp.route("/care-events/<row_id:event_id>", methods=["PUT"])
def update_care_event(event_id):
    _service().update_care_event(event_id, read_json())
    return jsonify({"message": "Care event updated"})


@care_events_bp.route("/care-events/<row_id:event_id>", methods=["DELETE"])
def delete_care_event(event_id):
    _service().delete_care_event(event_id)
    return jsonify({"message": "Care event deleted"})
