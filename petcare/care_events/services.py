import logging
from typing import Any, Dict, List, Mapping

from ..errors import NotFoundError
from ..storage import SqlStore
from .schemas import CareEventCreateSchema, CareEventUpdateSchema


class CareEventService:
    """Non-vaccine care activities (bath, checkup, deworming) of a pet."""

    def __init__(self, store: SqlStore):
        self.store = store

    def create_care_event(self, payload: Mapping[str, Any]) -> int:
        data = CareEventCreateSchema().load(payload)
        event_id = self.store.insert(
            """
            INSERT INTO care_events (type, description, date, pet_id)
            VALUES (:type, :description, :date, :pet_id)
            """,
            data,
        )
        logging.info(f"Care event {event_id} ({data['type']}) recorded for pet {data['pet_id']}")
        return event_id

    def list_for_pet(self, pet_id: int) -> List[Dict[str, Any]]:
        return self.store.fetch_all(
            """
            SELECT id, type, description, date, pet_id
            FROM care_events
            WHERE pet_id = :pet_id
            ORDER BY date DESC, id DESC
            """,
            {"pet_id": pet_id},
        )

    def update_care_event(self, event_id: int, payload: Mapping[str, Any]) -> None:
        data = CareEventUpdateSchema().load(payload)
        affected = self.store.execute(
            """
            UPDATE care_events
            SET type = :type, description = :description, date = :date
            WHERE id = :id
            """,
            {**data, "id": event_id},
        )
        if affected == 0:
            logging.warning(f"Care event {event_id} not found for update")
            raise NotFoundError("Care event", event_id)
        logging.info(f"Care event {event_id} updated")

    def delete_care_event(self, event_id: int) -> None:
        affected = self.store.execute("DELETE FROM care_events WHERE id = :id", {"id": event_id})
        if affected == 0:
            logging.warning(f"Care event {event_id} not found for delete")
            raise NotFoundError("Care event", event_id)
        logging.info(f"Care event {event_id} deleted")
