import logging
from typing import Any, Dict, List, Mapping

from ..errors import NotFoundError
from ..storage import SqlStore
from .schemas import VaccineCreateSchema, VaccineUpdateSchema


class VaccineService:
    """Vaccines applied to a pet, newest first when listed."""

    def __init__(self, store: SqlStore):
        self.store = store

    def create_vaccine(self, payload: Mapping[str, Any]) -> int:
        data = VaccineCreateSchema().load(payload)
        vaccine_id = self.store.insert(
            """
            INSERT INTO vaccines (name, application_date, pet_id)
            VALUES (:name, :application_date, :pet_id)
            """,
            data,
        )
        logging.info(f"Vaccine {vaccine_id} recorded for pet {data['pet_id']}")
        return vaccine_id

    def list_for_pet(self, pet_id: int) -> List[Dict[str, Any]]:
        return self.store.fetch_all(
            """
            SELECT id, name, application_date, pet_id
            FROM vaccines
            WHERE pet_id = :pet_id
            ORDER BY application_date DESC, id DESC
            """,
            {"pet_id": pet_id},
        )

    def update_vaccine(self, vaccine_id: int, payload: Mapping[str, Any]) -> None:
        data = VaccineUpdateSchema().load(payload)
        affected = self.store.execute(
            """
            UPDATE vaccines
            SET name = :name, application_date = :application_date
            WHERE id = :id
            """,
            {**data, "id": vaccine_id},
        )
        if affected == 0:
            logging.warning(f"Vaccine {vaccine_id} not found for update")
            raise NotFoundError("Vaccine", vaccine_id)
        logging.info(f"Vaccine {vaccine_id} updated")

    def delete_vaccine(self, vaccine_id: int) -> None:
        affected = self.store.execute("DELETE FROM vaccines WHERE id = :id", {"id": vaccine_id})
        if affected == 0:
            logging.warning(f"Vaccine {vaccine_id} not found for delete")
            raise NotFoundError("Vaccine", vaccine_id)
        logging.info(f"Vaccine {vaccine_id} deleted")
