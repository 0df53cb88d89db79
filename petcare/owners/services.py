import logging
from typing import Any, Dict, List, Mapping

from ..errors import NotFoundError
from ..storage import SqlStore
from .schemas import OwnerCreateSchema, OwnerUpdateSchema


class OwnerService:
    """Owners (pet clients): create, list, full update and delete."""

    def __init__(self, store: SqlStore):
        self.store = store

    def create_owner(self, payload: Mapping[str, Any]) -> int:
        data = OwnerCreateSchema().load(payload)
        owner_id = self.store.insert(
            "INSERT INTO owners (name, email, phone) VALUES (:name, :email, :phone)",
            data,
        )
        logging.info(f"Owner {owner_id} created")
        return owner_id

    def list_owners(self) -> List[Dict[str, Any]]:
        return self.store.fetch_all("SELECT id, name, email, phone FROM owners ORDER BY id")

    def update_owner(self, owner_id: int, payload: Mapping[str, Any]) -> None:
        data = OwnerUpdateSchema().load(payload)
        affected = self.store.execute(
            """
            UPDATE owners
            SET name = :name, email = :email, phone = :phone
            WHERE id = :id
            """,
            {**data, "id": owner_id},
        )
        if affected == 0:
            logging.warning(f"Owner {owner_id} not found for update")
            raise NotFoundError("Owner", owner_id)
        logging.info(f"Owner {owner_id} updated")

    def delete_owner(self, owner_id: int) -> None:
        affected = self.store.execute("DELETE FROM owners WHERE id = :id", {"id": owner_id})
        if affected == 0:
            logging.warning(f"Owner {owner_id} not found for delete")
            raise NotFoundError("Owner", owner_id)
        logging.info(f"Owner {owner_id} deleted")
