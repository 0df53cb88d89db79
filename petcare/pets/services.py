import logging
from typing import Any, Dict, List, Mapping

from ..errors import NotFoundError
from ..storage import SqlStore
from .schemas import PetCreateSchema, PetUpdateSchema

PET_COLUMNS = "id, name, species, breed, age, weight, health_condition, owner_id"


class PetService:
    """Pets: one parameterized statement per operation."""

    def __init__(self, store: SqlStore):
        self.store = store

    def create_pet(self, payload: Mapping[str, Any]) -> int:
        data = PetCreateSchema().load(payload)
        # the owner reference is checked by the foreign key, not here
        pet_id = self.store.insert(
            """
            INSERT INTO pets (name, species, breed, age, weight, health_condition, owner_id)
            VALUES (:name, :species, :breed, :age, :weight, :health_condition, :owner_id)
            """,
            data,
        )
        logging.info(f"Pet {pet_id} created for owner {data['owner_id']}")
        return pet_id

    def list_pets(self) -> List[Dict[str, Any]]:
        return self.store.fetch_all(f"SELECT {PET_COLUMNS} FROM pets ORDER BY id")

    def get_pet(self, pet_id: int) -> Dict[str, Any]:
        pet = self.store.fetch_one(f"SELECT {PET_COLUMNS} FROM pets WHERE id = :id", {"id": pet_id})
        if pet is None:
            raise NotFoundError("Pet", pet_id)
        return pet

    def update_pet(self, pet_id: int, payload: Mapping[str, Any]) -> None:
        data = PetUpdateSchema().load(payload)
        affected = self.store.execute(
            """
            UPDATE pets
            SET name = :name, species = :species, breed = :breed, age = :age,
                weight = :weight, health_condition = :health_condition,
                owner_id = COALESCE(:owner_id, owner_id)
            WHERE id = :id
            """,
            {**data, "id": pet_id},
        )
        if affected == 0:
            logging.warning(f"Pet {pet_id} not found for update")
            raise NotFoundError("Pet", pet_id)
        logging.info(f"Pet {pet_id} updated")

    def delete_pet(self, pet_id: int) -> None:
        affected = self.store.execute("DELETE FROM pets WHERE id = :id", {"id": pet_id})
        if affected == 0:
            logging.warning(f"Pet {pet_id} not found for delete")
            raise NotFoundError("Pet", pet_id)
        logging.info(f"Pet {pet_id} deleted")
