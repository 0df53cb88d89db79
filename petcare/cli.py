from __future__ import annotations

import random
from datetime import date, timedelta

import click
from flask import current_app
from sqlalchemy import text

from .extensions import db


def _db_uri() -> str:
    return current_app.config.get("SQLALCHEMY_DATABASE_URI", "")


def _services():
    return current_app.services


@click.command("init-db")
def init_db_cmd():
    uri = _db_uri()
    click.echo(f"Creating tables on DB: {uri}")
    db.create_all()
    click.echo("✔ Tables created.")


@click.command("reset-db")
@click.option("--force", is_flag=True, help="Drop + create (irreversible).")
def reset_db_cmd(force: bool):
    uri = _db_uri()
    if not force:
        click.echo("Add --force to confirm dropping all tables.")
        return
    click.echo(f"Dropping & creating tables on DB: {uri}")
    db.drop_all()
    db.create_all()
    click.echo("✔ Database reset.")


@click.command("purge-data")
def purge_data_cmd():
    # children first, there is no cascade
    for table in ("care_events", "vaccines", "pets", "owners"):
        db.session.execute(text(f"DELETE FROM {table}"))
    db.session.commit()
    click.echo("✔ All data removed (schema kept).")


@click.command("seed-demo")
def seed_demo_cmd():
    services = _services()
    owner_id = services["owners"].create_owner(
        {"name": "Ana", "email": "ana@petcare.test", "phone": "555-0100"}
    )
    pet_id = services["pets"].create_pet(
        {
            "name": "Rex",
            "species": "Perro",
            "breed": "Labrador",
            "age": 3,
            "weight": 20.5,
            "health_condition": "Sano",
            "owner_id": owner_id,
        }
    )
    services["vaccines"].create_vaccine(
        {"name": "Rabies", "application_date": "2025-11-30", "pet_id": pet_id}
    )
    services["care_events"].create_care_event(
        {
            "type": "Bath",
            "description": "Medicated bath for sensitive skin",
            "date": "2025-11-30",
            "pet_id": pet_id,
        }
    )
    click.echo(f"✔ Seed done. Owner Ana (id {owner_id}) with pet Rex (id {pet_id}).")


FIRST_NAMES = [
    "Ana", "Carlos", "Lucia", "Mateo", "Sofia", "Diego", "Valentina", "Javier",
    "Camila", "Andres", "Paula", "Miguel", "Laura", "Sebastian", "Daniela",
]
LAST_NAMES = [
    "Garcia", "Rodriguez", "Martinez", "Lopez", "Gomez", "Perez", "Sanchez",
    "Ramirez", "Torres", "Flores", "Rivera", "Castro",
]

SPECIES_BREEDS = {
    "Perro": ["Labrador", "Pastor Aleman", "Golden Retriever", "Bulldog", "Poodle", "Criollo"],
    "Gato": ["Siames", "Persa", "Maine Coon", "Angora", "Criollo"],
    "Ave": ["Periquito", "Canario", "Cacatua", "Agapornis"],
    "Conejo": ["Holland Lop", "Cabeza de Leon", "Enano"],
}
PET_NAMES = ["Rex", "Luna", "Simba", "Toby", "Kira", "Max", "Nala", "Rocky", "Coco", "Lola"]
CONDITIONS = [None, "Sano", "Sana", "Alergia alimentaria", "Diabetes", "Sobrepeso"]
VACCINES = ["Rabies", "Parvovirus", "Distemper", "Leptospirosis", "Triple felina"]
CARE_TYPES = {
    "Bath": "Regular bath",
    "Checkup": "General checkup and weight control",
    "Deworming": "Internal deworming",
    "Grooming": None,
}


def _rand_date(today: date) -> str:
    return (today - timedelta(days=random.randint(0, 720))).isoformat()


@click.command("seed-small")
@click.option("--owners", default=10, show_default=True, help="Number of owners.")
@click.option("--pets-per-owner-min", default=1, show_default=True, help="Min pets per owner.")
@click.option("--pets-per-owner-max", default=3, show_default=True, help="Max pets per owner.")
@click.option("--records-per-pet-min", default=1, show_default=True, help="Min vaccines/care events per pet.")
@click.option("--records-per-pet-max", default=4, show_default=True, help="Max vaccines/care events per pet.")
def seed_small_cmd(
    owners: int,
    pets_per_owner_min: int,
    pets_per_owner_max: int,
    records_per_pet_min: int,
    records_per_pet_max: int,
):
    random.seed(42)
    services = _services()
    click.echo(f"Seeding on DB: {_db_uri()}")
    today = date.today()

    total_pets = total_vaccines = total_care = 0
    for i in range(owners):
        first, last = random.choice(FIRST_NAMES), random.choice(LAST_NAMES)
        owner_id = services["owners"].create_owner(
            {
                "name": f"{first} {last}",
                "email": f"{first.lower()}.{last.lower()}{i:02d}@petcare.test",
                "phone": f"555-{random.randint(0, 9999):04d}",
            }
        )
        for _ in range(random.randint(pets_per_owner_min, pets_per_owner_max)):
            species = random.choice(list(SPECIES_BREEDS))
            pet_id = services["pets"].create_pet(
                {
                    "name": random.choice(PET_NAMES),
                    "species": species,
                    "breed": random.choice(SPECIES_BREEDS[species]),
                    "age": random.randint(0, 14),
                    "weight": round(random.uniform(0.1, 40.0), 1),
                    "health_condition": random.choice(CONDITIONS),
                    "owner_id": owner_id,
                }
            )
            total_pets += 1
            for _ in range(random.randint(records_per_pet_min, records_per_pet_max)):
                services["vaccines"].create_vaccine(
                    {
                        "name": random.choice(VACCINES),
                        "application_date": _rand_date(today),
                        "pet_id": pet_id,
                    }
                )
                care_type = random.choice(list(CARE_TYPES))
                services["care_events"].create_care_event(
                    {
                        "type": care_type,
                        "description": CARE_TYPES[care_type],
                        "date": _rand_date(today),
                        "pet_id": pet_id,
                    }
                )
                total_vaccines += 1
                total_care += 1

    click.echo(
        "✔ Seed completed:\n"
        f"  Owners: {owners}\n"
        f"  Pets: {total_pets}\n"
        f"  Vaccines: {total_vaccines}\n"
        f"  Care events: {total_care}"
    )
