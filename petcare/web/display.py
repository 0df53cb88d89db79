from __future__ import annotations

from typing import Any, Iterable, Optional

SPECIES_ICONS = (
    (("perro", "dog"), "🐶"),
    (("gato", "cat"), "🐱"),
    (("ave", "bird"), "🕊️"),
    (("conejo", "rabbit"), "🐰"),
)
DEFAULT_ICON = "🐾"

NO_OWNER = "No owner assigned"


def _matches(value: str, needles: Iterable[str]) -> bool:
    return any(n in value for n in needles)


def species_icon(species: Optional[str]) -> str:
    if not species:
        return DEFAULT_ICON
    s = species.lower()
    for needles, icon in SPECIES_ICONS:
        if _matches(s, needles):
            return icon
    return DEFAULT_ICON


def species_chip_class(species: Optional[str]) -> str:
    s = (species or "").lower()
    if _matches(s, ("perro", "dog")):
        return "chip chip-species-dog"
    if _matches(s, ("gato", "cat")):
        return "chip chip-species-cat"
    return "chip chip-species-other"


def condition_chip_class(condition: Optional[str]) -> str:
    if not condition:
        return "chip chip-health-neutral"
    c = condition.lower()
    if _matches(c, ("sano", "sana", "healthy")):
        return "chip chip-health-good"
    if "alerg" in c:
        return "chip chip-health-medium"
    if "diab" in c:
        return "chip chip-health-bad"
    return "chip chip-health-neutral"


def find_by_id(items: Iterable[dict], item_id: Any) -> Optional[dict]:
    return next((x for x in items if x.get("id") == item_id), None)


def owner_name(owners: Iterable[dict], owner_id: Any) -> str:
    """Resolve an owner id against an already fetched owner list."""
    owner = find_by_id(owners, owner_id)
    return owner["name"] if owner else NO_OWNER


def or_dash(value: Any, suffix: str = "") -> str:
    if value is None or value == "":
        return "-"
    return f"{value}{suffix}"
