"""
Classement des line items pour l'affichage (pièces vs addons).
Heuristique par mots-clés sur la description: aucune logique métier n'en dépend,
seul le regroupement dans l'email change.
"""
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple

ADDON_KEYWORDS = ("sketch", "track", "swatch", "addon", "add-on")


class Category(str, Enum):
    ROOM = "room"
    ADDON = "addon"


def classify(description: str) -> Category:
    text = (description or "").lower()
    if any(keyword in text for keyword in ADDON_KEYWORDS):
        return Category.ADDON
    return Category.ROOM


def split_line_items(items: Iterable[Dict[str, Any]]) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """Retourne (rooms, addons) en conservant l'ordre Stripe."""
    rooms: List[Dict[str, Any]] = []
    addons: List[Dict[str, Any]] = []
    for item in items:
        if classify(item.get("description", "")) is Category.ADDON:
            addons.append(item)
        else:
            rooms.append(item)
    return rooms, addons
