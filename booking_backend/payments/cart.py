"""
Logique panier pure (pas de Stripe, pas de HTTP).
"""
import math
from typing import Any, Dict, List, Optional, Tuple

from booking_backend.config import CURRENCY, MULTI_ROOM_DISCOUNT_PERCENT
from .models import Addon, RoomPackage, Totals, Voucher

# module booking_backend.payments.cart
def to_minor_units(amount: float) -> int:
    """
    Convertit un montant décimal en centimes (pence).
    Arrondi au plus proche, les demis vers le haut (12.346 -> 1235, 12.344 -> 1234).
    """
    return int(math.floor(float(amount) * 100 + 0.5))

def format_amount(value: float) -> str:
    """
    Représentation décimale la plus courte d'un montant.
    - 500.0 -> "500", 12.5 -> "12.5"
    Utilisé pour les metadata Stripe (valeurs string uniquement) et les libellés.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)

def line_item_name(name: str, quantity: int) -> str:
    return f"{quantity} x {name}" if quantity > 1 else name

def _line_item(name: str, description: str, amount: float, currency: str) -> Dict[str, Any]:
    return {
        "price_data": {
            "currency": currency,
            "product_data": {
                "name": name,
                "description": description,
            },
            "unit_amount": to_minor_units(amount),
        },
        # Le multiplicateur est déjà inclus dans le prix
        "quantity": 1,
    }

def to_line_items(
    cart: Dict[str, RoomPackage],
    addons: Dict[str, Addon],
    currency: str = CURRENCY,
) -> List[Dict[str, Any]]:
    """
    Construit les line_items Stripe: une ligne par pièce puis une ligne par addon.
    - Pièce: "<quantité> x <nom>" si quantité > 1, sinon le nom seul.
    - Prix en centimes via to_minor_units, quantité Stripe toujours 1.
    """
    line_items: List[Dict[str, Any]] = []
    for room_name, room in cart.items():
        line_items.append(
            _line_item(line_item_name(room_name, room.quantity), "Room Package", room.total_price, currency)
        )
    for addon_name, addon in addons.items():
        line_items.append(_line_item(addon_name, "Addon", addon.price, currency))
    return line_items

def combine_discounts(
    totals: Totals,
    voucher: Optional[Voucher],
    percent: int = MULTI_ROOM_DISCOUNT_PERCENT,
) -> Tuple[float, str]:
    """
    Fusionne remise multi-pièces + voucher en un seul montant et un libellé.
    Stripe n'accepte qu'un coupon par session, d'où la fusion préalable.
    Retour: (montant_total, description), description vide si aucune remise.
    """
    total = totals.discount + totals.voucher_discount
    has_multi_room = totals.discount > 0
    has_voucher = voucher is not None and totals.voucher_discount > 0

    description = ""
    if has_multi_room and has_voucher:
        description = f"Multi-room ({percent}%) + Voucher {voucher.code} ({format_amount(voucher.amount)}%)"
    elif has_multi_room:
        description = f"Multi-room discount ({percent}%)"
    elif has_voucher:
        description = f"Voucher: {voucher.code} ({format_amount(voucher.amount)}%)"
    return total, description

def success_url_with_session(success_url: str) -> str:
    # Stripe remplace le jeton {CHECKOUT_SESSION_ID} à la redirection
    return f"{success_url}?session_id={{CHECKOUT_SESSION_ID}}"
