"""
Sérialisation/désérialisation des métadonnées Stripe (client, remises, totaux).
Stripe n'accepte que des valeurs string: les montants partent en str et reviennent en float.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .cart import format_amount
from .models import Customer, Totals, Voucher

# module booking_backend.payments.metadata
def make_metadata(customer: Customer, totals: Totals, voucher: Optional[Voucher]) -> Dict[str, str]:
    """
    Métadonnées attachées à la session Checkout, relues par le webhook.
    - voucher_code: "" si pas de voucher
    - total_discount: remise multi-pièces + voucher
    """
    return {
        "customer_name": customer.name,
        "customer_phone": customer.phone,
        "voucher_code": voucher.code if voucher else "",
        "subtotal": format_amount(totals.subtotal_before_discount),
        "multi_room_discount": format_amount(totals.discount),
        "voucher_discount": format_amount(totals.voucher_discount),
        "total_discount": format_amount(totals.discount + totals.voucher_discount),
        "final_total": format_amount(totals.final_total),
    }

@dataclass
class Savings:
    multi_room: float = 0.0
    voucher: float = 0.0
    total: float = 0.0
    voucher_code: str = ""

    @property
    def has_savings(self) -> bool:
        return self.total > 0

def _to_float(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0

def extract_savings(metadata: Optional[Dict[str, Any]]) -> Savings:
    """
    Relit les remises depuis session.metadata (valeurs manquantes ou invalides -> 0).
    """
    meta = metadata or {}
    return Savings(
        multi_room=_to_float(meta.get("multi_room_discount")),
        voucher=_to_float(meta.get("voucher_discount")),
        total=_to_float(meta.get("total_discount")),
        voucher_code=str(meta.get("voucher_code") or ""),
    )

def extract_subtotal(metadata: Optional[Dict[str, Any]]) -> float:
    return _to_float((metadata or {}).get("subtotal"))
