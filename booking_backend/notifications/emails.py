"""
Rendu HTML des deux emails envoyés après paiement (Jinja2, autoescape).
- customer_receipt.html: récapitulatif client (pièces, addons, économies, total, coordonnées, suite)
- admin_notification.html: notification interne (total, statut, contact, détail, remises, lien dashboard)
"""
from datetime import datetime, timezone
from typing import Any, Dict, List

from jinja2 import Environment, FileSystemLoader, select_autoescape

from booking_backend.config import MULTI_ROOM_DISCOUNT_PERCENT, TEMPLATES_DIR, EmailSettings
from booking_backend.payments.metadata import extract_savings, extract_subtotal
from .classify import split_line_items

templates = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)

def pounds(minor_units: int) -> str:
    return f"{(minor_units or 0) / 100:.2f}"

def money(amount: float) -> str:
    return f"{float(amount or 0):.2f}"

templates.filters["pounds"] = pounds
templates.filters["money"] = money

def format_order_date(created: int) -> str:
    """Horodatage Stripe (secondes, UTC) -> '19 Oct 2026, 14:05'."""
    return datetime.fromtimestamp(int(created or 0), tz=timezone.utc).strftime("%d %b %Y, %H:%M")

def _context(session: Dict[str, Any], line_items: List[Dict[str, Any]], settings: EmailSettings) -> Dict[str, Any]:
    metadata = session.get("metadata") or {}
    rooms, addons = split_line_items(line_items)
    return {
        "session": session,
        "customer_name": metadata.get("customer_name", ""),
        "customer_phone": metadata.get("customer_phone", ""),
        "customer_email": session.get("customer_email") or "",
        "line_items": line_items,
        "rooms": rooms,
        "addons": addons,
        "savings": extract_savings(metadata),
        "subtotal": extract_subtotal(metadata),
        "amount_total": session.get("amount_total") or 0,
        "multi_room_percent": MULTI_ROOM_DISCOUNT_PERCENT,
        "settings": settings,
    }

# module booking_backend.notifications.emails
def render_customer_receipt(session: Dict[str, Any], line_items: List[Dict[str, Any]], settings: EmailSettings) -> str:
    return templates.get_template("customer_receipt.html").render(**_context(session, line_items, settings))

def render_admin_notification(session: Dict[str, Any], line_items: List[Dict[str, Any]], settings: EmailSettings) -> str:
    ctx = _context(session, line_items, settings)
    ctx["order_date"] = format_order_date(session.get("created"))
    ctx["dashboard_link"] = f"{settings.dashboard_url}/payments/{session.get('payment_intent') or ''}"
    return templates.get_template("admin_notification.html").render(**ctx)

def customer_subject() -> str:
    return "Booking Confirmation"

def admin_subject(session: Dict[str, Any]) -> str:
    name = (session.get("metadata") or {}).get("customer_name", "")
    return f"New Order from {name} - £{pounds(session.get('amount_total') or 0)}"
