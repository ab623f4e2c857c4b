"""
Module 'payments' (feature-first): point d'entrée public.
Réunit logique panier, metadata Stripe, client Stripe et service de checkout.
"""

from .cart import (
    to_minor_units,
    format_amount,
    line_item_name,
    to_line_items,
    combine_discounts,
    success_url_with_session,
)
from .metadata import make_metadata, extract_savings, extract_subtotal, Savings
from .models import CheckoutRequest, RoomPackage, Addon, Totals, Customer, Voucher
from .stripe_client import require_stripe, create_coupon, create_session, list_line_items, parse_event
from .service import create_checkout_session

__all__ = [
    # cart
    "to_minor_units",
    "format_amount",
    "line_item_name",
    "to_line_items",
    "combine_discounts",
    "success_url_with_session",
    # metadata
    "make_metadata",
    "extract_savings",
    "extract_subtotal",
    "Savings",
    # models
    "CheckoutRequest",
    "RoomPackage",
    "Addon",
    "Totals",
    "Customer",
    "Voucher",
    # stripe
    "require_stripe",
    "create_coupon",
    "create_session",
    "list_line_items",
    "parse_event",
    # services
    "create_checkout_session",
]
