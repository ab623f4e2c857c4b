"""
Module 'notifications' (feature-first): webhook Stripe, classement des line items,
rendu des emails et envoi via Resend.
"""

from .classify import ADDON_KEYWORDS, Category, classify, split_line_items
from .emails import render_customer_receipt, render_admin_notification, admin_subject, customer_subject
from .mailer import EmailDeliveryError, send_email
from .service import handle_event

__all__ = [
    "ADDON_KEYWORDS",
    "Category",
    "classify",
    "split_line_items",
    "render_customer_receipt",
    "render_admin_notification",
    "admin_subject",
    "customer_subject",
    "EmailDeliveryError",
    "send_email",
    "handle_event",
]
