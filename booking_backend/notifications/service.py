"""
Cas d'usage 'notifications': traite checkout.session.completed et envoie les emails.
Pipeline: filtre du type -> line items Stripe -> rendu HTML -> envoi (best effort).
"""
import logging
from typing import Any, Dict, Optional

from starlette.concurrency import run_in_threadpool

from booking_backend.config import EmailSettings, get_email_settings
from booking_backend.payments import stripe_client
from . import emails
from . import mailer

logger = logging.getLogger(__name__)

COMPLETED_EVENT = "checkout.session.completed"

async def handle_event(event: Dict[str, Any], settings: Optional[EmailSettings] = None) -> Dict[str, Any]:
    """
    Traite un événement Stripe déjà vérifié.
    - Autre type que checkout.session.completed: ignoré, aucun appel sortant.
    - Échec d'envoi email: journalisé puis ignoré (Stripe ne doit pas relivrer pour ça).
    - Échec de lecture des line items: propagé (Stripe relivrera l'événement).
    Retour: {"status": "ignored"} | {"status": "processed", "emails_sent": bool}
    """
    if (event or {}).get("type") != COMPLETED_EVENT:
        logger.info("notifications.event ignored type=%s", (event or {}).get("type"))
        return {"status": "ignored"}

    settings = settings or get_email_settings()
    session = ((event.get("data") or {}).get("object")) or {}
    logger.info("notifications.payment successful for=%s session_id=%s", session.get("customer_email"), session.get("id"))

    # SDK Stripe synchrone: exécuté hors de la boucle d'événements
    line_items = await run_in_threadpool(stripe_client.list_line_items, session.get("id"))

    customer_html = emails.render_customer_receipt(session, line_items, settings)
    admin_html = emails.render_admin_notification(session, line_items, settings)

    try:
        await mailer.send_email(
            to=session.get("customer_email"),
            subject=emails.customer_subject(),
            html=customer_html,
            from_address=settings.from_address,
        )
        logger.info("notifications.customer email sent to=%s", session.get("customer_email"))

        await mailer.send_email(
            to=list(settings.operator_emails),
            subject=emails.admin_subject(session),
            html=admin_html,
            from_address=settings.from_address,
        )
        logger.info("notifications.admin email sent to=%s", ", ".join(settings.operator_emails))
    except Exception:
        logger.exception("Erreur envoi email session_id=%s", session.get("id"))
        return {"status": "processed", "emails_sent": False}

    return {"status": "processed", "emails_sent": True}
