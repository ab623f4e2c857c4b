import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from booking_backend.payments import stripe_client
from booking_backend.notifications import service as notifications_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Stripe Webhook"])

# module booking_backend.notifications.views
@router.post("/stripe-webhook", include_in_schema=False)
async def stripe_webhook(request: Request):
    """
    Webhook Stripe: consomme checkout.session.completed pour envoyer les emails.
    - Signature: valide via stripe_client.parse_event (Stripe-Signature + STRIPE_WEBHOOK_SECRET)
    - Réponses: 400 {"error"} si signature invalide, sinon 200 {"received": true}
      (y compris si l'envoi des emails a échoué)
    """
    payload = await request.body()
    sig_header = request.headers.get("stripe-signature")
    try:
        event = stripe_client.parse_event(payload, sig_header)
    except Exception as e:
        logger.error("Webhook signature verification failed: %s", e)
        return JSONResponse({"error": "Webhook signature verification failed"}, status_code=400)

    result = await notifications_service.handle_event(event)
    logger.info("notifications.webhook type=%s result=%s", event.get("type"), result)
    return JSONResponse({"received": True})
