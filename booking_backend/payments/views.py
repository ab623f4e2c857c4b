import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from booking_backend.config import CORS_HEADERS
from booking_backend.payments import service as payments_service
from booking_backend.payments.models import CheckoutRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Checkout"])

# Toutes les méthodes arrivent ici pour renvoyer le 405 avec les en-têtes CORS
_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

# module booking_backend.payments.views
@router.api_route("/create-checkout", methods=_ALL_METHODS)
async def create_checkout(request: Request):
    """
    Crée une session Checkout Stripe pour le panier du storefront.
    - Entrée JSON: { cart, addons, totals, customer, voucher?, successUrl, cancelUrl }
    - OPTIONS (preflight CORS): 200 sans corps
    - Méthode autre que POST/OPTIONS: 405
    - Réponses: 200 {checkoutUrl, sessionId} | 500 {error, details}
    """
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    if request.method != "POST":
        return JSONResponse({"error": "Method Not Allowed"}, status_code=405, headers=CORS_HEADERS)

    try:
        body = json.loads(await request.body())
        payload = CheckoutRequest.model_validate(body)
        logger.info("payments.checkout creating session for=%s", payload.customer.email)
        result = await run_in_threadpool(payments_service.create_checkout_session, payload)
        return JSONResponse(result, headers=CORS_HEADERS)
    except Exception as e:
        logger.exception("Erreur create_checkout")
        return JSONResponse(
            {"error": str(e), "details": "Failed to create checkout session"},
            status_code=500,
            headers=CORS_HEADERS,
        )
