"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
Les objets Stripe sont convertis en dicts simples avant de sortir de ce module.
"""
import json
import stripe
from typing import Any, Dict, List, Optional

from booking_backend import config

# module booking_backend.payments.stripe_client
def require_stripe():
    """
    Prépare et retourne le module stripe prêt à l'emploi.
    - Configure stripe.api_key via STRIPE_SECRET_KEY.
    - En absence de clé, les appels Stripe échoueront côté SDK (ex: No API key provided).
    """
    if config.STRIPE_SECRET_KEY:
        stripe.api_key = config.STRIPE_SECRET_KEY
    return stripe

def create_coupon(*, amount_off: int, name: str, currency: str = config.CURRENCY) -> str:
    """
    Crée un coupon à montant fixe, utilisable une seule fois.
    Retour: l'identifiant du coupon.
    """
    require_stripe()
    params: Dict[str, Any] = {
        "amount_off": amount_off,
        "currency": currency,
        "duration": "once",
    }
    if name:
        params["name"] = name
    coupon = stripe.Coupon.create(**params)
    return coupon.id

def create_session(
    *,
    line_items: List[Dict[str, Any]],
    customer_email: str,
    metadata: Dict[str, str],
    success_url: str,
    cancel_url: str,
    coupon_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Crée une session Stripe Checkout (paiement unique, carte).
    Retour: {"id": "cs_test_...", "url": "https://checkout.stripe.com/..."}
    """
    require_stripe()
    params: Dict[str, Any] = {
        "payment_method_types": ["card"],
        "line_items": line_items,
        "mode": "payment",
        "customer_email": customer_email,
        "metadata": metadata,
        "success_url": success_url,
        "cancel_url": cancel_url,
    }
    if coupon_id:
        params["discounts"] = [{"coupon": coupon_id}]
    session = stripe.checkout.Session.create(**params)
    return {"id": session.id, "url": session.url}

def list_line_items(session_id: str) -> List[Dict[str, Any]]:
    """
    Relit les line items finalisés d'une session (l'event webhook ne les contient pas).
    Retour: [{"description": "...", "amount_total": <centimes>}, ...]
    """
    require_stripe()
    items = stripe.checkout.Session.list_line_items(session_id, expand=["data.price.product"])
    return [
        {"description": item["description"] or "", "amount_total": item["amount_total"] or 0}
        for item in items.auto_paging_iter()
    ]

def parse_event(payload: bytes, sig_header: Optional[str]) -> Dict[str, Any]:
    """
    Valide la signature Stripe (en-tête Stripe-Signature + STRIPE_WEBHOOK_SECRET)
    puis retourne l'événement sous forme de dict.
    - Lève stripe.SignatureVerificationError si la signature est invalide ou absente.
    - Pas de fallback non signé: sans secret, la vérification échoue.
    """
    body = payload.decode("utf-8")
    stripe.WebhookSignature.verify_header(
        body, sig_header or "", config.STRIPE_WEBHOOK_SECRET, tolerance=stripe.Webhook.DEFAULT_TOLERANCE
    )
    return json.loads(body)
