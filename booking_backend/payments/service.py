"""
Cas d'usage 'payments': orchestre cart, metadata et stripe_client pour créer la session Checkout.
"""
import logging
from typing import Any, Dict

from . import cart as cart_logic
from . import stripe_client
from .metadata import make_metadata
from .models import CheckoutRequest

logger = logging.getLogger(__name__)

def create_checkout_session(request: CheckoutRequest) -> Dict[str, Any]:
    """
    Prépare et crée la session Stripe à partir du panier du storefront.
    Étapes:
      1) line_items: pièces puis addons (cart_logic.to_line_items)
      2) remises fusionnées en un seul coupon si montant > 0
      3) metadata (client + remises) relues plus tard par le webhook
      4) session Checkout, retour {checkoutUrl, sessionId}
    Les appels sont séquentiels; un coupon créé n'est pas supprimé si la session échoue.
    """
    line_items = cart_logic.to_line_items(request.cart, request.addons)

    coupon_id = None
    discount_total, discount_description = cart_logic.combine_discounts(request.totals, request.voucher)
    if discount_total > 0:
        coupon_id = stripe_client.create_coupon(
            amount_off=cart_logic.to_minor_units(discount_total),
            name=discount_description,
        )
        logger.info("payments.coupon created id=%s name=%s", coupon_id, discount_description)

    metadata = make_metadata(request.customer, request.totals, request.voucher)
    try:
        session = stripe_client.create_session(
            line_items=line_items,
            customer_email=request.customer.email,
            metadata=metadata,
            success_url=cart_logic.success_url_with_session(request.success_url),
            cancel_url=request.cancel_url,
            coupon_id=coupon_id,
        )
    except Exception:
        if coupon_id:
            logger.warning("payments.coupon orphaned id=%s (session creation failed)", coupon_id)
        raise

    logger.info("payments.checkout session created id=%s", session.get("id"))
    return {"checkoutUrl": session.get("url"), "sessionId": session.get("id")}
