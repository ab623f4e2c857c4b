"""
Client Resend (API REST) via httpx.
"""
import logging
from typing import Any, Dict, List, Union

import httpx

from booking_backend import config

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Réponse non 2xx de l'API Resend."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"Resend error {status_code}: {message}")
        self.status_code = status_code


# module booking_backend.notifications.mailer
async def send_email(*, to: Union[str, List[str]], subject: str, html: str, from_address: str) -> Dict[str, Any]:
    """
    Envoie un email HTML via Resend.
    - to: adresse unique ou liste d'adresses
    - Lève EmailDeliveryError si Resend refuse l'envoi
    Retour: corps JSON de Resend (ex: {"id": "..."})
    """
    url = f"{config.RESEND_API_URL}/emails"
    headers = {
        "Authorization": f"Bearer {config.RESEND_API_KEY}",
        "Content-Type": "application/json",
    }
    payload = {
        "from": from_address,
        "to": to if isinstance(to, list) else [to],
        "subject": subject,
        "html": html,
    }
    async with httpx.AsyncClient() as client:
        response = await client.post(url, headers=headers, json=payload)
    try:
        data = response.json() if response.content else {}
    except ValueError:
        data = {}
    if response.status_code >= 300:
        message = data.get("message")
        raise EmailDeliveryError(response.status_code, message or response.text)
    logger.info("mailer.sent to=%s subject=%s id=%s", payload["to"], subject, data.get("id"))
    return data
