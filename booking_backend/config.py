# booking_backend.config
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=True)

TEMPLATES_DIR = Path(__file__).resolve().parent / "notifications" / "templates"

"""
Configuration centrale du backend.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les secrets (Stripe, Resend)
- Regroupe la configuration des emails (expéditeur, opérateurs, liens) dans EmailSettings
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _split_list(v: str) -> List[str]:
    return [e.strip() for e in (v or "").split(",") if e.strip()]

# Stripe: clé secrète et secret de signature webhook
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")
STRIPE_WEBHOOK_SECRET = _clean_env(os.getenv("STRIPE_WEBHOOK_SECRET") or "")
STRIPE_DASHBOARD_URL = _clean_env(os.getenv("STRIPE_DASHBOARD_URL") or "https://dashboard.stripe.com/test").rstrip("/")

# Resend: API d'envoi des emails
RESEND_API_KEY = _clean_env(os.getenv("RESEND_API_KEY") or "")
RESEND_API_URL = _clean_env(os.getenv("RESEND_API_URL") or "https://api.resend.com").rstrip("/")

# Tarification
CURRENCY = _clean_env(os.getenv("CURRENCY") or "gbp").lower()
MULTI_ROOM_DISCOUNT_PERCENT = int(os.getenv("MULTI_ROOM_DISCOUNT_PERCENT", "15"))

# Emails
EMAIL_FROM_ADDRESS = _clean_env(os.getenv("EMAIL_FROM_ADDRESS") or "Where Rooms Begin <hello@whereroomsbegin.com>")
OPERATOR_EMAILS = _split_list(os.getenv("OPERATOR_EMAILS", "matt@autara.studio,hello@whereroomsbegin.com"))
BOOKING_URL = _clean_env(os.getenv("BOOKING_URL") or "https://calendly.com/")
MEASURING_GUIDE_URL = _clean_env(
    os.getenv("MEASURING_GUIDE_URL")
    or "https://cdn.prod.website-files.com/68fb85ec75c72f4adb7abbd4/6920b82fa56fbee1fc06f973_Measuring%20Your%20Room.pdf"
)

# CORS: le front (storefront) appelle le checkout depuis n'importe quelle origine
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

@dataclass(frozen=True)
class EmailSettings:
    """Configuration injectée dans le service de notification (pas de littéraux dans le code)."""
    from_address: str = EMAIL_FROM_ADDRESS
    operator_emails: List[str] = field(default_factory=lambda: list(OPERATOR_EMAILS))
    dashboard_url: str = STRIPE_DASHBOARD_URL
    booking_url: str = BOOKING_URL
    measuring_guide_url: str = MEASURING_GUIDE_URL

def get_email_settings() -> EmailSettings:
    """Construit les réglages à partir des valeurs courantes du module (relues à chaque appel)."""
    return EmailSettings(
        from_address=EMAIL_FROM_ADDRESS,
        operator_emails=list(OPERATOR_EMAILS),
        dashboard_url=STRIPE_DASHBOARD_URL,
        booking_url=BOOKING_URL,
        measuring_guide_url=MEASURING_GUIDE_URL,
    )
