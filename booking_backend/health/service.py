from booking_backend import config

def health_config_info():
    """
    Indique quels secrets sont configurés (booléens uniquement, jamais les valeurs).
    """
    return {
        "stripe_secret_key": bool(config.STRIPE_SECRET_KEY),
        "stripe_webhook_secret": bool(config.STRIPE_WEBHOOK_SECRET),
        "resend_api_key": bool(config.RESEND_API_KEY),
        "operator_emails": len(config.OPERATOR_EMAILS),
    }
