"""
Factory d'application recommandée pour les entrypoints (ex: booking_backend.asgi).
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from fastapi import FastAPI
from .security import register_security_middleware
from .exceptions import register_exception_handlers
from .routers import register_routers

def create_app() -> FastAPI:
    """
    Construit l'app FastAPI et enregistre:
      - le middleware d'en-têtes de sécurité
      - les gestionnaires d'exceptions
      - tous les routers (checkout, webhook, health)
    Retour:
      FastAPI prêt à être utilisé par le serveur ASGI.
    """
    app = FastAPI(title="Where Rooms Begin Checkout API")
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routers(app)
    return app
