"""
Registre central des routers.
- API: payments (checkout), notifications (webhook Stripe)
- Health: health_router
"""
from fastapi import FastAPI
from booking_backend.payments import views as payments_views
from booking_backend.notifications import views as notifications_views
from booking_backend.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    """
    Agrège tous les routers de l'application.
    - L'ordre n'a pas d'impact sauf conflits de chemins (évités par préfixes).
    """
    app.include_router(payments_views.router)
    app.include_router(notifications_views.router)
    # Health & monitoring
    app.include_router(health_router)
