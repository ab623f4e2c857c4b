"""
Lancement local du service checkout + webhook Stripe.

    python -m booking_backend

Variables lues au démarrage:
- PORT: port HTTP (8000 si absent)
- UVICORN_RELOAD: "1"/"true"/"yes" pour recharger à chaque modification
- LOG_LEVEL: verbosité uvicorn ("info" par défaut)
En production, servir plutôt booking_backend.asgi:app derrière le process manager.
"""
import os
import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "booking_backend.asgi:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 8000)),
        reload=os.environ.get("UVICORN_RELOAD", "").lower() in ("1", "true", "yes"),
        log_level=os.environ.get("LOG_LEVEL", "info"),
    )
