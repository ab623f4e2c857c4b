"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `booking_backend.asgi:app`.
- Toute la configuration de FastAPI (routes, middlewares, handlers) est centralisée
  dans booking_backend.app_setup.factory, ce fichier ne fait qu'exposer l'instance `app`.
"""

from booking_backend.app_setup.factory import create_app

app = create_app()
