from fastapi import FastAPI

def register_security_middleware(app: FastAPI) -> None:
    """
    En-têtes de sécurité ajoutés à toutes les réponses (sans écraser ceux posés par les vues).
    - Les en-têtes CORS restent propres au checkout (posés par payments/views.py).
    """
    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)

        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        return response
