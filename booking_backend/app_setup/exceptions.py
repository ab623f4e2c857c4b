"""
Gestionnaires d'exceptions utilisés par la factory.
- HTTPException (ex: 405 de FastAPI sur une méthode non routée) -> {"error": <detail>}
  pour garder la même forme de corps que les endpoints checkout/webhook.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

def register_exception_handlers(app: FastAPI) -> None:
    """
    Enregistre le handler HTTPException (Starlette, donc aussi les 404/405 du routeur).
    """
    @app.exception_handler(StarletteHTTPException)
    async def json_error_body(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )
