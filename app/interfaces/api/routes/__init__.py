from fastapi import FastAPI

from .hello import router as hello_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(hello_router)
