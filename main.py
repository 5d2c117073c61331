import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Registra el arranque y la parada de la aplicación."""

    logger.info("Starting %s", app.title)
    yield
    logger.info("Stopping %s", app.title)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    # Solo se habilita CORS cuando hay orígenes configurados.
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    register_routes(app)
    return app


app = create_app()


def main() -> None:
    """Arranca el servidor HTTP con uvicorn en el puerto configurado."""

    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
