import uvicorn
from fastapi import FastAPI

from bakingtime.config import load_settings
from bakingtime.logging_config import get_logger
from bakingtime.web.routes import router


def create_app() -> FastAPI:
    app = FastAPI(title="BakingTime API")

    app.include_router(router)

    return app


app = create_app()


def main():
    settings = load_settings()
    logger = get_logger(__name__, level=settings.log_level)
    logger.info(f"Serving recipes from {settings.recipes_url}")
    uvicorn.run(
        "bakingtime.cmd.server:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
