"""FastAPI application entry point."""

from infrastructure.config import get_settings
from presentation.api.app import create_app

settings = get_settings()

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
