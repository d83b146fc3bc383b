"""NeuralSync chat relay - standalone server."""

import uvicorn

from config import get_settings
from app import create_app

settings = get_settings("standalone")
app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
    )
