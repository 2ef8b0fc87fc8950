"""Run the API server with uvicorn."""

import uvicorn

from chirpy.config import get_settings

settings = get_settings()

if __name__ == "__main__":
    uvicorn.run("chirpy.main:app", host=settings.host, port=settings.port)
