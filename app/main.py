"""Application entry point.

Run with:
    uvicorn main:create_server_app --factory
or:
    python main.py
"""

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from server.server import create_app


def create_server_app() -> FastAPI:
    """Load the .env file into the environment and build the application."""
    load_dotenv()
    return create_app()


if __name__ == "__main__":
    uvicorn.run("main:create_server_app", factory=True, host="0.0.0.0", port=8000)
