"""Entry point for the Clients FastAPI app."""
from clients_api.app import create_app

__all__ = ["create_app"]
