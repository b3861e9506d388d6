"""Entry point for the civic engagement FastAPI app."""
from civic.app import create_app

__all__ = ["create_app"]
