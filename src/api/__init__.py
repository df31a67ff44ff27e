"""HTTP API for the economic calendar.

Example:
    from src.api import create_app
    app = create_app()
"""

from src.api.app import create_app

__all__ = ["create_app"]
