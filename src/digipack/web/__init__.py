"""Web surface - FastAPI app rendering the presentation shell."""

from .app import create_app
from .sessions import SESSION_COOKIE, SessionStore

__all__ = ["create_app", "SessionStore", "SESSION_COOKIE"]
