"""Application services shared by use cases."""

from authcore.application.services.refresh_sessions import RefreshSessions, SessionKeyBuilder

__all__ = ["RefreshSessions", "SessionKeyBuilder"]
