"""
Centralized database layer for FiviMedia LLC.

Exposes the session dependency, the engine/session factories and the
entity and repository packages.
"""

from .base import Base, utc_now_naive
from .session import async_session_maker, engine, get_session, get_session_factory
from .utils import create_all, create_engine, create_sessionmaker

__all__ = [
    "Base",
    "utc_now_naive",
    "engine",
    "async_session_maker",
    "get_session",
    "get_session_factory",
    "create_all",
    "create_engine",
    "create_sessionmaker",
]
