"""
Middleware modules for the FiviMedia LLC server.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
