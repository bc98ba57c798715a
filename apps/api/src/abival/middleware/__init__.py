"""HTTP middleware."""

from abival.middleware.auth import APITokenMiddleware

__all__ = ["APITokenMiddleware"]
