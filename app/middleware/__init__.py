"""HTTP middleware: request ID propagation (applied in app.main)."""

from app.middleware.request_id import RequestIDMiddleware, resolve_request_id

__all__ = ["RequestIDMiddleware", "resolve_request_id"]
