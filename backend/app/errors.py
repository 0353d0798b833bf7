"""Domain errors raised by the services layer.

Each carries the HTTP status it maps to; ``app.main`` renders them as
``{"detail": ...}`` so routers never translate them by hand.
"""
from __future__ import annotations


class DomainError(Exception):
    """Base exception for all service-level failures."""

    status_code = 400

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ValidationFailed(DomainError):
    """Caller sent something structurally valid but semantically wrong."""

    status_code = 422


class NotFound(DomainError):
    """Entity is missing, or hidden from the caller."""

    status_code = 404


class Forbidden(DomainError):
    """Entity is known to the caller but the relationship to mutate it is missing."""

    status_code = 403
