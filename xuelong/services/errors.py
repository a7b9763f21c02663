"""Exceptions raised by the content services and mapped to HTTP statuses by the app."""
from __future__ import annotations


class ContentError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ContentError):
    status_code = 404


class ValidationError(ContentError):
    status_code = 400
