# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Errors raised by the Dropbox attachment source.

Every failed download maps to exactly one subclass of :class:`DropboxError`
according to the HTTP status of the response. None of them is retried
internally; the caller decides what to do.
"""

from __future__ import annotations

RATE_LIMIT_MESSAGE = "Too many request made"
SERVICE_ERROR_MESSAGE = "Dropbox service error"


class DropboxError(Exception):
    """Base class for classified Dropbox download failures.

    Attributes:
        message: Human-readable description of the failure.
        status: HTTP status the error class corresponds to, or None for
            the catch-all :class:`ServiceError`.
    """

    status: int | None = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestError(DropboxError):
    """The request was malformed (400); message is the raw response body."""

    status = 400


class AuthError(DropboxError):
    """The access token is invalid or expired (401)."""

    status = 401


class NotFoundError(DropboxError, FileNotFoundError):
    """No file exists at the requested path (409)."""

    status = 409


class RateLimitError(DropboxError):
    """Too many requests were made with this token (429)."""

    status = 429

    def __init__(self, message: str = RATE_LIMIT_MESSAGE):
        super().__init__(message)


class ServiceError(DropboxError):
    """Any other non-success response, including 5xx."""

    def __init__(self, message: str = SERVICE_ERROR_MESSAGE):
        super().__init__(message)
