# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Attachment sources.

Every source implements :class:`AttachmentSourceBase` and produces an
:class:`AttachmentSource` value (file name, content type, content, size)
that the email-composition side can attach as-is.

Available sources:
- dropbox - download through the Dropbox API v2 ``files/download`` endpoint

Example:
    Fetching a Dropbox file::

        attachment = await fetch(access_token, "/contracts/signed.pdf")
"""

from .base import AttachmentSourceBase
from .dropbox_fetcher import DOWNLOAD_ENDPOINT, DropboxAttachmentSource, fetch
from .errors import (
    AuthError,
    DropboxError,
    NotFoundError,
    RateLimitError,
    RequestError,
    ServiceError,
)
from .models import AttachmentSource

__all__ = [
    "DOWNLOAD_ENDPOINT",
    "AttachmentSource",
    "AttachmentSourceBase",
    "AuthError",
    "DropboxAttachmentSource",
    "DropboxError",
    "NotFoundError",
    "RateLimitError",
    "RequestError",
    "ServiceError",
    "fetch",
]
