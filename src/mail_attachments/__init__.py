# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Attachment sources for email composition.

Features:
    - Dropbox file download (API v2 ``files/download``) as an attachment
    - Classified errors for bad requests, expired tokens, missing files,
      rate limiting and generic service failures
    - INI / environment configuration for the Dropbox access token
    - ``mail-attachments`` command-line tool

Example::

    from mail_attachments import fetch

    attachment = await fetch(access_token, "/invoices/2025-03.pdf")
    print(attachment.file_name, attachment.size)
"""

from mail_attachments.attachments import (
    AttachmentSource,
    AttachmentSourceBase,
    AuthError,
    DropboxAttachmentSource,
    DropboxError,
    NotFoundError,
    RateLimitError,
    RequestError,
    ServiceError,
    fetch,
)

__version__ = "0.1.0"

__all__ = [
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
