# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Attachment result record and Dropbox wire schemas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class AttachmentSource:
    """Normalized attachment returned by every attachment source.

    Attributes:
        file_name: Name to use for the attachment.
        content_type: MIME type, empty when the source does not report one.
        content: Raw file bytes.
        size: File size in bytes as reported by the source.
    """

    file_name: str
    content_type: str
    content: bytes
    size: int


class FileDownloadArgument(BaseModel):
    """Argument of ``files/download``, sent in the ``Dropbox-API-Arg`` header."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Annotated[str, Field(description="File path (or id:/rev: reference) in Dropbox")]


class SuccessfulFileDownloadResponse(BaseModel):
    """File metadata returned in the ``Dropbox-API-Result`` header."""

    model_config = ConfigDict(extra="ignore")

    name: Annotated[str | None, Field(default=None, description="Last path component")]
    id: Annotated[str | None, Field(default=None, description="Unique file identifier")]
    size: Annotated[int | None, Field(default=None, description="File size in bytes")]


class UnsuccessfulFileDownloadResponse(BaseModel):
    """JSON error body returned with 401 and 409 responses."""

    model_config = ConfigDict(extra="ignore")

    error_summary: Annotated[str, Field(description="Machine-readable error summary")]
    # Dropbox sends either a plain string or {"locale": ..., "text": ...}
    user_message: Annotated[
        str | dict[str, Any] | None,
        Field(default=None, description="Message suitable for the end user"),
    ]
