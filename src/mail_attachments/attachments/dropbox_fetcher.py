# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Dropbox attachment source.

This module downloads a single file through the Dropbox API v2
``files/download`` endpoint and turns it into an :class:`AttachmentSource`.
The file path travels as JSON in the ``Dropbox-API-Arg`` request header;
file metadata comes back in the ``Dropbox-API-Result`` response header and
the file content is the response body.

Example:
    Attaching a file stored in Dropbox::

        source = DropboxAttachmentSource(access_token, "/reports/q3.pdf")
        attachment = await source.get_attachment()

        # or, as a one-shot call
        attachment = await fetch(access_token, "/reports/q3.pdf")
"""

from __future__ import annotations

import json

import aiohttp

from mail_attachments.logger import get_logger

from .base import AttachmentSourceBase
from .errors import (
    AuthError,
    DropboxError,
    NotFoundError,
    RateLimitError,
    RequestError,
    ServiceError,
)
from .models import (
    AttachmentSource,
    FileDownloadArgument,
    SuccessfulFileDownloadResponse,
    UnsuccessfulFileDownloadResponse,
)

DOWNLOAD_ENDPOINT = "https://content.dropboxapi.com/2/files/download"
API_VERSION = 2

API_ARG_HEADER = "Dropbox-API-Arg"
API_RESULT_HEADER = "Dropbox-API-Result"

logger = get_logger("DropboxFetcher")


def encode_api_arg(argument: FileDownloadArgument) -> str:
    """Serialize an API argument for use as an HTTP header value.

    The result is compact single-line JSON. Non-ASCII characters and DEL
    are escaped as ``\\uXXXX`` because Dropbox only accepts ASCII there.

    Args:
        argument: The argument model to serialize.

    Returns:
        The JSON string to send in ``Dropbox-API-Arg``.
    """
    encoded = json.dumps(argument.model_dump(), separators=(",", ":"), ensure_ascii=True)
    return encoded.replace("\x7f", "\\u007f")


class DropboxAttachmentSource(AttachmentSourceBase):
    """Attach a file from a Dropbox folder.

    Each call to :meth:`get_attachment` performs exactly one authenticated
    download in its own HTTP session. The instance holds no mutable state,
    so it can be awaited concurrently or reused.

    Attributes:
        _access_token: OAuth2 access token used as bearer credential.
        _file_path: Path of the file in Dropbox.
        _endpoint: Download URL.
    """

    def __init__(
        self,
        access_token: str,
        file_path: str,
        endpoint: str = DOWNLOAD_ENDPOINT,
    ):
        """Initialize the source.

        Args:
            access_token: Dropbox access token.
            file_path: Path of the file to download, e.g. "/docs/report.pdf".
            endpoint: Download URL override; defaults to the public API.
        """
        self._access_token = access_token
        self._file_path = file_path
        self._endpoint = endpoint

    @property
    def endpoint(self) -> str:
        """The Dropbox download endpoint."""
        return self._endpoint

    @property
    def api_version(self) -> int:
        """The Dropbox API version spoken by this source."""
        return API_VERSION

    @property
    def file_path(self) -> str:
        """The requested Dropbox path."""
        return self._file_path

    def _build_headers(self) -> dict[str, str]:
        argument = FileDownloadArgument(path=self._file_path)
        return {
            "Authorization": f"Bearer {self._access_token}",
            API_ARG_HEADER: encode_api_arg(argument),
        }

    async def get_attachment(self) -> AttachmentSource:
        """Download the file and return it as an attachment.

        Returns:
            AttachmentSource with name and size taken from the
            ``Dropbox-API-Result`` header when present, otherwise from the
            path's last segment and the body length. ``content_type`` is
            always empty.

        Raises:
            RequestError: On 400, with the raw response body as message.
            AuthError: On 401, with the error summary as message.
            NotFoundError: On 409, the file does not exist at the path.
            RateLimitError: On 429.
            ServiceError: On any other non-success status.
            pydantic.ValidationError: If a metadata header or error body
                cannot be parsed.
            aiohttp.ClientError: If the request itself fails.
        """
        logger.debug(f"Downloading Dropbox file {self._file_path}")

        async with aiohttp.ClientSession() as session:
            async with session.post(self._endpoint, headers=self._build_headers()) as response:
                if 200 <= response.status < 300:
                    content = await response.read()
                    raw_result = response.headers.get(API_RESULT_HEADER)
                    return self._build_attachment(content, raw_result)

                body = await response.read()
                error = self._classify_error(response.status, body)

        logger.warning(
            f"Dropbox download of {self._file_path} failed: "
            f"HTTP {response.status} {type(error).__name__}: {error.message}"
        )
        raise error

    def _build_attachment(self, content: bytes, raw_result: str | None) -> AttachmentSource:
        """Combine body and optional metadata header into the result."""
        # Text after the last "/"; a path ending in "/" yields an empty name
        file_name = self._file_path.rsplit("/", 1)[-1]
        size = len(content)

        if raw_result:
            metadata = SuccessfulFileDownloadResponse.model_validate_json(raw_result)
            if metadata.name is not None:
                file_name = metadata.name
            if metadata.size is not None:
                size = metadata.size

        logger.debug(f"Downloaded {file_name} ({size} bytes) from Dropbox")
        return AttachmentSource(
            file_name=file_name,
            content_type="",
            content=content,
            size=size,
        )

    @staticmethod
    def _classify_error(status: int, body: bytes) -> DropboxError:
        """Map a failed response to its error class.

        The body is only decoded for the statuses whose message comes from
        it, so undecodable bodies never mask the classification.

        Args:
            status: HTTP status code of the response.
            body: Raw response body.

        Returns:
            The error to raise.
        """
        if status == 400:
            return RequestError(body.decode("utf-8", errors="replace"))

        if status in (401, 409):
            api_error = UnsuccessfulFileDownloadResponse.model_validate_json(body)
            if status == 409:
                return NotFoundError(api_error.error_summary)
            return AuthError(api_error.error_summary)

        if status == 429:
            return RateLimitError()

        return ServiceError()


async def fetch(
    access_token: str,
    file_path: str,
    endpoint: str = DOWNLOAD_ENDPOINT,
) -> AttachmentSource:
    """Download one Dropbox file as an attachment.

    Shortcut for ``DropboxAttachmentSource(access_token, file_path).get_attachment()``.

    Args:
        access_token: Dropbox access token.
        file_path: Path of the file in Dropbox.
        endpoint: Download URL override.

    Returns:
        The downloaded attachment.
    """
    source = DropboxAttachmentSource(access_token, file_path, endpoint=endpoint)
    return await source.get_attachment()
