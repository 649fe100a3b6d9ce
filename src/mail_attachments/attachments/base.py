# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Base protocol for attachment sources.

An attachment source knows where a single file lives and how to retrieve
it. The email-composition side only depends on this interface, so new
backends can be plugged in without touching the consumer.
"""

from __future__ import annotations

from .models import AttachmentSource


class AttachmentSourceBase:
    """Abstract base class defining the attachment source interface.

    Concrete sources are configured at construction time with everything
    needed to locate the file and implement :meth:`get_attachment`.
    """

    async def get_attachment(self) -> AttachmentSource:
        """Retrieve the attachment.

        Returns:
            The normalized attachment, ready to be added to a message.

        Raises:
            NotImplementedError: If called on the base class directly.
        """
        raise NotImplementedError
