# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Logging utilities for mail-attachments.

Modules obtain named loggers through :func:`get_logger`. Handlers, level
and format are configured once by the entry point (see ``cli.main``) via
``logging.basicConfig()`` so library code never installs handlers.

Example:
    Typical usage in a module::

        from mail_attachments.logger import get_logger

        logger = get_logger("DropboxFetcher")
        logger.debug("Downloading /reports/q3.pdf")
"""

import logging


def get_logger(name: str = "MailAttachments") -> logging.Logger:
    """Return the standard library logger bound to ``name``.

    Args:
        name: The logger name. Defaults to "MailAttachments".

    Returns:
        A ``logging.Logger`` instance; repeated calls return the same object.
    """
    return logging.getLogger(name)
