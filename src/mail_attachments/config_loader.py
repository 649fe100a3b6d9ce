# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Configuration loader for Dropbox settings.

This module loads the Dropbox access token and download endpoint from an
INI-style configuration file or from environment variables.

Example:
    Configuration file format (config.ini)::

        [dropbox]
        access_token = sl.B0a1...
        endpoint = https://content.dropboxapi.com/2/files/download

    Loading the configuration::

        config = load_dropbox_config("/etc/mail-attachments/config.ini")
        attachment = await fetch(config.access_token, "/docs/report.pdf",
                                 endpoint=config.endpoint)
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from mail_attachments.attachments.dropbox_fetcher import DOWNLOAD_ENDPOINT
from mail_attachments.logger import get_logger

ENV_ACCESS_TOKEN = "MAIL_ATTACHMENTS_DROPBOX_TOKEN"
ENV_ENDPOINT = "MAIL_ATTACHMENTS_DROPBOX_ENDPOINT"


@dataclass
class DropboxConfig:
    """Configuration for the Dropbox attachment source.

    Attributes:
        access_token: Dropbox access token, None when not configured.
        endpoint: Download endpoint URL.
    """

    access_token: str | None = None
    endpoint: str = DOWNLOAD_ENDPOINT

    @property
    def enabled(self) -> bool:
        """Check if Dropbox downloads are possible (token configured)."""
        return bool(self.access_token)


logger = get_logger("config_loader")


def load_dropbox_config(config_path: str | None = None) -> DropboxConfig:
    """Load Dropbox configuration from config file or environment.

    Priority: config file > environment variables > defaults. Blank values
    are treated as missing.

    Environment variables:
        MAIL_ATTACHMENTS_DROPBOX_TOKEN: Dropbox access token
        MAIL_ATTACHMENTS_DROPBOX_ENDPOINT: Download endpoint URL

    Args:
        config_path: Optional path to config.ini file

    Returns:
        DropboxConfig with parsed settings, using defaults for missing values.
    """
    config_values: dict = {
        "access_token": os.environ.get(ENV_ACCESS_TOKEN, "").strip() or None,
        "endpoint": os.environ.get(ENV_ENDPOINT, "").strip() or DOWNLOAD_ENDPOINT,
    }

    if config_path:
        if not Path(config_path).exists():
            logger.warning(f"Config file {config_path} not found, using environment")
        else:
            config = configparser.ConfigParser()
            config.read(config_path)

            if config.has_section("dropbox"):
                def get_str(key: str, default: str | None) -> str | None:
                    value = config.get("dropbox", key, fallback=None)
                    return value.strip() if value and value.strip() else default

                config_values["access_token"] = get_str("access_token", config_values["access_token"])
                config_values["endpoint"] = get_str("endpoint", config_values["endpoint"])

    return DropboxConfig(**config_values)
