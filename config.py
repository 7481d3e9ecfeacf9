# SPDX-FileCopyrightText: 2025 Taras Paruta (partarstu@gmail.com)
#
# SPDX-License-Identifier: Apache-2.0

"""
Centralized configuration for the ReportPortal client.
"""

from dotenv import load_dotenv
import os

load_dotenv()

# Logging
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
GOOGLE_CLOUD_LOGGING_ENABLED = os.environ.get("GOOGLE_CLOUD_LOGGING_ENABLED", "False").lower() in ("true", "1", "t")

# ReportPortal connection
RP_ENDPOINT = os.environ.get("RP_ENDPOINT")
RP_PROJECT = os.environ.get("RP_PROJECT")
RP_TOKEN = os.environ.get("RP_TOKEN")
RP_LAUNCH = os.environ.get("RP_LAUNCH", "Python Launch")
RP_API_VERSION = int(os.environ.get("RP_API_VERSION", "1"))

# No timeout unless explicitly configured
_timeout = os.environ.get("RP_CLIENT_TIMEOUT_SECONDS")
RP_CLIENT_TIMEOUT_SECONDS = float(_timeout) if _timeout else None

DEFAULT_API_VERSION = 1
DEFAULT_MIME_TYPE = "application/octet-stream"
