# SPDX-FileCopyrightText: 2025 Taras Paruta (partarstu@gmail.com)
#
# SPDX-License-Identifier: Apache-2.0

import logging
import math
import mimetypes
from datetime import datetime
from pathlib import Path
from typing import Optional

import config

logging_initialized = False

HTTP_SCHEMES = ("http://", "https://")
API_VERSION_MARKER = "/api/v"


def _initialize_logging():
    global logging_initialized
    if config.GOOGLE_CLOUD_LOGGING_ENABLED:
        import google.cloud.logging
        client = google.cloud.logging.Client()
        client.setup_logging()
    else:
        logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    logging_initialized = True


def get_logger(name):
    if not logging_initialized:
        _initialize_logging()
    log_level = config.LOG_LEVEL
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    return logger


def to_timestamp(moment: datetime) -> int:
    """
    Converts a datetime into the integer timestamp the ReportPortal API expects.

    Whole Unix seconds are scaled by 1000, so sub-second precision is dropped:
    2019-01-01T00:00:00Z becomes 1546300800000. Naive datetimes are treated as local time.
    """
    return math.floor(moment.timestamp()) * 1000


def normalize_endpoint(endpoint: str, api_version: int = config.DEFAULT_API_VERSION) -> str:
    """
    Normalizes a ReportPortal endpoint into a versioned API base URL.

    Trailing slashes are stripped, ``https://`` is prepended when no scheme is present and
    ``/api/v{api_version}`` is appended unless the endpoint already names an API version.
    Versions lower than 1 fall back to 1. Applying it to its own output changes nothing.
    """
    endpoint = endpoint.rstrip("/")
    if api_version < 1:
        api_version = config.DEFAULT_API_VERSION
    if not endpoint.lower().startswith(HTTP_SCHEMES):
        endpoint = f"https://{endpoint}"
    if API_VERSION_MARKER not in endpoint:
        endpoint = f"{endpoint}{API_VERSION_MARKER}{api_version}"
    return endpoint


def guess_mime_type(file_name: str, declared_mime_type: Optional[str] = None) -> str:
    if declared_mime_type:
        return declared_mime_type
    mime_type, _ = mimetypes.guess_type(Path(file_name).name)
    return mime_type or config.DEFAULT_MIME_TYPE
