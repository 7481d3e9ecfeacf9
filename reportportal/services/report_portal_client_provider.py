# SPDX-FileCopyrightText: 2025 Taras Paruta (partarstu@gmail.com)
#
# SPDX-License-Identifier: Apache-2.0

from typing import Optional

import config
from reportportal.services.client import Client


def get_report_portal_client(endpoint: Optional[str] = None, project: Optional[str] = None,
                             token: Optional[str] = None) -> Client:
    endpoint = endpoint or config.RP_ENDPOINT
    if not endpoint:
        raise ValueError("RP_ENDPOINT is not configured in config.py or environment variables.")
    project = project or config.RP_PROJECT
    if not project:
        raise ValueError("RP_PROJECT is not configured in config.py or environment variables.")
    token = token or config.RP_TOKEN
    if not token:
        raise ValueError("RP_TOKEN is not configured in config.py or environment variables.")
    return Client(endpoint, project, token, api_version=config.RP_API_VERSION,
                  timeout=config.RP_CLIENT_TIMEOUT_SECONDS)
