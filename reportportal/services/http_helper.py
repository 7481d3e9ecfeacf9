# SPDX-FileCopyrightText: 2025 Taras Paruta (partarstu@gmail.com)
#
# SPDX-License-Identifier: Apache-2.0

from typing import Optional, Dict

import httpx

from reportportal import utils
from reportportal.exceptions import RequestBuildError, ReportPortalTransportError

logger = utils.get_logger(__name__)


def do_request(method: str, url: str, token: Optional[str], transport: Optional[httpx.BaseTransport] = None,
               timeout: Optional[float] = None, headers: Optional[Dict[str, str]] = None,
               **kwargs) -> httpx.Response:
    """
    Executes a single synchronous request with bearer authorization.

    The response body is read completely before the underlying connection is released, so the
    returned response can be inspected freely. A failure to build or send the request is raised
    before any response exists.

    Args:
        method: HTTP method (GET, POST, PUT, DELETE)
        url: Fully qualified request URL
        token: Bearer token, the Authorization header is only set when it's not empty
        transport: Optional httpx transport, e.g. a mock transport in tests
        timeout: Timeout in seconds, None means waiting indefinitely
        headers: Additional request headers
        **kwargs: Additional arguments passed to httpx (json, content, files, ...)

    Returns:
        The received response, regardless of its status code.

    Raises:
        RequestBuildError: If the request can't be built.
        ReportPortalTransportError: If the request couldn't be executed.
    """
    request_headers = dict(headers or {})
    if token:
        request_headers["Authorization"] = f"Bearer {token}"

    with httpx.Client(transport=transport, timeout=timeout) as client:
        try:
            request = client.build_request(method, url, headers=request_headers, **kwargs)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            logger.error(f"Can't create {method} request for {url}: {e}")
            raise RequestBuildError(f"can't create {method} request for {url}: {e}", url=url) from e
        try:
            response = client.send(request)
        except httpx.HTTPError as e:
            logger.error(f"Failed to execute {method} request {url}: {e}")
            raise ReportPortalTransportError(f"failed to execute {method} request {url}: {e}", url=url) from e
    logger.debug(f"{method} {url} responded with status {response.status_code}")
    return response
