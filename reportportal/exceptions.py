# SPDX-FileCopyrightText: 2025 Taras Paruta (partarstu@gmail.com)
#
# SPDX-License-Identifier: Apache-2.0

from typing import Optional


class ReportPortalError(Exception):
    """Base exception for all ReportPortal client errors."""

    def __init__(self, message: str, operation: Optional[str] = None, url: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.url = url


class RequestBuildError(ReportPortalError):
    """Raised when a request payload can't be marshalled or the request can't be built."""

    pass


class ReportPortalTransportError(ReportPortalError):
    """Raised when a request fails before any response is received (DNS, connect, TLS, timeout)."""

    pass


class UnexpectedStatusError(ReportPortalError):
    """Raised when the server answers with a status code other than the expected one."""

    def __init__(self, status_code: int, reason_phrase: str, operation: Optional[str] = None,
                 url: Optional[str] = None):
        super().__init__(f"failed with status {status_code} {reason_phrase}", operation, url)
        self.status_code = status_code
        self.reason_phrase = reason_phrase


class ResponseDecodeError(ReportPortalError):
    """Raised when a response body is not valid JSON or doesn't have the expected shape."""

    pass


class InvalidStateError(ReportPortalError):
    """Raised when a launch or test item operation is called out of its lifecycle order."""

    pass
