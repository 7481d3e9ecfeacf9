# SPDX-FileCopyrightText: 2025 Taras Paruta (partarstu@gmail.com)
#
# SPDX-License-Identifier: Apache-2.0

from typing import List, Optional, Type, TypeVar, Any, Union

import httpx
from pydantic import BaseModel, TypeAdapter

import config
from reportportal import utils
from reportportal.exceptions import (UnexpectedStatusError, ResponseDecodeError, RequestBuildError,
                                     ReportPortalTransportError)
from reportportal.models import Dashboard, Activity, ProjectSettings
from reportportal.services.http_helper import do_request

JSON_HEADERS = {"Content-Type": "application/json"}

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = utils.get_logger(__name__)


class Client:
    """
    A client for the ReportPortal REST API.

    Holds the endpoint, project and token every launch and test item bound to it uses.
    """

    def __init__(self, endpoint: str, project: str, token: str, api_version: int = config.DEFAULT_API_VERSION,
                 timeout: Optional[float] = None, transport: Optional[httpx.BaseTransport] = None):
        """
        Initializes the Client.

        Args:
            endpoint: ReportPortal host or URL, normalized into a versioned API base URL
            project: Project name used as a namespace segment in every project URL
            token: Bearer token of the ReportPortal user
            api_version: API version appended when the endpoint doesn't name one, values below 1 mean 1
            timeout: Request timeout in seconds, None means no timeout
            transport: Optional httpx transport used for every request
        """
        self.endpoint = utils.normalize_endpoint(endpoint, api_version)
        self.project = project
        self.token = token
        self.timeout = timeout
        self.transport = transport
        logger.debug(f"ReportPortal endpoint: {self.endpoint}, project: {self.project}")

    def project_url(self, *segments: str) -> str:
        return "/".join([self.endpoint, self.project, *segments])

    def check_connect(self) -> None:
        url = f"{self.endpoint}/user"
        logger.info(f"Checking connection to {url}")
        self.execute("check connection", "GET", url, httpx.codes.OK)
        logger.info("Connection to ReportPortal is established.")

    def get_dashboard(self) -> List[Dashboard]:
        url = self.project_url("dashboard")
        logger.info(f"Fetching dashboards of project {self.project}")
        response = self.execute("get dashboard", "GET", url, httpx.codes.OK, headers=JSON_HEADERS)
        return self.decode(response, TypeAdapter(List[Dashboard]), "get dashboard", url)

    def get_activity(self) -> Activity:
        url = self.project_url("activity")
        logger.info(f"Fetching activity of project {self.project}")
        response = self.execute("get activity", "GET", url, httpx.codes.OK, headers=JSON_HEADERS)
        return self.decode(response, Activity, "get activity", url)

    def get_project_settings(self) -> ProjectSettings:
        url = self.project_url("settings")
        logger.info(f"Fetching settings of project {self.project}")
        response = self.execute("get project settings", "GET", url, httpx.codes.OK, headers=JSON_HEADERS)
        return self.decode(response, ProjectSettings, "get project settings", url)

    def execute(self, operation: str, method: str, url: str, expected_status: int, **kwargs) -> httpx.Response:
        """
        Executes one request against ReportPortal and verifies its status code.

        Args:
            operation: Human-readable operation name used in error reports
            method: HTTP method
            url: Fully qualified request URL
            expected_status: The only status code treated as success
            **kwargs: Additional arguments passed to the request helper

        Returns:
            The response with the expected status code.

        Raises:
            ReportPortalError: If the request fails or the status code doesn't match.
        """
        try:
            response = do_request(method, url, self.token, transport=self.transport, timeout=self.timeout, **kwargs)
        except (RequestBuildError, ReportPortalTransportError) as e:
            cause = e.__cause__ or e
            logger.error(f"Failed to {operation} at {url}: {cause}")
            raise type(e)(f"failed to {operation} at {url}: {cause}", operation, url) from cause
        if response.status_code != expected_status:
            error = UnexpectedStatusError(response.status_code, response.reason_phrase, operation, url)
            logger.error(f"Failed to {operation} at {url}: {error}")
            if response.content:
                logger.debug(f"Error response: {response.text}")
            raise error
        return response

    @staticmethod
    def build_payload(model: Type[ModelT], operation: str, url: str, exclude_none: bool = False, **fields) -> Any:
        """Validates the request fields against the payload model and returns its JSON-ready form."""
        try:
            return model(**fields).model_dump(mode="json", exclude_none=exclude_none)
        except ValueError as e:
            logger.error(f"Failed to marshal {operation} request for {url}: {e}")
            raise RequestBuildError(f"failed to marshal {operation} request for {url}: {e}", operation, url) from e

    @staticmethod
    def decode(response: httpx.Response, model: Union[Type[ModelT], TypeAdapter], operation: str, url: str):
        try:
            data = response.json()
            if isinstance(model, TypeAdapter):
                return model.validate_python(data)
            return model.model_validate(data)
        except ValueError as e:
            logger.error(f"Failed to decode response from {url}: {e}")
            raise ResponseDecodeError(f"failed to decode {operation} response from {url}: {e}", operation, url) from e
