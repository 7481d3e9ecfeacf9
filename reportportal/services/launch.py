# SPDX-FileCopyrightText: 2025 Taras Paruta (partarstu@gmail.com)
#
# SPDX-License-Identifier: Apache-2.0

from datetime import datetime, timezone
from typing import List, Optional

import httpx

from reportportal import utils
from reportportal.models import (LaunchMode, ItemStatus, LaunchAction, ReportingState, LaunchStartRequest,
                                 LaunchStartResponse, LaunchFinalizeRequest, LaunchUpdateRequest)
from reportportal.services.client import Client, JSON_HEADERS
from reportportal.services.reporting_entity_base import ReportingEntityBase

logger = utils.get_logger(__name__)


class Launch(ReportingEntityBase):
    """
    A single test run reported to ReportPortal.

    The launch gets its ID from the server on start, every further call addresses it by that ID.
    """

    def __init__(self, client: Client, name: str, description: str = "", mode: LaunchMode = LaunchMode.DEFAULT,
                 tags: Optional[List[str]] = None):
        super().__init__()
        self.client = client
        self.name = name
        self.description = description
        self.mode = mode
        self.tags = list(tags) if tags else []
        self.number: Optional[int] = None
        self.start_time: Optional[datetime] = None

    def start(self) -> None:
        self._require_state("start", ReportingState.PENDING)
        url = self.client.project_url("launch")
        logger.info(f"Starting launch '{self.name}' at {url}")
        start_time = datetime.now(timezone.utc)
        payload = self.client.build_payload(LaunchStartRequest, "start launch", url, exclude_none=True,
                                            name=self.name, description=self.description, mode=self.mode,
                                            tags=self.tags or None, start_time=utils.to_timestamp(start_time))
        response = self.client.execute("start launch", "POST", url, httpx.codes.CREATED, json=payload,
                                       headers=JSON_HEADERS)
        launch_info = self.client.decode(response, LaunchStartResponse, "start launch", url)
        self.id = launch_info.id
        self.number = launch_info.number
        self.start_time = start_time
        self.state = ReportingState.STARTED
        logger.info(f"Launch '{self.name}' started with ID: {self.id}")

    def stop(self, status: ItemStatus) -> None:
        self._finalize(status, LaunchAction.STOP)

    def finish(self, status: ItemStatus) -> None:
        self._finalize(status, LaunchAction.FINISH)

    def update(self, description: str, mode: LaunchMode, tags: Optional[List[str]]) -> None:
        """Updates the launch on the server, local fields are left as they are."""
        self._require_id("update")
        url = self.client.project_url("launch", self.id, "update")
        logger.info(f"Updating launch {self.id}")
        payload = self.client.build_payload(LaunchUpdateRequest, "update launch", url,
                                            description=description, mode=mode, tags=tags)
        self.client.execute("update launch", "PUT", url, httpx.codes.OK, json=payload, headers=JSON_HEADERS)
        logger.info(f"Successfully updated launch {self.id}.")

    def delete(self) -> None:
        self._require_id("delete")
        url = self.client.project_url("launch", self.id)
        logger.info(f"Deleting launch {self.id}")
        self.client.execute("delete launch", "DELETE", url, httpx.codes.OK, headers=JSON_HEADERS)
        self.state = ReportingState.DELETED
        logger.info(f"Successfully deleted launch {self.id}.")

    def _finalize(self, status: ItemStatus, action: LaunchAction):
        operation = f"{action.value} launch"
        self._require_state(operation, ReportingState.STARTED)
        url = self.client.project_url("launch", self.id, action.value)
        payload = self.client.build_payload(LaunchFinalizeRequest, operation, url, status=status,
                                            end_time=utils.to_timestamp(datetime.now(timezone.utc)))
        logger.info(f"Trying to {operation} {self.id} with status {payload['status']}")
        self.client.execute(operation, "PUT", url, httpx.codes.OK, json=payload, headers=JSON_HEADERS)
        self.state = ReportingState.STOPPED if action == LaunchAction.STOP else ReportingState.FINISHED
        logger.info(f"Launch {self.id} is {self.state.value.lower()}.")
