# SPDX-FileCopyrightText: 2025 Taras Paruta (partarstu@gmail.com)
#
# SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from typing import Optional

from reportportal.exceptions import InvalidStateError
from reportportal.models import ReportingState


class ReportingEntityBase(ABC):
    """Common lifecycle of remote ReportPortal entities which get their ID on start."""

    def __init__(self):
        self.id: Optional[str] = None
        self.state = ReportingState.PENDING

    @property
    def is_started(self) -> bool:
        return self.state == ReportingState.STARTED

    @abstractmethod
    def start(self) -> None:
        raise NotImplementedError

    def _require_state(self, operation: str, *allowed_states: ReportingState):
        if self.state not in allowed_states:
            allowed = ", ".join(state.value for state in allowed_states)
            raise InvalidStateError(f"can't {operation} {self._describe()} in state {self.state.value}, "
                                    f"expected one of: {allowed}", operation)

    def _require_id(self, operation: str):
        if not self.id or self.state == ReportingState.DELETED:
            raise InvalidStateError(f"can't {operation} {self._describe()} in state {self.state.value}, "
                                    f"it has to be started first", operation)

    def _describe(self) -> str:
        return f"{type(self).__name__} '{getattr(self, 'name', '')}'"
