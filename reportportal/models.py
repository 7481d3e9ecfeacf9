# SPDX-FileCopyrightText: 2025 Taras Paruta (partarstu@gmail.com)
#
# SPDX-License-Identifier: Apache-2.0

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Dict, Any, Union

from pydantic import Field, BaseModel, field_validator


class LaunchMode(str, Enum):
    DEFAULT = "DEFAULT"
    DEBUG = "DEBUG"


class ItemStatus(str, Enum):
    PASSED = "PASSED"
    FAILED = "FAILED"
    STOPPED = "STOPPED"
    SKIPPED = "SKIPPED"
    RESETED = "RESETED"
    CANCELLED = "CANCELLED"


class LogLevel(str, Enum):
    ERROR = "error"
    WARN = "warn"
    TRACE = "trace"
    INFO = "info"
    DEBUG = "debug"
    FATAL = "fatal"
    UNKNOWN = "unknown"


class ItemType(str, Enum):
    SUITE = "SUITE"
    STORY = "STORY"
    TEST = "TEST"
    SCENARIO = "SCENARIO"
    STEP = "STEP"
    BEFORE_CLASS = "BEFORE_CLASS"
    BEFORE_GROUPS = "BEFORE_GROUPS"
    BEFORE_METHOD = "BEFORE_METHOD"
    BEFORE_SUITE = "BEFORE_SUITE"
    BEFORE_TEST = "BEFORE_TEST"
    AFTER_CLASS = "AFTER_CLASS"
    AFTER_GROUPS = "AFTER_GROUPS"
    AFTER_METHOD = "AFTER_METHOD"
    AFTER_SUITE = "AFTER_SUITE"
    AFTER_TEST = "AFTER_TEST"


class LaunchAction(str, Enum):
    STOP = "stop"
    FINISH = "finish"


class ReportingState(str, Enum):
    """Local lifecycle state of a launch or a test item."""
    PENDING = "PENDING"
    STARTED = "STARTED"
    STOPPED = "STOPPED"
    FINISHED = "FINISHED"
    DELETED = "DELETED"


class JsonSerializableModel(BaseModel):
    """A base model that provides a JSON string representation."""

    def __str__(self) -> str:
        return self.model_dump_json(indent=2)


# Request payloads

class LaunchStartRequest(JsonSerializableModel):
    name: str
    description: str
    mode: LaunchMode
    tags: Optional[List[str]] = Field(default=None, description="Omitted from the payload when empty")
    start_time: int


class LaunchFinalizeRequest(JsonSerializableModel):
    status: ItemStatus
    end_time: int


class LaunchUpdateRequest(JsonSerializableModel):
    description: str
    mode: LaunchMode
    tags: Optional[List[str]]


class ItemParameter(JsonSerializableModel):
    key: str
    value: str


class ItemStartRequest(JsonSerializableModel):
    name: str
    description: str
    tags: Optional[List[str]]
    start_time: int
    launch_id: str
    type: ItemType
    parameters: Optional[List[ItemParameter]]


class ItemFinishRequest(JsonSerializableModel):
    end_time: int
    status: ItemStatus


class ItemUpdateRequest(JsonSerializableModel):
    description: str
    tags: Optional[List[str]]


class LogRequest(JsonSerializableModel):
    item_id: str
    message: str
    level: LogLevel
    time: int


class FileInfo(JsonSerializableModel):
    name: str


class LogWithFileRequest(JsonSerializableModel):
    """A single entry of the ``json_request_part`` array sent along with an attachment."""
    file: FileInfo
    item_id: str
    level: LogLevel
    message: str
    time: int


# Responses

class LaunchStartResponse(JsonSerializableModel):
    id: str
    number: Optional[int] = None


class ItemStartResponse(JsonSerializableModel):
    id: str
    uniqueId: Optional[str] = None


class Widget(JsonSerializableModel):
    id: str = Field(alias="widgetId")
    size: List[int] = Field(alias="widgetSize", min_length=2, max_length=2)
    position: List[int] = Field(alias="widgetPosition", min_length=2, max_length=2)


class Dashboard(JsonSerializableModel):
    owner: str
    share: bool
    id: str
    name: str
    widgets: List[Widget] = Field(default_factory=list)

    @field_validator("widgets", mode="before")
    @classmethod
    def _null_widgets_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ActivityHistory(JsonSerializableModel):
    field: str
    oldValue: Optional[str] = None
    newValue: Optional[str] = None


class ActivityContent(JsonSerializableModel):
    actionType: str
    activityId: str
    history: List[ActivityHistory] = Field(default_factory=list)
    lastModifiedDate: datetime
    loggedObjectRef: str
    objectName: str
    objectType: str
    projectRef: str
    userRef: str

    @field_validator("history", mode="before")
    @classmethod
    def _null_history_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ActivityPage(JsonSerializableModel):
    number: int
    size: int
    totalElements: int
    totalPages: int


class Activity(JsonSerializableModel):
    content: List[ActivityContent] = Field(default_factory=list)
    page: ActivityPage

    @field_validator("content", mode="before")
    @classmethod
    def _null_content_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ProjectSettings(JsonSerializableModel):
    statisticsStrategy: Optional[str] = None
    name: str = Field(alias="project")
    subTypes: Dict[str, Any] = Field(default_factory=dict)


class Attachment(BaseModel):
    """A named binary payload sent with a log entry."""

    name: str = Field(description="File name reported to the server, only its base name is used")
    data: Any = Field(description="Raw content (bytes, bytearray or text) or a binary stream to read it from")
    mime_type: Optional[str] = Field(default=None, description="Declared MIME type, guessed from the name if absent")

    @field_validator("data", mode="before")
    @classmethod
    def _check_data(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, (bytes, bytearray, memoryview)) or callable(getattr(value, "read", None)):
            return value
        raise ValueError(f"attachment data must be bytes or a binary stream, got {type(value).__name__}")

    @classmethod
    def from_file(cls, path: Union[str, Path], mime_type: Optional[str] = None) -> "Attachment":
        file_path = Path(path)
        if not file_path.is_file():
            raise RuntimeError(f"File {file_path} does not exist.")
        return cls(name=file_path.name, data=file_path.read_bytes(), mime_type=mime_type)

    def read(self) -> bytes:
        if isinstance(self.data, (bytes, bytearray, memoryview)):
            return bytes(self.data)
        content = self.data.read()
        if isinstance(content, str):
            return content.encode("utf-8")
        if not isinstance(content, (bytes, bytearray)):
            raise TypeError(f"attachment stream returned {type(content).__name__} instead of bytes")
        return bytes(content)
