"""Data models for the contact relay."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


class SendStatus(str, Enum):
    """Status of a single provider attempt."""

    SUCCESS = "success"
    FAILED = "failed"


class DispatchStatus(str, Enum):
    """Aggregate outcome of a dispatch."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    NO_PROVIDER = "no_provider"


@dataclass(frozen=True)
class Submission:
    """A validated contact-form entry."""

    name: str
    email: str
    message: str


@dataclass(frozen=True)
class RenderedMessage:
    """Subject and bodies derived from a submission."""

    subject: str
    text_body: str
    html_body: str


@dataclass
class SendResult:
    """Result of one provider attempt."""

    provider: str
    status: SendStatus
    message_id: Optional[str] = None
    error_reason: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def ok(self) -> bool:
        return self.status == SendStatus.SUCCESS


@dataclass
class DispatchResult:
    """Outcome of running a message through the provider chain."""

    status: DispatchStatus
    provider: Optional[str] = None
    attempts: List[SendResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == DispatchStatus.SUCCEEDED
