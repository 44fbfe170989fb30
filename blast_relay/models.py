from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

TICKET_PATTERN = re.compile(r"^[A-Z0-9\-]+$")


class SequenceRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sequence: str = Field(min_length=1)


@dataclass(frozen=True, slots=True)
class Ticket:
    """Opaque BLAST request id (RID) issued for one submission."""

    rid: str

    def __post_init__(self) -> None:
        if not TICKET_PATTERN.match(self.rid):
            raise ValueError(f"invalid RID: {self.rid!r}")

    def __str__(self) -> str:
        return self.rid


class PollStatus(str, Enum):
    ready = "ready"
    waiting = "waiting"
    transport_error = "transport_error"


@dataclass(slots=True)
class PollOutcome:
    status: PollStatus
    body: str = ""
    error: Exception | None = None

    @classmethod
    def ready(cls, body: str) -> PollOutcome:
        return cls(status=PollStatus.ready, body=body)

    @classmethod
    def waiting(cls, body: str) -> PollOutcome:
        return cls(status=PollStatus.waiting, body=body)

    @classmethod
    def failed(cls, error: Exception) -> PollOutcome:
        return cls(status=PollStatus.transport_error, error=error)


@dataclass(slots=True)
class RelayResponse:
    status_code: int
    body: str
    media_type: str = "text/plain"
