"""Outcome of writing a record to the store."""

from enum import Enum

from pydantic import BaseModel, Field


class SubmissionStatus(str, Enum):
    """How far a write is known to have got."""

    FAILED = "failed"
    SENT = "sent"
    CONFIRMED = "confirmed"


class SubmissionResult(BaseModel):
    """Store write result. SENT means accepted by the form, not yet seen in the sheet."""

    status: SubmissionStatus
    detail: str | None = Field(default=None)

    @property
    def ok(self) -> bool:
        return self.status is not SubmissionStatus.FAILED

    @classmethod
    def failed(cls, detail: str) -> "SubmissionResult":
        return cls(status=SubmissionStatus.FAILED, detail=detail)
