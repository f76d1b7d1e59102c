"""
Generation requests and results exchanged with the generative backend.
"""
from dataclasses import dataclass
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from call_assist.core.exceptions import GenerativeBackendError
from call_assist.models.customer import CustomerRecord


class ScriptRequest(BaseModel):
    """Request for a collections call script."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["script"] = "script"
    customer: CustomerRecord


class SummaryRequest(BaseModel):
    """Request to summarize an agent's call notes."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["summary"] = "summary"
    customer: CustomerRecord
    notes: str


GenerationRequest = Annotated[
    Union[ScriptRequest, SummaryRequest], Field(discriminator="kind")
]


class SummaryResult(BaseModel):
    """Structured call summary. Both fields are always populated."""
    model_config = ConfigDict(frozen=True)

    summary: str = Field(..., min_length=1)
    next_action: str = Field(..., min_length=1)


@dataclass(frozen=True)
class BackendResult:
    """Outcome of one backend invocation: raw reply text or an error."""

    text: Optional[str] = None
    error: Optional[GenerativeBackendError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "BackendResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: GenerativeBackendError) -> "BackendResult":
        return cls(error=error)
