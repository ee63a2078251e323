"""Domain models (Pydantic v2).

Why Pydantic here:
- Validation at the edge of the client (config arrives as user input).
- `ActionResult` serializes to the exact `{status, error, results, metadata}`
  shape callers of the API client rely on.

Note:
- These models describe *what* a call produced, not *how* it was made.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

DEFAULT_BASE_URL = "https://api-lr.agent.ai/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0
UNKNOWN_ERROR = "Unknown error"


class ActionErrorKind(str, Enum):
    """Why an action did not produce results."""

    INVALID_ACTION = "invalid_action"
    REMOTE = "remote"
    TRANSPORT = "transport"


class ClientConfig(BaseModel):
    """Connection settings for `AgentAiClient`.

    Extra headers are merged *over* `Authorization` and `Content-Type`, so a
    caller can replace either one on purpose.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="API root; action paths are appended to it.",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Additional headers sent with every request.",
    )


class ActionResult(BaseModel):
    """Normalized outcome of one action call.

    Exactly one side is meaningful: `results`/`metadata` on success, `error`
    on failure. All four fields are always present.

    `error_kind` tags the failure path and is left out of `model_dump()`.
    """

    model_config = ConfigDict(frozen=True)

    status: int = Field(..., description="HTTP status (or 400/500 for local failures).")
    error: str | None = Field(default=None, description="Error message, None on success.")
    results: Any | None = Field(default=None, description="`response` field of the body.")
    metadata: Any | None = Field(default=None, description="`metadata` field of the body.")
    error_kind: ActionErrorKind | None = Field(default=None, exclude=True)

    @property
    def ok(self) -> bool:
        return self.error_kind is None and 200 <= self.status < 300

    @classmethod
    def success(cls, status: int, *, results: Any = None, metadata: Any = None) -> "ActionResult":
        return cls(status=status, error=None, results=results, metadata=metadata)

    @classmethod
    def invalid_action(cls, action_id: object) -> "ActionResult":
        return cls(
            status=400,
            error=f"Invalid action_id: {action_id}",
            error_kind=ActionErrorKind.INVALID_ACTION,
        )

    @classmethod
    def remote_error(cls, status: int, message: str) -> "ActionResult":
        return cls(status=status, error=message, error_kind=ActionErrorKind.REMOTE)

    @classmethod
    def transport_error(cls, message: str | None) -> "ActionResult":
        return cls(status=500, error=message or UNKNOWN_ERROR, error_kind=ActionErrorKind.TRANSPORT)
