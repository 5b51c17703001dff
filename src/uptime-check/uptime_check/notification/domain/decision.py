"""Decision: what the notification gate concluded for one check result."""

from enum import StrEnum

from pydantic import BaseModel, Field


class Decision(StrEnum):
    NO_ACTION = "no_action"
    SUPPRESSED = "suppressed"
    NOTIFY = "notify"
    BLOCKED = "blocked"


class DispatchResult(BaseModel, frozen=True):
    """Outcome of NotificationGate.dispatch.

    ``delivered`` is True only when the decision was NOTIFY and the notifier
    accepted the message. ``missing_fields`` is populated for BLOCKED.
    """

    decision: Decision
    delivered: bool = False
    missing_fields: list[str] = Field(default_factory=list)
