"""Error taxonomy for the workout core."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_STATE = "invalid_state"  # Active-only call while idle, or start while active
    INVALID_INPUT = "invalid_input"  # negative / non-numeric set values
    NOT_FOUND = "not_found"  # set or exercise id unknown to the session or catalog
    PERSISTENCE = "persistence"  # gateway save failed; memory state kept


@dataclass(frozen=True)
class SessionIssue:
    """A reported (not raised) condition from the active session manager."""

    kind: ErrorKind
    message: str


class PersistenceError(Exception):
    """Saving a collection through the gateway failed. In-memory state is not rolled back."""

    def __init__(self, domain: str, cause: Exception | None = None) -> None:
        self.domain = domain
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to save {domain}{detail}")
