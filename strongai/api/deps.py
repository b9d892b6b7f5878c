"""Request dependencies: the application-wide state owners live on ``app.state``."""

from fastapi import HTTPException, Request

from strongai.core.config import Settings
from strongai.core.errors import ErrorKind
from strongai.services.rest_timer import RestTimer
from strongai.services.session_manager import ActiveSessionManager
from strongai.services.store import FitnessStore

ISSUE_STATUS = {
    ErrorKind.INVALID_STATE: 409,
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PERSISTENCE: 503,
}


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> FitnessStore:
    return request.app.state.store


def get_manager(request: Request) -> ActiveSessionManager:
    return request.app.state.manager


def get_timer(request: Request) -> RestTimer:
    return request.app.state.timer


def issue_exception(manager: ActiveSessionManager) -> HTTPException:
    """HTTP error for the manager's last reported issue."""
    issue = manager.last_issue
    if issue is None:
        return HTTPException(status_code=409, detail="Request could not be applied")
    return HTTPException(status_code=ISSUE_STATUS[issue.kind], detail=issue.message)
