from app.domains.sessions.entities import ActionResult, EditingSession, SessionRegistry
from app.domains.sessions.schemas import SessionStateResponse
from app.domains.sessions.services import SessionService

__all__ = [
    "ActionResult", "EditingSession", "SessionRegistry",
    "SessionStateResponse",
    "SessionService"
]
