from app.domains.identity.entities import User, Session
from app.domains.identity.schemas import UserResponse, SessionResponse, CurrentSessionResponse

__all__ = [
    "User", "Session",
    "UserResponse", "SessionResponse", "CurrentSessionResponse"
]
