from .user import User
from .checklist import Checklist, CHECKLIST_STEPS
from .portfolio import Portfolio
from .user_session import UserSession

__all__ = [
    "User",
    "Checklist",
    "CHECKLIST_STEPS",
    "Portfolio",
    "UserSession",
]
