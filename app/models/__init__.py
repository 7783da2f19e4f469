from .user import User, AuthSession
from .profile import Profile
from .assessment_result import AssessmentResult
from .decision_log import DecisionLog
from .automation import Automation

__all__ = [
    "User",
    "AuthSession",
    "Profile",
    "AssessmentResult",
    "DecisionLog",
    "Automation",
]
