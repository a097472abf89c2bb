"""
PickleCoach API Module

FastAPI routes and session state for stroke comparison.
"""

from .routes import router
from .session import session, AnalysisSession

__all__ = [
    "router",
    "session",
    "AnalysisSession",
]
