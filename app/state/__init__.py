# app/state - Session state management
from .session import (
    LiftBrief,
    get_brief,
    update_brief,
    reset_brief,
)

__all__ = [
    'LiftBrief',
    'get_brief',
    'update_brief',
    'reset_brief',
]
