"""
Authentication package for CleanCity
"""
from .authentication import (
    validate_signup,
    register_user,
    SIGNUP_SUCCESS_MESSAGE
)

__all__ = [
    'validate_signup',
    'register_user',
    'SIGNUP_SUCCESS_MESSAGE'
]
