"""
Account sign-up for CleanCity
Passwords are kept as entered; there is no login step yet
"""
import re
from typing import Tuple, Optional

from database.models import UserRepository

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")

SIGNUP_SUCCESS_MESSAGE = "Account created! You can now log in and report issues."


def validate_signup(name: str, email: str, password: str) -> Optional[str]:
    """
    Check the sign-up form fields

    Returns:
        Error message, or None when the input is acceptable
    """
    if not all([(name or "").strip(), (email or "").strip(), password]):
        return "All fields are required"
    if not EMAIL_PATTERN.match(email.strip()):
        return "Please enter a valid email address"
    return None


def register_user(users: UserRepository, name: str, email: str,
                  password: str) -> Tuple[bool, Optional[str]]:
    """
    Register a new user account

    Args:
        users: User repository to add the account to
        name: Full name of the user
        email: Email address, unique regardless of letter case
        password: Password, stored as entered

    Returns:
        Tuple of (success: bool, error_message: str or None)
    """
    error_msg = validate_signup(name, email, password)
    if error_msg:
        return False, error_msg

    success, _user, error_msg = users.register(
        name=name.strip(),
        email=email.strip(),
        password=password
    )
    return success, error_msg
