from typing import Optional

from email_validator import validate_email, EmailNotValidError 

def validate_name(name: str) -> tuple[bool, str]:
    """Account name: non-empty after trimming, at most 100 characters."""
    name = name.strip()
    if not name:
        return False, "Enter a valid name"
    if len(name) > 100:
        return False, "Name cannot be longer than 100 characters"
    return True, ""

def validate_password(password: str) -> tuple[bool, str]:
    if len(password) < 5:
        return False, "Password must contain at least 5 characters"
    if len(password) > 128:
        return False, "Password is too long"
    return True, ""

def normalize_and_validated_email(email: str) -> Optional[str]:
    try:
        validated = validate_email(email.strip(), check_deliverability=False)
        return validated.normalized.lower()
    except EmailNotValidError:
        return None
