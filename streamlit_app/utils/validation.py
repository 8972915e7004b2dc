"""Frontend validation utilities"""
import re
from typing import List, Tuple

# Constants
MIN_PASSWORD_LENGTH = 8

_URL_PATTERN = re.compile(r'^https?://[^\s/$.?#][^\s]*$', re.IGNORECASE)


def validate_founder_form(name: str, title: str, bio: str, image: str) -> Tuple[bool, str]:
    """
    Validate the founder form before create
    Returns: (is_valid, message)
    """
    if not all(v and v.strip() for v in (name, title, bio, image)):
        return False, "All fields including an image are required."
    return validate_image_url(image)


def validate_image_url(url: str) -> Tuple[bool, str]:
    """
    Validate an image URL
    Returns: (is_valid, message)
    """
    if not url or not url.strip():
        return False, "Image URL is required"
    if not _URL_PATTERN.match(url.strip()):
        return False, "Invalid image URL. Expected an http(s) URL"
    return True, ""


def validate_new_password(new_password: str, confirm_password: str) -> Tuple[bool, str]:
    """
    Validate a new password and its confirmation
    Returns: (is_valid, message)
    """
    if not new_password:
        return False, "New password is required"
    if len(new_password) < MIN_PASSWORD_LENGTH:
        return False, f"New password must be at least {MIN_PASSWORD_LENGTH} characters long"
    if new_password != confirm_password:
        return False, "Passwords do not match"
    return True, ""


def badges_to_text(badges: List[str]) -> str:
    """Render badges for the comma-separated input field"""
    return ", ".join(badges or [])
