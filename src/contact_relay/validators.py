"""Validation and sanitization of raw contact-form fields."""

import logging
import re
from typing import Any, Mapping

from .exceptions import RejectedInputError
from .models import Submission

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 200
MESSAGE_MAX_LENGTH = 5000
DEFAULT_MAX_LENGTH = 10000

# Minimal address shape: local@domain.tld, no whitespace, exactly one "@".
EMAIL_SHAPE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def sanitize(value: Any, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Trim and truncate a string field.

    Args:
        value: Raw field value, possibly missing or of the wrong type
        max_length: Maximum number of characters kept after trimming

    Returns:
        The cleaned string, or an empty string for non-string input
    """
    if not isinstance(value, str):
        return ""
    return value.strip()[: max_length or DEFAULT_MAX_LENGTH]


def validate_email_shape(value: Any) -> bool:
    """Check that a value looks like an email address.

    This is intentionally loose and is not RFC 5322 validation.
    """
    return EMAIL_SHAPE.fullmatch(str(value).strip()) is not None


def clean_email(value: Any) -> str:
    """Trim the email field without truncating it."""
    if not value:
        return ""
    return str(value).strip()


def validate_submission(data: Mapping[str, Any]) -> Submission:
    """Turn raw request fields into a Submission.

    Checks run in a fixed order and the first failure wins:
    name, email presence, email shape, message.

    Args:
        data: Mapping with ``nom``, ``email`` and ``message`` keys

    Returns:
        Validated submission

    Raises:
        RejectedInputError: If any check fails
    """
    name = sanitize(data.get("nom"), NAME_MAX_LENGTH)
    email = clean_email(data.get("email"))
    message = sanitize(data.get("message"), MESSAGE_MAX_LENGTH)

    if not name:
        raise RejectedInputError("nom")
    if not email:
        raise RejectedInputError("email")
    if not validate_email_shape(email):
        raise RejectedInputError("email", "malformed")
    if not message:
        raise RejectedInputError("message")

    return Submission(name=name, email=email, message=message)
