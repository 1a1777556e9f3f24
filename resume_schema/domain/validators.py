"""Pure syntax validators for date, e-mail and URL fields.

Every function accepts ``None`` (all such fields are optional) and either
returns quietly or raises a :class:`~resume_schema.errors.ValidationError`
subclass naming the first rule the value broke.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError
from email_validator.syntax import validate_email_local_part
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as _UrlParseError

from ..errors import (
    EmptyEmail,
    EmptyUrl,
    InvalidDate,
    InvalidDateFormat,
    InvalidDomain,
    InvalidFormat,
    InvalidScheme,
    TooLong,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_DOMAIN_PATTERN = re.compile(r"[A-Za-z0-9.-]+")

MAX_EMAIL_LENGTH = 254
MAX_DOMAIN_LENGTH = 253
MAX_LABEL_LENGTH = 63

WEB_SCHEMES = ("http", "https")

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def validate_date(value: Optional[str]) -> None:
    """Require ``YYYY-MM-DD`` naming a day that exists on the calendar."""
    if value is None:
        return

    if not _DATE_PATTERN.fullmatch(value):
        raise InvalidDateFormat(f"Date must be in YYYY-MM-DD format: {value}", value)

    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise InvalidDate(f"Invalid date: {value}", value) from None


# ---------------------------------------------------------------------------
# E-mail
# ---------------------------------------------------------------------------


def validate_email(value: Optional[str]) -> None:
    """Check e-mail syntax only; deliverability is never looked up.

    Length is checked before structure, and the domain rules run before the
    local-part check so the most specific message wins.  Only the shape of
    the domain is checked; special-use names such as ``.local`` or ``.test``
    pass.  The local part must be plain ASCII.
    """
    if value is None:
        return

    if not value.strip():
        raise EmptyEmail("Email cannot be empty", value)

    if len(value) > MAX_EMAIL_LENGTH:
        raise TooLong(f"Email address is too long (max {MAX_EMAIL_LENGTH} characters)", value)

    parts = value.split("@")
    if len(parts) != 2:
        raise InvalidFormat(f"Invalid email format: {value}", value)

    local, domain = parts
    if not _is_valid_domain(domain):
        raise InvalidDomain(f"Invalid email domain: {domain}", value)

    try:
        validate_email_local_part(local, allow_smtputf8=False)
    except EmailNotValidError:
        raise InvalidFormat(f"Invalid email format: {value}", value) from None


def _is_valid_domain(domain: str) -> bool:
    if len(domain) > MAX_DOMAIN_LENGTH:
        return False
    if "." not in domain:
        return False
    if _DOMAIN_PATTERN.fullmatch(domain) is None:
        return False
    return all(_is_valid_label(label) for label in domain.split("."))


def _is_valid_label(label: str) -> bool:
    if not label or len(label) > MAX_LABEL_LENGTH:
        return False
    return not (label.startswith("-") or label.endswith("-"))


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------


def validate_url(value: Optional[str]) -> None:
    """Require a well-formed absolute URL with an ``http``/``https`` scheme."""
    if value is None:
        return

    if not value.strip():
        raise EmptyUrl("URL cannot be empty", value)

    if any(ch.isspace() for ch in value):
        raise InvalidFormat(f"Invalid URL format: {value}", value)

    try:
        parsed = _URL_ADAPTER.validate_python(value)
    except _UrlParseError:
        raise InvalidFormat(f"Invalid URL format: {value}", value) from None

    if parsed.scheme not in WEB_SCHEMES:
        raise InvalidScheme(f"URL must have a valid scheme (http, https): {value}", value)


def validate_http_url(value: Optional[str]) -> None:
    """Like :func:`validate_url`, for fields that must be web-reachable.

    Today both accept exactly the same inputs.
    """
    if value is None:
        return

    validate_url(value)

    scheme = value.split(":", 1)[0].lower()
    if scheme not in WEB_SCHEMES:
        raise InvalidScheme(f"URL must use HTTP or HTTPS: {value}", value)
