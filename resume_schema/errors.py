"""Error taxonomy for resume construction and building."""

from __future__ import annotations

from typing import Any, Optional


class ResumeError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ResumeError, ValueError):
    """A field value failed a syntax check during record construction."""

    def __init__(self, message: str, value: Optional[Any] = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidDateFormat(ValidationError):
    pass


class InvalidDate(ValidationError):
    pass


class EmptyEmail(ValidationError):
    pass


class TooLong(ValidationError):
    pass


class InvalidDomain(ValidationError):
    pass


class InvalidFormat(ValidationError):
    pass


class EmptyUrl(ValidationError):
    pass


class InvalidScheme(ValidationError):
    pass


class InvalidChoice(ValidationError):
    """A raw string is not a member of the field's closed vocabulary."""


class MissingRequiredSection(ResumeError):
    """``build()`` was called before a required section was supplied."""

    def __init__(self, section: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{section.capitalize()} section is required")
        self.section = section
