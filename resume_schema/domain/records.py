"""Immutable record types for each section of a JSON Resume document.

Records check their own fields once, in ``__post_init__``, in field
declaration order.  A record that exists is valid.  Sequence fields are
stored as tuples whatever sequence type the caller passed in.

Field metadata keys:

``json``
    External key used by the JSON writer when it differs from the attribute.
``check``
    Syntax validator from :mod:`.validators` applied to non-``None`` values.
``choices``
    Closed vocabulary; raw strings are coerced to members.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Optional, Tuple

from ..enums import EducationLevel, Network, SkillLevel
from ..errors import InvalidChoice
from .validators import validate_date, validate_email, validate_url


def field_meta(json: Optional[str] = None, check: Optional[Callable] = None, choices: Any = None) -> Dict[str, Any]:
    """Build the ``metadata`` mapping for a record field."""
    meta: Dict[str, Any] = {}
    if json is not None:
        meta["json"] = json
    if check is not None:
        meta["check"] = check
    if choices is not None:
        meta["choices"] = choices
    return meta


def json_key(f) -> str:
    """Return the JSON Resume key for dataclass field *f*."""
    return f.metadata.get("json", f.name)


@dataclass(frozen=True)
class Record:
    """Base for every record; runs coercion and validation on construction."""

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)

            if isinstance(value, list):
                value = tuple(value)
                object.__setattr__(self, f.name, value)

            vocabulary = f.metadata.get("choices")
            if vocabulary is not None and not (value is None and f.default is None):
                value = _to_member(f.name, vocabulary, value)
                object.__setattr__(self, f.name, value)

            check = f.metadata.get("check")
            if check is not None and value is not None:
                check(value)


def _to_member(name: str, vocabulary: Any, value: Any) -> Any:
    # Only members of this exact vocabulary, or their string values, are stored.
    if isinstance(value, vocabulary):
        return value
    member = vocabulary.try_from(value) if isinstance(value, str) else None
    if member is None:
        allowed = ", ".join(m.value for m in vocabulary)
        raise InvalidChoice(f"Invalid {name} '{value}'. Expected one of: {allowed}", value)
    return member


# ---------------------------------------------------------------------------
# Basics
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Location(Record):
    address: Optional[str] = None
    postal_code: Optional[str] = field(default=None, metadata=field_meta(json="postalCode"))
    city: Optional[str] = None
    country_code: Optional[str] = field(default=None, metadata=field_meta(json="countryCode"))
    region: Optional[str] = None


@dataclass(frozen=True)
class Profile(Record):
    network: Network = field(metadata=field_meta(choices=Network))
    username: str
    url: Optional[str] = field(default=None, metadata=field_meta(check=validate_url))


@dataclass(frozen=True)
class Basics(Record):
    """Who the resume is about: name, headline, contact details."""

    name: str
    label: str
    image: Optional[str] = None
    email: Optional[str] = field(default=None, metadata=field_meta(check=validate_email))
    phone: Optional[str] = None
    url: Optional[str] = field(default=None, metadata=field_meta(check=validate_url))
    summary: Optional[str] = None
    location: Optional[Location] = None
    profiles: Tuple[Profile, ...] = ()


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Work(Record):
    name: str
    location: Optional[str] = field(default=None, kw_only=True)
    position: str
    url: Optional[str] = field(default=None, metadata=field_meta(check=validate_url))
    start_date: Optional[str] = field(default=None, metadata=field_meta(json="startDate", check=validate_date))
    end_date: Optional[str] = field(default=None, metadata=field_meta(json="endDate", check=validate_date))
    summary: Optional[str] = None
    highlights: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Volunteer(Record):
    organization: str
    position: str
    url: Optional[str] = field(default=None, metadata=field_meta(check=validate_url))
    start_date: Optional[str] = field(default=None, metadata=field_meta(json="startDate", check=validate_date))
    end_date: Optional[str] = field(default=None, metadata=field_meta(json="endDate", check=validate_date))
    summary: Optional[str] = None
    highlights: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Project(Record):
    name: str
    start_date: Optional[str] = field(default=None, metadata=field_meta(json="startDate", check=validate_date))
    end_date: Optional[str] = field(default=None, metadata=field_meta(json="endDate", check=validate_date))
    description: Optional[str] = None
    highlights: Tuple[str, ...] = ()
    url: Optional[str] = field(default=None, metadata=field_meta(check=validate_url))


# ---------------------------------------------------------------------------
# Education and recognition
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Education(Record):
    institution: str
    url: Optional[str] = field(default=None, metadata=field_meta(check=validate_url))
    area: Optional[str] = None
    study_type: Optional[EducationLevel] = field(
        default=None, metadata=field_meta(json="studyType", choices=EducationLevel)
    )
    start_date: Optional[str] = field(default=None, metadata=field_meta(json="startDate", check=validate_date))
    end_date: Optional[str] = field(default=None, metadata=field_meta(json="endDate", check=validate_date))
    score: Optional[str] = None
    courses: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Award(Record):
    title: str
    date: str = field(metadata=field_meta(check=validate_date))
    awarder: str
    summary: Optional[str] = None


@dataclass(frozen=True)
class Certificate(Record):
    name: str
    date: str = field(metadata=field_meta(check=validate_date))
    issuer: str
    url: Optional[str] = field(default=None, metadata=field_meta(check=validate_url))


@dataclass(frozen=True)
class Publication(Record):
    name: str
    publisher: str
    release_date: str = field(metadata=field_meta(json="releaseDate", check=validate_date))
    url: Optional[str] = field(default=None, metadata=field_meta(check=validate_url))
    summary: Optional[str] = None


# ---------------------------------------------------------------------------
# Skills and people
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Skill(Record):
    name: str
    level: Optional[SkillLevel] = field(default=None, metadata=field_meta(choices=SkillLevel))
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Language(Record):
    language: str
    fluency: Optional[str] = None


@dataclass(frozen=True)
class Interest(Record):
    name: str
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Reference(Record):
    name: str
    reference: str
