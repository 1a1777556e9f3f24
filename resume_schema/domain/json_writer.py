"""Pure domain logic for JSON Resume serialization.

All functions return dicts or strings -- no file I/O.

Two presence rules apply and both are part of the output contract:

* inside leaf records every declared field is emitted, ``None`` as ``null``;
* on :class:`Basics` and :class:`Resume` absent scalars are left out
  entirely, ``profiles`` is always emitted and each resume section is
  emitted only when it has entries.
"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from enum import Enum
from typing import Any, Dict, Optional

from .job_description import JobDescription
from .records import Basics, Record, json_key
from .resume import SECTIONS, Resume

logger = logging.getLogger(__name__)

# Basics scalars that are dropped when absent, in output order.
_BASICS_OPTIONAL = ("image", "email", "phone", "url", "summary")

_COMPACT_SEPARATORS = (",", ":")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def record_to_dict(record: Record) -> Dict[str, Any]:
    """Serialize a leaf record, emitting every field."""
    return {json_key(f): _to_json_value(getattr(record, f.name)) for f in fields(record)}


def basics_to_dict(basics: Basics) -> Dict[str, Any]:
    data: Dict[str, Any] = {"name": basics.name, "label": basics.label}

    for attr in _BASICS_OPTIONAL:
        value = getattr(basics, attr)
        if value is not None:
            data[attr] = value

    if basics.location is not None:
        data["location"] = record_to_dict(basics.location)

    data["profiles"] = [record_to_dict(p) for p in basics.profiles]
    return data


def resume_to_dict(resume: Resume) -> Dict[str, Any]:
    """Project a :class:`Resume` onto the JSON Resume document shape."""
    data: Dict[str, Any] = {
        "$schema": resume.schema.value,
        "basics": basics_to_dict(resume.basics),
    }

    for name in SECTIONS:
        items = resume.section(name)
        if items:
            data[name] = [record_to_dict(item) for item in items]

    logger.debug("Serialized resume sections: %s", [k for k in data if k in SECTIONS])
    return data


def resume_to_json(resume: Resume, indent: Optional[int] = None, ensure_ascii: bool = False) -> str:
    """Render *resume* as a JSON string.

    With ``indent=None`` the output is compact with no whitespace between
    tokens.  The same resume always yields the same string.
    """
    return _dumps(resume_to_dict(resume), indent, ensure_ascii)


def job_description_to_dict(job: JobDescription) -> Dict[str, Any]:
    return record_to_dict(job)


def job_description_to_json(job: JobDescription, indent: Optional[int] = None, ensure_ascii: bool = False) -> str:
    return _dumps(job_description_to_dict(job), indent, ensure_ascii)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _to_json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Record):
        return record_to_dict(value)
    if isinstance(value, tuple):
        return [_to_json_value(v) for v in value]
    return value


def _dumps(data: Dict[str, Any], indent: Optional[int], ensure_ascii: bool) -> str:
    if indent is None:
        return json.dumps(data, separators=_COMPACT_SEPARATORS, ensure_ascii=ensure_ascii)
    return json.dumps(data, indent=indent, ensure_ascii=ensure_ascii)
