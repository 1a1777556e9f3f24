"""Standalone job posting record, shaped like the resume's list sections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .records import Record


@dataclass(frozen=True)
class JobDescription(Record):
    """A job posting. No field of it is validated beyond its type."""

    name: str
    location: Optional[str] = None
    description: Optional[str] = None
    highlights: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()
    tools: Tuple[str, ...] = ()
    responsibilities: Tuple[str, ...] = ()
    deliverables: Tuple[str, ...] = ()
