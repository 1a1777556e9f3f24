"""The Resume aggregate and its read-only reporting projections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from ..enums import ResumeSchema
from .records import (
    Award,
    Basics,
    Certificate,
    Education,
    Interest,
    Language,
    Project,
    Publication,
    Record,
    Reference,
    Skill,
    Volunteer,
    Work,
    field_meta,
)

#: Collection attributes in JSON Resume output order.
SECTIONS: Tuple[str, ...] = (
    "work",
    "volunteer",
    "education",
    "awards",
    "certificates",
    "publications",
    "skills",
    "languages",
    "interests",
    "references",
    "projects",
)

JSON_LD_CONTEXT = "https://schema.org"


@dataclass(frozen=True)
class Resume(Record):
    """A complete resume: one :class:`Basics` plus ordered sections.

    Every section may be empty.  Order inside a section is the order the
    entries were added in and is kept in every output.
    """

    basics: Basics
    work: Tuple[Work, ...] = ()
    volunteer: Tuple[Volunteer, ...] = ()
    education: Tuple[Education, ...] = ()
    awards: Tuple[Award, ...] = ()
    certificates: Tuple[Certificate, ...] = ()
    publications: Tuple[Publication, ...] = ()
    skills: Tuple[Skill, ...] = ()
    languages: Tuple[Language, ...] = ()
    interests: Tuple[Interest, ...] = ()
    references: Tuple[Reference, ...] = ()
    projects: Tuple[Project, ...] = ()
    schema: ResumeSchema = field(default=ResumeSchema.V1, metadata=field_meta(json="$schema", choices=ResumeSchema))

    def section(self, name: str) -> Tuple[Record, ...]:
        """Return the collection called *name* (one of :data:`SECTIONS`)."""
        if name not in SECTIONS:
            raise KeyError(f"Unknown resume section: {name}")
        return getattr(self, name)

    def get_summary(self) -> Dict[str, Union[int, bool, str, None]]:
        """Flat counts and presence flags for reporting."""
        return {
            "name": self.basics.name,
            "email": self.basics.email,
            "work_experiences": len(self.work),
            "education_entries": len(self.education),
            "skills": len(self.skills),
            "projects": len(self.projects),
            "languages": len(self.languages),
            "has_volunteer_experience": bool(self.volunteer),
            "has_awards": bool(self.awards),
            "has_publications": bool(self.publications),
        }

    def to_json_ld(self) -> Dict[str, Any]:
        """Project basics and skills onto a schema.org ``Person``."""
        return {
            "@context": JSON_LD_CONTEXT,
            "@type": "Person",
            "name": self.basics.name,
            "url": self.basics.url,
            "jobTitle": self.basics.label,
            "sameAs": [p.url for p in self.basics.profiles if p.url],
            "knowsAbout": [s.name for s in self.skills],
        }
