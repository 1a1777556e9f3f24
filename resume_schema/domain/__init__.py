"""Resume Schema Domain - Pure domain logic for resume documents.

This package contains validators, immutable records, builders and
serializers.  Nothing here touches the file system; everything operates
on records, dicts and strings.
"""

from .builders import JobDescriptionBuilder, ResumeBuilder
from .job_description import JobDescription
from .json_writer import (
    basics_to_dict,
    job_description_to_dict,
    job_description_to_json,
    record_to_dict,
    resume_to_dict,
    resume_to_json,
)
from .markdown_writer import resume_to_markdown
from .records import (
    Award,
    Basics,
    Certificate,
    Education,
    Interest,
    Language,
    Location,
    Profile,
    Project,
    Publication,
    Record,
    Reference,
    Skill,
    Volunteer,
    Work,
)
from .resume import SECTIONS, Resume
from .validators import validate_date, validate_email, validate_http_url, validate_url

__all__ = [
    # Validators
    "validate_date",
    "validate_email",
    "validate_url",
    "validate_http_url",
    # Records
    "Record",
    "Location",
    "Profile",
    "Basics",
    "Work",
    "Volunteer",
    "Education",
    "Award",
    "Certificate",
    "Publication",
    "Skill",
    "Language",
    "Interest",
    "Reference",
    "Project",
    "JobDescription",
    # Aggregate
    "Resume",
    "SECTIONS",
    # Builders
    "ResumeBuilder",
    "JobDescriptionBuilder",
    # JSON writer
    "record_to_dict",
    "basics_to_dict",
    "resume_to_dict",
    "resume_to_json",
    "job_description_to_dict",
    "job_description_to_json",
    # Markdown writer
    "resume_to_markdown",
]
