"""Resume Schema - JSON Resume records, builders and renderers."""

__version__ = "0.1.0"

from .config import MARKDOWN_SECTIONS, MarkdownOptions, RenderConfig, load_raw_config, load_render_config
from .config_validator import ConfigIssue, Severity, has_errors, validate_config
from .domain import (
    Award,
    Basics,
    Certificate,
    Education,
    Interest,
    JobDescription,
    JobDescriptionBuilder,
    Language,
    Location,
    Profile,
    Project,
    Publication,
    Reference,
    Resume,
    ResumeBuilder,
    Skill,
    Volunteer,
    Work,
    resume_to_dict,
    resume_to_json,
    resume_to_markdown,
)
from .enums import EducationLevel, Network, ResumeSchema, SkillLevel
from .errors import (
    EmptyEmail,
    EmptyUrl,
    InvalidChoice,
    InvalidDate,
    InvalidDateFormat,
    InvalidDomain,
    InvalidFormat,
    InvalidScheme,
    MissingRequiredSection,
    ResumeError,
    TooLong,
    ValidationError,
)
from .observability import configure_logging

__all__ = [
    "__version__",
    # Records
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
    "Resume",
    # Builders
    "ResumeBuilder",
    "JobDescriptionBuilder",
    # Serializers
    "resume_to_dict",
    "resume_to_json",
    "resume_to_markdown",
    # Vocabularies
    "Network",
    "SkillLevel",
    "EducationLevel",
    "ResumeSchema",
    # Errors
    "ResumeError",
    "ValidationError",
    "InvalidDateFormat",
    "InvalidDate",
    "EmptyEmail",
    "TooLong",
    "InvalidDomain",
    "InvalidFormat",
    "EmptyUrl",
    "InvalidScheme",
    "InvalidChoice",
    "MissingRequiredSection",
    # Config
    "MARKDOWN_SECTIONS",
    "MarkdownOptions",
    "RenderConfig",
    "load_raw_config",
    "load_render_config",
    "ConfigIssue",
    "Severity",
    "validate_config",
    "has_errors",
    "configure_logging",
]
