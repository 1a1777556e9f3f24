"""Pure domain logic for rendering a resume as Markdown.

Sections always come out in the same order (basics, contact, profiles,
work, education, skills, languages); options only switch them on or off.
Field text is copied verbatim, Markdown special characters included.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Union

from ..config import MarkdownOptions
from .records import Education, Location, Work
from .resume import Resume

logger = logging.getLogger(__name__)

OptionsLike = Union[MarkdownOptions, Mapping[str, bool], None]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resume_to_markdown(resume: Resume, options: OptionsLike = None) -> str:
    """Render *resume* as a Markdown document.

    *options* may be a :class:`MarkdownOptions`, a plain mapping of section
    name to bool (missing names stay enabled) or ``None`` for everything.
    Blank lines are dropped from the result.
    """
    opts = _coerce_options(options)

    lines: List[str] = []
    for name in opts.enabled_sections():
        lines.extend(_RENDERERS[name](resume))

    logger.debug("Rendered markdown sections: %s", opts.enabled_sections())
    # Fragments may carry their own newlines; collapse every blank line.
    split_lines = (part for line in lines for part in line.split("\n"))
    return "\n".join(part for part in split_lines if part.strip())


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def _render_basics(resume: Resume) -> List[str]:
    basics = resume.basics
    lines = [f"# {basics.name}", f"**{basics.label}**"]
    if basics.summary:
        lines.append(basics.summary)
    return lines


def _render_contact(resume: Resume) -> List[str]:
    basics = resume.basics
    lines = ["## Contact"]
    if basics.email:
        lines.append(f"- Email: {basics.email}")
    if basics.phone:
        lines.append(f"- Phone: {basics.phone}")
    if basics.url:
        lines.append(f"- Website: {basics.url}")
    location = _format_location(basics.location)
    if location:
        lines.append(f"- Location: {location}")
    return lines


def _render_profiles(resume: Resume) -> List[str]:
    profiles = resume.basics.profiles
    if not profiles:
        return []
    lines = ["## Profiles"]
    for profile in profiles:
        if profile.url:
            lines.append(f"- {profile.network.value}: [{profile.username}]({profile.url})")
        else:
            lines.append(f"- {profile.network.value}: {profile.username}")
    return lines


def _render_work(resume: Resume) -> List[str]:
    if not resume.work:
        return []
    lines = ["## Work Experience"]
    for work in resume.work:
        lines.extend(_render_work_entry(work))
    return lines


def _render_work_entry(work: Work) -> List[str]:
    lines = [f"### {work.position} at {work.name}"]
    dates = _format_dates(work.start_date, work.end_date)
    if dates:
        lines.append(f"*{dates}*")
    if work.location:
        lines.append(work.location)
    if work.summary:
        lines.append(work.summary)
    lines.extend(f"- {h}" for h in work.highlights)
    return lines


def _render_education(resume: Resume) -> List[str]:
    if not resume.education:
        return []
    lines = ["## Education"]
    for education in resume.education:
        lines.extend(_render_education_entry(education))
    return lines


def _render_education_entry(education: Education) -> List[str]:
    lines = [f"### {education.institution}"]
    study_type = education.study_type.value if education.study_type else None
    if study_type and education.area:
        lines.append(f"{study_type} in {education.area}")
    elif study_type or education.area:
        lines.append(study_type or education.area)
    dates = _format_dates(education.start_date, education.end_date)
    if dates:
        lines.append(f"*{dates}*")
    if education.score:
        lines.append(f"Score: {education.score}")
    lines.extend(f"- {c}" for c in education.courses)
    return lines


def _render_skills(resume: Resume) -> List[str]:
    if not resume.skills:
        return []
    lines = ["## Skills"]
    for skill in resume.skills:
        line = f"- **{skill.name}**"
        if skill.level is not None:
            line += f" ({skill.level.value})"
        if skill.keywords:
            line += f": {', '.join(skill.keywords)}"
        lines.append(line)
    return lines


def _render_languages(resume: Resume) -> List[str]:
    if not resume.languages:
        return []
    lines = ["## Languages"]
    for language in resume.languages:
        if language.fluency:
            lines.append(f"- {language.language}: {language.fluency}")
        else:
            lines.append(f"- {language.language}")
    return lines


_RENDERERS: Dict[str, Callable[[Resume], List[str]]] = {
    "basics": _render_basics,
    "contact": _render_contact,
    "profiles": _render_profiles,
    "work": _render_work,
    "education": _render_education,
    "skills": _render_skills,
    "languages": _render_languages,
}


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _coerce_options(options: OptionsLike) -> MarkdownOptions:
    if options is None:
        return MarkdownOptions()
    if isinstance(options, MarkdownOptions):
        return options
    return MarkdownOptions.model_validate(dict(options))


def _format_dates(start: Optional[str], end: Optional[str]) -> str:
    if start:
        return f"{start} - {end or 'Present'}"
    return end or ""


def _format_location(location: Optional[Location]) -> str:
    if location is None:
        return ""
    parts = [location.city, location.region, location.country_code]
    return ", ".join(p for p in parts if p)
