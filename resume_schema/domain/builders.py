"""Fluent builders for :class:`Resume` and :class:`JobDescription`.

A builder is a mutable staging area owned by one caller at a time; sharing
one instance across threads is not supported.  ``build()`` copies every
collection, so later calls on the builder never change a built record.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..errors import MissingRequiredSection
from .job_description import JobDescription
from .records import (
    Award,
    Basics,
    Certificate,
    Education,
    Interest,
    Language,
    Project,
    Publication,
    Reference,
    Skill,
    Volunteer,
    Work,
)
from .resume import Resume

logger = logging.getLogger(__name__)


class ResumeBuilder:
    """Assemble a :class:`Resume` one entry at a time."""

    def __init__(self) -> None:
        self._basics: Optional[Basics] = None
        self._work: List[Work] = []
        self._volunteer: List[Volunteer] = []
        self._education: List[Education] = []
        self._awards: List[Award] = []
        self._certificates: List[Certificate] = []
        self._publications: List[Publication] = []
        self._skills: List[Skill] = []
        self._languages: List[Language] = []
        self._interests: List[Interest] = []
        self._references: List[Reference] = []
        self._projects: List[Project] = []

    def basics(self, basics: Basics) -> ResumeBuilder:
        self._basics = basics
        return self

    def add_work(self, work: Work) -> ResumeBuilder:
        self._work.append(work)
        return self

    def add_volunteer(self, volunteer: Volunteer) -> ResumeBuilder:
        self._volunteer.append(volunteer)
        return self

    def add_education(self, education: Education) -> ResumeBuilder:
        self._education.append(education)
        return self

    def add_award(self, award: Award) -> ResumeBuilder:
        self._awards.append(award)
        return self

    def add_certificate(self, certificate: Certificate) -> ResumeBuilder:
        self._certificates.append(certificate)
        return self

    def add_publication(self, publication: Publication) -> ResumeBuilder:
        self._publications.append(publication)
        return self

    def add_skill(self, skill: Skill) -> ResumeBuilder:
        self._skills.append(skill)
        return self

    def add_language(self, language: Language) -> ResumeBuilder:
        self._languages.append(language)
        return self

    def add_interest(self, interest: Interest) -> ResumeBuilder:
        self._interests.append(interest)
        return self

    def add_reference(self, reference: Reference) -> ResumeBuilder:
        self._references.append(reference)
        return self

    def add_project(self, project: Project) -> ResumeBuilder:
        self._projects.append(project)
        return self

    def build(self) -> Resume:
        """Snapshot the staged sections into an immutable :class:`Resume`.

        Raises:
            MissingRequiredSection: if :meth:`basics` was never called.
        """
        if self._basics is None:
            raise MissingRequiredSection("basics")

        resume = Resume(
            basics=self._basics,
            work=tuple(self._work),
            volunteer=tuple(self._volunteer),
            education=tuple(self._education),
            awards=tuple(self._awards),
            certificates=tuple(self._certificates),
            publications=tuple(self._publications),
            skills=tuple(self._skills),
            languages=tuple(self._languages),
            interests=tuple(self._interests),
            references=tuple(self._references),
            projects=tuple(self._projects),
        )
        logger.debug(
            "Built resume for %s (%d work, %d education, %d skills, %d projects)",
            resume.basics.name,
            len(resume.work),
            len(resume.education),
            len(resume.skills),
            len(resume.projects),
        )
        return resume


class JobDescriptionBuilder:
    """Assemble a :class:`JobDescription`.

    Each list field has an ``add_*`` method that appends one item and a
    plural setter that replaces the whole list.
    """

    def __init__(self) -> None:
        self._name = ""
        self._location: Optional[str] = None
        self._description: Optional[str] = None
        self._highlights: List[str] = []
        self._skills: List[str] = []
        self._tools: List[str] = []
        self._responsibilities: List[str] = []
        self._deliverables: List[str] = []

    def name(self, name: str) -> JobDescriptionBuilder:
        self._name = name
        return self

    def location(self, location: Optional[str]) -> JobDescriptionBuilder:
        self._location = location
        return self

    def description(self, description: Optional[str]) -> JobDescriptionBuilder:
        self._description = description
        return self

    def add_highlight(self, highlight: str) -> JobDescriptionBuilder:
        self._highlights.append(highlight)
        return self

    def highlights(self, highlights: Iterable[str]) -> JobDescriptionBuilder:
        self._highlights = list(highlights)
        return self

    def add_skill(self, skill: str) -> JobDescriptionBuilder:
        self._skills.append(skill)
        return self

    def skills(self, skills: Iterable[str]) -> JobDescriptionBuilder:
        self._skills = list(skills)
        return self

    def add_tool(self, tool: str) -> JobDescriptionBuilder:
        self._tools.append(tool)
        return self

    def tools(self, tools: Iterable[str]) -> JobDescriptionBuilder:
        self._tools = list(tools)
        return self

    def add_responsibility(self, responsibility: str) -> JobDescriptionBuilder:
        self._responsibilities.append(responsibility)
        return self

    def responsibilities(self, responsibilities: Iterable[str]) -> JobDescriptionBuilder:
        self._responsibilities = list(responsibilities)
        return self

    def add_deliverable(self, deliverable: str) -> JobDescriptionBuilder:
        self._deliverables.append(deliverable)
        return self

    def deliverables(self, deliverables: Iterable[str]) -> JobDescriptionBuilder:
        self._deliverables = list(deliverables)
        return self

    def build(self) -> JobDescription:
        job = JobDescription(
            name=self._name,
            location=self._location,
            description=self._description,
            highlights=tuple(self._highlights),
            skills=tuple(self._skills),
            tools=tuple(self._tools),
            responsibilities=tuple(self._responsibilities),
            deliverables=tuple(self._deliverables),
        )
        logger.debug("Built job description %r", job.name)
        return job
