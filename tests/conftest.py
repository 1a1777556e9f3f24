"""Global pytest fixtures for a deterministic test environment."""

from __future__ import annotations

import logging

import pytest

from resume_schema import (
    Award,
    Basics,
    Education,
    EducationLevel,
    Language,
    Location,
    Network,
    Profile,
    Project,
    Publication,
    ResumeBuilder,
    Skill,
    SkillLevel,
    Volunteer,
    Work,
)


@pytest.fixture(autouse=True)
def _isolate_package_logger():
    """Drop handlers that configure_logging() may attach during a test."""
    logger = logging.getLogger("resume_schema")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def basics() -> Basics:
    return Basics(
        name="John Doe",
        label="Software Engineer",
        email="john@example.com",
        phone="+1-555-123-4567",
        url="https://johndoe.com",
        summary="Experienced software engineer with 5+ years in web development.",
        location=Location(
            address="123 Main St",
            postal_code="94105",
            city="San Francisco",
            country_code="US",
            region="CA",
        ),
        profiles=[
            Profile(network=Network.GITHUB, username="johndoe", url="https://github.com/johndoe"),
            Profile(network=Network.LINKEDIN, username="john-doe"),
        ],
    )


@pytest.fixture
def full_resume(basics):
    """A resume with entries in most sections."""
    return (
        ResumeBuilder()
        .basics(basics)
        .add_work(
            Work(
                name="Tech Corp",
                position="Senior Developer",
                url="https://techcorp.example.com",
                start_date="2020-01-01",
                end_date="2023-12-31",
                summary="Led the platform team.",
                highlights=["Shipped the billing rewrite", "Mentored four engineers"],
            )
        )
        .add_work(Work(name="StartupCo", position="Developer", start_date="2016-06-01", end_date="2019-12-31"))
        .add_volunteer(Volunteer(organization="Code Club", position="Mentor", start_date="2018-01-01"))
        .add_education(
            Education(
                institution="State University",
                area="Computer Science",
                study_type=EducationLevel.BACHELOR,
                start_date="2012-09-01",
                end_date="2016-06-01",
                score="3.8",
                courses=["Algorithms", "Databases"],
            )
        )
        .add_award(Award(title="Engineer of the Year", date="2022-12-01", awarder="Tech Corp"))
        .add_publication(Publication(name="Scaling Queues", publisher="Dev Journal", release_date="2021-05-20"))
        .add_skill(Skill(name="Python", level=SkillLevel.EXPERT, keywords=["Django", "FastAPI"]))
        .add_skill(Skill(name="Go", level=SkillLevel.INTERMEDIATE))
        .add_skill(Skill(name="Leadership"))
        .add_language(Language(language="English", fluency="Native"))
        .add_language(Language(language="Spanish"))
        .add_project(Project(name="resume-kit", description="Resume tooling", highlights=["1k stars"]))
        .build()
    )
