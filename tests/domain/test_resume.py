"""Tests for the Resume aggregate and its reporting projections."""

import pytest

from resume_schema import Basics, Network, Profile, Resume, ResumeSchema, Skill


class TestResume:
    def test_direct_construction_defaults(self, minimal_basics):
        resume = Resume(basics=minimal_basics)
        assert resume.schema is ResumeSchema.V1
        assert resume.work == ()
        assert resume.projects == ()

    def test_lists_are_frozen_on_construction(self, minimal_basics):
        skills = [Skill(name="Python")]
        resume = Resume(basics=minimal_basics, skills=skills)
        skills.clear()
        assert len(resume.skills) == 1

    def test_unknown_section_name(self, minimal_basics):
        with pytest.raises(KeyError):
            Resume(basics=minimal_basics).section("hobbies")


class TestSummary:
    def test_full_resume_summary(self, full_resume):
        assert full_resume.get_summary() == {
            "name": "John Doe",
            "email": "john@example.com",
            "work_experiences": 2,
            "education_entries": 1,
            "skills": 3,
            "projects": 1,
            "languages": 2,
            "has_volunteer_experience": True,
            "has_awards": True,
            "has_publications": True,
        }

    def test_empty_sections_summary(self):
        summary = Resume(basics=Basics(name="Jane", label="Designer")).get_summary()
        assert summary["email"] is None
        assert summary["work_experiences"] == 0
        assert summary["has_awards"] is False


class TestJsonLd:
    def test_structure(self, full_resume):
        data = full_resume.to_json_ld()
        assert data["@context"] == "https://schema.org"
        assert data["@type"] == "Person"
        assert data["name"] == "John Doe"
        assert data["url"] == "https://johndoe.com"
        assert data["jobTitle"] == "Software Engineer"
        assert data["sameAs"] == ["https://github.com/johndoe"]
        assert data["knowsAbout"] == ["Python", "Go", "Leadership"]

    def test_missing_profiles_and_skills(self):
        resume = Resume(basics=Basics(name="Jane", label="Designer"))
        data = resume.to_json_ld()
        assert data["url"] is None
        assert data["sameAs"] == []
        assert data["knowsAbout"] == []

    def test_profiles_without_url_are_skipped(self):
        basics = Basics(
            name="Jane",
            label="Designer",
            profiles=[
                Profile(network=Network.DRIBBBLE, username="jane"),
                Profile(network=Network.BEHANCE, username="jane", url="https://behance.net/jane"),
            ],
        )
        assert Resume(basics=basics).to_json_ld()["sameAs"] == ["https://behance.net/jane"]
