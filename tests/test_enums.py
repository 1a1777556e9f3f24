"""Tests for the closed vocabularies."""

import pytest

from resume_schema import EducationLevel, Network, ResumeSchema, SkillLevel


class TestTryFrom:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("github", Network.GITHUB),
            ("linkedin", Network.LINKEDIN),
            ("twitter", Network.TWITTER),
            ("stackoverflow", Network.STACKOVERFLOW),
            ("personal_website", Network.PERSONAL_WEBSITE),
            ("mastodon", Network.MASTODON),
            ("bluesky", Network.BLUESKY),
            ("invalid_network", None),
            ("", None),
        ],
    )
    def test_network(self, value, expected):
        assert Network.try_from(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Beginner", SkillLevel.BEGINNER),
            ("Intermediate", SkillLevel.INTERMEDIATE),
            ("Advanced", SkillLevel.ADVANCED),
            ("Expert", SkillLevel.EXPERT),
            ("Pro", None),
            ("beginner", None),
            ("", None),
        ],
    )
    def test_skill_level(self, value, expected):
        assert SkillLevel.try_from(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Bachelor", EducationLevel.BACHELOR),
            ("Master", EducationLevel.MASTER),
            ("Doctorate", EducationLevel.DOCTORATE),
            ("High School", EducationLevel.HIGH_SCHOOL),
            ("Bootcamp", EducationLevel.BOOTCAMP),
            ("PhD", None),
            ("bachelor", None),
            ("", None),
        ],
    )
    def test_education_level(self, value, expected):
        assert EducationLevel.try_from(value) is expected

    def test_none(self):
        assert Network.try_from(None) is None


class TestMembers:
    def test_network_size(self):
        assert len(Network) == 35
        assert Network.WHATSAPP_BUSINESS.value == "whatsapp_business"

    def test_skill_levels_in_order(self):
        assert [m.value for m in SkillLevel] == ["Beginner", "Intermediate", "Advanced", "Expert"]

    def test_education_levels(self):
        assert len(EducationLevel) == 9
        assert EducationLevel.OTHER.value == "Other"

    def test_schema_version(self):
        assert list(ResumeSchema) == [ResumeSchema.V1]
        assert ResumeSchema.V1.value == "https://jsonresume.org/schema/schema.json"

    def test_strict_lookup_raises(self):
        with pytest.raises(ValueError):
            SkillLevel("expert")
