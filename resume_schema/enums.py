"""Closed vocabularies used by enum-backed resume fields."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

_E = TypeVar("_E", bound="_Vocabulary")


class _Vocabulary(Enum):
    @classmethod
    def try_from(cls: Type[_E], value: Optional[str]) -> Optional[_E]:
        """Return the member whose value is *value*, or ``None``.

        Matching is exact and case-sensitive.
        """
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class Network(_Vocabulary):
    TWITTER = "twitter"
    GITHUB = "github"
    LINKEDIN = "linkedin"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    YOUTUBE = "youtube"
    TIKTOK = "tiktok"
    STACKOVERFLOW = "stackoverflow"
    REDDIT = "reddit"
    PERSONAL_WEBSITE = "personal_website"
    OTHER = "other"
    MASTODON = "mastodon"
    BLUESKY = "bluesky"
    DISCORD = "discord"
    WHATSAPP = "whatsapp"
    TELEGRAM = "telegram"
    SNAPCHAT = "snapchat"
    PINTEREST = "pinterest"
    TUMBLR = "tumblr"
    MEDIUM = "medium"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"
    DRIBBBLE = "dribbble"
    BEHANCE = "behance"
    FLICKR = "flickr"
    VIMEO = "vimeo"
    QUORA = "quora"
    SLACK = "slack"
    CLUBHOUSE = "clubhouse"
    WHATSAPP_BUSINESS = "whatsapp_business"
    SIGNAL = "signal"
    WECHAT = "wechat"
    LINE = "line"
    VIBER = "viber"
    SKYPE = "skype"


class SkillLevel(_Vocabulary):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class EducationLevel(_Vocabulary):
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    HIGH_SCHOOL = "High School"
    ASSOCIATE = "Associate"
    BACHELOR = "Bachelor"
    MASTER = "Master"
    DOCTORATE = "Doctorate"
    BOOTCAMP = "Bootcamp"
    OTHER = "Other"


class ResumeSchema(_Vocabulary):
    V1 = "https://jsonresume.org/schema/schema.json"
