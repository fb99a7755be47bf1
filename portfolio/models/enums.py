"""
Enumerations shared by the persistence and API layers.
"""

from enum import Enum


class AdminRole(str, Enum):
    """Roles an admin account can hold. Only ``owner`` exists today."""

    OWNER = "owner"


class ContentKey(str, Enum):
    """The fixed set of editable content sections."""

    HERO = "hero"
    ABOUT = "about"
    SKILLS = "skills"
    CONTACT = "contact"
    SOCIAL = "social"
    BANNERS = "banners"
    BACKGROUNDS = "backgrounds"
