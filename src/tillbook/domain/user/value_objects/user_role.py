from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"
    TEAM_MEMBER = "team_member"  # internal staff, skip onboarding
