"""Decides who counts as internal team staff."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tillbook.domain.user.aggregates import User


class TeamMembershipPolicy:
    """Team membership by e-mail: an explicit allow list or a whole domain.

    Examples
    --------
    >>> policy = TeamMembershipPolicy(domain="tillbook.io", emails=["ops@gmail.com"])
    >>> policy.is_team_email("Jane@Tillbook.io")
    True
    """

    def __init__(self, domain: str = "", emails: Iterable[str] = ()):
        self._domain = domain.strip().lower().lstrip("@")
        self._emails = frozenset(e.strip().lower() for e in emails if e.strip())

    @property
    def enabled(self) -> bool:
        return bool(self._domain or self._emails)

    def is_team_email(self, email: str) -> bool:
        normalized = email.strip().lower()
        if normalized in self._emails:
            return True
        return bool(self._domain) and normalized.endswith(f"@{self._domain}")

    def is_team_member(self, user: User) -> bool:
        return user.has_team_role or self.is_team_email(user.email)

    def apply(self, user: User) -> bool:
        """Upgrade ``user`` when the e-mail rule matches and onboarding is open.

        Returns
        -------
        True if the user was changed and needs saving.
        """
        if user.onboarding_completed or not self.is_team_email(user.email):
            return False
        user.join_team()
        return True
