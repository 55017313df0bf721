"""User aggregate: identity, role and business profile."""

from __future__ import annotations

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from tillbook.domain.shared.time import utc_now
from tillbook.domain.user.value_objects import (
    BusinessCategory,
    BusinessProfile,
    Email,
    TaxFilingStatus,
    UserRole,
)


class User:
    """
    User aggregate root.

    Holds the tenant's identity and the answers from onboarding. Every
    tenant-owned row (linked items, ledger transactions) references
    ``User.id``.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        role: Union[str, UserRole] = UserRole.USER,
        id: UUID | None = None,
        full_name: str | None = None,
        company_name: str | None = None,
        onboarding_completed: bool = False,
        tax_filing_status: Union[str, TaxFilingStatus, None] = None,
        business_category: Union[str, BusinessCategory, None] = None,
        state: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._email = email if isinstance(email, Email) else Email(email)
        self._role = UserRole(role)
        self._full_name = full_name
        self._company_name = company_name
        self._onboarding_completed = onboarding_completed
        self._tax_filing_status = (
            TaxFilingStatus(tax_filing_status) if tax_filing_status else None
        )
        self._business_category = (
            BusinessCategory(business_category) if business_category else None
        )
        self._state = state
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    # Identity

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def has_team_role(self) -> bool:
        """Admins count as team members."""
        return self._role in (UserRole.TEAM_MEMBER, UserRole.ADMIN)

    # Profile

    @property
    def full_name(self) -> str | None:
        return self._full_name

    @property
    def company_name(self) -> str | None:
        return self._company_name

    @property
    def onboarding_completed(self) -> bool:
        return self._onboarding_completed

    @property
    def tax_filing_status(self) -> TaxFilingStatus | None:
        return self._tax_filing_status

    @property
    def business_category(self) -> BusinessCategory | None:
        return self._business_category

    @property
    def state(self) -> str | None:
        return self._state

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # Behaviour

    def complete_onboarding(self, profile: BusinessProfile) -> None:
        """Store the questionnaire answers and mark onboarding as done.

        Calling it again overwrites the answers; the flag stays set.
        """
        self._company_name = profile.company_name
        self._tax_filing_status = profile.tax_filing_status
        self._business_category = profile.business_category
        self._state = profile.state
        self._onboarding_completed = True
        self._touch()

    def join_team(self) -> None:
        """Flag the user as internal staff, which skips onboarding.

        Admins keep their role.
        """
        if self._role == UserRole.USER:
            self._role = UserRole.TEAM_MEMBER
        self._onboarding_completed = True
        self._touch()

    def update_profile(
        self,
        full_name: str | None = None,
        company_name: str | None = None,
        tax_filing_status: Union[str, TaxFilingStatus, None] = None,
        business_category: Union[str, BusinessCategory, None] = None,
        state: str | None = None,
    ) -> None:
        """Apply the given profile fields; ``None`` leaves a field unchanged."""
        if full_name is not None:
            self._full_name = full_name.strip() or None
        if company_name is not None:
            self._company_name = company_name.strip() or None
        if tax_filing_status is not None:
            self._tax_filing_status = TaxFilingStatus(tax_filing_status)
        if business_category is not None:
            self._business_category = BusinessCategory(business_category)
        if state is not None:
            self._state = state.strip().upper()
        self._touch()

    def change_role(self, role: Union[str, UserRole]) -> None:
        self._role = UserRole(role)
        self._touch()

    def promote_to_admin(self) -> None:
        self.change_role(UserRole.ADMIN)

    def _touch(self) -> None:
        self._updated_at = utc_now()

    # Factories

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        role: UserRole = UserRole.USER,
        full_name: str | None = None,
    ) -> User:
        return cls(email=email, role=role, full_name=full_name)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: str,
        role: Union[str, UserRole],
        full_name: str | None,
        company_name: str | None,
        onboarding_completed: bool,
        tax_filing_status: str | None,
        business_category: str | None,
        state: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        return cls(
            id=id,
            email=email,
            role=role,
            full_name=full_name,
            company_name=company_name,
            onboarding_completed=onboarding_completed,
            tax_filing_status=tax_filing_status,
            business_category=business_category,
            state=state,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role.value})"
