import re
from dataclasses import dataclass

from tillbook.domain.user.exceptions import InvalidEmailError

EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,}$")


@dataclass(frozen=True)
class Email:
    """A syntactically valid, lower-cased e-mail address."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        if not normalized:
            raise InvalidEmailError("Email cannot be empty")
        if not EMAIL_PATTERN.match(normalized):
            raise InvalidEmailError(f"Invalid email format: {self.value}")
        object.__setattr__(self, "value", normalized)

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    def __str__(self) -> str:
        return self.value
