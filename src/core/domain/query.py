"""Query options for the listing search.

Date windows and the age/size/gender filter vocabulary live in the domain
layer so the CLI and the URL builder share a single source of truth.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field


class DateWindow(str, Enum):
    """Relative posting-date window."""

    TODAY = "today"
    LAST_3_DAYS = "3days"

    @classmethod
    def _missing_(cls, value: object) -> "DateWindow | None":
        # Accept "TODAY", "3DAYS", "last_3_days"...
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        return None

    @property
    def offset_days(self) -> int:
        """Days to go back from today before truncating to midnight."""

        return 2 if self is DateWindow.LAST_3_DAYS else 0


class AgeOption(str, Enum):
    BABY = "baby"
    YOUNG = "young"
    ADULT = "adult"
    SENIOR = "senior"


class SizeOption(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


class GenderOption(str, Enum):
    MALE = "male"
    FEMALE = "female"


def parse_tokens(text: str | Iterable[str] | None, allowed: type[Enum]) -> list[str]:
    """Normalize user input into valid, lowercase, de-duplicated tokens.

    Accepts a comma-separated string or an iterable of strings. Unknown
    tokens are dropped silently; order of first appearance is kept.
    """

    if not text:
        return []
    raw = text.split(",") if isinstance(text, str) else list(text)
    valid = {member.value for member in allowed}  # type: ignore[attr-defined]

    out: list[str] = []
    for token in raw:
        value = token.strip().lower()
        if value in valid and value not in out:
            out.append(value)
    return out


class FilterSelection(BaseModel):
    """Age/size/gender selections chosen by the user."""

    ages: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list)
    genders: list[str] = Field(default_factory=list)

    @classmethod
    def parse(
        cls,
        ages: str | Iterable[str] | None = None,
        sizes: str | Iterable[str] | None = None,
        genders: str | Iterable[str] | None = None,
    ) -> "FilterSelection":
        return cls(
            ages=parse_tokens(ages, AgeOption),
            sizes=parse_tokens(sizes, SizeOption),
            genders=parse_tokens(genders, GenderOption),
        )

    def as_csv(self) -> tuple[str, str, str]:
        """Comma-joined (age, size, gender) strings for the URL builder."""

        return ",".join(self.ages), ",".join(self.sizes), ",".join(self.genders)

    def is_empty(self) -> bool:
        return not (self.ages or self.sizes or self.genders)
