from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Child(BaseModel):
    """A child from the Baby Buddy roster: read-only from our side."""
    id: int = Field(..., ge=1)
    first_name: str
    last_name: str = ""
    birth_date: date
    slug: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def age_in_months(self, today: date) -> int:
        months = (today.year - self.birth_date.year) * 12 + (today.month - self.birth_date.month)
        if today.day < self.birth_date.day:
            months -= 1
        return max(months, 0)

    def age_description(self, today: date) -> str:
        """Months under two years, then years and months."""
        months = self.age_in_months(today)
        if months < 24:
            return f"{months} month{'' if months == 1 else 's'}"

        years, rest = divmod(months, 12)
        text = f"{years} year{'' if years == 1 else 's'}"
        if rest:
            text += f", {rest} month{'' if rest == 1 else 's'}"
        return text
