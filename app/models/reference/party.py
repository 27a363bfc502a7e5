"""Party reference data."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity

MAIN = "main"
SECONDARY = "secondary"
CATEGORIES = (MAIN, SECONDARY)


@dataclass
class Party(BaseEntity):
    """Political party as shown in the calculator and on profile pages.

    The free-text lists (pros, cons, ...) are curated by hand and are
    independent of any computed metric.
    """

    id: str
    name: str
    short_name: str = ""
    category: str = SECONDARY
    poll_percentage: float | None = None
    slug: str = ""
    description: str = ""
    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)
    historical_achievements: list[str] = field(default_factory=list)
    controversies: list[str] = field(default_factory=list)

    @property
    def label(self) -> str:
        return self.short_name or self.name or self.id.upper()


def category_rank(category: str) -> int:
    """Sort precedence: main first, secondary next, anything else last."""
    try:
        return CATEGORIES.index(category)
    except ValueError:
        return len(CATEGORIES)
