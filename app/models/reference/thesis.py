"""Issue (topic) and thesis (scored statement) reference data."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass
class Issue(BaseEntity):
    """Topic grouping theses."""

    id: str
    title: str
    description: str = ""
    order: int = 0


@dataclass
class Thesis(BaseEntity):
    """Single statement the user and the parties take a stance on."""

    id: str
    issue_id: str
    text: str
    scale_min: int = -2
    scale_max: int = 2
    order: int = 0
    is_active: bool = True
