"""Services package - service class exports."""

from app.services.metrics import ProfileService
from app.services.polls import PollService
from app.services.scoring import CalculatorService

__all__ = [
    "CalculatorService",
    "PollService",
    "ProfileService",
]
