"""API errors and validation helpers."""

from collections.abc import Mapping

from app.models.scoring import UserAnswer
from app.services.scoring import MODES


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Calculator answer scale
MIN_VALUE = -2
MAX_VALUE = 2
MAX_WEIGHT = 3


def validate_answers(answers: Mapping[str, UserAnswer]) -> None:
    """Validate answer values and weights (weight 0 = skipped)."""
    for thesis_id, answer in answers.items():
        if thesis_id != answer.thesis_id:
            raise ValidationError(f"Answer key {thesis_id} does not match thesis {answer.thesis_id}")
        if not MIN_VALUE <= answer.value <= MAX_VALUE:
            raise ValidationError(f"Invalid value for {thesis_id}: {answer.value}. Must be between {MIN_VALUE} and {MAX_VALUE}")
        if answer.weight not in range(MAX_WEIGHT + 1):
            raise ValidationError(f"Invalid weight for {thesis_id}: {answer.weight}. Must be 0 (skip) to {MAX_WEIGHT}")


def validate_mode(mode: str) -> None:
    """Validate quiz mode."""
    if mode not in MODES:
        raise ValidationError(f"Invalid mode: {mode}. Must be one of {', '.join(MODES)}")
