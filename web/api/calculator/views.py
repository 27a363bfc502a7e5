"""Calculator API views - thin layer over services."""

from app.container import container
from app.models.scoring import UserAnswer
from web.api.errors import NotFoundError, validate_answers, validate_mode

from .schemas import (
    AnswerItem,
    ComparisonResponse,
    IssueInsightItem,
    IssueInsightsResponse,
    QuestionItem,
    QuestionsResponse,
    ResultsResponse,
    ScoreItem,
    ThesisResultItem,
)


def _answers(items: list[AnswerItem]) -> dict[str, UserAnswer]:
    answers = {item.thesis_id: item.to_entity() for item in items}
    validate_answers(answers)
    return answers


def get_questions(mode: str = "full", seed: int | None = None) -> QuestionsResponse:
    """Get theses for a quiz run."""
    validate_mode(mode)
    theses = container.calculator.questions(mode, seed)

    items = [
        QuestionItem(
            id=t.id,
            issue_id=t.issue_id,
            text=t.text,
            scale_min=t.scale_min,
            scale_max=t.scale_max,
        )
        for t in theses
    ]

    return QuestionsResponse(mode=mode, total=len(items), items=items)


def get_results(items: list[AnswerItem], red_lines: list[str] | None = None) -> ResultsResponse:
    """Score a quiz submission against all parties."""
    answers = _answers(items)
    red_lines = red_lines or []
    data = container.calculator.evaluate(answers, red_lines)

    scores = [ScoreItem.model_validate(r.to_dict()) for r in data]

    return ResultsResponse(
        answered=sum(1 for a in answers.values() if not a.skipped),
        red_lines=red_lines,
        items=scores,
    )


def get_comparison(items: list[AnswerItem], party_id: str) -> ComparisonResponse:
    """Get agreement breakdown against one party."""
    answers = _answers(items)
    data = container.calculator.comparison(answers, party_id)
    if data is None:
        raise NotFoundError(f"Party not found: {party_id}")

    def convert(results):
        return [ThesisResultItem.model_validate(t.to_dict()) for t in results]

    return ComparisonResponse(
        party_id=party_id,
        strong_agreements=convert(data.strong_agreements),
        partial_agreements=convert(data.partial_agreements),
        strong_disagreements=convert(data.strong_disagreements),
    )


def get_issue_insights(items: list[AnswerItem], party_id: str) -> IssueInsightsResponse:
    """Get per-issue alignment with one party."""
    answers = _answers(items)
    if container.reference.get_party(party_id) is None:
        raise NotFoundError(f"Party not found: {party_id}")

    data = container.calculator.issue_insights(answers, party_id)
    return IssueInsightsResponse(
        party_id=party_id,
        items=[IssueInsightItem.model_validate(i.to_dict()) for i in data],
    )
