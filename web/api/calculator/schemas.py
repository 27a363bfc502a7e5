"""Calculator API request/response schemas."""

from pydantic import BaseModel, Field

from app.models.scoring import UserAnswer


class AnswerItem(BaseModel):
    """Single answer from the quiz form."""

    thesis_id: str = Field(alias="thesisId")
    value: float
    weight: int = 1

    class Config:
        populate_by_name = True

    def to_entity(self) -> UserAnswer:
        return UserAnswer(thesis_id=self.thesis_id, value=self.value, weight=self.weight)


class QuestionItem(BaseModel):
    """Thesis presented in the quiz."""

    id: str
    issue_id: str
    text: str
    scale_min: int
    scale_max: int


class QuestionsResponse(BaseModel):
    """Quiz questions response."""

    mode: str
    total: int
    items: list[QuestionItem]


class ThesisResultItem(BaseModel):
    """Per-thesis comparison."""

    thesis_id: str
    user_value: float
    party_value: float
    difference: float
    weight: int
    confidence: float
    contribution: float


class ScoreItem(BaseModel):
    """Agreement with one party."""

    party_id: str
    party_name: str
    party_category: str
    total_score: float
    max_possible_score: float
    agreement_percentage: float
    confidence_score: float
    coverage_percentage: int
    thesis_results: list[ThesisResultItem]


class ResultsResponse(BaseModel):
    """Quiz results response."""

    answered: int
    red_lines: list[str]
    items: list[ScoreItem]


class ComparisonResponse(BaseModel):
    """Detailed comparison with one party."""

    party_id: str
    strong_agreements: list[ThesisResultItem]
    partial_agreements: list[ThesisResultItem]
    strong_disagreements: list[ThesisResultItem]


class IssueInsightItem(BaseModel):
    """Alignment within one issue."""

    issue_id: str
    title: str
    description: str
    alignment: float
    avg_confidence: float
    count: int


class IssueInsightsResponse(BaseModel):
    """Per-issue alignment with one party."""

    party_id: str
    items: list[IssueInsightItem]
