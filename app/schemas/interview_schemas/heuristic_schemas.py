"""
Description:
Schemas exchanged with the heuristic interview engine: job context, per-answer
analysis, follow-up turns and the end-of-interview performance report.

Dependencies:
- pydantic: For data validation and serialization.
- typing: For type annotations.

Author: @kcaparas1630
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple


class JobContext(BaseModel):
    """Job title and description with the keywords extracted from it."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Job title")
    description: str = Field(..., description="Free-text job description")
    keywords: Tuple[str, ...] = Field(default=(), description="Vocabulary terms found in the description")


class InterviewDataItem(BaseModel):
    question: str
    answer: str = ""
    feedback: Optional[str] = None


class AnswerAnalysis(BaseModel):
    score: int = Field(..., ge=0, le=100, description="Answer score between 0 and 100")
    feedback: str = Field(..., description="Score-tier feedback sentence")


class QuestionAnalysis(BaseModel):
    question: str
    score: int = Field(..., ge=0, le=100)
    feedback: str


class FollowUp(BaseModel):
    question: str = Field(..., description="Next question to ask the candidate")
    feedback: str = Field(..., description="Inline feedback on the answer just given")


class ScoreBreakdown(BaseModel):
    overall: int = Field(..., ge=0, le=100)
    technical: int = Field(..., ge=0, le=100)
    communication: int = Field(..., ge=0, le=100)
    problem_solving: int = Field(..., ge=0, le=100)


class PerformanceReport(BaseModel):
    """
    End-of-interview report produced by the heuristic engine.

    Category scores are proxies derived from the overall score, not from
    category-specific signal in the answers.
    """
    overall_score: int = Field(..., ge=0, le=100)
    technical_score: int = Field(..., ge=0, le=100)
    communication_score: int = Field(..., ge=0, le=100)
    problem_solving_score: int = Field(..., ge=0, le=100)
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    question_analysis: List[QuestionAnalysis] = Field(default_factory=list)

    @property
    def score_breakdown(self) -> ScoreBreakdown:
        return ScoreBreakdown(
            overall=self.overall_score,
            technical=self.technical_score,
            communication=self.communication_score,
            problem_solving=self.problem_solving_score,
        )
