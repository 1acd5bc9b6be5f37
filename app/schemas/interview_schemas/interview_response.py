"""
Description:
Response schemas for stored interviews and their question records.

Dependencies:
- pydantic: For data validation and serialization from ORM objects.
- typing: For type annotations.

Author: @kcaparas1630
"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class InterviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    company: Optional[str] = None
    job_description: str
    date: datetime
    score: Optional[int] = None
    status: str
    duration: Optional[int] = None
    difficulty: str
    feedback: Optional[Dict[str, Any]] = None


class QuestionRecord(BaseModel):
    """A generated or follow-up question and, once answered, its evaluation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    interview_id: int
    question: str
    answer: Optional[str] = None
    feedback: Optional[str] = None
    score: Optional[int] = Field(None, ge=0, le=100)


class AnswerSubmissionResponse(BaseModel):
    success: bool


class NextQuestionResponse(BaseModel):
    feedback: str
    score: int = Field(default=0, description="0 when the heuristic engine handled the answer")
    question: Optional[str] = Field(None, description="Follow-up question, when requested")
    question_id: Optional[int] = None
