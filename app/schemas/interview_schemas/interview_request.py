"""
Description:
Request schemas for the interview and AI interviewer routes.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.

Author: @kcaparas1630
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional

Difficulty = Literal["easy", "medium", "hard"]
InterviewStatus = Literal["pending", "completed"]


class InterviewCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    company: Optional[str] = Field(None, max_length=200)
    job_description: str = Field(..., min_length=1)
    difficulty: Difficulty = "medium"
    num_questions: int = Field(default=5, ge=1, le=50)


class InterviewUpdateRequest(BaseModel):
    status: Optional[InterviewStatus] = None
    score: Optional[int] = Field(None, ge=0, le=100)
    duration: Optional[int] = Field(None, ge=0, description="Interview duration in seconds")
    feedback: Optional[Dict[str, Any]] = None


class AnswerSubmission(BaseModel):
    answer: str


class NextQuestionRequest(BaseModel):
    interview_id: int
    current_question_id: int
    answer: str
    previous_questions: List[str] = Field(default_factory=list)
    include_follow_up: bool = Field(False, description="Store and return a follow-up question")


class CompleteInterviewRequest(BaseModel):
    interview_id: int
    duration: Optional[int] = Field(None, ge=0)
