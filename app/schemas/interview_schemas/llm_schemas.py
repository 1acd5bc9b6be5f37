"""
Description:
Schemas for results parsed out of hosted language model replies.

Dependencies:
- pydantic: For data validation and settings management.

Author: @kcaparas1630
"""
from pydantic import BaseModel, Field
from typing import List


class LLMAnswerAnalysis(BaseModel):
    score: int = Field(default=5, description="Answer score between 1 and 10")
    feedback: str = Field(default="No feedback provided.")
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)


class LLMPerformanceReport(BaseModel):
    overall_score: int = Field(default=5, description="Overall score between 1 and 10")
    summary: str = Field(default="No summary provided.")
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
