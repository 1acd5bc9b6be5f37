"""
AI Interviewer API Routes

Description:
This module defines FastAPI routes for evaluating an answer during the
interview and for producing the final performance report. Both try the
hosted language model first and fall back to the heuristic engine.

Arguments:
- request: NextQuestionRequest or CompleteInterviewRequest.

Returns:
- NextQuestionResponse with feedback, score and an optional follow-up question.
- The performance report stored on the interview.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- app.schemas.interview_schemas: For request and response schemas.
- app.services.interview_service: For the evaluation and reporting flow.
- loguru: For logging information about the requests.

Author: @kcaparas1630

"""
from typing import Union
from fastapi import APIRouter, Depends
from loguru import logger
from app.schemas.interview_schemas import (
    NextQuestionRequest,
    NextQuestionResponse,
    CompleteInterviewRequest,
    PerformanceReport,
    LLMPerformanceReport
)
from app.services.interview_service import InterviewService, get_interview_service

router = APIRouter(
    prefix="/api/ai",
    tags=["ai-interviewer"],
    responses={404: {"description": "Not found"}}
)


@router.post("/next-question", response_model=NextQuestionResponse)
async def next_question(request: NextQuestionRequest, service: InterviewService = Depends(get_interview_service)):
    """
    Store and evaluate an answer, returning feedback for the candidate.
    """
    logger.info(f"Evaluating answer to question {request.current_question_id} of interview {request.interview_id}")
    return await service.next_question(request)


@router.post("/complete-interview", response_model=Union[PerformanceReport, LLMPerformanceReport])
async def complete_interview(request: CompleteInterviewRequest, service: InterviewService = Depends(get_interview_service)):
    """
    Generate the performance report and mark the interview completed.
    """
    logger.info(f"Completing interview {request.interview_id}")
    return await service.complete_interview(request)
