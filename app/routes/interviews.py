"""
Interview API Routes

Description:
This module defines FastAPI routes for creating interviews, reading and
updating them, listing their questions and storing answers.

Arguments:
- request: Request bodies validated against app.schemas.interview_schemas.

Returns:
- Interview and question records serialized through response models.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- app.schemas.interview_schemas: For request and response schemas.
- app.services.interview_service: For the interview lifecycle operations.
- loguru: For logging information about the requests.

Author: @kcaparas1630

"""
from typing import List
from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED
from loguru import logger
from app.schemas.interview_schemas import (
    InterviewCreateRequest,
    InterviewUpdateRequest,
    InterviewResponse,
    QuestionRecord,
    AnswerSubmission,
    AnswerSubmissionResponse
)
from app.services.interview_service import InterviewService, get_interview_service

router = APIRouter(
    prefix="/api",
    tags=["interviews"],
    responses={404: {"description": "Not found"}}
)


@router.post("/interviews", response_model=InterviewResponse, status_code=HTTP_201_CREATED)
async def create_interview(request: InterviewCreateRequest, service: InterviewService = Depends(get_interview_service)):
    """
    Create an interview and generate its questions from the job description.
    """
    logger.info(f"Creating interview for '{request.title}' with {request.num_questions} questions")
    return await service.create_interview(request)


@router.get("/interviews", response_model=List[InterviewResponse])
async def list_interviews(service: InterviewService = Depends(get_interview_service)):
    return service.list_interviews()


@router.get("/interviews/{interview_id}", response_model=InterviewResponse)
async def get_interview(interview_id: int, service: InterviewService = Depends(get_interview_service)):
    return service.get_interview(interview_id)


@router.put("/interviews/{interview_id}", response_model=InterviewResponse)
async def update_interview(interview_id: int, request: InterviewUpdateRequest, service: InterviewService = Depends(get_interview_service)):
    return service.update_interview(interview_id, request)


@router.get("/interviews/{interview_id}/questions", response_model=List[QuestionRecord])
async def get_interview_questions(interview_id: int, service: InterviewService = Depends(get_interview_service)):
    return service.get_questions(interview_id)


@router.post("/questions/{question_id}/answer", response_model=AnswerSubmissionResponse)
async def submit_answer(question_id: int, request: AnswerSubmission, service: InterviewService = Depends(get_interview_service)):
    """
    Store the candidate's answer without evaluating it.
    """
    service.submit_answer(question_id, request.answer)
    return {"success": True}
