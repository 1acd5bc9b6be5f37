"""
Interview Service

Runs the interview lifecycle: question generation at setup, answer evaluation
on every turn, and the performance report at the end. Each step asks the
hosted language model first and falls back to the heuristic engine when that
call fails, so the interview never stalls on an AI outage.

Dependencies:
- fastapi: For dependency injection of the database session and services.
- sqlalchemy: For the request-scoped database session.
- loguru: For logging fallbacks.
- app.services.llm_interviewer: For the hosted model path.
- app.services.heuristic_engine: For the rule-based fallback path.
- app.services.storage: For interview persistence.

Author: @kcaparas1630
"""

from typing import List, Union
from fastapi import Depends
from sqlalchemy.orm import Session
from loguru import logger
from app.database import get_db_session
from app.errors.exceptions import InterviewNotFound, QuestionNotFound
from app.models.interview_models import Interview, InterviewQuestion
from app.schemas.interview_schemas import (
    InterviewCreateRequest,
    InterviewUpdateRequest,
    NextQuestionRequest,
    NextQuestionResponse,
    CompleteInterviewRequest,
    InterviewDataItem,
    PerformanceReport,
    LLMPerformanceReport
)
from app.services.heuristic_engine import HeuristicInterviewEngine, get_heuristic_engine
from app.services.llm_interviewer import LLMInterviewerService, get_llm_interviewer_service
from app.services.storage.interview_storage import InterviewStorage

InterviewReport = Union[PerformanceReport, LLMPerformanceReport]


class InterviewService:
    """
    Service class coordinating storage, the hosted model and the heuristic engine.
    """

    def __init__(self, storage: InterviewStorage, llm_service: LLMInterviewerService, engine: HeuristicInterviewEngine):
        self.storage = storage
        self.llm_service = llm_service
        self.engine = engine

    def get_interview(self, interview_id: int) -> Interview:
        interview = self.storage.get_interview(interview_id)
        if interview is None:
            raise InterviewNotFound(interview_id)
        return interview

    def list_interviews(self) -> List[Interview]:
        return self.storage.list_interviews()

    def update_interview(self, interview_id: int, request: InterviewUpdateRequest) -> Interview:
        self.get_interview(interview_id)
        return self.storage.update_interview(interview_id, request.model_dump(exclude_unset=True))

    def get_questions(self, interview_id: int) -> List[InterviewQuestion]:
        self.get_interview(interview_id)
        return self.storage.get_questions_by_interview_id(interview_id)

    def get_question(self, question_id: int) -> InterviewQuestion:
        question = self.storage.get_question(question_id)
        if question is None:
            raise QuestionNotFound(question_id)
        return question

    async def generate_questions(self, job_title: str, job_description: str, num_questions: int) -> List[str]:
        try:
            return await self.llm_service.generate_interview_questions(job_description, num_questions)
        except Exception as e:
            logger.error(f"Error using AI for question generation, falling back to local: {e}")
            return self.engine.generate_interview_questions(job_title, job_description, num_questions)

    async def create_interview(self, request: InterviewCreateRequest) -> Interview:
        """
        Create an interview and store its initial question set.

        Args:
            request (InterviewCreateRequest): Job details and question count.

        Returns:
            Interview: The stored interview.
        """
        questions = await self.generate_questions(request.title, request.job_description, request.num_questions)

        interview = self.storage.create_interview(request.model_dump(exclude={"num_questions"}))
        self.storage.create_questions(interview.id, questions)
        return interview

    def submit_answer(self, question_id: int, answer: str) -> InterviewQuestion:
        self.get_question(question_id)
        return self.storage.update_question(question_id, {"answer": answer})

    async def next_question(self, request: NextQuestionRequest) -> NextQuestionResponse:
        """
        Store an answer, evaluate it, and optionally queue a follow-up question.

        The hosted model returns a 1-10 score with its feedback. When it is
        unavailable, the heuristic follow-up generator supplies inline feedback
        and the score is left unset. Without explicit ``previous_questions``
        the interview's questions up to and including the current one count as
        already asked.

        Args:
            request (NextQuestionRequest): The answered question and answer text.

        Returns:
            NextQuestionResponse: Feedback, score and the follow-up question if requested.
        """
        interview = self.get_interview(request.interview_id)
        current_question = self.get_question(request.current_question_id)
        if current_question.interview_id != interview.id:
            raise QuestionNotFound(request.current_question_id)

        self.storage.update_question(current_question.id, {"answer": request.answer})

        # Questions are asked in id order, so later rows have not been reached yet
        previous_questions = request.previous_questions or [
            question.question
            for question in self.storage.get_questions_by_interview_id(interview.id)
            if question.id <= current_question.id
        ]

        follow_up = None
        try:
            analysis = await self.llm_service.analyze_answer(
                current_question.question,
                request.answer,
                interview.job_description
            )
            feedback, score = analysis.feedback, analysis.score or 0
        except Exception as e:
            logger.error(f"Error using AI for answer analysis, falling back to local: {e}")
            follow_up = self.engine.generate_next_question(
                interview.job_description,
                current_question.question,
                request.answer,
                previous_questions
            )
            # The heuristic turn does not score answers
            feedback, score = follow_up.feedback, 0

        self.storage.update_question(current_question.id, {"feedback": feedback, "score": score or None})
        response = NextQuestionResponse(feedback=feedback, score=score)

        if request.include_follow_up:
            if follow_up is None:
                follow_up = self.engine.generate_next_question(
                    interview.job_description,
                    current_question.question,
                    request.answer,
                    previous_questions
                )
            record = self.storage.create_question(interview.id, follow_up.question)
            response.question = record.question
            response.question_id = record.id

        return response

    async def complete_interview(self, request: CompleteInterviewRequest) -> InterviewReport:
        """
        Produce the performance report and mark the interview completed.

        Heuristic reports carry a per-question analysis that is written back to
        every question. Model reports do not, so unscored questions receive the
        overall score instead.

        Args:
            request (CompleteInterviewRequest): Interview id and duration.

        Returns:
            PerformanceReport | LLMPerformanceReport: The stored report.
        """
        interview = self.get_interview(request.interview_id)
        questions = self.storage.get_questions_by_interview_id(interview.id)

        try:
            report = await self.llm_service.generate_performance_report(
                [question.question for question in questions],
                [question.answer or "No answer provided" for question in questions],
                interview.job_description
            )
        except Exception as e:
            logger.error(f"Error using AI for performance report, falling back to local: {e}")
            interview_data = [
                InterviewDataItem(question=question.question, answer=question.answer or "", feedback=question.feedback or "")
                for question in questions
            ]
            report = self.engine.generate_performance_report(interview.title, interview.job_description, interview_data)

        changes = {"status": "completed", "score": report.overall_score, "feedback": report.model_dump()}
        if request.duration is not None:
            changes["duration"] = request.duration
        self.storage.update_interview(interview.id, changes)

        if isinstance(report, PerformanceReport):
            for question, analysis in zip(questions, report.question_analysis):
                self.storage.update_question(question.id, {"score": analysis.score, "feedback": analysis.feedback})
        else:
            for question in questions:
                if not question.score:
                    self.storage.update_question(question.id, {"score": report.overall_score})

        logger.info(f"Completed interview {interview.id} with score {report.overall_score}")
        return report


def get_interview_service(
    db: Session = Depends(get_db_session),
    llm_service: LLMInterviewerService = Depends(get_llm_interviewer_service),
    engine: HeuristicInterviewEngine = Depends(get_heuristic_engine)
) -> InterviewService:
    """FastAPI dependency assembling an InterviewService for one request."""
    return InterviewService(InterviewStorage(db), llm_service, engine)
