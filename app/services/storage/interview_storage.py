"""
Interview Storage Module

CRUD operations for interviews and their question records on top of a
SQLAlchemy session. Question scores are clamped to 0-100 whenever they are
written.

Dependencies:
- sqlalchemy: For ORM sessions and queries.
- loguru: For logging.
- app.models.interview_models: For the Interview and InterviewQuestion models.

Author: @kcaparas1630
"""

from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from loguru import logger
from app.models.interview_models import Interview, InterviewQuestion

INTERVIEW_FIELDS = {"title", "company", "job_description", "score", "status", "duration", "difficulty", "feedback"}
QUESTION_FIELDS = {"question", "answer", "feedback", "score"}


def clamp_question_score(score: Optional[int]) -> Optional[int]:
    if score is None:
        return None
    return max(0, min(100, int(score)))


class InterviewStorage:
    """
    Storage for interviews and the questions asked in them.
    """

    def __init__(self, db: Session):
        self.db = db

    # Interview methods
    def create_interview(self, data: Dict[str, Any]) -> Interview:
        interview = Interview(**{key: value for key, value in data.items() if key in INTERVIEW_FIELDS})
        self.db.add(interview)
        self.db.commit()
        self.db.refresh(interview)
        logger.info(f"Created interview {interview.id} for '{interview.title}'")
        return interview

    def get_interview(self, interview_id: int) -> Optional[Interview]:
        return self.db.get(Interview, interview_id)

    def list_interviews(self) -> List[Interview]:
        return list(self.db.scalars(select(Interview).order_by(Interview.date.desc(), Interview.id.desc())))

    def update_interview(self, interview_id: int, changes: Dict[str, Any]) -> Optional[Interview]:
        interview = self.get_interview(interview_id)
        if interview is None:
            return None
        for key, value in changes.items():
            if key in INTERVIEW_FIELDS:
                setattr(interview, key, value)
        self.db.commit()
        self.db.refresh(interview)
        return interview

    # Question methods
    def create_question(self, interview_id: int, question: str, answer: Optional[str] = "", feedback: Optional[str] = "", score: Optional[int] = None) -> InterviewQuestion:
        record = InterviewQuestion(
            interview_id=interview_id,
            question=question,
            answer=answer,
            feedback=feedback,
            score=clamp_question_score(score)
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def create_questions(self, interview_id: int, questions: List[str]) -> List[InterviewQuestion]:
        records = [
            InterviewQuestion(interview_id=interview_id, question=question, answer="", feedback="", score=None)
            for question in questions
        ]
        self.db.add_all(records)
        self.db.commit()
        for record in records:
            self.db.refresh(record)
        logger.info(f"Stored {len(records)} questions for interview {interview_id}")
        return records

    def get_question(self, question_id: int) -> Optional[InterviewQuestion]:
        return self.db.get(InterviewQuestion, question_id)

    def get_questions_by_interview_id(self, interview_id: int) -> List[InterviewQuestion]:
        return list(self.db.scalars(
            select(InterviewQuestion)
            .where(InterviewQuestion.interview_id == interview_id)
            .order_by(InterviewQuestion.id)
        ))

    def update_question(self, question_id: int, changes: Dict[str, Any]) -> Optional[InterviewQuestion]:
        record = self.get_question(question_id)
        if record is None:
            return None
        for key, value in changes.items():
            if key not in QUESTION_FIELDS:
                continue
            if key == "score":
                value = clamp_question_score(value)
            setattr(record, key, value)
        self.db.commit()
        self.db.refresh(record)
        return record
