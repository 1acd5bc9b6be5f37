"""Interview Models Module

This module defines SQLAlchemy models for simulated interviews and the
questions asked in them. A question row is created for every generated or
follow-up question, filled in when the candidate answers, and updated again
when the answer is evaluated.

Dependencies:
- sqlalchemy: For ORM functionality and database modeling.
- datetime: For timestamp handling.
- typing: For type annotations and optional fields.

Author: @kcaparas1630
"""

from typing import Any, Dict, List, Optional
from sqlalchemy import ForeignKey, String, Text, DateTime, func, JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from datetime import datetime

class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    Provides the foundation for all database models in the application.
    """
    pass

class Interview(Base):
    """Simulated interview record.

    Holds the job the candidate is practicing for, the interview status and,
    once completed, the overall score and the full performance report.

    Attributes:
        id (int): Primary key, auto-incrementing
        title (str): Job title
        company (str, optional): Company name
        job_description (str): Free-text job description
        date (datetime): When the interview was created
        score (int, optional): Overall score, set on completion
        status (str): "pending" or "completed"
        duration (int, optional): Interview duration in seconds
        difficulty (str): "easy", "medium" or "hard"
        feedback (dict, optional): Performance report stored as JSON
        questions (List[InterviewQuestion]): Questions asked in this interview
    """
    __tablename__ = "interviews"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200))
    company: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    job_description: Mapped[str] = mapped_column(Text)
    date: Mapped[datetime] = mapped_column(DateTime, default=func.now())
    score: Mapped[Optional[int]] = mapped_column(nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="pending")
    duration: Mapped[Optional[int]] = mapped_column(nullable=True)
    difficulty: Mapped[str] = mapped_column(String(20), default="medium")
    feedback: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)
    questions: Mapped[List["InterviewQuestion"]] = relationship(
        "InterviewQuestion", back_populates="interview", cascade="all", order_by="InterviewQuestion.id"
    )

    def __repr__(self):
        return f"Interview(id={self.id}, title={self.title}, status={self.status})"

class InterviewQuestion(Base):
    """Question asked within a specific interview.

    Attributes:
        id (int): Primary key, auto-incrementing
        interview_id (int): Foreign key to Interview table
        question (str): The question text
        answer (str, optional): Candidate's answer
        feedback (str, optional): Feedback on the answer
        score (int, optional): Score assigned to the answer, within 0-100
        interview (Interview): Many-to-one relationship with Interview
    """
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    interview_id: Mapped[int] = mapped_column(ForeignKey("interviews.id"))
    question: Mapped[str] = mapped_column(Text)
    answer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    feedback: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    score: Mapped[Optional[int]] = mapped_column(nullable=True)
    # Establish many-to-one relationship with Interview
    interview: Mapped["Interview"] = relationship("Interview", back_populates="questions")

    def __repr__(self):
        return f"InterviewQuestion(id={self.id}, question={self.question})"
