"""
Heuristic Interview Engine

Rule-based stand-in for the hosted language model. Bundles the keyword
extractor, question synthesizer, answer analyzer, follow-up generator and
report aggregator behind one object that owns the template set and random
source they share.

Dependencies:
- random: For the injectable random source.
- loguru: For logging engine initialization.
- app.constants.interview_templates: For the shared template set.
- app.services.heuristic_engine: For the individual components.

Author: @kcaparas1630
"""
import random
import threading
from typing import List, Optional, Sequence
from loguru import logger
from app.constants.interview_templates import InterviewTemplates, get_interview_templates
from app.schemas.interview_schemas import AnswerAnalysis, FollowUp, JobContext, PerformanceReport
from app.services.heuristic_engine.keyword_extractor import extract_keywords, build_job_context
from app.services.heuristic_engine.question_synthesizer import generate_interview_questions, generate_questions
from app.services.heuristic_engine.answer_analyzer import analyze_answer
from app.services.heuristic_engine.follow_up_generator import generate_next_question
from app.services.heuristic_engine.report_aggregator import InterviewData, generate_performance_report


class HeuristicInterviewEngine:
    """
    Rule-based interview engine used when the language model is unavailable.

    Pass a seeded ``random.Random`` to make question order, follow-up choices
    and category scores reproducible.
    """

    def __init__(self, templates: Optional[InterviewTemplates] = None, rng: Optional[random.Random] = None):
        self.templates = templates or get_interview_templates()
        self.rng = rng or random.Random()

    def extract_keywords(self, job_description: str) -> List[str]:
        return extract_keywords(job_description, self.templates)

    def build_job_context(self, job_title: str, job_description: str) -> JobContext:
        return build_job_context(job_title, job_description, self.templates)

    def generate_questions(self, job_title: str, keywords: Sequence[str], count: int) -> List[str]:
        return generate_questions(job_title, keywords, count, self.templates, self.rng)

    def generate_interview_questions(self, job_title: str, job_description: str, count: int = 10) -> List[str]:
        return generate_interview_questions(job_title, job_description, count, self.templates, self.rng)

    def analyze_answer(self, answer: str, job_keywords: Sequence[str]) -> AnswerAnalysis:
        return analyze_answer(answer, job_keywords, self.templates)

    def generate_next_question(
        self,
        job_description: str,
        current_question: str,
        candidate_answer: str,
        previous_questions: Optional[Sequence[str]] = None,
    ) -> FollowUp:
        return generate_next_question(
            job_description, current_question, candidate_answer, previous_questions, self.templates, self.rng
        )

    def generate_performance_report(self, job_title: str, job_description: str, interview_data: InterviewData) -> PerformanceReport:
        return generate_performance_report(job_title, job_description, interview_data, self.templates, self.rng)


_engine: Optional[HeuristicInterviewEngine] = None
_engine_lock = threading.Lock()


def get_heuristic_engine() -> HeuristicInterviewEngine:
    """Get the process-wide engine, seeded from OS entropy."""
    global _engine

    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = HeuristicInterviewEngine()
                logger.info("Heuristic interview engine initialized")

    return _engine
