"""
Follow-up Generator

Picks the next question of a heuristic interview turn: a keyword that has
not been asked about yet combined with a follow-up template, or a generic
follow-up once every keyword has been covered.

Dependencies:
- random: For the injectable, seedable selection source.
- loguru: For logging fallbacks.
- app.constants.interview_templates: For the follow-up templates.
- app.services.heuristic_engine: For keyword extraction and inline feedback.

Author: @kcaparas1630
"""
import random
from typing import List, Optional, Sequence
from loguru import logger
from app.constants.interview_templates import InterviewTemplates, get_interview_templates
from app.schemas.interview_schemas import FollowUp
from app.services.heuristic_engine.keyword_extractor import extract_keywords
from app.services.heuristic_engine.answer_analyzer import generate_inline_feedback


def find_unused_keywords(job_keywords: Sequence[str], previous_questions: Sequence[str]) -> List[str]:
    """Keywords that do not appear in any previously asked question."""
    asked = [question.lower() for question in previous_questions]
    return [keyword for keyword in job_keywords if not any(keyword in question for question in asked)]


def select_follow_up_question(
    job_keywords: Sequence[str],
    previous_questions: Sequence[str],
    templates: Optional[InterviewTemplates] = None,
    rng: Optional[random.Random] = None,
) -> str:
    templates = templates or get_interview_templates()
    rng = rng or random.Random()

    unused_keywords = find_unused_keywords(job_keywords, previous_questions)
    if unused_keywords:
        keyword = rng.choice(unused_keywords)
        template = rng.choice(templates.follow_up_templates)
        return template.format(keyword=keyword)

    return rng.choice(templates.general_follow_up_questions)


def generate_next_question(
    job_description: str,
    current_question: str,
    candidate_answer: str,
    previous_questions: Optional[Sequence[str]] = None,
    templates: Optional[InterviewTemplates] = None,
    rng: Optional[random.Random] = None,
) -> FollowUp:
    """
    Generate inline feedback on an answer and the next question to ask.

    Args:
        job_description (str): The job description; keywords are re-extracted.
        current_question (str): The question that was just answered.
        candidate_answer (str): The answer just given.
        previous_questions (Sequence[str], optional): Questions asked so far.
        templates (InterviewTemplates, optional): Template set to use.
        rng (random.Random, optional): Source of randomness.

    Returns:
        FollowUp: Next question and feedback. Never raises; any error yields
        the fixed fallback pair.
    """
    templates = templates or get_interview_templates()
    rng = rng or random.Random()

    try:
        job_keywords = extract_keywords(job_description, templates)
        feedback = generate_inline_feedback(candidate_answer, job_keywords, templates, rng)
        question = select_follow_up_question(job_keywords, previous_questions or [], templates, rng)
        return FollowUp(question=question, feedback=feedback)
    except Exception as e:
        logger.error(f"Error generating next question: {e}")
        return FollowUp(
            question=templates.fallback_follow_up_question,
            feedback=templates.fallback_follow_up_feedback,
        )
