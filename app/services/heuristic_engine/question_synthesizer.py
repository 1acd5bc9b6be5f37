"""
Question Synthesizer

Builds an interview question set from three template pools (technical,
behavioral and role-specific), shuffles them with an injected random source
and keeps the requested number of questions.

Dependencies:
- random: For the injectable, seedable shuffle source.
- loguru: For logging fallbacks.
- app.constants.interview_templates: For the question templates.
- app.services.heuristic_engine.keyword_extractor: For job keyword extraction.

Author: @kcaparas1630
"""
import random
from typing import List, Optional, Sequence
from loguru import logger
from app.constants.interview_templates import InterviewTemplates, get_interview_templates
from app.services.heuristic_engine.keyword_extractor import build_job_context


def get_default_questions(job_title: str, templates: Optional[InterviewTemplates] = None) -> List[str]:
    """Fixed role-aware question list used when synthesis fails."""
    templates = templates or get_interview_templates()
    return [template.format(job_title=job_title) for template in templates.default_question_templates]


def build_question_pool(job_title: str, keywords: Sequence[str], templates: InterviewTemplates) -> List[str]:
    """Concatenate the technical, behavioral and role-specific pools, unshuffled."""
    technical_questions = [
        template.format(skill=keyword)
        for keyword in keywords
        for template in templates.technical_question_templates
    ]
    role_questions = [template.format(job_title=job_title) for template in templates.role_question_templates]

    return technical_questions + list(templates.behavioral_questions) + role_questions


def generate_questions(
    job_title: str,
    keywords: Sequence[str],
    count: int,
    templates: Optional[InterviewTemplates] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Generate interview questions from job keywords and title.

    Questions are not de-duplicated across pools, and the order differs
    between calls unless a seeded ``rng`` is supplied.

    Args:
        job_title (str): Job title interpolated into role-specific questions.
        keywords (Sequence[str]): Job keywords for the technical pool.
        count (int): Maximum number of questions to return.
        templates (InterviewTemplates, optional): Template set to use.
        rng (random.Random, optional): Source of randomness for the shuffle.

    Returns:
        List[str]: Up to ``count`` questions, or the default questions on error.
    """
    templates = templates or get_interview_templates()
    rng = rng or random.Random()

    try:
        questions = build_question_pool(job_title, keywords, templates)
        rng.shuffle(questions)
        return questions[:max(count, 0)]
    except Exception as e:
        logger.error(f"Error generating questions from keywords: {e}")
        return get_default_questions(job_title, templates)


def generate_interview_questions(
    job_title: str,
    job_description: str,
    count: int = 10,
    templates: Optional[InterviewTemplates] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Extract keywords from the description and synthesize a question set."""
    templates = templates or get_interview_templates()

    try:
        job_context = build_job_context(job_title, job_description, templates)
        return generate_questions(job_context.title, job_context.keywords, count, templates, rng)
    except Exception as e:
        logger.error(f"Error generating interview questions: {e}")
        return get_default_questions(job_title, templates)
