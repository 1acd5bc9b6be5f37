"""
Answer Analyzer

Scores a single candidate answer from keyword mentions and answer length, and
produces two independent kinds of feedback:

- score-tier feedback, used for the end-of-interview question analysis
- inline keyword feedback, used right after an answer is given

The two are generated by different rules and may read differently for the
same answer.

Dependencies:
- random: For the injectable source used by inline feedback.
- loguru: For logging fallbacks.
- app.constants.interview_templates: For the feedback tables.
- app.schemas.interview_schemas: For the AnswerAnalysis schema.

Author: @kcaparas1630
"""
import random
from typing import Iterable, List, Optional
from loguru import logger
from app.constants.interview_templates import InterviewTemplates, get_interview_templates
from app.schemas.interview_schemas import AnswerAnalysis

BASE_SCORE = 70
MIN_SCORE = 0
MAX_SCORE = 100


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def find_mentioned_keywords(answer: str, job_keywords: Iterable[str]) -> List[str]:
    text = answer.lower()
    return [keyword for keyword in job_keywords if keyword in text]


def keyword_bonus(mentions: int) -> int:
    if mentions > 3:
        return 15
    elif mentions > 1:
        return 10
    elif mentions > 0:
        return 5
    return 0


def length_adjustment(word_count: int) -> int:
    if word_count > 150:
        return 10
    elif word_count > 100:
        return 5
    elif word_count < 20:
        return -15
    elif word_count < 50:
        return -5
    return 0


def score_answer(answer: str, job_keywords: Iterable[str]) -> int:
    """
    Score an answer on a 0-100 scale.

    Raises on malformed input; use ``analyze_answer`` for the fail-safe path.
    """
    mentions = len(find_mentioned_keywords(answer, job_keywords))
    word_count = len(answer.split())

    score = BASE_SCORE + keyword_bonus(mentions) + length_adjustment(word_count)
    return clamp_score(score)


def feedback_for_score(score: int, templates: Optional[InterviewTemplates] = None) -> str:
    templates = templates or get_interview_templates()
    for minimum, feedback in templates.score_feedback_tiers:
        if score >= minimum:
            return feedback
    return templates.lowest_tier_feedback


def analyze_answer(answer: str, job_keywords: Iterable[str], templates: Optional[InterviewTemplates] = None) -> AnswerAnalysis:
    """
    Score an answer and attach its score-tier feedback.

    Args:
        answer (str): The candidate's answer.
        job_keywords (Iterable[str]): Keywords extracted from the job description.
        templates (InterviewTemplates, optional): Template set to use.

    Returns:
        AnswerAnalysis: Score in [0, 100] and feedback. Never raises; malformed
        input yields a score of 0 with a generic message.
    """
    templates = templates or get_interview_templates()

    try:
        score = score_answer(answer, job_keywords)
        return AnswerAnalysis(score=score, feedback=feedback_for_score(score, templates))
    except Exception as e:
        logger.error(f"Error analyzing answer: {e}")
        return AnswerAnalysis(score=0, feedback=templates.analysis_error_feedback)


def generate_inline_feedback(
    answer: str,
    job_keywords: Iterable[str],
    templates: Optional[InterviewTemplates] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Acknowledge an answer, referencing a mentioned keyword when there is one."""
    templates = templates or get_interview_templates()
    rng = rng or random.Random()

    mentioned_keywords = find_mentioned_keywords(answer, job_keywords)
    if mentioned_keywords:
        keyword = rng.choice(mentioned_keywords)
        template = rng.choice(templates.positive_feedback_templates)
        return template.format(keyword=keyword)

    return rng.choice(templates.general_feedback_templates)
