"""
Report Aggregator

Combines the per-question analyses of a finished interview into a
performance report: overall and category scores, strengths, improvement
areas and recommendations.

The technical, communication and problem-solving scores are random
multipliers of the overall score. They are proxies, not measurements of
category-specific signal in the answers.

Dependencies:
- random: For the injectable category score multipliers.
- loguru: For logging fallbacks.
- app.constants.interview_templates: For report strings and fallback values.
- app.services.heuristic_engine: For keyword extraction and answer scoring.

Author: @kcaparas1630
"""
import math
import random
from typing import Any, Iterable, List, Optional, Sequence, Union
from loguru import logger
from app.constants.interview_templates import InterviewTemplates, get_interview_templates
from app.schemas.interview_schemas import InterviewDataItem, PerformanceReport, QuestionAnalysis, ScoreBreakdown
from app.services.heuristic_engine.keyword_extractor import extract_keywords
from app.services.heuristic_engine.answer_analyzer import score_answer, feedback_for_score

InterviewData = Sequence[Union[InterviewDataItem, dict]]

HIGH_QUESTION_SCORE = 80
LOW_QUESTION_SCORE = 65
CATEGORY_THRESHOLD = 75


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def pad_items(items: List[str], pool: Iterable[str], minimum: int) -> List[str]:
    """Append pool entries in order until ``items`` holds ``minimum`` entries or the pool runs out."""
    remaining = list(pool)
    while len(items) < minimum and remaining:
        items.append(remaining.pop(0))
    return items


def analyze_answers(interview_data: InterviewData, job_keywords: Sequence[str], templates: InterviewTemplates) -> List[QuestionAnalysis]:
    """Score every answer. Pre-existing feedback on the entries is ignored."""
    question_analysis = []
    for entry in interview_data:
        item = InterviewDataItem.model_validate(entry)
        score = score_answer(item.answer, job_keywords)
        question_analysis.append(QuestionAnalysis(
            question=item.question,
            score=score,
            feedback=feedback_for_score(score, templates),
        ))
    return question_analysis


def calculate_scores(question_analysis: Sequence[QuestionAnalysis], rng: random.Random) -> ScoreBreakdown:
    overall = round_half_up(sum(item.score for item in question_analysis) / len(question_analysis))

    technical = min(100, round_half_up(overall * rng.uniform(0.9, 1.1)))
    communication = min(100, round_half_up(overall * rng.uniform(0.9, 1.1)))
    problem_solving = min(100, round_half_up(overall * rng.uniform(0.8, 1.0)))

    return ScoreBreakdown(
        overall=overall,
        technical=technical,
        communication=communication,
        problem_solving=problem_solving,
    )


def identify_strengths(question_analysis: Sequence[QuestionAnalysis], scores: ScoreBreakdown, templates: InterviewTemplates) -> List[str]:
    strengths = []

    if any(item.score >= HIGH_QUESTION_SCORE for item in question_analysis):
        strengths.append(templates.high_score_strength)
    if scores.technical >= CATEGORY_THRESHOLD:
        strengths.append(templates.technical_strength)
    if scores.communication >= CATEGORY_THRESHOLD:
        strengths.append(templates.communication_strength)
    if scores.problem_solving >= CATEGORY_THRESHOLD:
        strengths.append(templates.problem_solving_strength)

    return pad_items(strengths, templates.generic_strengths, templates.min_report_items)


def identify_improvements(question_analysis: Sequence[QuestionAnalysis], scores: ScoreBreakdown, templates: InterviewTemplates) -> List[str]:
    improvements = []

    if any(item.score <= LOW_QUESTION_SCORE for item in question_analysis):
        improvements.append(templates.low_score_improvement)
    if scores.technical < CATEGORY_THRESHOLD:
        improvements.append(templates.technical_improvement)
    if scores.communication < CATEGORY_THRESHOLD:
        improvements.append(templates.communication_improvement)
    if scores.problem_solving < CATEGORY_THRESHOLD:
        improvements.append(templates.problem_solving_improvement)

    return pad_items(improvements, templates.generic_improvements, templates.min_report_items)


def generate_recommendations(improvements: Sequence[str], templates: InterviewTemplates) -> List[str]:
    """Map each improvement to a recommendation by exact text match."""
    recommendations = [
        templates.recommendation_for(improvement)
        or templates.unmapped_recommendation_template.format(improvement=improvement.lower())
        for improvement in improvements
    ]
    return pad_items(recommendations, templates.generic_recommendations, templates.min_report_items)


def _entry_field(entry: Any, name: str) -> Any:
    if isinstance(entry, dict):
        return entry.get(name)
    return getattr(entry, name, None)


def generate_fallback_report(interview_data: Any, templates: Optional[InterviewTemplates] = None) -> PerformanceReport:
    """Fixed report returned whenever the normal pipeline cannot run."""
    templates = templates or get_interview_templates()

    try:
        entries = list(interview_data or [])
    except TypeError:
        entries = []

    question_analysis = [
        QuestionAnalysis(
            question=str(_entry_field(entry, "question") or ""),
            score=templates.fallback_question_score,
            feedback=str(_entry_field(entry, "feedback") or templates.fallback_question_feedback),
        )
        for entry in entries
    ]

    return PerformanceReport(
        overall_score=templates.fallback_overall_score,
        technical_score=templates.fallback_technical_score,
        communication_score=templates.fallback_communication_score,
        problem_solving_score=templates.fallback_problem_solving_score,
        strengths=list(templates.fallback_strengths),
        improvements=list(templates.fallback_improvements),
        recommendations=list(templates.fallback_recommendations),
        question_analysis=question_analysis,
    )


def generate_performance_report(
    job_title: str,
    job_description: str,
    interview_data: InterviewData,
    templates: Optional[InterviewTemplates] = None,
    rng: Optional[random.Random] = None,
) -> PerformanceReport:
    """
    Generate a performance report for a finished interview.

    Args:
        job_title (str): The job title.
        job_description (str): The job description; keywords are re-extracted.
        interview_data (Sequence): Question/answer/feedback entries, as
            InterviewDataItem instances or plain dicts.
        templates (InterviewTemplates, optional): Template set to use.
        rng (random.Random, optional): Source of the category score multipliers.

    Returns:
        PerformanceReport: The report. Never raises; an empty interview or any
        error yields the fixed fallback report.
    """
    templates = templates or get_interview_templates()
    rng = rng or random.Random()

    try:
        if not interview_data:
            logger.warning(f"No answers to evaluate for '{job_title}', returning fallback report")
            return generate_fallback_report(interview_data, templates)

        job_keywords = extract_keywords(job_description, templates)
        question_analysis = analyze_answers(interview_data, job_keywords, templates)
        scores = calculate_scores(question_analysis, rng)

        strengths = identify_strengths(question_analysis, scores, templates)
        improvements = identify_improvements(question_analysis, scores, templates)
        recommendations = generate_recommendations(improvements, templates)

        return PerformanceReport(
            overall_score=scores.overall,
            technical_score=scores.technical,
            communication_score=scores.communication,
            problem_solving_score=scores.problem_solving,
            strengths=strengths,
            improvements=improvements,
            recommendations=recommendations,
            question_analysis=question_analysis,
        )
    except Exception as e:
        logger.error(f"Error generating performance report: {e}")
        return generate_fallback_report(interview_data, templates)
