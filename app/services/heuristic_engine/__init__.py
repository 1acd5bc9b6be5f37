"""
Heuristic Interview Engine Module

Rule-based keyword extraction, question synthesis, answer scoring, follow-up
generation and report aggregation, used as the fallback path when the hosted
language model cannot be reached.
"""

from .engine import HeuristicInterviewEngine, get_heuristic_engine
from .keyword_extractor import extract_keywords, build_job_context
from .question_synthesizer import generate_questions, generate_interview_questions, get_default_questions
from .answer_analyzer import analyze_answer, generate_inline_feedback
from .follow_up_generator import generate_next_question
from .report_aggregator import generate_performance_report, generate_fallback_report

__all__ = [
    "HeuristicInterviewEngine",
    "get_heuristic_engine",
    "extract_keywords",
    "build_job_context",
    "generate_questions",
    "generate_interview_questions",
    "get_default_questions",
    "analyze_answer",
    "generate_inline_feedback",
    "generate_next_question",
    "generate_performance_report",
    "generate_fallback_report"
]
