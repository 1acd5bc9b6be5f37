"""
Description:
Extract structured interviewer data from language model replies.
Replies are expected to carry a JSON array or object, but models often wrap
it in prose, numbered lists or reasoning blocks. Each extractor finds the
JSON payload with precompiled regex patterns and falls back to defaults
when it cannot.

Arguments:
- content: The raw text content of the model reply.

Returns:
- A list of questions, an LLMAnswerAnalysis or an LLMPerformanceReport.

Dependencies:
- app.constants.regex_patterns: For accessing precompiled regex patterns.
- app.schemas.interview_schemas: For the parsed result schemas.
- json: Python's built-in JSON decoder.
- loguru: For logging parse failures.

Author: @kcaparas1630

"""
from app.constants.regex_patterns import REGEX_PATTERNS
from app.schemas.interview_schemas import LLMAnswerAnalysis, LLMPerformanceReport
from typing import Any, List
import json
from loguru import logger

def strip_reasoning(content: str) -> str:
    """Remove <think> blocks that some models emit before their answer."""
    return REGEX_PATTERNS['think_block'].sub('', content or '').strip()

def _to_score(value: Any, default: int = 5) -> int:
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError):
        return default
    return score or default

def _to_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]

# Extract a question list from a reply
def extract_questions(content: str, num_questions: int) -> List[str]:
    content = strip_reasoning(content)

    json_match = REGEX_PATTERNS['json_array'].search(content)
    if json_match:
        try:
            questions = json.loads(json_match.group(0))
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing questions: {e}")
            raise ValueError(f"Failed to parse interview questions: {e}") from e
        if isinstance(questions, list) and questions:
            return [str(question) for question in questions][:num_questions]

    # Not a JSON array, so fall back to one question per line
    lines = [
        line for line in content.split('\n')
        if line.strip()
        and '```' not in line
        and not line.startswith('[')
        and not line.startswith(']')
        and 'Here are' not in line
    ]
    extracted_questions = [
        question for question in (REGEX_PATTERNS['numbered_prefix'].sub('', line).strip() for line in lines)
        if question.endswith('?') or len(question) > 30
    ][:num_questions]

    if extracted_questions:
        return extracted_questions

    raise ValueError("Failed to parse interview questions: Could not parse questions from response")

# Extract a single answer analysis from a reply
def extract_answer_analysis(content: str) -> LLMAnswerAnalysis:
    content = strip_reasoning(content)

    json_match = REGEX_PATTERNS['json_object'].search(content)
    if not json_match:
        return LLMAnswerAnalysis(
            score=5,
            feedback=content[:200],
            strengths=["Could not parse strengths from AI response"],
            improvements=["Could not parse improvements from AI response"]
        )

    try:
        analysis = json.loads(json_match.group(0))
        return LLMAnswerAnalysis(
            score=_to_score(analysis.get("score")),
            feedback=str(analysis.get("feedback") or "No feedback provided."),
            strengths=_to_str_list(analysis.get("strengths")),
            improvements=_to_str_list(analysis.get("improvements"))
        )
    except (json.JSONDecodeError, AttributeError) as e:
        logger.error(f"Error parsing answer analysis: {e}")
        return LLMAnswerAnalysis(
            score=5,
            feedback="Could not parse AI analysis response.",
            strengths=[],
            improvements=["Try providing a more complete answer."]
        )

# Extract an end-of-interview report from a reply
def extract_performance_report(content: str) -> LLMPerformanceReport:
    content = strip_reasoning(content)

    json_match = REGEX_PATTERNS['json_object'].search(content)
    if not json_match:
        return LLMPerformanceReport(
            overall_score=5,
            summary=content[:300],
            strengths=["Could not parse strengths from AI response"],
            weaknesses=["Could not parse weaknesses from AI response"],
            recommendations=["Could not parse recommendations from AI response"]
        )

    try:
        report = json.loads(json_match.group(0))
        return LLMPerformanceReport(
            overall_score=_to_score(report.get("overallScore")),
            summary=str(report.get("summary") or "No summary provided."),
            strengths=_to_str_list(report.get("strengths")),
            weaknesses=_to_str_list(report.get("weaknesses")),
            recommendations=_to_str_list(report.get("recommendations"))
        )
    except (json.JSONDecodeError, AttributeError) as e:
        logger.error(f"Error parsing performance report: {e}")
        return LLMPerformanceReport(
            overall_score=5,
            summary="Could not parse the AI analysis response.",
            strengths=[],
            weaknesses=[],
            recommendations=["Consider providing more detailed answers in future interviews."]
        )
