"""
Test LLM Reply Extraction Module

This module tests pulling questions, answer analyses and performance reports
out of loosely formatted model replies.

Dependencies:
- pytest: For testing framework
- app.helper.extract_llm_json: The module being tested
"""

import pytest
from app.helper.extract_llm_json import (
    extract_answer_analysis,
    extract_performance_report,
    extract_questions,
    strip_reasoning
)

class TestExtractQuestions:

    def test_json_array_inside_prose(self):
        content = 'Sure, here you go:\n```json\n["What is Docker?", "How do you test?", "Why Python?"]\n```'
        assert extract_questions(content, 2) == ["What is Docker?", "How do you test?"]

    def test_numbered_lines_fallback(self):
        content = (
            "Here are the questions:\n"
            "1. What is Docker?\n"
            "2. Describe how you would scale a service horizontally under load\n"
            "short line"
        )
        assert extract_questions(content, 5) == [
            "What is Docker?",
            "Describe how you would scale a service horizontally under load"
        ]

    def test_reasoning_block_is_ignored(self):
        content = '<think>["Not this one?"]</think>\n["Tell me about SQL?"]'
        assert extract_questions(content, 3) == ["Tell me about SQL?"]

    def test_invalid_json_array_raises(self):
        with pytest.raises(ValueError, match="Failed to parse interview questions"):
            extract_questions("[this is not json]", 3)

    def test_no_questions_raises(self):
        with pytest.raises(ValueError, match="Could not parse questions from response"):
            extract_questions("ok", 3)

class TestExtractAnswerAnalysis:

    def test_parses_json_object(self):
        content = 'Analysis:\n{"score": 8, "feedback": "Solid answer.", "strengths": ["Clear"], "improvements": ["Add metrics"]}'
        analysis = extract_answer_analysis(content)

        assert analysis.score == 8
        assert analysis.feedback == "Solid answer."
        assert analysis.strengths == ["Clear"]
        assert analysis.improvements == ["Add metrics"]

    def test_numeric_strings_and_missing_fields(self):
        analysis = extract_answer_analysis('{"score": "6.6"}')
        assert analysis.score == 7
        assert analysis.feedback == "No feedback provided."
        assert analysis.strengths == []

    def test_zero_score_uses_default(self):
        assert extract_answer_analysis('{"score": 0, "feedback": "x"}').score == 5

    def test_reply_without_json(self):
        analysis = extract_answer_analysis("The candidate did well overall.")
        assert analysis.score == 5
        assert analysis.feedback == "The candidate did well overall."
        assert analysis.strengths == ["Could not parse strengths from AI response"]

    def test_broken_json(self):
        analysis = extract_answer_analysis("{score: eight}")
        assert analysis.score == 5
        assert analysis.feedback == "Could not parse AI analysis response."
        assert analysis.improvements == ["Try providing a more complete answer."]

class TestExtractPerformanceReport:

    def test_parses_json_object(self):
        content = (
            '<think>scoring...</think>{"overallScore": 7, "summary": "Good interview.", '
            '"strengths": ["Clear"], "weaknesses": ["Brief"], "recommendations": ["Practice"]}'
        )
        report = extract_performance_report(content)

        assert report.overall_score == 7
        assert report.summary == "Good interview."
        assert report.weaknesses == ["Brief"]
        assert report.recommendations == ["Practice"]

    def test_reply_without_json(self):
        report = extract_performance_report("x" * 400)
        assert report.overall_score == 5
        assert report.summary == "x" * 300

    def test_broken_json(self):
        report = extract_performance_report("{overallScore: 7,}")
        assert report.overall_score == 5
        assert report.recommendations == ["Consider providing more detailed answers in future interviews."]

def test_strip_reasoning_handles_none():
    assert strip_reasoning(None) == ""
