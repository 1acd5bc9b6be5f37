"""
Test Answer Analyzer Module

This module tests answer scoring bands, score-tier feedback and the inline
keyword feedback used right after an answer.

Dependencies:
- pytest: For testing framework
- app.services.heuristic_engine.answer_analyzer: The module being tested
"""

import pytest
from app.services.heuristic_engine.answer_analyzer import (
    analyze_answer,
    clamp_score,
    feedback_for_score,
    generate_inline_feedback,
    keyword_bonus,
    length_adjustment,
    score_answer
)

KEYWORDS = ["python", "docker", "sql", "aws"]

def words(count: int) -> str:
    return " ".join(["word"] * count)

class TestScoreBands:

    @pytest.mark.parametrize("mentions, bonus", [(0, 0), (1, 5), (2, 10), (3, 10), (4, 15), (9, 15)])
    def test_keyword_bonus(self, mentions, bonus):
        assert keyword_bonus(mentions) == bonus

    @pytest.mark.parametrize("word_count, adjustment", [
        (0, -15), (19, -15), (20, -5), (49, -5), (50, 0), (100, 0), (101, 5), (150, 5), (151, 10)
    ])
    def test_length_adjustment(self, word_count, adjustment):
        assert length_adjustment(word_count) == adjustment

    def test_clamp(self):
        assert clamp_score(130) == 100
        assert clamp_score(-4) == 0
        assert clamp_score(55) == 55

class TestAnalyzeAnswer:

    def test_empty_answer(self, templates):
        analysis = analyze_answer("", KEYWORDS, templates)
        assert analysis.score == 55
        assert analysis.feedback == "Answer needs improvement - provide more details and specific examples."

    def test_detailed_answer_with_four_keywords(self, templates):
        answer = "I used Python, Docker, SQL and AWS daily. " + words(152)
        assert len(answer.split()) == 160

        analysis = analyze_answer(answer, KEYWORDS, templates)
        assert analysis.score == 95
        assert analysis.feedback == "Excellent answer with specific details and relevant skills."

    def test_single_mention_medium_length(self, templates):
        analysis = analyze_answer("python " + words(59), KEYWORDS, templates)
        assert analysis.score == 75
        assert analysis.feedback.startswith("Good answer with some relevant points")

    def test_two_mentions_medium_length(self, templates):
        analysis = analyze_answer("python sql " + words(58), KEYWORDS, templates)
        assert analysis.score == 80
        assert analysis.feedback == "Strong answer demonstrating good knowledge and experience."

    def test_short_answer_without_keywords(self, templates):
        analysis = analyze_answer(words(30), KEYWORDS, templates)
        assert analysis.score == 65
        assert analysis.feedback == "Adequate answer, but lacks depth and concrete examples."

    def test_keyword_matching_is_case_insensitive(self):
        assert score_answer("PYTHON " + words(59), KEYWORDS) == 75

    def test_malformed_answer_does_not_raise(self, templates):
        analysis = analyze_answer(None, KEYWORDS, templates)
        assert analysis.score == 0
        assert analysis.feedback == templates.analysis_error_feedback

    def test_score_always_in_range(self, templates):
        for answer in ["", "python", words(500), "python docker sql aws " * 100]:
            assert 0 <= analyze_answer(answer, KEYWORDS, templates).score <= 100

    @pytest.mark.parametrize("score, prefix", [
        (95, "Excellent"), (90, "Excellent"), (89, "Strong"), (80, "Strong"),
        (70, "Good"), (60, "Adequate"), (59, "Answer needs improvement")
    ])
    def test_feedback_tiers(self, templates, score, prefix):
        assert feedback_for_score(score, templates).startswith(prefix)

class TestInlineFeedback:

    def test_references_mentioned_keyword(self, templates, rng):
        feedback = generate_inline_feedback("I deployed it with Docker", KEYWORDS, templates, rng)
        expected = [template.format(keyword="docker") for template in templates.positive_feedback_templates]
        assert feedback in expected

    def test_generic_acknowledgment_without_keywords(self, templates, rng):
        feedback = generate_inline_feedback("I like teamwork", KEYWORDS, templates, rng)
        assert feedback in templates.general_feedback_templates
