"""
Test Question Synthesizer Module

Dependencies:
- pytest: For testing framework
- app.services.heuristic_engine.question_synthesizer: The module being tested
"""

import random
from app.services.heuristic_engine.question_synthesizer import (
    build_question_pool,
    generate_questions,
    generate_interview_questions,
    get_default_questions
)

KEYWORDS = ["python", "docker", "sql"]

class TestGenerateQuestions:
    """Test pool construction, shuffling and truncation."""

    def test_returns_requested_count_from_pool(self, templates, rng):
        questions = generate_questions("Backend Engineer", KEYWORDS, 5, templates, rng)
        pool = build_question_pool("Backend Engineer", KEYWORDS, templates)

        assert len(questions) == 5
        assert all(question in pool for question in questions)

    def test_pool_composition(self, templates):
        pool = build_question_pool("Backend Engineer", KEYWORDS, templates)

        assert len(pool) == len(KEYWORDS) * 5 + 10 + 5
        assert pool[0] == "Tell me about your experience with python."
        assert "What do you think are the most important skills for a Backend Engineer?" in pool
        assert "How do you handle disagreements with team members?" in pool

    def test_count_larger_than_pool_returns_whole_pool(self, templates, rng):
        questions = generate_questions("Analyst", ["data"], 100, templates, rng)
        assert len(questions) == 5 + 10 + 5

    def test_seeded_rng_is_reproducible(self, templates):
        first = generate_questions("Backend Engineer", KEYWORDS, 8, templates, random.Random(7))
        second = generate_questions("Backend Engineer", KEYWORDS, 8, templates, random.Random(7))
        assert first == second

    def test_zero_count(self, templates, rng):
        assert generate_questions("Backend Engineer", KEYWORDS, 0, templates, rng) == []

    def test_internal_error_falls_back_to_default_questions(self, templates, rng):
        # A non-iterable keyword collection breaks pool construction
        questions = generate_questions("Data Scientist", None, 5, templates, rng)
        assert questions == get_default_questions("Data Scientist", templates)
        assert questions[0] == "What interests you about this Data Scientist position?"
        assert len(questions) == 10

class TestGenerateInterviewQuestions:

    def test_uses_keywords_from_description(self, templates, rng):
        questions = generate_interview_questions(
            "Backend Engineer",
            "Kubernetes and Terraform on GCP",
            50,
            templates,
            rng
        )
        assert "Tell me about your experience with kubernetes." in questions
        assert "Tell me about your experience with gcp." in questions

    def test_default_count_is_ten(self, templates, rng):
        assert len(generate_interview_questions("Designer", "Figma and UX research", templates=templates, rng=rng)) == 10
