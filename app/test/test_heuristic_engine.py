"""
Test Heuristic Interview Engine Module

Dependencies:
- pytest: For testing framework
- app.services.heuristic_engine.engine: The module being tested
"""

import random
import pytest
from pydantic import ValidationError
from app.constants import interview_templates
from app.constants.interview_templates import InterviewTemplates, get_interview_templates, load_interview_templates
from app.services.heuristic_engine import HeuristicInterviewEngine, get_heuristic_engine

DESCRIPTION = "Python services on AWS with Docker"

class TestHeuristicInterviewEngine:

    def test_same_seed_gives_same_interview(self, templates):
        def run(seed):
            engine = HeuristicInterviewEngine(templates=templates, rng=random.Random(seed))
            questions = engine.generate_interview_questions("Backend Engineer", DESCRIPTION, 5)
            follow_up = engine.generate_next_question(DESCRIPTION, questions[0], "I use python", questions)
            report = engine.generate_performance_report(
                "Backend Engineer",
                DESCRIPTION,
                [{"question": questions[0], "answer": "I use python"}]
            )
            return questions, follow_up, report

        assert run(11) == run(11)

    def test_keywords_and_context(self, engine):
        assert engine.extract_keywords(DESCRIPTION) == ["python", "docker", "aws"]
        assert engine.build_job_context("Backend Engineer", DESCRIPTION).keywords == ("python", "docker", "aws")

    def test_analyze_answer(self, engine):
        assert engine.analyze_answer("", ["python"]).score == 55

    def test_custom_templates(self, rng):
        custom = InterviewTemplates(generic_keywords=("curiosity",), keyword_vocabulary=("rust",))
        engine = HeuristicInterviewEngine(templates=custom, rng=rng)
        assert engine.extract_keywords("Rust developer") == ["rust", "curiosity"]

    def test_shared_engine_is_singleton(self):
        assert get_heuristic_engine() is get_heuristic_engine()

class TestLoadInterviewTemplates:

    def test_missing_path_uses_defaults(self):
        assert load_interview_templates(None) == InterviewTemplates()

    def test_json_override(self, tmp_path):
        path = tmp_path / "templates.json"
        path.write_text('{"generic_keywords": ["grit", "focus", "drive"]}')

        templates = load_interview_templates(str(path))

        assert templates.generic_keywords == ("grit", "focus", "drive")
        assert templates.fallback_overall_score == 70

    def test_recommendation_table_is_read_only(self, templates):
        assert templates.recommendation_for("Quantify achievements with metrics when possible") == (
            "Review your resume and add specific numbers and percentages to your achievements"
        )
        assert templates.recommendation_for("Unknown improvement") is None

        with pytest.raises(TypeError):
            templates.recommendations_by_improvement[0] = ("Unknown improvement", "Changed")
        with pytest.raises(ValidationError):
            templates.recommendations_by_improvement = ()

    def test_json_override_of_recommendations(self, tmp_path):
        path = tmp_path / "templates.json"
        path.write_text('{"recommendations_by_improvement": [["Speak slower", "Pause between points"]]}')

        templates = load_interview_templates(str(path))

        assert templates.recommendation_for("Speak slower") == "Pause between points"

class TestGetInterviewTemplates:

    @pytest.fixture(autouse=True)
    def fresh_templates(self, monkeypatch):
        monkeypatch.setattr(interview_templates, "_templates", None)

    def test_missing_override_file_falls_back_to_defaults(self, monkeypatch, tmp_path):
        monkeypatch.setenv("INTERVIEW_TEMPLATES_PATH", str(tmp_path / "missing.json"))
        assert get_interview_templates() == InterviewTemplates()

    def test_invalid_override_file_falls_back_to_defaults(self, monkeypatch, tmp_path):
        path = tmp_path / "templates.json"
        path.write_text('{"generic_keywords": 42}')
        monkeypatch.setenv("INTERVIEW_TEMPLATES_PATH", str(path))

        assert get_interview_templates() == InterviewTemplates()

    def test_engine_keeps_working_with_broken_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("INTERVIEW_TEMPLATES_PATH", str(tmp_path / "missing.json"))

        report = HeuristicInterviewEngine(rng=random.Random(0)).generate_performance_report("Engineer", DESCRIPTION, [])

        assert report.overall_score == 70
