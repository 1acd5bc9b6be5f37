"""
Test Keyword Extractor Module

Dependencies:
- pytest: For testing framework
- app.services.heuristic_engine.keyword_extractor: The module being tested
"""

from app.services.heuristic_engine.keyword_extractor import extract_keywords, build_job_context

GENERIC = ["experience", "skills", "projects", "challenges"]

class TestExtractKeywords:
    """Test vocabulary matching on job descriptions."""

    def test_matches_in_vocabulary_order(self, templates):
        description = "We need Docker, Python and AWS experience for our backend team."
        assert extract_keywords(description, templates) == ["python", "docker", "aws", "backend"]

    def test_substring_matching(self, templates):
        """'java' matches inside 'javascript', 'ai' inside other words."""
        keywords = extract_keywords("Strong JavaScript skills, maintain our platform", templates)
        assert "javascript" in keywords
        assert "java" in keywords
        assert "ai" in keywords

    def test_generic_terms_appended_below_three_matches(self, templates):
        keywords = extract_keywords("Looking for a python person", templates)
        assert keywords == ["python"] + GENERIC

    def test_no_matches_returns_generic_terms(self, templates):
        assert extract_keywords("", templates) == GENERIC
        assert extract_keywords("zzz", templates) == GENERIC

    def test_exactly_three_matches_not_padded(self, templates):
        keywords = extract_keywords("react vue angular", templates)
        assert keywords == ["react", "angular", "vue"]

    def test_deterministic(self, templates):
        description = "Kubernetes, SQL, leadership and agile delivery"
        assert extract_keywords(description, templates) == extract_keywords(description, templates)

    def test_tolerates_none(self, templates):
        assert extract_keywords(None, templates) == GENERIC

    def test_minimum_length(self, templates):
        for description in ["", "python", "python sql", "a b c d e f", "x" * 10000]:
            assert len(extract_keywords(description, templates)) >= 3

class TestBuildJobContext:

    def test_context_holds_keywords(self, templates):
        context = build_job_context("Backend Engineer", "Python and SQL, plus Docker", templates)
        assert context.title == "Backend Engineer"
        assert context.keywords == ("python", "docker", "sql")
