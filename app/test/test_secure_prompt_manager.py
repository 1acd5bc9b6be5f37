"""
Test Secure Prompt Manager Module

This module tests the SecurePromptManager to ensure it properly prevents
prompt injection attacks and safely handles user data.

Dependencies:
- pytest: For testing framework
- app.core.secure_prompt_manager: The module being tested

Author: @kcaparas1630
"""

import pytest
from app.core.secure_prompt_manager import SecurePromptManager, sanitize_text, PromptTemplate

class TestSanitizeText:
    """Test the sanitize_text function for various injection attempts."""
    
    def test_sanitize_normal_text(self):
        """Test that normal text is sanitized correctly."""
        text = "Hello, this is a normal response."
        result = sanitize_text(text)
        assert result == "Hello, this is a normal response."
    
    def test_sanitize_html_injection(self):
        """Test that HTML injection is prevented."""
        text = "<script>alert('xss')</script>Hello"
        result = sanitize_text(text)
        assert "<script>" not in result
        assert "&lt;script&gt;" in result
    
    def test_sanitize_null_bytes(self):
        """Test that null bytes are removed."""
        text = "Hello\x00World"
        result = sanitize_text(text)
        assert "\x00" not in result
        assert "HelloWorld" in result
    
    def test_sanitize_control_characters(self):
        """Test that control characters are removed."""
        text = "Hello\x01\x02\x03World"
        result = sanitize_text(text)
        assert "\x01" not in result
        assert "\x02" not in result
        assert "\x03" not in result
        assert "HelloWorld" in result
    
    def test_sanitize_length_limit(self):
        """Test that text is truncated to prevent DoS."""
        long_text = "A" * 2000
        result = sanitize_text(long_text)
        assert len(result) <= 1000
    
    def test_sanitize_none_input(self):
        """Test that None input raises ValueError."""
        with pytest.raises(ValueError, match="Text cannot be None"):
            sanitize_text(None)
    
    def test_sanitize_empty_after_cleaning(self):
        """Test that empty text after sanitization raises ValueError."""
        with pytest.raises(ValueError, match="Text cannot be empty after sanitization"):
            sanitize_text("")

    def test_sanitize_empty_allowed(self):
        """Test that empty text is accepted when explicitly allowed."""
        assert sanitize_text("  ", allow_empty=True) == ""

class TestPromptTemplate:
    """Test the PromptTemplate class."""
    
    def test_template_rendering(self):
        """Test basic template rendering."""
        template = PromptTemplate(
            template="Hello {name}, you are a {role}.",
            placeholders={"name": "User's name", "role": "User's role"}
        )
        result = template.render(name="John", role="developer")
        assert result == "Hello John, you are a developer."
    
    def test_template_missing_placeholder(self):
        """Test that missing placeholders raise ValueError."""
        template = PromptTemplate(
            template="Hello {name}, you are a {role}.",
            placeholders={"name": "User's name", "role": "User's role"}
        )
        with pytest.raises(ValueError, match="Missing required placeholders"):
            template.render(name="John")
    
    def test_template_unknown_key_ignored(self):
        """Test that unknown keys are ignored to prevent injection."""
        template = PromptTemplate(
            template="Hello {name}.",
            placeholders={"name": "User's name"}
        )
        result = template.render(name="John", malicious_key="injection")
        assert result == "Hello John."
    
    def test_template_injection_attempt(self):
        """Test that injection attempts are sanitized."""
        template = PromptTemplate(
            template="Hello {name}.",
            placeholders={"name": "User's name"}
        )
        malicious_input = "<script>alert('xss')</script>"
        result = template.render(name=malicious_input)
        assert "<script>" not in result
        assert "&lt;script&gt;" in result

class TestSecurePromptManager:
    """Test the SecurePromptManager class."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.manager = SecurePromptManager()
    
    def test_question_generation_prompts(self):
        """Test question generation prompt generation."""
        prompts = self.manager.get_question_generation_prompts("Backend role using Python and SQL", 5)

        assert "expert technical interviewer" in prompts["system"]
        assert "generate exactly 5 interview questions" in prompts["user"]
        assert "JSON array of strings" in prompts["user"]
        assert "Backend role using Python and SQL" in prompts["user"]

    def test_answer_analysis_prompts(self):
        """Test single answer analysis prompt generation."""
        prompts = self.manager.get_answer_analysis_prompts(
            "Tell me about a challenging project.",
            "I migrated our billing system to Postgres.",
            "Backend engineer"
        )

        assert "expert interview coach and evaluator" in prompts["system"]
        assert "Question: Tell me about a challenging project." in prompts["user"]
        assert "Candidate's Answer: I migrated our billing system to Postgres." in prompts["user"]
        assert '"Backend engineer"' in prompts["user"]
        assert "score: A score from 1-10" in prompts["user"]

    def test_answer_analysis_allows_empty_answer(self):
        """An unanswered question is still sent for analysis."""
        prompts = self.manager.get_answer_analysis_prompts("Why this role?", "", "Backend engineer")
        assert "Candidate's Answer: \n" in prompts["user"]

    def test_answer_analysis_requires_question(self):
        """Test that an empty question is rejected."""
        with pytest.raises(ValueError, match="Text cannot be empty after sanitization"):
            self.manager.get_answer_analysis_prompts("", "An answer", "Backend engineer")

    def test_performance_report_prompts(self):
        """Test report prompt generation with a missing answer."""
        prompts = self.manager.get_performance_report_prompts(
            ["Why this role?", "Describe a failure."],
            ["I like the product."],
            "Backend engineer"
        )

        assert "completed job interview" in prompts["system"]
        assert "Question 1: Why this role?\nAnswer 1: I like the product." in prompts["user"]
        assert "Question 2: Describe a failure.\nAnswer 2: No answer provided." in prompts["user"]
        assert "overallScore" in prompts["user"]

    def test_control_characters_removed_from_user_data(self):
        """Test that control characters never reach the model."""
        prompts = self.manager.get_question_generation_prompts("Python\x00 and\x07 SQL", 3)
        assert "\x00" not in prompts["user"]
        assert "\x07" not in prompts["user"]
        assert "Python and SQL" in prompts["user"]

    def test_job_description_length_limited(self):
        """Test that oversized job descriptions are truncated."""
        prompts = self.manager.get_question_generation_prompts("A" * 6000, 3)
        assert "A" * 5000 in prompts["user"]
        assert "A" * 5001 not in prompts["user"]

    def test_braces_in_user_data_do_not_break_rendering(self):
        """Test that format fields inside user data are left untouched."""
        prompts = self.manager.get_question_generation_prompts("Use {num_questions} wisely", 2)
        assert "Use {num_questions} wisely" in prompts["user"]

class TestSecurityFeatures:
    """Test specific security features and edge cases."""
    
    def test_unicode_normalization(self):
        """Test that unicode characters are properly normalized."""
        text = "Hello\u2028World\u2029"  # Unicode line/paragraph separators
        result = sanitize_text(text)
        # Note: The current sanitize_text function doesn't remove \u2028 and \u2029
        # This is acceptable as they are not control characters in the current regex
        assert "Hello" in result
        assert "World" in result
    
    def test_whitespace_handling(self):
        """Test that whitespace is properly handled."""
        text = "  Hello  World  "
        result = sanitize_text(text)
        assert result == "Hello  World"  # Leading/trailing stripped, internal preserved
    
    def test_special_characters(self):
        """Test that special characters are properly escaped."""
        text = "Hello & World < 5 > 3"
        result = sanitize_text(text)
        assert "&amp;" in result
        assert "&lt;" in result
        assert "&gt;" in result
    
    def test_template_placeholder_validation(self):
        """Test that template placeholders are properly validated."""
        template = PromptTemplate(
            template="Hello {name}.",
            placeholders={"name": "User's name"}
        )
        
        # Test with extra data (should be ignored)
        result = template.render(name="John", extra="data")
        assert result == "Hello John."
        
        # Test with missing data (should raise error)
        with pytest.raises(ValueError):
            template.render(extra="data")

if __name__ == "__main__":
    pytest.main([__file__]) 
