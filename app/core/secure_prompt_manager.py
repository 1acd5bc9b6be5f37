"""
Secure Prompt Manager Module

This module keeps the AI interviewer prompts separate from user data to
prevent injection attacks. Prompts are templates with explicit placeholders,
and every value is sanitized before it is rendered.

The module contains:
- PromptTemplate: A dataclass for secure prompt templates with placeholders
- SecurePromptManager: Main class for managing the interviewer prompts
- sanitize_text: Utility function for text sanitization

Dependencies:
- dataclasses: For template data structures
- typing: For type hints
- re: For regex-based sanitization
- html: For HTML entity encoding

Author: @kcaparas1630
"""

from typing import Dict, Sequence
from dataclasses import dataclass
import re
import html
import logging

logger = logging.getLogger(__name__)

def sanitize_text(text: str, max_length: int = 1000, escape_html: bool = True, allow_empty: bool = False) -> str:
    """
    Sanitize text input before it is placed into a prompt.

    This function performs multiple sanitization steps:
    1. Optional HTML entity encoding
    2. Strips leading/trailing whitespace
    3. Removes null bytes and other control characters
    4. Configurable length limiting
    5. Normalizes unicode characters

    Args:
        text (str): The text to sanitize
        max_length (int): Maximum allowed length (default: 1000)
        escape_html (bool): Whether to HTML escape the text (default: True)
        allow_empty (bool): Whether an empty result is acceptable (default: False)

    Returns:
        str: The sanitized text

    Raises:
        ValueError: If text is None, or empty after sanitization when not allowed
    """
    if text is None:
        raise ValueError("Text cannot be None")

    text = str(text)

    if escape_html:
        text = html.escape(text)

    text = text.strip()

    # Remove null bytes and other control characters (except newlines and tabs)
    text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', text)

    if len(text) > max_length:
        text = text[:max_length]
        logger.warning(f"Text truncated to {max_length} characters for security")

    text = text.encode('utf-8', errors='ignore').decode('utf-8')

    if not text and not allow_empty:
        raise ValueError("Text cannot be empty after sanitization")

    return text

@dataclass
class PromptTemplate:
    """Secure prompt template with placeholders for safe data injection."""
    template: str
    placeholders: Dict[str, str]
    sanitization_config: Dict[str, Dict] = None  # Per-placeholder sanitization config

    def render(self, **kwargs) -> str:
        """
        Safely render the template with provided data.

        Args:
            **kwargs: Data to inject into placeholders

        Returns:
            str: Rendered prompt with sanitized data

        Raises:
            ValueError: If required placeholders are missing or data is invalid
        """
        missing_placeholders = set(self.placeholders.keys()) - set(kwargs.keys())
        if missing_placeholders:
            raise ValueError(f"Missing required placeholders: {missing_placeholders}")

        sanitized_data = {}
        for key, value in kwargs.items():
            if key in self.placeholders:
                config = self.sanitization_config.get(key, {}) if self.sanitization_config else {}
                sanitized_data[key] = sanitize_text(
                    str(value),
                    max_length=config.get('max_length', 1000),
                    escape_html=config.get('escape_html', True),
                    allow_empty=config.get('allow_empty', False)
                )
            else:
                # Skip unknown keys to prevent injection
                logger.warning(f"Unknown placeholder key: {key}")
                continue

        try:
            return self.template.format(**sanitized_data)
        except KeyError as e:
            raise ValueError(f"Template rendering error: {e}") from e

JOB_DESCRIPTION_CONFIG = {"max_length": 5000, "escape_html": False}
ANSWER_CONFIG = {"max_length": 4000, "escape_html": False, "allow_empty": True}

class SecurePromptManager:
    """
    Keeps the interviewer system and user prompts for the hosted model.

    Each operation has a system prompt and a user prompt template; user data
    only ever enters through sanitized placeholders.
    """

    def __init__(self):
        self._templates = self._initialize_templates()

    def _initialize_templates(self) -> Dict[str, PromptTemplate]:
        """Initialize secure prompt templates with explicit placeholders."""
        return {
            "question_generation_system": PromptTemplate(
                template="""You are an expert technical interviewer. Your task is to create challenging
but fair interview questions based on the job description provided. Focus on questions that test
both technical knowledge and problem-solving abilities. Each question should be clear, specific,
and relevant to the job requirements.""",
                placeholders={}
            ),
            "question_generation": PromptTemplate(
                template="""Based on the following job description, generate exactly {num_questions} interview questions.
Format your response as a JSON array of strings with each question. Do not include any explanations,
just return the JSON array.

Job Description:
{job_description}""",
                placeholders={
                    "num_questions": "Number of questions to generate",
                    "job_description": "Job description to base the questions on"
                },
                sanitization_config={"job_description": JOB_DESCRIPTION_CONFIG}
            ),
            "answer_analysis_system": PromptTemplate(
                template="""You are an expert interview coach and evaluator. Your role is to analyze
candidate answers to interview questions and provide objective feedback. Be thorough but fair in
your assessment.""",
                placeholders={}
            ),
            "answer_analysis": PromptTemplate(
                template="""I need you to analyze this candidate's answer to an interview question. The job is described as:

"{job_description}"

Question: {question}

Candidate's Answer: {answer}

Please analyze the answer and return your analysis in JSON format with the following fields:
- score: A score from 1-10
- feedback: A short paragraph with overall feedback
- strengths: An array of 2-3 specific strengths in the answer
- improvements: An array of 2-3 specific areas for improvement

Return only the JSON object.""",
                placeholders={
                    "job_description": "Job description for context",
                    "question": "Interview question that was asked",
                    "answer": "Candidate's answer to analyze"
                },
                sanitization_config={
                    "job_description": JOB_DESCRIPTION_CONFIG,
                    "question": {"escape_html": False},
                    "answer": ANSWER_CONFIG
                }
            ),
            "performance_report_system": PromptTemplate(
                template="""You are an expert interview coach providing comprehensive feedback on a
completed job interview. Analyze the candidate's responses to all questions and provide detailed,
constructive feedback related to the job requirements.""",
                placeholders={}
            ),
            "performance_report": PromptTemplate(
                template="""Please analyze this candidate's interview for the following job position:

"{job_description}"

Here are all the questions and answers from the interview:

{qa_section}

Provide a comprehensive evaluation in JSON format with these fields:
- overallScore: A number from 1-10 representing overall performance
- summary: A detailed paragraph summarizing the candidate's performance
- strengths: An array of 3-5 specific strengths demonstrated in the interview
- weaknesses: An array of 3-5 specific areas for improvement
- recommendations: An array of 3-5 actionable recommendations for improvement

Return only the JSON object.""",
                placeholders={
                    "job_description": "Job description for context",
                    "qa_section": "Numbered question and answer transcript"
                },
                sanitization_config={
                    "job_description": JOB_DESCRIPTION_CONFIG,
                    "qa_section": {"max_length": 20000, "escape_html": False}
                }
            )
        }

    def get_question_generation_prompts(self, job_description: str, num_questions: int) -> Dict[str, str]:
        """
        Get the system and user prompts for question generation.

        Raises:
            ValueError: If data validation fails
        """
        return {
            "system": self._templates["question_generation_system"].render(),
            "user": self._templates["question_generation"].render(
                num_questions=num_questions,
                job_description=job_description
            )
        }

    def get_answer_analysis_prompts(self, question: str, answer: str, job_description: str) -> Dict[str, str]:
        """
        Get the system and user prompts for single answer analysis.

        Raises:
            ValueError: If data validation fails
        """
        return {
            "system": self._templates["answer_analysis_system"].render(),
            "user": self._templates["answer_analysis"].render(
                job_description=job_description,
                question=question,
                answer=answer
            )
        }

    def get_performance_report_prompts(self, questions: Sequence[str], answers: Sequence[str], job_description: str) -> Dict[str, str]:
        """
        Get the system and user prompts for the end-of-interview report.

        Missing answers are reported to the model as "No answer provided."

        Raises:
            ValueError: If data validation fails
        """
        qa_section = "\n\n".join(
            f"Question {i + 1}: {question}\nAnswer {i + 1}: {answers[i] if i < len(answers) and answers[i] else 'No answer provided.'}"
            for i, question in enumerate(questions)
        )

        return {
            "system": self._templates["performance_report_system"].render(),
            "user": self._templates["performance_report"].render(
                job_description=job_description,
                qa_section=qa_section
            )
        }


# Global instance for reuse across the application
secure_prompt_manager = SecurePromptManager()
