"""
LLM Interviewer Service

This module talks to hosted Llama models on OpenRouter to generate interview
questions, analyze answers and write end-of-interview reports. Every failure
(missing API key, network or HTTP error, unusable reply) is raised as
LLMServiceError so callers can fall back to the heuristic engine.

Dependencies:
- openai: For the OpenAI-compatible OpenRouter client.
- loguru: For logging operations.
- app.core.ai_client_manager: For dedicated per-operation clients.
- app.core.secure_prompt_manager: For sanitized prompts.
- app.helper.extract_llm_json: For parsing model replies.

Author: @kcaparas1630
"""

from typing import Dict, List, Optional, Sequence
from openai import APIStatusError
from loguru import logger
from app.core.ai_client_manager import AIClientManager, get_ai_client_manager, DEFAULT_MODEL, LLAMA_MODELS
from app.core.secure_prompt_manager import secure_prompt_manager
from app.errors.exceptions import LLMServiceError
from app.helper.extract_llm_json import extract_questions, extract_answer_analysis, extract_performance_report
from app.schemas.interview_schemas import LLMAnswerAnalysis, LLMPerformanceReport


class LLMInterviewerService:
    """
    Service class wrapping the hosted interviewer model.
    """

    def __init__(self, client_manager: Optional[AIClientManager] = None):
        """
        Initialize the service with a client manager.

        Args:
            client_manager (AIClientManager, optional): Source of dedicated
                clients. Defaults to the process-wide manager.
        """
        self.client_manager = client_manager or get_ai_client_manager()
        self.temperature = 0.7
        self.max_tokens = 1024

    async def _complete(self, service_type: str, prompts: Dict[str, str], model: str = DEFAULT_MODEL) -> str:
        try:
            client = self.client_manager.get_client(service_type)
            response = await client.chat.completions.create(
                model=model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                messages=[
                    {"role": "system", "content": prompts["system"]},
                    {"role": "user", "content": prompts["user"]}
                ]
            )
            content = response.choices[0].message.content
        except APIStatusError as e:
            logger.error(f"OpenRouter API error: {e.status_code} - {e.message}")
            raise LLMServiceError(f"OpenRouter API error: {e.status_code} - {e.message}") from e
        except Exception as e:
            logger.error(f"Error calling OpenRouter API: {e}")
            raise LLMServiceError(f"Failed to call OpenRouter API: {e}") from e

        if not content or not content.strip():
            raise LLMServiceError("Empty response from OpenRouter API")

        return content

    async def generate_interview_questions(self, job_description: str, num_questions: int = 5) -> List[str]:
        """
        Generate interview questions for a job description.

        Returns:
            List[str]: At most ``num_questions`` questions.

        Raises:
            LLMServiceError: If the model cannot be reached or its reply holds no questions.
        """
        try:
            prompts = secure_prompt_manager.get_question_generation_prompts(job_description, num_questions)
        except ValueError as e:
            raise LLMServiceError(f"Invalid question generation input: {e}") from e

        content = await self._complete("question_generation", prompts)

        try:
            questions = extract_questions(content, num_questions)
        except ValueError as e:
            raise LLMServiceError(str(e)) from e

        logger.info(f"Generated {len(questions)} interview questions with {DEFAULT_MODEL}")
        return questions

    async def analyze_answer(self, question: str, answer: str, job_description: str) -> LLMAnswerAnalysis:
        """
        Analyze a single interview answer. Scores are on a 1-10 scale.

        Raises:
            LLMServiceError: If the model cannot be reached.
        """
        try:
            prompts = secure_prompt_manager.get_answer_analysis_prompts(question, answer, job_description)
        except ValueError as e:
            raise LLMServiceError(f"Invalid answer analysis input: {e}") from e

        content = await self._complete("answer_analysis", prompts)
        return extract_answer_analysis(content)

    async def generate_performance_report(
        self,
        questions: Sequence[str],
        answers: Sequence[str],
        job_description: str
    ) -> LLMPerformanceReport:
        """
        Generate an end-of-interview report with the medium model.

        Raises:
            LLMServiceError: If the model cannot be reached.
        """
        try:
            prompts = secure_prompt_manager.get_performance_report_prompts(questions, answers, job_description)
        except ValueError as e:
            raise LLMServiceError(f"Invalid performance report input: {e}") from e

        content = await self._complete("performance_report", prompts, model=LLAMA_MODELS["medium"])
        return extract_performance_report(content)


_llm_service: Optional[LLMInterviewerService] = None

def get_llm_interviewer_service() -> LLMInterviewerService:
    """FastAPI dependency returning the shared interviewer service."""
    global _llm_service

    if _llm_service is None:
        _llm_service = LLMInterviewerService()

    return _llm_service
