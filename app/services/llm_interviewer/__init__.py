"""
LLM Interviewer Service Module

Question generation, answer analysis and performance reports backed by a
hosted language model on OpenRouter.
"""

from .llm_interviewer_service import LLMInterviewerService, get_llm_interviewer_service

__all__ = ["LLMInterviewerService", "get_llm_interviewer_service"]
