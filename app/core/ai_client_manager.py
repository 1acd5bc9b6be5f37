"""
AI Client Manager

This module manages the OpenAI-compatible client instances used to reach the
hosted Llama models on OpenRouter. Each interviewer operation gets its own
dedicated client instance so a slow report does not hold up answer analysis.
"""

import os
from openai import AsyncOpenAI
import logging
import threading
from typing import Dict, Optional
from dotenv import load_dotenv

# Ensure .env is loaded
load_dotenv()

logger = logging.getLogger(__name__)

LLAMA_MODELS = {
    "small": "meta-llama/llama-3-8b-instruct",
    "medium": "meta-llama/llama-3-70b-instruct",
    "large": "meta-llama/llama-3.1-405b-instruct"
}

# Small model keeps requests within free tier limits
DEFAULT_MODEL = LLAMA_MODELS["small"]

SERVICE_TYPES = ("question_generation", "answer_analysis", "performance_report")

class AIClientManager:
    """
    Manages dedicated AI client instances for the interviewer operations.

    This singleton class creates and manages separate AsyncOpenAI clients
    for question generation, answer analysis and performance reports.
    """

    _lock = threading.Lock()

    def __init__(self):
        self._clients: Dict[str, AsyncOpenAI] = {}
        self._initialized = False

    def _initialize_clients(self):
        """Lazy initialization of client instances."""
        if self._initialized:
            return

        with self._lock:
            # Double-check locking for initialization
            if self._initialized:
                return

            api_key = os.getenv("OPENROUTER_API_KEY")
            if not api_key:
                if os.getenv("ENV") == "test":
                    logger.warning("OPENROUTER_API_KEY not set - AI clients disabled for testing")
                    return
                else:
                    raise RuntimeError(
                        "OPENROUTER_API_KEY environment variable is not set. "
                        "Please set it in your .env file or environment variables."
                    )

            base_url = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
            timeout = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))
            max_retries = int(os.getenv("LLM_MAX_RETRIES", "1"))
            default_headers = {
                "HTTP-Referer": os.getenv("OPENROUTER_APP_URL", "http://localhost:8000"),
                "X-Title": "InterviewAI"
            }

            try:
                self._clients = {
                    service_type: AsyncOpenAI(
                        base_url=base_url,
                        api_key=api_key,
                        timeout=timeout,
                        max_retries=max_retries,
                        default_headers=default_headers
                    )
                    for service_type in SERVICE_TYPES
                }

                self._initialized = True
                logger.info(f"Initialized {len(self._clients)} dedicated AI client instances")

            except Exception as e:
                logger.error(f"Failed to initialize AI clients: {e}")
                raise RuntimeError(f"Failed to initialize AI clients: {e}") from e

    def get_client(self, service_type: str) -> AsyncOpenAI:
        """
        Get a dedicated client for the specified service type.

        Args:
            service_type (str): Type of service ("question_generation",
                              "answer_analysis", "performance_report")

        Returns:
            AsyncOpenAI: Dedicated client instance for the service

        Raises:
            ValueError: If service_type is not supported
            RuntimeError: If clients failed to initialize
        """
        self._initialize_clients()

        if not self._initialized:
            raise RuntimeError("AI clients failed to initialize properly")

        if service_type not in self._clients:
            available_types = list(self._clients.keys()) if self._clients else []
            raise ValueError(f"Unsupported service type: {service_type}. Available: {available_types}")

        return self._clients[service_type]

# Lazy initialization - no eager instantiation
_ai_manager: Optional[AIClientManager] = None
_manager_lock = threading.Lock()

def get_ai_client_manager() -> AIClientManager:
    """
    Get the singleton AIClientManager instance with lazy initialization.

    Clients are only created on first use, so a missing API key surfaces as
    a RuntimeError at call time rather than during module import.

    Returns:
        AIClientManager: The singleton instance
    """
    global _ai_manager

    if _ai_manager is None:
        with _manager_lock:
            # Double-check locking pattern
            if _ai_manager is None:
                _ai_manager = AIClientManager()

    return _ai_manager
