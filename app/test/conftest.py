"""
Shared pytest configuration.

Points the application at an in-memory SQLite database and disables rate
limiting and the hosted model before any app module is imported.
"""

import os
import random

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("OPENROUTER_API_KEY", None)

import pytest
from app.constants.interview_templates import InterviewTemplates
from app.services.heuristic_engine import HeuristicInterviewEngine


@pytest.fixture
def templates():
    return InterviewTemplates()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def engine(templates, rng):
    return HeuristicInterviewEngine(templates=templates, rng=rng)
