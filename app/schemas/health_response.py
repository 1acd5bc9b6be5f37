"""
Description: 
This module defines the schema for health check responses using Pydantic.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For the allowed status values.

Author: @kcaparas1630
"""
from typing import Literal
from pydantic import BaseModel, Field

class HealthResponse(BaseModel):
    """
    Schema for health check endpoint responses.

    The service stays usable without the hosted model, so ``llm_provider``
    only reports which path answers will be evaluated on.
    """
    status: Literal["ok", "degraded"]
    database: Literal["ok", "unavailable"]
    llm_provider: Literal["openrouter", "heuristic"] = Field(..., description="Evaluation path used for new answers")
