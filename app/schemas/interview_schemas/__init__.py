from .heuristic_schemas import (
    JobContext,
    InterviewDataItem,
    AnswerAnalysis,
    QuestionAnalysis,
    FollowUp,
    ScoreBreakdown,
    PerformanceReport
)
from .llm_schemas import LLMAnswerAnalysis, LLMPerformanceReport
from .interview_request import (
    InterviewCreateRequest,
    InterviewUpdateRequest,
    AnswerSubmission,
    NextQuestionRequest,
    CompleteInterviewRequest
)
from .interview_response import (
    InterviewResponse,
    QuestionRecord,
    AnswerSubmissionResponse,
    NextQuestionResponse
)

__all__ = [
    "JobContext",
    "InterviewDataItem",
    "AnswerAnalysis",
    "QuestionAnalysis",
    "FollowUp",
    "ScoreBreakdown",
    "PerformanceReport",
    "LLMAnswerAnalysis",
    "LLMPerformanceReport",
    "InterviewCreateRequest",
    "InterviewUpdateRequest",
    "AnswerSubmission",
    "NextQuestionRequest",
    "CompleteInterviewRequest",
    "InterviewResponse",
    "QuestionRecord",
    "AnswerSubmissionResponse",
    "NextQuestionResponse"
]
