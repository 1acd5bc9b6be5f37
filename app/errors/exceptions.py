from fastapi import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

class BadRequest(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=HTTP_400_BAD_REQUEST, detail=detail)

class NotFound(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=HTTP_404_NOT_FOUND, detail=detail)

class InternalServerError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

class InterviewNotFound(NotFound):
    def __init__(self, identifier: int = None):
        detail = f"Interview {identifier} not found." if identifier is not None else "Interview not found."
        super().__init__(detail=detail)
class QuestionNotFound(NotFound):
    def __init__(self, identifier: int = None):
        detail = f"Question {identifier} not found." if identifier is not None else "Question not found."
        super().__init__(detail=detail)

class LLMServiceError(Exception):
    """Raised when the hosted language model cannot produce a usable reply."""
