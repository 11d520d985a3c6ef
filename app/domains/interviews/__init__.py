from app.domains.interviews.entities import Interview
from app.domains.interviews.schemas import (
    InterviewBase, InterviewCreate, InterviewUpdate, InterviewResponse, InterviewListResponse
)

__all__ = [
    "Interview",
    "InterviewBase", "InterviewCreate", "InterviewUpdate", "InterviewResponse", "InterviewListResponse"
]
