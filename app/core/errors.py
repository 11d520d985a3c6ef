"""Service-layer failures.

Every operation in ``app.domains`` fails only with one of the exceptions
below. The HTTP layer maps them onto status codes in one place
(``app.api.http.errors``).
"""


class ServiceError(Exception):
    """Base class for all expected service failures"""


class NotFoundError(ServiceError):
    """A referenced resource does not exist"""


class InterviewNotFoundError(NotFoundError):
    def __init__(self, interview_id: str):
        self.interview_id = interview_id
        super().__init__(f"Interview {interview_id} not found")


class DocumentNotFoundError(NotFoundError):
    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"Document {document_id} not found")


class TakeNotFoundError(NotFoundError):
    def __init__(self, take_id: str):
        self.take_id = take_id
        super().__init__(f"Take {take_id} not found")


class UserNotFoundError(NotFoundError):
    """Raised by the identity service only"""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class UnauthorizedError(ServiceError):
    """The acting user is not the transitive owner of the resource"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StageTransitionError(ServiceError):
    """Backward stage move while regression is disabled"""

    def __init__(self, take_id: str, current: str, requested: str):
        self.take_id = take_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Take {take_id} cannot move from '{current}' back to '{requested}'"
        )
