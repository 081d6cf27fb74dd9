"""Error taxonomy for the feedback service.

Every service-level failure is a ``FeedbackServiceError`` carrying the code
and HTTP status it is rendered with by the API layer.
"""


class FeedbackServiceError(Exception):
    """Base class for client-visible service failures."""

    code = "InternalError"
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(FeedbackServiceError):
    """A required field is missing or malformed."""

    code = "InvalidInput"
    status_code = 400
    default_message = "Invalid input"


class MalformedInput(FeedbackServiceError):
    """A query parameter could not be parsed."""

    code = "MalformedInput"
    status_code = 400
    default_message = "Malformed input"


class InvalidRange(FeedbackServiceError):
    """Rating outside 1-5."""

    code = "InvalidRange"
    status_code = 400
    default_message = "Rating must be an integer from 1 through 5"


class DuplicateSubmission(FeedbackServiceError):
    """The user already left feedback for this session."""

    code = "DuplicateSubmission"
    status_code = 403
    default_message = "Feedback for this session has already been submitted by this user"


class NotFound(FeedbackServiceError):
    """A referenced or targeted record does not exist."""

    code = "NotFound"
    status_code = 400
    default_message = "Record not found"


class InternalError(FeedbackServiceError):
    """Store or transport failure. The message is always generic."""

    pass
