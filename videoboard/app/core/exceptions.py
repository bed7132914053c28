"""Custom exception classes for the video suggestion board."""


class VideoBoardException(Exception):
    """Base exception for all suggestion board errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class SuggestionNotFoundError(VideoBoardException):
    """Raised when a suggestion is not found."""

    def __init__(self, suggestion_id: str):
        super().__init__(
            message=f"Suggestion not found: {suggestion_id}",
            details="The requested suggestion does not exist"
        )
        self.suggestion_id = suggestion_id


class MissingFieldError(VideoBoardException):
    """Raised when a required field is missing or blank."""

    def __init__(self, fields: list[str]):
        super().__init__(
            message=f"Missing required field(s): {', '.join(fields)}",
            details="Please fill in all fields"
        )
        self.fields = fields


class MissingVideoUrlError(MissingFieldError):
    """Raised when publishing a suggestion without a video URL."""

    def __init__(self, suggestion_id: str):
        super().__init__(["video_url"])
        self.details = "A video URL is required to publish a suggestion"
        self.suggestion_id = suggestion_id


class AdminAuthenticationError(VideoBoardException):
    """Raised when an admin-only action is attempted without a valid session."""

    def __init__(self, login_url: str, reason: str = "Admin session required"):
        super().__init__(
            message=reason,
            details="Sign in on the admin login page to continue"
        )
        self.login_url = login_url


class InvalidTransitionError(VideoBoardException):
    """Raised when a status change is not a legal edge of the workflow."""

    def __init__(self, suggestion_id: str, current: str, target: str):
        super().__init__(
            message=f"Cannot move suggestion {suggestion_id} from {current} to {target}",
            details="The requested status change is not allowed from the current status"
        )
        self.suggestion_id = suggestion_id
        self.current = current
        self.target = target


class InvalidStateError(VideoBoardException):
    """Raised when an operation is not legal for a lifecycle state."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message=message, details=details)


class SuggestionNotVotableError(InvalidStateError):
    """Raised when voting on a suggestion that is not open for voting."""

    def __init__(self, suggestion_id: str, status: str):
        super().__init__(
            message=f"Suggestion {suggestion_id} is not open for voting (status: {status})",
            details="Only suggestions that are open for voting accept votes"
        )
        self.suggestion_id = suggestion_id
        self.status = status


class DuplicateVoteError(VideoBoardException):
    """Raised when a voter has already voted for a suggestion."""

    def __init__(self, suggestion_id: str, voter: str | None = None):
        message = f"Already voted for suggestion {suggestion_id}"
        if voter:
            message += f" as {voter}"
        super().__init__(
            message=message,
            details="You have already voted for this suggestion"
        )
        self.suggestion_id = suggestion_id
        self.voter = voter


class VideoCatalogError(VideoBoardException):
    """Raised when the video catalog service fails or is unreachable."""

    def __init__(self, operation: str, original_error: Exception | None = None):
        message = f"Video catalog error during {operation}"
        if original_error:
            message += f": {str(original_error)}"
        super().__init__(
            message=message,
            details="The video catalog service is temporarily unavailable"
        )
        self.operation = operation
        self.original_error = original_error


class VideoCatalogNotConfiguredError(VideoBoardException):
    """Raised when catalog import is used without an API key."""

    def __init__(self):
        super().__init__(
            message="YouTube API key not configured",
            details="Set YOUTUBE_API_KEY to enable catalog import"
        )
