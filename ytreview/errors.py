"""
Error taxonomy for review actions.

Every failure is terminal for the single user action that caused it;
nothing is retried and nothing is rolled back.
"""

from typing import Optional


class ReviewError(Exception):
    """Base class for failures surfaced to the reviewer."""

    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NetworkFailure(ReviewError):
    """The annotation API rejected the request or could not be reached."""

    default_message = "Request to the annotation service failed"


class InvalidInput(ReviewError):
    """Input rejected before any network call was made."""

    default_message = "Please fill in all fields"


class InvalidStatus(InvalidInput):
    """Status value the API does not accept."""

    default_message = "Invalid annotation status"


class PlayerNotReady(ReviewError):
    """No playback position is available yet."""

    default_message = "Player is not ready"


class NotFound(ReviewError):
    """A project or annotation id the server does not know about."""

    default_message = "Not found"
