"""Database models."""

from videoboard.app.models.suggestion import Suggestion, SuggestionStatus, Channel
from videoboard.app.models.vote import Vote

__all__ = ["Suggestion", "SuggestionStatus", "Channel", "Vote"]
