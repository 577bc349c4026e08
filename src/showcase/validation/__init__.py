"""Input validation models."""

from .models import SourceUsernameInput

__all__ = ["SourceUsernameInput"]
