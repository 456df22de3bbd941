"""Contact models."""

from src.apps.contact.models.submission import ContactSubmission

__all__ = ["ContactSubmission"]
