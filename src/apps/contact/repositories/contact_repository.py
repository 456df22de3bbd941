"""Contact repository."""

from src.apps.contact.models import ContactSubmission
from src.core.bases.base_repository import BaseRepository


class ContactRepository(BaseRepository[ContactSubmission]):
    """Contact repository class."""

    model = ContactSubmission
