"""Contact router."""

from fastapi import Depends, Request, status

from src.apps.blog.repositories.exam_repository import ExaminationRepository
from src.apps.blog.services.exam_service import ExaminationService
from src.apps.contact.repositories.contact_repository import ContactRepository
from src.apps.contact.schemas.contact import ContactCreate, ContactResponse
from src.apps.contact.services.contact_service import (
    GRADE_OPTIONS,
    ContactService,
    contact_metadata,
    faq_entries,
)
from src.core import exceptions
from src.core.bases.base_router import BaseRouter
from src.core.database import get_session
from src.core.response.handlers import error_response


def get_contact_service():
    """Get contact service instance."""
    return ContactService(ContactRepository(get_session))  # type:ignore


def get_exam_service():
    """Get examination service instance."""
    return ExaminationService(ExaminationRepository(get_session))  # type:ignore


class ContactRouter(BaseRouter):
    """Contact page and submission endpoint."""

    def __init__(self):
        super().__init__(tags=["Contact"])

    def _register_routes(self) -> None:
        self._register_page()
        self._register_submit()

    def _register_page(self) -> None:
        @self.router.get("/contact", summary="Contact page")
        async def contact_page(
            request: Request,
            exam_service: ExaminationService = Depends(get_exam_service),
        ):
            exams = await exam_service.get_dropdown_options()
            return self.render(
                request,
                "contact.html",
                {
                    "exams": exams,
                    "grade_options": GRADE_OPTIONS,
                    "faqs": faq_entries(),
                },
                metadata=contact_metadata(),
            )

    def _register_submit(self) -> None:
        @self.router.post(
            "/api/contact",
            response_model=ContactResponse,
            response_model_exclude_none=True,
            summary="Submit the contact form",
            responses={
                200: {"description": "Message received"},
                422: {"description": "Missing or invalid fields"},
                500: {"description": "Message could not be stored"},
            },
        )
        async def submit_contact(
            payload: ContactCreate,
            service: ContactService = Depends(get_contact_service),
        ):
            try:
                message = await service.submit(payload)
            except exceptions.ServiceException as e:
                return error_response(
                    error_code="SERVICE_ERROR",
                    message=str(e.detail),
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )
            return ContactResponse(success=True, message=message)


router = ContactRouter().get_router()
