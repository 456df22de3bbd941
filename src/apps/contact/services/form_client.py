"""Client side of the contact form: validate, post once, track status."""

from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from src.core import exceptions
from src.core.logger import get_logger
from src.core.response.schemas import ErrorDetail

logger = get_logger("contact.form")

CONTACT_ENDPOINT = "/api/contact"
FORM_FIELDS = ("name", "email", "grade", "exam", "message")
REQUIRED_FIELDS = ("name", "email", "message")

NETWORK_ERROR = "Network error. Please try again."
DEFAULT_ERROR = "Failed to submit"


@dataclass
class FormStatus:
    type: str  # "success" or "error"
    message: str


class ContactFormClient:
    """Mirror of the browser contact form.

    Holds the field values and the last status message. `submit` refuses
    to touch the network while a required field is blank.
    """

    def __init__(self, http_client: httpx.AsyncClient, endpoint: str = CONTACT_ENDPOINT):
        self.http_client = http_client
        self.endpoint = endpoint
        self.fields: Dict[str, str] = {name: "" for name in FORM_FIELDS}
        self.status: Optional[FormStatus] = None
        self.is_submitting = False

    def fill(self, **values: Optional[str]) -> "ContactFormClient":
        for name, value in values.items():
            if name not in self.fields:
                raise KeyError(f"Unknown contact form field: {name}")
            self.fields[name] = value or ""
        return self

    def reset(self) -> None:
        self.fields = {name: "" for name in FORM_FIELDS}

    def missing_fields(self):
        return [name for name in REQUIRED_FIELDS if not self.fields[name].strip()]

    async def submit(self) -> FormStatus:
        missing = self.missing_fields()
        if missing:
            raise exceptions.ValidationException(
                f"Please fill in the required fields: {', '.join(missing)}",
                error_details=[
                    ErrorDetail(field=name, code="REQUIRED", message="This field is required")
                    for name in missing
                ],
            )

        self.is_submitting = True
        self.status = None
        try:
            response = await self.http_client.post(self.endpoint, json=dict(self.fields))
            result = response.json()
            if not isinstance(result, dict):
                self.status = FormStatus("error", DEFAULT_ERROR)
            elif result.get("success"):
                self.status = FormStatus("success", result.get("message") or "")
                self.reset()
            else:
                self.status = FormStatus("error", result.get("error") or DEFAULT_ERROR)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Submit error: %s", e)
            self.status = FormStatus("error", NETWORK_ERROR)
        finally:
            self.is_submitting = False
        return self.status
