import json

import httpx
import pytest
from httpx import AsyncClient

from src.apps.contact.services.contact_service import SUCCESS_MESSAGE
from src.apps.contact.services.form_client import NETWORK_ERROR, ContactFormClient
from src.core.exceptions import ValidationException


class Recorder:
    def __init__(self, response=None, error=None):
        self.requests = []
        self.response = response
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error:
            raise self.error
        return self.response


def mock_client(recorder: Recorder) -> AsyncClient:
    return AsyncClient(transport=httpx.MockTransport(recorder), base_url="http://test")


def filled(client: AsyncClient, **overrides) -> ContactFormClient:
    values = {
        "name": "Asha",
        "email": "asha@example.com",
        "grade": "Graduate",
        "exam": "SSC CGL",
        "message": "Please update the admit card date.",
    }
    values.update(overrides)
    return ContactFormClient(client).fill(**values)


async def test_submit_posts_once_and_resets():
    recorder = Recorder(httpx.Response(200, json={"success": True, "message": "Thanks"}))
    async with mock_client(recorder) as client:
        form = filled(client)
        status = await form.submit()

    assert len(recorder.requests) == 1
    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/api/contact"
    assert json.loads(request.content) == {
        "name": "Asha",
        "email": "asha@example.com",
        "grade": "Graduate",
        "exam": "SSC CGL",
        "message": "Please update the admit card date.",
    }
    assert status.type == "success"
    assert status.message == "Thanks"
    assert all(value == "" for value in form.fields.values())
    assert form.is_submitting is False


async def test_blank_message_never_reaches_network():
    recorder = Recorder(httpx.Response(200, json={"success": True}))
    async with mock_client(recorder) as client:
        form = filled(client, message="  ")
        with pytest.raises(ValidationException) as excinfo:
            await form.submit()

    assert recorder.requests == []
    assert [d.field for d in excinfo.value.error_details] == ["message"]
    assert form.fields["name"] == "Asha"


async def test_server_error_keeps_fields():
    recorder = Recorder(httpx.Response(500, json={"success": False, "error": "Disk full"}))
    async with mock_client(recorder) as client:
        form = filled(client)
        status = await form.submit()

    assert status.type == "error"
    assert status.message == "Disk full"
    assert form.fields["email"] == "asha@example.com"


async def test_failure_without_error_text():
    recorder = Recorder(httpx.Response(400, json={"success": False}))
    async with mock_client(recorder) as client:
        status = await filled(client).submit()

    assert status.type == "error"
    assert status.message == "Failed to submit"


async def test_network_error():
    recorder = Recorder(error=httpx.ConnectError("connection refused"))
    async with mock_client(recorder) as client:
        status = await filled(client).submit()

    assert len(recorder.requests) == 1
    assert status.type == "error"
    assert status.message == NETWORK_ERROR


async def test_submit_against_running_site(client: AsyncClient):
    form = filled(client, grade=None, exam=None)
    status = await form.submit()
    assert status.type == "success"
    assert status.message == SUCCESS_MESSAGE


async def test_fill_rejects_unknown_field():
    with pytest.raises(KeyError):
        ContactFormClient(AsyncClient()).fill(phone="123")


async def test_non_object_reply_is_a_failure():
    recorder = Recorder(httpx.Response(200, json=["ok"]))
    async with mock_client(recorder) as client:
        form = filled(client)
        status = await form.submit()

    assert status.type == "error"
    assert status.message == "Failed to submit"
    assert form.fields["name"] == "Asha"
    assert form.is_submitting is False
