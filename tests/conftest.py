from typing import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio

from dropbox_sign import DropboxSignClient
from dropbox_sign.signature_request.schema import SendSignatureRequest, SubSignatureRequestTemplateSigner
from tests.builders import Handler
from tests.constants import API_KEY

ClientFactory = Callable[[Handler], DropboxSignClient]


@pytest_asyncio.fixture(scope="function")
async def client_factory() -> AsyncGenerator[ClientFactory, None]:
    clients: list[DropboxSignClient] = []

    def _build_client(handler: Handler) -> DropboxSignClient:
        client = DropboxSignClient(api_key=API_KEY, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _build_client

    for client in clients:
        await client.close()


@pytest.fixture(scope="function")
def sent_requests() -> list[httpx.Request]:
    return []


@pytest.fixture(scope="function")
def minimal_send_request() -> SendSignatureRequest:
    return SendSignatureRequest(
        signers=[
            SubSignatureRequestTemplateSigner(role="Client", name="George", email_address="george@example.com"),
        ],
        template_ids=["c26b8a16784a872da37ea946b9ddec7c1e11dff6"],
    )
