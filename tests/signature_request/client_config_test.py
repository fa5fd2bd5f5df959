from http import HTTPStatus

import httpx
import pytest
from pytest_mock import MockerFixture

from dropbox_sign import DropboxSignClient
from dropbox_sign.config import API_URL, DropboxSignSettings, Settings
from tests.builders import build_handler, build_signature_request_body
from tests.conftest import ClientFactory
from tests.constants import API_KEY, SIGNATURE_REQUEST_ID


def _pool_limit(client: DropboxSignClient) -> int:
    return client.client._transport._pool._max_connections  # noqa: WPS437


@pytest.mark.asyncio
async def test_should_use_default_pool_and_timeout():
    async with DropboxSignClient(API_KEY) as client:
        assert client.pool_size == 5
        assert client.timeout == 30
        assert client.base_url == API_URL
        assert client.client.timeout.read == 30
        assert _pool_limit(client) == 5


@pytest.mark.asyncio
async def test_should_not_open_httpx_client_until_first_request(
    client_factory: ClientFactory,
    sent_requests: list[httpx.Request],
):
    base_client = client_factory(
        build_handler(HTTPStatus.OK, json=build_signature_request_body(), sent_requests=sent_requests),
    )
    intermediate = base_client.with_pool(10)
    configured = intermediate.with_timeout(5)

    assert base_client._client is None  # noqa: WPS437
    assert intermediate._client is None  # noqa: WPS437
    assert configured._client is None  # noqa: WPS437

    await configured.get_signature_request(SIGNATURE_REQUEST_ID)
    await configured.close()

    assert len(sent_requests) == 1
    assert intermediate._client is None  # noqa: WPS437
    assert configured._client is not None  # noqa: WPS437


@pytest.mark.asyncio
async def test_should_close_unused_client():
    client = DropboxSignClient(API_KEY)

    await client.close()

    assert client._client is None  # noqa: WPS437


@pytest.mark.asyncio
async def test_should_return_new_client_from_with_setters():
    async with DropboxSignClient(API_KEY) as client:
        async with client.with_pool(10).with_timeout(5) as configured:
            assert configured is not client
            assert configured.api_key == API_KEY
            assert configured.pool_size == 10
            assert configured.timeout == 5
            assert configured.client.timeout.connect == 5
            assert _pool_limit(configured) == 10

        assert client.pool_size == 5
        assert client.timeout == 30


@pytest.mark.parametrize("kwargs", [{"pool_size": 0}, {"timeout": -1}])
def test_should_reject_non_positive_configuration(kwargs: dict):
    with pytest.raises(ValueError):
        DropboxSignClient(API_KEY, **kwargs)


@pytest.mark.asyncio
async def test_should_build_client_from_settings():
    dropbox_sign_settings = DropboxSignSettings(
        api_key=API_KEY,
        api_url="https://sandbox.example.com/v3/",
        pool_max_size=2,
        timeout=10,
    )

    async with DropboxSignClient.from_settings(dropbox_sign_settings) as client:
        assert client.api_key == API_KEY
        assert client.base_url == "https://sandbox.example.com/v3"
        assert client.pool_size == 2
        assert client.timeout == 10


def test_should_require_api_key_in_settings():
    with pytest.raises(ValueError):
        DropboxSignClient.from_settings(DropboxSignSettings())


def test_should_read_nested_settings_from_env(mocker: MockerFixture):
    mocker.patch.dict(
        "os.environ",
        {
            "DROPBOX_SIGN__API_KEY": API_KEY,
            "DROPBOX_SIGN__TIMEOUT": "12",
        },
    )

    env_settings = Settings(_env_file=None)

    assert env_settings.dropbox_sign.api_key == API_KEY
    assert env_settings.dropbox_sign.timeout == 12
    assert env_settings.dropbox_sign.pool_max_size == 5
