from urllib.parse import quote

from httpx import AsyncBaseTransport, BasicAuth

from dropbox_sign.api_client.base_api_client import BaseApiClient, HTTPMethod
from dropbox_sign.api_client.response import parse_error_response, parse_response
from dropbox_sign.api_client.schema import WarningResponse
from dropbox_sign.config import API_URL, DropboxSignSettings, settings
from dropbox_sign.signature_request.schema import SendSignatureRequest, SignatureRequestResponse

DEFAULT_POOL_SIZE = 5
DEFAULT_TIMEOUT = 30

SignatureRequestResult = tuple[SignatureRequestResponse, list[WarningResponse] | None]


class DropboxSignClient(BaseApiClient):
    """
    Async client for the signature request endpoints of the Dropbox Sign API.

    Authenticates with HTTP Basic auth, the API key is the username and the password is empty.
    `pool_size` and `timeout` (seconds) configure the underlying httpx connection pool.
    `with_pool` and `with_timeout` return a new client; the httpx client itself is only created on the first request.
    Nothing is retried, every failure is raised to the caller as one of
    `DropboxSignResponseException`, `DropboxSignTransportException` or `DropboxSignParseException`.
    """

    signature_request_key = "signature_request"

    def __init__(
        self,
        api_key: str,
        pool_size: int = DEFAULT_POOL_SIZE,
        timeout: int = DEFAULT_TIMEOUT,
        base_url: str = API_URL,
        transport: AsyncBaseTransport | None = None,
    ) -> None:
        if pool_size <= 0:
            raise ValueError(f"pool_size must be positive, got {pool_size}")
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")

        self.api_key = api_key
        self.pool_size = pool_size
        self.timeout = timeout

        super().__init__(
            base_url=base_url,
            auth=BasicAuth(username=api_key, password=""),
            timeout=timeout,
            pool_size=pool_size,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, dropbox_sign_settings: DropboxSignSettings | None = None) -> "DropboxSignClient":
        dropbox_sign_settings = dropbox_sign_settings or settings.dropbox_sign
        if dropbox_sign_settings.api_key is None:
            raise ValueError("DROPBOX_SIGN__API_KEY environment variable is absent")

        return cls(
            api_key=dropbox_sign_settings.api_key,
            pool_size=dropbox_sign_settings.pool_max_size,
            timeout=dropbox_sign_settings.timeout,
            base_url=dropbox_sign_settings.api_url,
        )

    def with_pool(self, pool_size: int) -> "DropboxSignClient":
        return self._replace(pool_size=pool_size)

    def with_timeout(self, timeout: int) -> "DropboxSignClient":
        return self._replace(timeout=timeout)

    async def get_signature_request(self, signature_request_id: str) -> SignatureRequestResult:
        endpoint = f"/signature_request/{quote(signature_request_id, safe='')}"

        return await self._do_request(HTTPMethod.get, endpoint)

    async def send_with_template(self, send_signature_request: SendSignatureRequest) -> SignatureRequestResult:
        endpoint = "/signature_request/send_with_template"

        signature_request, warnings = await self._do_request(
            HTTPMethod.post,
            endpoint,
            json=send_signature_request.to_wire(),
        )
        self._logger.debug("send_with_template response: %r", signature_request)

        return signature_request, warnings

    def _replace(self, **kwargs) -> "DropboxSignClient":
        init_kwargs = {
            "api_key": self.api_key,
            "pool_size": self.pool_size,
            "timeout": self.timeout,
            "base_url": self.base_url,
            "transport": self._transport,
        }
        init_kwargs.update(kwargs)

        return self.__class__(**init_kwargs)

    async def _do_request(self, method: HTTPMethod, endpoint: str, **kwargs) -> SignatureRequestResult:
        response = await self._request(method, endpoint, **kwargs)

        if not response.is_success:
            self._logger.error("%s %s returned %s", method.value, endpoint, response.status_code)
            parse_error_response(response)

        signature_request, warnings = parse_response(response, self.signature_request_key, SignatureRequestResponse)
        for warning in warnings or []:
            self._logger.warning("Dropbox Sign warning: %s", warning)

        return signature_request, warnings
