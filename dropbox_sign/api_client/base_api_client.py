import logging
from types import MappingProxyType

from httpx import AsyncBaseTransport, AsyncClient, Auth, DecodingError, Limits, RequestError, Response, Timeout

from dropbox_sign.api_client.exception import DropboxSignParseException, DropboxSignTransportException
from dropbox_sign.base.components import BaseEnum

DEFAULT_HEADERS = MappingProxyType({
    "Accept": "application/json",
})


class HTTPMethod(BaseEnum):
    post = "POST"
    get = "GET"


class BaseApiClient:
    def __init__(
        self,
        base_url: str,
        headers: dict | None = None,
        auth: Auth | None = None,
        timeout: float | None = None,
        pool_size: int | None = None,
        transport: AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = DEFAULT_HEADERS.copy() if headers is None else headers

        self._auth = auth
        self._timeout = timeout
        self._pool_size = pool_size
        self._transport = transport

        # built on first request
        self._client: AsyncClient | None = None
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def client(self) -> AsyncClient:
        if self._client is None:
            self._client = AsyncClient(
                headers=self.headers,
                auth=self._auth,
                timeout=Timeout(self._timeout),
                limits=Limits(max_connections=self._pool_size, max_keepalive_connections=self._pool_size),
                transport=self._transport,
            )

        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _request(self, method: HTTPMethod, endpoint: str, **kwargs) -> Response:
        url = self.base_url + endpoint
        self._logger.debug("%s %s", method.value, url)

        try:
            return await self.client.request(method=method.value, url=url, **kwargs)
        except DecodingError as exc:
            raise DropboxSignParseException(addition_message=str(exc)) from exc
        except RequestError as exc:
            self._logger.error("%s %s failed: %r", method.value, url, exc)
            raise DropboxSignTransportException(exc, url=url) from exc
