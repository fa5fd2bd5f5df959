from http import HTTPStatus

import httpx

from dropbox_sign.api_client.enum import ErrorNameEnum
from dropbox_sign.api_client.schema import ErrorResponseError
from dropbox_sign.base.exception import BaseDropboxSignException


class DropboxSignResponseException(BaseDropboxSignException):
    message = "Dropbox Sign API returned an error."

    def __init__(self, error: ErrorResponseError):
        self.error = error
        self.status_code = error.status
        self.error_msg = error.error_msg
        self.error_path = error.error_path
        self.error_name = error.error_name

        super().__init__(message=str(error))

    def __str__(self):
        class_name = self.__class__.__name__
        return (
            f"{class_name}(status_code={self.status_code!r}, error_name={self.error_name!r}, "
            + f"error_msg={self.error_msg!r}, error_path={self.error_path!r})"
        )

    @property
    def is_auth_exception(self) -> bool:
        return (
            self.status_code == HTTPStatus.UNAUTHORIZED
            or self.error_name == ErrorNameEnum.unauthorized
        )


class DropboxSignTransportException(BaseDropboxSignException):
    message = "Request to Dropbox Sign API failed."

    is_expected = False

    def __init__(self, exc: httpx.RequestError, url: str | None = None):
        self.url = url

        super().__init__(addition_message=f"{exc.__class__.__name__}: {exc}")


class DropboxSignParseException(BaseDropboxSignException):
    message = "Dropbox Sign API response could not be parsed."

    def __init__(self, addition_message: str | None = None, message: str | None = None):
        super().__init__(message=message, addition_message=addition_message)


class MissingResponseKeyException(DropboxSignParseException):
    def __init__(self, key: str):
        self.key = key

        super().__init__(message=f"Missing key `{key}` in response.")
