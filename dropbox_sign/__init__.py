from dropbox_sign.api_client.exception import (
    DropboxSignParseException,
    DropboxSignResponseException,
    DropboxSignTransportException,
    MissingResponseKeyException,
)
from dropbox_sign.api_client.schema import ErrorResponseError, WarningResponse
from dropbox_sign.base.exception import BaseDropboxSignException
from dropbox_sign.signature_request.client import DropboxSignClient
