from typing import Any, NoReturn, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from dropbox_sign.api_client.exception import (
    DropboxSignParseException,
    DropboxSignResponseException,
    MissingResponseKeyException,
)
from dropbox_sign.api_client.schema import ErrorResponse, WarningResponse

WARNINGS_KEY = "warnings"

PayloadModel = TypeVar("PayloadModel", bound=BaseModel)

warnings_adapter = TypeAdapter(list[WarningResponse])


def _read_json_object(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError as exc:  # covers both JSONDecodeError and UnicodeDecodeError
        raise DropboxSignParseException(addition_message=str(exc)) from exc

    if not isinstance(body, dict):
        raise DropboxSignParseException(addition_message=f"Expected JSON object, got {type(body).__name__}")

    return body


def parse_response(
    response: httpx.Response,
    key: str,
    model: type[PayloadModel],
) -> tuple[PayloadModel, list[WarningResponse] | None]:
    """
    Unwrap a successful Dropbox Sign response.

    The payload lives under `key` at the top level of the body and is validated into `model`.
    Warnings are optional; `None` is returned when the body has no `warnings` key.
    """
    body = _read_json_object(response)

    if key not in body:
        raise MissingResponseKeyException(key)

    try:
        payload = model.model_validate(body[key])
    except ValidationError as exc:
        raise DropboxSignParseException(addition_message=str(exc)) from exc

    raw_warnings = body.get(WARNINGS_KEY)
    if raw_warnings is None:
        return payload, None

    try:
        warnings = warnings_adapter.validate_python(raw_warnings)
    except ValidationError as exc:
        raise DropboxSignParseException(addition_message=str(exc)) from exc

    return payload, warnings


def parse_error_response(response: httpx.Response) -> NoReturn:
    body = _read_json_object(response)

    try:
        error_response = ErrorResponse.model_validate(body)
    except ValidationError as exc:
        raise DropboxSignParseException(addition_message=str(exc)) from exc

    error_response.error.status = response.status_code

    raise DropboxSignResponseException(error_response.error)
