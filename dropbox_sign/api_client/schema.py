from pydantic import Field

from dropbox_sign.base.schema import ApiBaseModel


class WarningResponse(ApiBaseModel):
    warning_msg: str
    warning_name: str

    def __str__(self):
        return f"{self.warning_msg} ({self.warning_name})"


class ErrorResponseError(ApiBaseModel):
    error_msg: str
    error_path: str | None = None
    error_name: str

    # not a part of the response body, set from the HTTP status of the response
    status: int | None = Field(default=None, exclude=True)

    def __str__(self):
        if self.error_path:
            return f"{self.error_name} ({self.error_path}): {self.error_msg}"

        return f"{self.error_name}: {self.error_msg}"


class ErrorResponse(ApiBaseModel):
    error: ErrorResponseError
