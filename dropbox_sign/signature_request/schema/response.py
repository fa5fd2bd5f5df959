from typing import Any

from pydantic import Field

from dropbox_sign.base.schema import ApiBaseModel
from dropbox_sign.signature_request.enum import CustomFieldTypeEnum, ResponseDataTypeEnum


class SignatureRequestResponseSignatures(ApiBaseModel):
    signature_id: str
    signer_group_guid: str | None = None
    signer_email_address: str
    signer_name: str | None = None
    signer_role: str | None = None
    order: int | None = None
    status_code: str
    decline_reason: str | None = None
    signed_at: int | None = None
    last_viewed_at: int | None = None
    last_reminded_at: int | None = None
    has_pin: bool
    has_sms_auth: bool | None = None
    has_sms_delivery: bool | None = None
    sms_phone_number: str | None = None
    reassigned_by: str | None = None
    reassignment_reason: str | None = None
    reassigned_from: str | None = None
    error: str | None = None


class SignatureRequestResponseCustomFieldBase(ApiBaseModel):
    type_: CustomFieldTypeEnum = Field(alias="type")
    name: str
    required: bool | None = None
    api_id: str | None = None
    editor: str | None = None
    value: Any = None  # noqa: WPS110


class SignatureRequestResponseAttachment(ApiBaseModel):
    id: str  # noqa: WPS125
    signer: str
    name: str
    required: bool
    instructions: str | None = None
    uploaded_at: int | None = None


class SignatureRequestResponseData(ApiBaseModel):
    api_id: str | None = None
    signature_id: str | None = None
    name: str | None = None
    required: bool | None = None
    type_: ResponseDataTypeEnum | None = Field(default=None, alias="type")

    # string for text fields, bool for checkboxes and radios
    value: Any = None  # noqa: WPS110


class SignatureRequestResponse(ApiBaseModel):
    test_mode: bool | None = None
    signature_request_id: str
    requester_email_address: str | None = None
    title: str
    original_title: str
    subject: str | None = None
    message: str | None = None
    metadata: dict[str, Any]
    created_at: int
    expires_at: int | None = None
    is_complete: bool
    is_declined: bool
    has_error: bool
    files_url: str
    signing_url: str | None = None
    details_url: str
    cc_email_addresses: list[str]
    signing_redirect_url: str | None = None
    final_copy_uri: str | None = None
    template_ids: list[str] | None = None
    custom_ids: list[str] | None = None
    custom_fields: list[SignatureRequestResponseCustomFieldBase] | None = None
    attachments: list[SignatureRequestResponseAttachment] | None = None
    response_data: list[SignatureRequestResponseData] | None = None
    signatures: list[SignatureRequestResponseSignatures]
    bulk_send_job_id: str | None = None
