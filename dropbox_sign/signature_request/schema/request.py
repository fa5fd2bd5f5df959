from pydantic import AliasChoices, Field

from dropbox_sign.base.schema import ApiBaseModel
from dropbox_sign.signature_request.enum import SigningOptionsDefaultTypeEnum, SMSPhoneNumberTypeEnum


class SubSignatureRequestTemplateSigner(ApiBaseModel):
    role: str  # must match a role defined in the template
    name: str
    email_address: str
    pin: str | None = None
    sms_phone_number: str | None = None
    sms_phone_number_type: SMSPhoneNumberTypeEnum | None = None


class SubCC(ApiBaseModel):
    role: str
    email_address: str = Field(validation_alias=AliasChoices("email_address", "email"))


class SubCustomField(ApiBaseModel):
    name: str
    editor: str | None = None
    required: bool | None = None
    value: str | None = None  # noqa: WPS110


class SubSigningOptions(ApiBaseModel):
    default_type: SigningOptionsDefaultTypeEnum
    draw: bool | None = None
    phone: bool | None = None
    type_: bool | None = Field(default=None, alias="type")
    upload: bool | None = None


class SendSignatureRequest(ApiBaseModel):
    """
    Body of `POST /signature_request/send_with_template`.

    Only `signers` and `template_ids` are required, every other field is left out
    of the request body until it is set.
    """

    signers: list[SubSignatureRequestTemplateSigner]
    template_ids: list[str]
    allow_decline: bool | None = None
    ccs: list[SubCC] | None = None
    client_id: str | None = None
    custom_fields: list[SubCustomField] | None = None
    files: list[bytes] | None = None
    file_urls: list[str] | None = None
    is_eid: bool | None = None
    message: str | None = None
    metadata: dict[str, str] | None = None
    signing_options: SubSigningOptions | None = None
    signing_redirect_url: str | None = None
    subject: str | None = None
    test_mode: bool | None = None
    title: str | None = None
