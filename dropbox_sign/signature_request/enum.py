from dropbox_sign.base.components import BaseEnum


class SMSPhoneNumberTypeEnum(BaseEnum):
    authentication = "authentication"
    delivery = "delivery"


class SigningOptionsDefaultTypeEnum(BaseEnum):
    draw = "draw"
    phone = "phone"
    type = "type"  # noqa: WPS125
    upload = "upload"


class CustomFieldTypeEnum(BaseEnum):
    text = "text"
    checkbox = "checkbox"


class ResponseDataTypeEnum(BaseEnum):
    """
    The list of form field types returned in `response_data`
    https://developers.hellosign.com/api/reference/schema/#SignatureRequestResponseDataBase
    """

    text = "text"
    checkbox = "checkbox"
    dropdown = "dropdown"
    radio = "radio"
    signature = "signature"
    date_signed = "date_signed"
    initials = "initials"
    text_merge = "text-merge"
    checkbox_merge = "checkbox-merge"
