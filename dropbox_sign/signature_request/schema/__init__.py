from dropbox_sign.signature_request.schema.request import (
    SendSignatureRequest,
    SubCC,
    SubCustomField,
    SubSignatureRequestTemplateSigner,
    SubSigningOptions,
)
from dropbox_sign.signature_request.schema.response import (
    SignatureRequestResponse,
    SignatureRequestResponseAttachment,
    SignatureRequestResponseCustomFieldBase,
    SignatureRequestResponseData,
    SignatureRequestResponseSignatures,
)
