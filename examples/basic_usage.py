"""
Send a signature request from a template, then fetch it back by id.

Reads DROPBOX_SIGN__API_KEY, SIGNER_EMAIL and TEMPLATE_ID from the environment or `.env`.
"""
import asyncio
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from dropbox_sign import DropboxSignClient
from dropbox_sign.log_config import configure_logging
from dropbox_sign.signature_request.schema import (
    SendSignatureRequest,
    SubCustomField,
    SubSignatureRequestTemplateSigner,
)

logger = logging.getLogger("basic_usage")


class BasicUsageSettings(BaseSettings):
    signer_email: str
    template_id: str

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


async def main() -> None:
    usage_settings = BasicUsageSettings()

    signature_request = SendSignatureRequest(
        # role has to match the role name in the template
        signers=[
            SubSignatureRequestTemplateSigner(
                role="Client",
                name="test name",
                email_address=usage_settings.signer_email,
            ),
        ],
        template_ids=[usage_settings.template_id],
        custom_fields=[
            SubCustomField(name="test_field_one", value="This is test field one!"),
            SubCustomField(name="test_field_two", value="This is test field two!"),
        ],
        test_mode=True,
    )

    async with DropboxSignClient.from_settings() as client:
        response, warnings = await client.send_with_template(signature_request)
        logger.info("Sent signature request %s, warnings: %s", response.signature_request_id, warnings)

        fetched, fetch_warnings = await client.get_signature_request(response.signature_request_id)
        logger.info("Fetched signature request %r, warnings: %s", fetched, fetch_warnings)


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())
