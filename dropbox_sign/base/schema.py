from pydantic import BaseModel, ConfigDict


class ApiBaseModel(BaseModel):
    """Base for records mirroring the Dropbox Sign wire format (snake_case on both sides)."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        use_enum_values=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    def to_wire(self) -> dict:
        # optional fields left unset are not sent at all
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
