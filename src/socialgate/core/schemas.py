"""Login result schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

URN_PREFIX = "urn"


class Identity(BaseModel):
    """Normalized, provider-independent user identity."""

    model_config = ConfigDict(frozen=True)

    urn: str = Field(min_length=1)
    properties: dict[str, str] = Field(default_factory=dict)

    @field_validator("urn")
    @classmethod
    def _check_urn(cls, value: str) -> str:
        parts = value.split(":", 2)
        if len(parts) != 3 or parts[0] != URN_PREFIX or not parts[1] or not parts[2]:
            raise ValueError(f"URN must look like 'urn:<provider>:<id>', got {value!r}")
        return value

    @classmethod
    def build(cls, provider: str, native_id: str, properties: dict[str, str] | None = None) -> "Identity":
        return cls(urn=f"{URN_PREFIX}:{provider}:{native_id}", properties=properties or {})

    @property
    def provider(self) -> str:
        return self.urn.split(":", 2)[1]

    @property
    def native_id(self) -> str:
        return self.urn.split(":", 2)[2]
