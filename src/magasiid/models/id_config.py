"""
Identifier configuration model.

Every field is optional on input; unknown keys are rejected. A field the caller
passes explicitly (even as None or an empty string) counts as set and overrides
the default verbatim when the configuration is resolved.
"""
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from ..config import (
    DEFAULT_ID_PREFIX,
    DEFAULT_ID_LENGTH,
    DEFAULT_ID_INCLUDE_TIMESTAMP,
    DEFAULT_ID_USE_DASHES,
    DEFAULT_ID_INCLUDE_CHECKSUM,
    DEFAULT_ID_CHAR_SET,
)


class IDConfiguration(BaseModel):
    """Segment layout for generated identifiers."""

    model_config = {"from_attributes": True, "extra": "forbid"}

    prefix: Optional[str] = Field(None, description="Literal text prepended to every identifier")
    length: Optional[int] = Field(
        None,
        description="Target length of the non-checksum, non-dash portion",
    )
    include_timestamp: Optional[bool] = Field(
        None,
        validation_alias=AliasChoices("include_timestamp", "includeTimestamp"),
        description="Embed a base-36 millisecond timestamp segment",
    )
    use_dashes: Optional[bool] = Field(
        None,
        validation_alias=AliasChoices("use_dashes", "useDashes"),
        description="Insert '-' between segments",
    )
    include_checksum: Optional[bool] = Field(
        None,
        validation_alias=AliasChoices("include_checksum", "includeChecksum"),
        description="Append a trailing checksum character",
    )
    custom_char_set: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("custom_char_set", "customCharSet"),
        description="Alphabet for the random body",
    )
    custom_format: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("custom_format", "customFormat"),
        description="Placeholder pattern applied as a final rewrite ('X' = next id character)",
    )

    @classmethod
    def defaults(cls) -> "IDConfiguration":
        """Fully-populated default configuration."""
        return cls(
            prefix=DEFAULT_ID_PREFIX,
            length=DEFAULT_ID_LENGTH,
            include_timestamp=DEFAULT_ID_INCLUDE_TIMESTAMP,
            use_dashes=DEFAULT_ID_USE_DASHES,
            include_checksum=DEFAULT_ID_INCLUDE_CHECKSUM,
            custom_char_set=DEFAULT_ID_CHAR_SET,
            custom_format=None,
        )

    def overrides(self) -> dict:
        """Fields explicitly set by the caller, keyed by field name."""
        return {name: getattr(self, name) for name in self.model_fields_set}
