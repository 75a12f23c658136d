from __future__ import annotations

import secrets
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def generate_id() -> str:
    """Random 16-hex-char record id."""
    return secrets.token_hex(8)


def utcnow() -> datetime:
    return datetime.now(UTC)


def _assume_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


# Timestamps written without an offset are read as UTC so they stay comparable.
UtcDatetime = Annotated[datetime, AfterValidator(_assume_utc)]


class Record(BaseModel):
    """Base for stored records. Serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
