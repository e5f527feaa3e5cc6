from datetime import datetime, timezone
from typing import Annotated
from pydantic import AfterValidator, Field


def as_utc(value: datetime) -> datetime:
    # naive values are read as UTC; SQLite keeps only the wall-clock part
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Shared field constraints used by the resource schemas.
Name = Annotated[str, Field(min_length=3, max_length=255)]
Phone = Annotated[str, Field(pattern=r"^[6-9]\d{9}$")]
Text = Annotated[str, Field(min_length=3)]
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]
