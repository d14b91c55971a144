from enum import Enum
from typing import Annotated

from pydantic import StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class WorkerCategory(str, Enum):
    WELDER = "welder"
    FITTER = "fitter"
    HELPER = "helper"
    PACKER = "packer"
    MACHINIST = "machinist"
    ELECTRICIAN = "electrician"
    PLUMBER = "plumber"
    CARPENTER = "carpenter"
    OTHER = "other"


def blank_to_none(value: str | None) -> str | None:
    """Optional text fields treat whitespace-only input as missing."""
    if value is None:
        return None
    return value.strip() or None
