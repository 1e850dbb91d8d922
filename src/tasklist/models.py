from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BeforeValidator, StrictBool, StrictStr
from pydantic_core import PydanticCustomError


def _not_blank(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError("blank_title", "Title is required")
    return value


def _not_null(value: Any) -> Any:
    # Only runs for values that were sent, an absent field keeps its default.
    if value is None:
        raise PydanticCustomError("bool_type", "Input should be a valid boolean")
    return value


Title = Annotated[StrictStr, AfterValidator(_not_blank)]
Completed = Annotated[Optional[StrictBool], BeforeValidator(_not_null)]


@dataclass
class Task:
    id: int
    title: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        return cls(id=data["id"], title=data["title"], completed=data["completed"])


@dataclass
class TaskCreate:
    title: Title


@dataclass
class TaskUpdate:
    """A partial update, ``None`` fields are left untouched.

    An empty title counts as absent.
    """

    title: Optional[StrictStr] = None
    completed: Completed = None
