"""Typed shapes that opaque results are narrowed into."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

# Host and graph schemas are open-ended and change between server versions.
Host = dict[str, Any]
Graph = dict[str, Any]
GraphItem = dict[str, Any]


class HistoryItem(BaseModel):
    """One history sample. All fields stay text to keep the server's precision."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    clock: str
    value: str
    itemid: str


USERS: TypeAdapter[list[Any]] = TypeAdapter(list[Any])
HOSTS: TypeAdapter[list[Host]] = TypeAdapter(list[Host])
GRAPHS: TypeAdapter[list[Graph]] = TypeAdapter(list[Graph])
GRAPH_ITEMS: TypeAdapter[list[GraphItem]] = TypeAdapter(list[GraphItem])
HISTORY: TypeAdapter[list[HistoryItem]] = TypeAdapter(list[HistoryItem])

T = TypeVar("T")


def narrow(adapter: TypeAdapter[T], result: Any) -> T:
    """Re-decode an opaque result into the adapter's shape.

    Raises:
        ValueError: If the result does not fit the shape.

    """
    try:
        return adapter.validate_python(result)
    except ValidationError as e:
        raise ValueError(f"unexpected result shape: {e.error_count()} validation error(s)") from e
