"""Generic JSON helpers: plain values and typed instances to and from text.

    >>> from cssbuilder.shapes import Rectangle
    >>> to_json(Rectangle(10, 20))
    '{"width": 10, "height": 20}'
    >>> from_json(Rectangle, '{"width": 10, "height": 20}').area
    200
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["to_json", "from_json"]


def _to_plain(obj: Any) -> Any:
    """``default`` hook for json.dumps: dataclasses and ``to_dict()`` objects."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the JSON representation of *obj*."""
    return json.dumps(obj, default=_to_plain)


def from_json(cls: type[T], text: str) -> T:
    """Reconstitute an instance of *cls* from JSON *text*.

    Dataclasses are built from the object's keys that name init fields
    (other keys are ignored), classes with a ``from_dict`` classmethod go
    through it, and anything else is called with the decoded value
    (``from_json(list, "[1, 2]")``).
    """
    data = json.loads(text)
    if dataclasses.is_dataclass(cls):
        if not isinstance(data, dict):
            raise TypeError(
                f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
            )
        names = {f.name for f in dataclasses.fields(cls) if f.init}
        return cls(**{k: v for k, v in data.items() if k in names})  # type: ignore[return-value]
    from_dict = getattr(cls, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)  # type: ignore[no-any-return]
    return cls(data)  # type: ignore[call-arg]
