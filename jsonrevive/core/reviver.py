"""
Reviver pass for jsonrevive.

After parsing, the walker visits the value tree bottom-up and hands every
(key, value) pair to a caller-supplied function, which may replace the value
or remove the key by returning ABSENT.
"""

from typing import Any, Callable, Union

from .values import ValueKind, kind_of


class _Absent:
    """Type of the ABSENT sentinel."""

    _instance = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


# Returned by a reviver to delete the key it was called for
ABSENT = _Absent()

Key = Union[str, int]
Reviver = Callable[..., Any]


class ReviverWalker:
    """Applies a reviver to every node of a parsed value."""

    def __init__(self, reviver: Reviver, pass_holder: bool = False) -> None:
        self.reviver = reviver
        self.pass_holder = pass_holder

    def revive(self, value: Any) -> Any:
        """Walk ``value`` under a synthetic root holder and return the result."""
        root = {"": value}
        result = self._walk(root, "")
        return None if result is ABSENT else result

    def _walk(self, holder: Any, key: Key) -> Any:
        value = holder[key]
        kind = kind_of(value)
        if kind is None or not kind.is_container:
            return self._call(holder, key, value)

        if kind is ValueKind.OBJECT:
            for child_key in list(value):
                revived = self._walk(value, child_key)
                if revived is ABSENT:
                    del value[child_key]
                else:
                    value[child_key] = revived
        else:
            removed = set()
            for index in range(len(value)):
                revived = self._walk(value, index)
                if revived is ABSENT:
                    removed.add(index)
                else:
                    value[index] = revived
            # Indices stay stable while walking; compact afterwards
            if removed:
                value[:] = [
                    item for index, item in enumerate(value) if index not in removed
                ]

        return self._call(holder, key, value)

    def _call(self, holder: Any, key: Key, value: Any) -> Any:
        if self.pass_holder:
            return self.reviver(holder, key, value)
        return self.reviver(key, value)


def revive(value: Any, reviver: Reviver, pass_holder: bool = False) -> Any:
    """Apply ``reviver`` to ``value`` bottom-up."""
    return ReviverWalker(reviver, pass_holder).revive(value)
