"""Faults raised by the matching engine."""

from typing import Any, NoReturn


class UnreachableCaseError(RuntimeError):
    """A closed enumeration received a value outside its known set.

    Indicates schema drift between the caller's data and the engine. It is
    never caught inside the engine; the whole matching call fails.
    """

    def __init__(self, value: Any, message: str | None = None):
        self.value = value
        super().__init__(message or f"Unexpected value: {value!r}")


def assert_unreachable(value: Any, message: str | None = None) -> NoReturn:
    raise UnreachableCaseError(value, message)
