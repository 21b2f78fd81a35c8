"""Reference-counted and exclusively owned value holders."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

_UNSET: Any = object()


class _Counter:
    __slots__ = ("count",)

    def __init__(self, count: int = 1) -> None:
        self.count = count


class SharedPointer(Generic[T]):
    """A holder whose value is shared by copies and released with the last of them."""

    def __init__(self, value: Optional[T] = None) -> None:
        self._value: Optional[T] = value
        self._counter: Optional[_Counter] = _Counter()

    @classmethod
    def _sharing(cls, value: Optional[T], counter: Optional[_Counter]) -> SharedPointer[T]:
        twin = cls.__new__(cls)
        twin._value = value
        twin._counter = counter
        return twin

    def _acquire(self) -> None:
        if self._counter is not None:
            self._counter.count += 1

    def _release(self) -> None:
        counter = getattr(self, "_counter", None)
        if counter is None:
            return
        counter.count -= 1
        if counter.count == 0 and self._value is not None:
            self._value = None
            self._counter = None

    def copy(self) -> SharedPointer[T]:
        """A new holder sharing this value and its count."""
        twin = self._sharing(self._value, self._counter)
        twin._acquire()
        return twin

    __copy__ = copy

    def move(self) -> SharedPointer[T]:
        """Hand the value and count over to a new holder, leaving this one empty."""
        twin = self._sharing(self._value, self._counter)
        self._value = None
        self._counter = None
        return twin

    def assign(self, other: SharedPointer[T]) -> SharedPointer[T]:
        """Drop the current value and share ``other``'s instead."""
        if other is not self:
            self._release()
            self._value = other._value
            self._counter = other._counter
            self._acquire()
        return self

    def reset(self, value: Any = _UNSET) -> None:
        """Drop the current value; with a value, start owning it afresh."""
        self._release()
        if value is _UNSET:
            self._value = None
            self._counter = None
        else:
            self._value = value
            self._counter = _Counter()

    def get(self) -> Optional[T]:
        """The held value, or ``None``."""
        return self._value

    def use_count(self) -> int:
        """How many holders share the value, or -1 when detached."""
        return self._counter.count if self._counter is not None else -1

    def __del__(self) -> None:
        self._release()


class UniquePointer(Generic[T]):
    """A holder that owns its value alone; it can be moved but not copied."""

    def __init__(self, value: Optional[T] = None) -> None:
        self._value: Optional[T] = value

    def _refuse_copy(self, kind: str) -> None:
        message = f"a {type(self).__name__} cannot be {kind}; move() it instead"
        raise TypeError(message)

    def __copy__(self) -> UniquePointer[T]:
        self._refuse_copy("copied")
        return self

    def __deepcopy__(self, memo: dict) -> UniquePointer[T]:
        self._refuse_copy("deep-copied")
        return self

    def move(self) -> UniquePointer[T]:
        """Hand the value over to a new holder, leaving this one empty."""
        twin = type(self)(self._value)
        self._value = None
        return twin

    def assign(self, other: UniquePointer[T]) -> UniquePointer[T]:
        """Drop the current value and take ``other``'s, leaving ``other`` empty."""
        if not isinstance(other, UniquePointer):
            raise TypeError("can only take ownership from another UniquePointer")
        if other is not self:
            self._value = other._value
            other._value = None
        return self

    def reset(self, value: Optional[T] = None) -> None:
        """Drop the current value and hold ``value`` instead."""
        self._value = value

    def get(self) -> Optional[T]:
        """The held value, or ``None``."""
        return self._value