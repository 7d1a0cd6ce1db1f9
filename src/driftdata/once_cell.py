import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class OnceCell(Generic[T]):
    """
    A lazily initialized, write-once value.

    The first caller of `get_or_init` computes the value while holding the lock;
    every caller, concurrent ones included, gets back that same object.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._initialized = False

    def get(self) -> Optional[T]:
        return self._value if self._initialized else None

    def get_or_init(self, init: Callable[[], T]) -> T:
        if self._initialized:
            return self._value  # type: ignore
        with self._lock:
            if not self._initialized:
                self._value = init()
                self._initialized = True
        return self._value  # type: ignore
