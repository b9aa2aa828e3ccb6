import threading, typing

T = typing.TypeVar("T")

_MISSING = object()

class memoized(typing.Generic[T]):
    """
    Read-only attribute computed on first access and then reused for the lifetime of the instance.

    The result is stored in the instance __dict__ (which also works for frozen dataclasses), so later
    lookups never reach the descriptor. First accesses from several threads are serialized, the
    wrapped function runs at most once per instance.
    """

    fnc: typing.Callable[[typing.Any], T]
    name: str

    _lock: threading.Lock

    def __init__(self, fnc: typing.Callable[[typing.Any], T]):
        self.fnc = fnc
        self.name = fnc.__name__
        self.__doc__ = fnc.__doc__
        self._lock = threading.Lock()

    def __set_name__(self, owner, name): self.name = name

    def __get__(self, obj, objtype=None) -> T:
        if obj is None: return self

        val = obj.__dict__.get(self.name, _MISSING)
        if val is _MISSING:
            with self._lock:
                val = obj.__dict__.get(self.name, _MISSING)
                if val is _MISSING:
                    val = self.fnc(obj)
                    obj.__dict__[self.name] = val
        return val
