#!/usr/bin/env python3
from typing import TypeVar, Generic, Optional, Any, Protocol


class PushesAndPops(Protocol):  # pragma: no cover
    def push(self, arg: Any) -> None:
        ...

    def pop(self) -> Any:
        ...


ObjT = TypeVar('ObjT', bound=PushesAndPops)
ArgT = TypeVar('ArgT')


class Context(Generic[ObjT, ArgT]):
    """
        push arg on enter, pop it again on exit, even when the block raises
    """
    __slots__ = 'obj', 'arg'
    obj: ObjT
    arg: Optional[ArgT]

    def __init__(self, obj: ObjT, arg: Optional[ArgT]):
        self.obj = obj
        self.arg = arg

    def __enter__(self) -> ObjT:
        self.obj.push(self.arg)
        return self.obj

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.obj.pop()
