"""
Drivers that execute filesystem step generators.

Storage operations are written once as generators that yield
``(primitive, args)`` pairs and receive the primitive's result back. The
blocking driver calls a FileSystem directly; the async driver awaits an
AsyncFileSystem. Exceptions raised by a primitive are thrown back into the
generator at the yield point, so both drivers see identical control flow.
"""

from __future__ import annotations

from typing import Any, Generator, TypeVar

from .interfaces import AsyncFileSystem, FileSystem

T = TypeVar("T")

Step = tuple[str, tuple[Any, ...]]
Steps = Generator[Step, Any, T]


def run(steps: Steps[T], fs: FileSystem) -> T:
    try:
        name, args = next(steps)
        while True:
            try:
                result = getattr(fs, name)(*args)
            except Exception as exc:
                name, args = steps.throw(exc)
            else:
                name, args = steps.send(result)
    except StopIteration as stop:
        return stop.value


async def run_async(steps: Steps[T], fs: AsyncFileSystem) -> T:
    try:
        name, args = next(steps)
        while True:
            try:
                result = await getattr(fs, name)(*args)
            except Exception as exc:
                name, args = steps.throw(exc)
            else:
                name, args = steps.send(result)
    except StopIteration as stop:
        return stop.value
