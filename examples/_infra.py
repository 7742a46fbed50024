from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Person:
    name: str
    age: int
    children: tuple[Person, ...] = ()


@dataclass(frozen=True, slots=True)
class Todo:
    text: str
    completed: bool = False


def family() -> Person:
    rufus = Person("Rufus", 1)
    clementine = Person("Clementine", 1)
    brandon = Person("Brandon", 37, (rufus, clementine))
    return Person("Jackie", 57, (brandon,))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str
    transient: bool = False

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


def _empty_people() -> dict[str, Person]:
    return {}


@dataclass(slots=True)
class FakeStore:
    """In-memory people store with optional latency and scripted failures."""

    people: dict[str, Person] = field(default_factory=_empty_people)
    delay_seconds: float = 0.0
    failures_before_ok: int = 0

    async def load(self, name: str) -> Person:
        await asyncio.sleep(self.delay_seconds)
        if self.failures_before_ok > 0:
            self.failures_before_ok -= 1
            raise ConnectionError("store: unavailable")
        person = self.people.get(name)
        if person is None:
            raise KeyError(name)
        return person

    async def save(self, person: Person) -> None:
        await asyncio.sleep(self.delay_seconds)
        self.people[person.name] = person


@dataclass(frozen=True, slots=True)
class Env:
    store: FakeStore
    audit: list[str]


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
