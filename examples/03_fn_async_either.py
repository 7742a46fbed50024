from __future__ import annotations

from _infra import Env, Failure, FakeStore, Person, banner, family, run

from kungfu import Error, Ok

from focal import FnAsyncEither, id_, modify


def load(name: str) -> FnAsyncEither[Env, Person, Failure]:
    # Locality: the store comes from the environment, not from a closure.
    return FnAsyncEither.try_catch(
        lambda env: env.store.load(name),
        lambda exc, env: Failure(f"load {name}: {exc!r}", transient=isinstance(exc, ConnectionError)),
    )


def save(person: Person) -> FnAsyncEither[Env, None, Failure]:
    return FnAsyncEither.try_catch(
        lambda env: env.store.save(person),
        lambda exc, env: Failure(f"save {person.name}: {exc!r}"),
    )


def audit(message: str) -> FnAsyncEither[Env, None, Failure]:
    def write(env: Env) -> None:
        env.audit.append(message)

    return FnAsyncEither.from_fn(write)


ages = id_().prop("children").array().prop("age")


def birthday_party(name: str) -> FnAsyncEither[Env, Person, Failure]:
    return (
        load(name)
        .alt(load(name))  # one retry on any failure
        .map(modify(ages, lambda age: age + 1))
        .then_first(save)
        .then_first(lambda p: audit(f"party for {p.name}'s children"))
    )


async def main() -> None:
    banner("03_fn_async_either: env-reading pipeline with try_catch + alt + then_first")

    env = Env(store=FakeStore(delay_seconds=0.01, failures_before_ok=1), audit=[])
    await env.store.save(family())

    result = await birthday_party("Jackie")(env)
    match result:
        case Ok(person):
            print(f"ok: children now {[child.age for child in person.children]}")
        case Error(err):
            print(f"error: {err}")
    print(f"audit: {env.audit!r}")

    missing = await birthday_party("Nobody").fold(
        lambda err: f"failed: {err}",
        lambda person: f"ok: {person.name}",
    )(env)
    print(missing)

    banner("03_fn_async_either: ask / local")

    store_size = FnAsyncEither.asks(lambda store: len(store.people)).local(lambda e: e.store)
    print(f"people in store: {await store_size(env)}")


if __name__ == "__main__":
    run(main)
