"""Combinators: structure, refinement, sum branches and traversals."""

from __future__ import annotations

import typing
from dataclasses import dataclass
from typing import NamedTuple

import pytest
from kungfu import Error, Nothing, Ok, Some

from focal._helpers import identity
from focal.algebra import Eq, EqIdentity, Iso, Tree, TraversableSequence
from focal.optics import (
    Strength,
    at_key,
    at_map,
    from_iso,
    from_predicate,
    id_,
    modify,
    replace,
    traverse,
    view,
)


def inc(n: int) -> int:
    return n + 1


def is_even(n: int) -> bool:
    return n % 2 == 0


@dataclass(frozen=True, slots=True)
class Account:
    owner: str
    balance: int


class Point(NamedTuple):
    x: int
    y: int


class Box:
    def __init__(self, content: typing.Any) -> None:
        self.content = content


# ============================================================================
# Scenarios
# ============================================================================


class TestScenarios:
    def test_children_names(self, jackie: dict[str, typing.Any]) -> None:
        names = id_().prop("children").array().prop("name")
        assert view(names, jackie) == ("Brandon",)

    def test_complete_all_todos(self, todos: list[dict[str, typing.Any]]) -> None:
        completed = id_().array().prop("completed")

        updated = replace(completed, True)(todos)

        assert updated == [
            {"text": "Write some good examples for Optics", "completed": True},
            {"text": "Make some coffee", "completed": True},
        ]
        assert view(completed, updated) == (True, True)
        assert view(completed, todos) == (False, False)

    def test_missing_key_is_absent_and_untouched(self, scores: dict[str, int]) -> None:
        optic = id_().key("c")
        assert view(optic, scores) == Nothing()
        assert modify(optic, inc)(scores) is scores

    def test_present_key_is_updated(self, scores: dict[str, int]) -> None:
        assert modify(id_().key("a"), inc)(scores) == {"a": 2, "b": 2}
        assert scores == {"a": 1, "b": 2}

    def test_at_key_deletes_and_inserts(self) -> None:
        optic = at_key(id_(), "a")
        assert replace(optic, Nothing())({"a": 1}) == {}
        assert replace(optic, Some(5))({}) == {"a": 5}

    def test_grandchildren_names(self, jackie: dict[str, typing.Any]) -> None:
        grandchildren = (
            id_()
            .prop("children").nilable().array()
            .prop("children").nilable().array()
            .prop("name")
        )
        assert grandchildren.tag is Strength.MANY
        assert view(grandchildren, jackie) == ("Rufus", "Clementine")


# ============================================================================
# Structure
# ============================================================================


class TestProp:
    def test_mapping(self, jackie: dict[str, typing.Any]) -> None:
        age = id_().prop("age")
        assert age.tag is Strength.EXACT
        assert view(age, jackie) == 57

        older = modify(age, inc)(jackie)

        assert older["age"] == 58
        assert older["children"] is jackie["children"]
        assert jackie["age"] == 57

    def test_absent_mapping_key_reads_as_none(self) -> None:
        assert view(id_().prop("missing"), {"a": 1}) is None

    def test_dataclass(self) -> None:
        account = Account("ann", 10)
        updated = modify(id_().prop("balance"), inc)(account)
        assert updated == Account("ann", 11)
        assert account.balance == 10

    def test_namedtuple(self) -> None:
        updated = replace(id_().prop("x"), 5)(Point(1, 2))
        assert updated == Point(5, 2)
        assert isinstance(updated, Point)

    def test_plain_object(self) -> None:
        box = Box("old")
        updated = replace(id_().prop("content"), "new")(box)
        assert updated is not box
        assert updated.content == "new"
        assert box.content == "old"


class TestProps:
    def test_view_picks_fields(self, jackie: dict[str, typing.Any]) -> None:
        optic = id_().props("name", "age")
        assert view(optic, jackie) == {"name": "Jackie", "age": 57}

    def test_modify_merges_back(self, jackie: dict[str, typing.Any]) -> None:
        optic = id_().props("name", "age")

        updated = modify(optic, lambda d: {**d, "age": 58})(jackie)

        assert updated["age"] == 58
        assert updated["name"] == "Jackie"
        assert updated["children"] is jackie["children"]

    def test_extra_keys_are_ignored(self, jackie: dict[str, typing.Any]) -> None:
        optic = id_().props("name", "age")
        assert modify(optic, lambda d: {**d, "extra": 1})(jackie) is jackie

    def test_absent_key_is_not_written_back(self) -> None:
        optic = id_().props("a", "b")
        assert modify(optic, lambda d: {**d, "a": 2})({"a": 1}) == {"a": 2}

    def test_dropped_names_keep_their_values(self) -> None:
        optic = id_().props("a", "b")
        assert modify(optic, lambda d: {"a": 5})({"a": 1, "b": 2}) == {"a": 5, "b": 2}

    def test_only_changed_fields_reach_set_fields(self) -> None:
        optic = id_().props("x", "y")
        assert replace(optic, {"x": 1, "y": 7})(Point(1, 2)) == Point(1, 7)

    def test_dataclass(self) -> None:
        optic = id_().props("owner", "balance")
        updated = replace(optic, {"owner": "bob", "balance": 0})(Account("ann", 10))
        assert updated == Account("bob", 0)


class TestIndex:
    def test_in_range(self) -> None:
        optic = id_().index(1)
        assert optic.tag is Strength.PARTIAL
        assert view(optic, [10, 20, 30]) == Some(20)
        assert replace(optic, 0)([10, 20, 30]) == [10, 0, 30]

    @pytest.mark.parametrize("i", [3, 10, -1])
    def test_out_of_range(self, i: int) -> None:
        source = [10, 20, 30]
        optic = id_().index(i)
        assert view(optic, source) == Nothing()
        assert modify(optic, inc)(source) is source

    def test_tuple_stays_tuple(self) -> None:
        assert modify(id_().index(0), inc)((1, 2)) == (2, 2)

    def test_namedtuple_keeps_type(self) -> None:
        updated = modify(id_().index(0), inc)(Point(1, 2))
        assert updated == Point(2, 2)
        assert type(updated) is Point


class TestKey:
    def test_nested(self) -> None:
        source = {"config": {"retries": 3}}
        optic = id_().key("config").key("retries")
        assert view(optic, source) == Some(3)
        assert modify(optic, inc)(source) == {"config": {"retries": 4}}

    def test_equal_value_keeps_reference(self, scores: dict[str, int]) -> None:
        assert replace(id_().key("a"), 1)(scores) is scores


class TestAtKey:
    def test_view_is_not_flattened(self) -> None:
        optic = id_().at_key("a")
        assert optic.tag is Strength.EXACT
        assert view(optic, {"a": 1}) == Some(1)
        assert view(optic, {}) == Nothing()

    def test_overwrite(self) -> None:
        assert replace(id_().at_key("a"), Some(2))({"a": 1, "b": 0}) == {"a": 2, "b": 0}

    def test_noops_keep_reference(self) -> None:
        present = {"a": 1}
        absent: dict[str, int] = {}
        optic = id_().at_key("a")
        assert replace(optic, Some(1))(present) is present
        assert replace(optic, Nothing())(absent) is absent

    def test_modify_through_some(self) -> None:
        optic = id_().at_key("a").some()
        assert modify(optic, inc)({"a": 1}) == {"a": 2}
        assert view(optic, {}) == Nothing()


class TestAtMap:
    def test_default_equality(self) -> None:
        source = {(1, 2): "x"}
        optic = at_map(id_(), (1, 2))
        assert view(optic, source) == Some("x")
        assert replace(optic, Nothing())(source) == {}

    def test_custom_eq_targets_stored_key(self) -> None:
        source = {"Alpha": 1, "beta": 2}
        optic = id_().at_map("ALPHA", eq=Eq.by(str.casefold))

        assert view(optic, source) == Some(1)
        assert replace(optic, Some(10))(source) == {"Alpha": 10, "beta": 2}
        assert replace(optic, Nothing())(source) == {"beta": 2}

    def test_custom_eq_insert_uses_given_key(self) -> None:
        optic = id_().at_map("ALPHA", eq=Eq.by(str.casefold))
        assert replace(optic, Some(1))({"beta": 2}) == {"beta": 2, "ALPHA": 1}

    def test_without_eq_case_matters(self) -> None:
        optic = id_().at_map("ALPHA")
        assert view(optic, {"Alpha": 1}) == Nothing()

    def test_identity_eq_ignores_equal_keys(self) -> None:
        token = object()
        source = {token: "kept", (1, 2): "pair"}

        by_reference = id_().at_map(token, eq=EqIdentity)
        assert view(by_reference, source) == Some("kept")
        assert replace(by_reference, Nothing())(source) == {(1, 2): "pair"}

        equal_but_distinct = id_().at_map(tuple([1, 2]), eq=EqIdentity)
        assert view(equal_but_distinct, source) == Nothing()


class TestPairs:
    def test_first(self) -> None:
        optic = id_().first()
        assert view(optic, ("a", 1)) == "a"
        assert replace(optic, "b")(("a", 1)) == ("b", 1)

    def test_second(self) -> None:
        optic = id_().second()
        assert view(optic, ("a", 1)) == 1
        assert modify(optic, inc)(("a", 1)) == ("a", 2)

    def test_noop_keeps_reference(self) -> None:
        pair = ("a", 1)
        assert modify(id_().first(), identity)(pair) is pair


class TestIso:
    def test_imap(self) -> None:
        optic = id_().prop("n").imap(str, int)
        assert view(optic, {"n": 5}) == "5"
        assert modify(optic, lambda s: s + "0")({"n": 5}) == {"n": 50}

    def test_from_iso(self) -> None:
        as_tuple = from_iso(Iso(tuple, list))
        assert as_tuple.tag is Strength.EXACT
        assert view(as_tuple, [1, 2]) == (1, 2)
        assert modify(as_tuple, lambda t: (*t, 3))([1, 2]) == [1, 2, 3]


# ============================================================================
# Refinement
# ============================================================================


class TestRefinement:
    def test_filter(self) -> None:
        evens = id_().array().filter(is_even)
        assert view(evens, [1, 2, 3, 4]) == (2, 4)
        assert modify(evens, inc)([1, 2, 3, 4]) == [1, 3, 3, 5]

    def test_filter_on_exact_is_partial(self) -> None:
        optic = id_().prop("n").filter(is_even)
        assert optic.tag is Strength.PARTIAL
        assert view(optic, {"n": 3}) == Nothing()

    def test_from_predicate(self) -> None:
        even = from_predicate(is_even)
        assert view(even, 4) == Some(4)
        assert view(even, 3) == Nothing()
        assert modify(even, inc)(4) == 5
        assert modify(even, inc)(3) == 3

    def test_nilable(self, jackie: dict[str, typing.Any]) -> None:
        rufus = jackie["children"][0]["children"][0]
        optic = id_().prop("children").nilable()
        assert view(optic, rufus) == Nothing()
        assert modify(optic, list.copy)(rufus) is rufus
        assert view(optic, jackie) == Some(jackie["children"])

    def test_some(self) -> None:
        optic = id_().some()
        assert view(optic, Some(1)) == Some(1)
        assert view(optic, Nothing()) == Nothing()
        assert modify(optic, inc)(Some(1)) == Some(2)


class TestSumBranches:
    def test_right(self) -> None:
        optic = id_().right()
        assert view(optic, Ok(1)) == Some(1)
        assert view(optic, Error("boom")) == Nothing()
        assert modify(optic, inc)(Ok(1)) == Ok(2)

    def test_right_skips_error(self) -> None:
        failed = Error("boom")
        assert modify(id_().right(), inc)(failed) is failed

    def test_left(self) -> None:
        optic = id_().left()
        assert view(optic, Error("boom")) == Some("boom")
        assert view(optic, Ok(1)) == Nothing()
        assert modify(optic, str.upper)(Error("boom")) == Error("BOOM")

    def test_left_skips_ok(self) -> None:
        done = Ok(1)
        assert modify(id_().left(), str.upper)(done) is done


# ============================================================================
# Traversals
# ============================================================================


class TestTraversals:
    def test_array_keeps_kind(self) -> None:
        assert modify(id_().array(), inc)((1, 2)) == (2, 3)
        assert modify(id_().array(), inc)([1, 2]) == [2, 3]

    def test_array_keeps_namedtuple(self) -> None:
        updated = modify(id_().array(), inc)(Point(1, 2))
        assert updated == Point(2, 3)
        assert type(updated) is Point

    def test_traverse_with_explicit_instance(self) -> None:
        optic = traverse(id_(), TraversableSequence)
        assert optic.tag is Strength.MANY
        assert view(optic, [1, 2]) == (1, 2)

    def test_record(self, scores: dict[str, int]) -> None:
        values = id_().record()
        assert view(values, scores) == (1, 2)
        assert modify(values, inc)(scores) == {"a": 2, "b": 3}

    def test_set(self) -> None:
        members = id_().set()
        assert sorted(view(members, {1, 2, 3})) == [1, 2, 3]

        updated = modify(members, inc)({1, 2, 3})

        assert updated == {2, 3, 4}
        assert type(updated) is set

    def test_frozenset_stays_frozen(self) -> None:
        updated = modify(id_().set(), inc)(frozenset({1}))
        assert updated == frozenset({2})
        assert type(updated) is frozenset

    def test_set_collapses_equal_results(self) -> None:
        assert replace(id_().set(), 0)({1, 2, 3}) == {0}

    def test_tree_pre_order(self) -> None:
        source = Tree.of(1, Tree.of(2), Tree.of(3, Tree.of(4)))
        values = id_().tree()

        assert view(values, source) == (1, 2, 3, 4)
        assert modify(values, inc)(source) == Tree.of(2, Tree.of(3), Tree.of(4, Tree.of(5)))

    def test_tree_partial_update_shares_untouched_branches(self) -> None:
        left = Tree.of(1)
        source = Tree.of(1, left, Tree.of(2))

        updated = modify(id_().tree(), lambda n: n * 10 if n == 2 else n)(source)

        assert updated.forest[0] is left
        assert updated.forest[1] == Tree.of(20)


# ============================================================================
# No-op updates
# ============================================================================


class TestNoOpUpdates:
    """Identity updates hand back the very same object."""

    @pytest.mark.parametrize(
        "optic",
        [
            id_().prop("age"),
            id_().props("name", "age"),
            id_().prop("children").array(),
            id_().prop("children").array().prop("name"),
            id_().prop("children").nilable().array().prop("children").nilable().array(),
        ],
    )
    def test_person(self, jackie: dict[str, typing.Any], optic: typing.Any) -> None:
        assert modify(optic, identity)(jackie) is jackie

    @pytest.mark.parametrize(
        ("optic", "source"),
        [
            (id_().record(), {"a": 1}),
            (id_().set(), {1, 2}),
            (id_().tree(), Tree.of(1, Tree.of(2))),
            (id_().array(), ()),
        ],
    )
    def test_containers(self, optic: typing.Any, source: typing.Any) -> None:
        assert modify(optic, identity)(source) is source

    def test_equal_large_int_counts_as_unchanged(self) -> None:
        source = [10**30]
        assert modify(id_().array(), lambda n: int(str(n)))(source) is source

    def test_int_to_bool_is_a_change(self) -> None:
        source = [1]
        updated = modify(id_().array(), lambda n: True if n == 1 else n)(source)
        assert updated is not source
        assert type(updated[0]) is bool
