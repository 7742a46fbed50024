"""Strength lattice: align is a join over EXACT < PARTIAL < MANY."""

import pytest
from hypothesis import given, strategies as st

from focal.optics import Strength, align

strengths = st.sampled_from(list(Strength))


class TestOrder:
    def test_total_order(self) -> None:
        assert Strength.EXACT < Strength.PARTIAL < Strength.MANY

    @pytest.mark.parametrize(
        ("u", "v", "expected"),
        [
            (Strength.EXACT, Strength.EXACT, Strength.EXACT),
            (Strength.EXACT, Strength.PARTIAL, Strength.PARTIAL),
            (Strength.EXACT, Strength.MANY, Strength.MANY),
            (Strength.PARTIAL, Strength.EXACT, Strength.PARTIAL),
            (Strength.PARTIAL, Strength.MANY, Strength.MANY),
            (Strength.MANY, Strength.PARTIAL, Strength.MANY),
        ],
    )
    def test_align_table(self, u: Strength, v: Strength, expected: Strength) -> None:
        assert align(u, v) is expected


class TestJoinLaws:
    """Property-based checks that align is a lattice join."""

    @given(x=strengths, y=strengths)
    def test_commutative(self, x: Strength, y: Strength) -> None:
        assert align(x, y) is align(y, x)

    @given(x=strengths, y=strengths, z=strengths)
    def test_associative(self, x: Strength, y: Strength, z: Strength) -> None:
        assert align(x, align(y, z)) is align(align(x, y), z)

    @given(x=strengths)
    def test_idempotent(self, x: Strength) -> None:
        assert align(x, x) is x

    @given(x=strengths, y=strengths)
    def test_upper_bound(self, x: Strength, y: Strength) -> None:
        joined = align(x, y)
        assert joined >= x
        assert joined >= y
