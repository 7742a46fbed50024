"""Cast engine: natural transformations between strengths."""

from __future__ import annotations

import typing

import pytest
from kungfu import Nothing, Some

from focal import InvalidCastError
from focal._helpers import identity
from focal.optics import Strength, Viewer, affine, cast, fold, id_


def _absent(_: typing.Any) -> typing.Any:
    return Nothing()


class TestUpcasts:
    def test_exact_to_partial(self) -> None:
        assert cast(id_(), Strength.PARTIAL)(5) == Some(5)

    def test_exact_to_many(self) -> None:
        assert cast(id_(), Strength.MANY)(5) == (5,)

    def test_partial_absent_to_many(self) -> None:
        assert cast(affine(_absent, identity), Strength.MANY)(5) == ()

    def test_partial_present_to_many(self) -> None:
        assert cast(affine(Some, identity), Strength.MANY)(5) == (5,)

    @pytest.mark.parametrize("tag", list(Strength))
    def test_same_strength_returns_original_view(self, tag: Strength) -> None:
        """No wrapping when strengths already match."""
        source = Viewer(tag, identity)
        assert cast(source, tag) is source.view


class TestDowncasts:
    @pytest.mark.parametrize(
        ("source", "target"),
        [
            (Strength.MANY, Strength.PARTIAL),
            (Strength.MANY, Strength.EXACT),
            (Strength.PARTIAL, Strength.EXACT),
        ],
    )
    def test_downcast_is_fatal(self, source: Strength, target: Strength) -> None:
        with pytest.raises(InvalidCastError) as info:
            cast(Viewer(source, identity), target)
        assert info.value.source is source
        assert info.value.target is target
        assert source.name in str(info.value)

    def test_invalid_cast_is_an_assertion(self) -> None:
        """Broken-invariant errors are assertions, not recoverable failures."""
        with pytest.raises(AssertionError):
            cast(fold(lambda s: (s,), identity), Strength.EXACT)
