from __future__ import annotations

import pytest

from justmaybe import AbsentValueError, Maybe, cat_maybes, collect_mapped, collect_present, map_maybes


def even_only(x: int) -> Maybe[int]:
    return Maybe.of(x) if x % 2 == 0 else Maybe.absent()


def test_collect_present():
    maybes = [Maybe.of("a"), Maybe.of("b"), Maybe.of(None), Maybe.of("d")]
    assert collect_present(maybes) == ["a", "b", "d"]


def test_collect_present_empty():
    assert collect_present([]) == []
    assert collect_present([Maybe.absent(), Maybe.absent()]) == []


def test_collect_mapped():
    maybes = [Maybe.of(1), Maybe.of(2), Maybe.of(None), Maybe.of(4)]
    assert collect_mapped(even_only, maybes) == [2, 4]


def test_collect_mapped_changes_type():
    maybes = [Maybe.of(1), Maybe.absent(), Maybe.of(3)]
    assert collect_mapped(lambda x: Maybe.of(str(x)), maybes) == ["1", "3"]


def test_collect_mapped_skips_mapper_on_absent():
    seen = []

    def mapper(x):
        seen.append(x)
        return Maybe.of(x)

    collect_mapped(mapper, [Maybe.absent(), Maybe.of(5), Maybe.absent()])
    assert seen == [5]


def test_collect_mapped_propagates_absent_value_error_from_mapper():
    def mapper(x):
        Maybe.absent().unwrap()
        return Maybe.of(x)

    with pytest.raises(AbsentValueError):
        collect_mapped(mapper, [Maybe.of(1)])

    with pytest.raises(AbsentValueError):
        collect_mapped(lambda d: Maybe.of_required(d.get("k")), [Maybe.of({"k": 1}), Maybe.of({})])


def test_collect_mapped_propagates_other_errors():
    def mapper(x):
        raise KeyError(x)

    with pytest.raises(KeyError):
        collect_mapped(mapper, [Maybe.of(1)])


def test_helpers_are_idempotent():
    maybes = (Maybe.of(1), Maybe.of(2), Maybe.absent(), Maybe.of(4))

    assert collect_present(maybes) == collect_present(maybes) == [1, 2, 4]
    assert collect_mapped(even_only, maybes) == collect_mapped(even_only, maybes) == [2, 4]


def test_helpers_preserve_order():
    values = [9, None, 3, 8, None, 1, 6, 2]
    maybes = [Maybe.of(v) for v in values]

    assert collect_present(maybes) == [9, 3, 8, 1, 6, 2]
    assert collect_mapped(even_only, maybes) == [8, 6, 2]


def test_helpers_accept_generators():
    assert collect_present(Maybe.of(i) for i in (1, None, 2)) == [1, 2]
    assert collect_mapped(even_only, (Maybe.of(i) for i in range(5))) == [0, 2, 4]


def test_aliases():
    assert cat_maybes is collect_present
    assert map_maybes is collect_mapped
