from drillkit.lessons.pointers import (
    Cons,
    Cow,
    abs_all,
    create_empty_list,
    create_non_empty_list,
)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    assert create_non_empty_list() != create_empty_list()
    assert list(create_non_empty_list()) == [1]


def test_cons_iterates_values():
    assert list(Cons(1, Cons(2, Cons(3)))) == [1, 2, 3]


def test_reference_mutation():
    original = (-1, 0, 1)
    result = abs_all(Cow.borrowed(original))
    assert result.is_owned is True
    assert list(result.data) == [1, 0, 1]
    assert original == (-1, 0, 1)


def test_reference_no_mutation():
    original = [0, 1, 2]
    result = abs_all(Cow.borrowed(original))
    assert result.is_owned is False
    assert result.data is original


def test_owned_no_mutation():
    data = [0, 1, 2]
    result = abs_all(Cow.owned(data))
    assert result.is_owned is True
    assert result.data == [0, 1, 2]


def test_owned_mutation():
    data = [-1, 0, 1]
    result = abs_all(Cow.owned(data))
    assert result.is_owned is True
    assert result.data is data
    assert data == [1, 0, 1]


def test_to_mut_copies_borrowed_once():
    original = [5, -6]
    cow = Cow.borrowed(original)
    first = cow.to_mut()
    second = cow.to_mut()
    assert first is second
    assert first is not original
    assert len(cow) == 2 and cow[1] == -6