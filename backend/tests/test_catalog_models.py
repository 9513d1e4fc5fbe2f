import pytest

from objects_checker.models.catalog import list_objects

from tests._builders import catalog, obj


def _catalog():
    return catalog(
        ("Weapons", [obj(3, "sword"), obj(1, "Axe", tags="heavy")]),
        ("Armor", [obj(2, "Helmet"), obj(4, "Boots")]),
    )


def test_all_objects_keeps_catalog_order() -> None:
    assert [o.id for o in _catalog().all_objects()] == [3, 1, 2, 4]


def test_counts() -> None:
    data = _catalog()

    assert data.class_count == 2
    assert data.object_count == 4


def test_list_objects_by_id() -> None:
    rows = list_objects(_catalog())

    assert [(r.id, r.class_name) for r in rows] == [(1, "Weapons"), (2, "Armor"), (3, "Weapons"), (4, "Armor")]
    assert rows[0].tags == "heavy"
    assert rows[1].tags == ""


def test_list_objects_by_name_ignores_case() -> None:
    rows = list_objects(_catalog(), sort_by="name")

    assert [r.name for r in rows] == ["Axe", "Boots", "Helmet", "sword"]


def test_list_objects_by_class_is_stable() -> None:
    rows = list_objects(_catalog(), sort_by="class")

    assert [r.id for r in rows] == [2, 4, 3, 1]


def test_list_objects_descending() -> None:
    rows = list_objects(_catalog(), sort_by="id", descending=True)

    assert [r.id for r in rows] == [4, 3, 2, 1]


def test_list_objects_rejects_unknown_sort() -> None:
    with pytest.raises(ValueError, match="Cannot sort objects by 'tags'"):
        list_objects(_catalog(), sort_by="tags")
