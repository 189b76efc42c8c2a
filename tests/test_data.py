import pytest

from msmanager.data import State, SortField, StateRegistry, default_registry


def names(registry):
    return [s.name for s in registry]


def test_default_registry_contents():
    registry = default_registry()
    assert len(registry) == 16
    assert names(registry)[0] == "Johor"
    assert names(registry)[-1] == "Perlis"


def test_insert_appends_at_end():
    registry = default_registry()
    state = registry.insert("Testland", 1999, 12.5, 1000)
    assert list(registry)[-1] is state
    assert state == State("Testland", 1999, 12.5, 1000)


def test_name_is_truncated():
    state = State("x" * 60, 2000, 1.0, 1)
    assert len(state.name) == 49


def test_delete_is_case_sensitive():
    registry = default_registry()
    assert registry.delete("johor") is False
    assert registry.delete("Johor") is True
    assert "Johor" not in names(registry)
    assert len(registry) == 15


def test_delete_missing():
    registry = StateRegistry()
    assert registry.delete("Nowhere") is False


def test_sort_by_name_ascending():
    registry = default_registry()
    registry.sort(SortField.NAME, True)
    assert names(registry) == sorted(names(registry))


def test_sort_by_population_descending():
    registry = default_registry()
    registry.sort(4, False)
    pops = [s.population for s in registry]
    assert all(a >= b for a, b in zip(pops, pops[1:]))


@pytest.mark.parametrize("ascending", [True, False])
def test_sort_is_stable(ascending):
    registry = default_registry()
    registry.sort(SortField.YEAR, ascending)
    order = names(registry)
    assert order.index("Johor") + 1 == order.index("Perak")


def test_sort_unknown_field_keeps_order():
    registry = default_registry()
    before = names(registry)
    registry.sort(9, True)
    assert names(registry) == before


def test_search_ignores_case():
    registry = default_registry()
    found = registry.search("KUALA LUMPUR")
    assert found.name == "Kuala Lumpur"
    assert found.population == 1793000


def test_search_missing():
    assert default_registry().search("Atlantis") is None


def test_clear():
    registry = default_registry()
    registry.clear()
    assert len(registry) == 0
    assert list(registry) == []