import pytest

from exprparse.items import MAX_DOT, Item, ItemCollection, ItemSet


def _sample_set():
    st = ItemSet()
    for production, dot in [(1, 2), (5, 1), (1, 0), (3, 5), (2, 1)]:
        st.add(Item(production, dot))
    return st


def test_membership_after_adding():
    st = _sample_set()
    assert Item(1, 2) in st
    assert Item(1, 0) in st
    assert Item(1, 1) not in st
    assert len(st) == 5


def test_iteration_is_ordered_by_production_then_dot():
    st = _sample_set()
    items = list(st)
    assert items == sorted(items)
    assert set(items) == {Item(1, 2), Item(5, 1), Item(1, 0), Item(3, 5), Item(2, 1)}


def test_productions_are_sorted_and_grouped():
    st = _sample_set()
    assert st.productions() == [1, 2, 3, 5]
    assert st.dots(1) == frozenset({0, 2})
    assert st.dots(4) == frozenset()


def test_discard_removes_single_item():
    st = _sample_set()
    st.discard(Item(1, 2))
    assert Item(1, 2) not in st
    assert Item(1, 0) in st
    assert len(st) == 4


def test_discard_every_item_empties_set():
    st = _sample_set()
    for production, dot in [(1, 2), (5, 1), (1, 0), (3, 5), (2, 1)]:
        st.discard(Item(production, dot))
    assert len(st) == 0
    assert st.productions() == []
    assert st == ItemSet()


def test_discard_missing_item_keeps_set_unchanged():
    st = _sample_set()
    before = list(st)
    st.discard(Item(9, 0))
    st.discard(Item(1, 1))
    assert list(st) == before


def test_adding_twice_is_idempotent():
    st = ItemSet([Item(0, 0)])
    st.add(Item(0, 0))
    assert list(st) == [Item(0, 0)]


def test_union_merges_both_sets():
    st1 = ItemSet([Item(2, 0), Item(4, 0), Item(6, 0), Item(1, 0)])
    st2 = ItemSet([Item(1, 1), Item(3, 1), Item(1, 2)])
    merged = st1.union(st2)
    assert set(merged) == set(st1) | set(st2)
    assert merged.productions() == [1, 2, 3, 4, 6]
    assert merged.dots(1) == frozenset({0, 1, 2})


def test_union_leaves_operands_untouched():
    st1 = ItemSet([Item(1, 0)])
    st2 = ItemSet([Item(1, 1)])
    st1.union(st2)
    assert list(st1) == [Item(1, 0)]
    assert list(st2) == [Item(1, 1)]


def test_union_with_empty_set_is_identity():
    st = _sample_set()
    assert st.union(ItemSet()) == st
    assert ItemSet().union(st) == st


def test_union_operator_matches_method():
    st1 = ItemSet([Item(0, 1)])
    st2 = ItemSet([Item(3, 0)])
    assert (st1 | st2) == st1.union(st2)


def test_iteration_snapshot_allows_adding():
    st = ItemSet([Item(0, 0)])
    for item in st:
        st.add(Item(item.production + 1, 0))
    assert list(st) == [Item(0, 0), Item(1, 0)]


@pytest.mark.parametrize("production, dot", [(-1, 0), (0, -1), (0, MAX_DOT + 1)])
def test_invalid_items_are_rejected(production, dot):
    with pytest.raises(ValueError):
        Item(production, dot)


def test_highest_dot_is_accepted():
    st = ItemSet([Item(0, MAX_DOT)])
    assert st.dots(0) == frozenset({MAX_DOT})


def test_collection_iterates_newest_first():
    set1 = ItemSet([Item(1, 0)])
    set2 = ItemSet([Item(2, 0)])
    set3 = ItemSet([Item(3, 0)])
    collection = ItemCollection()
    for st in (set1, set2, set3):
        collection.add(st)
    held = list(collection)
    assert len(collection) == 3
    assert held[0] is set3
    assert held[1] is set2
    assert held[2] is set1


def test_collection_clear_empties_member_sets():
    set1 = ItemSet([Item(1, 0)])
    set2 = ItemSet([Item(2, 0)])
    set3 = ItemSet([Item(3, 0)])
    collection = ItemCollection()
    for st in (set1, set2, set3):
        collection.add(st)
    collection.clear()
    assert len(collection) == 0
    assert len(set1) == 0
    assert len(set2) == 0
    assert len(set3) == 0


def test_collection_remove_by_identity():
    set1 = ItemSet([Item(1, 0)])
    set2 = ItemSet([Item(2, 0)])
    set3 = ItemSet([Item(3, 0)])
    collection = ItemCollection()
    for st in (set1, set2, set3):
        collection.add(st)

    collection.remove(set1)
    held = list(collection)
    assert len(held) == 2
    assert held[0] is set3
    assert held[1] is set2

    collection.remove(set3)
    held = list(collection)
    assert len(held) == 1
    assert held[0] is set2

    collection.remove(set2)
    assert len(collection) == 0
    assert Item(1, 0) in set1


def test_collection_remove_ignores_equal_but_distinct_set():
    held_set = ItemSet([Item(1, 0)])
    collection = ItemCollection()
    collection.add(held_set)
    collection.remove(ItemSet([Item(1, 0)]))
    assert len(collection) == 1
    assert next(iter(collection)) is held_set