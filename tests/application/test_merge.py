from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from lib_config_explorer.application.merge import last_document, merge_documents


SCALAR = st.one_of(st.none(), st.booleans(), st.integers(), st.text(min_size=1, max_size=5))
VALUE = st.recursive(
    SCALAR,
    lambda children: st.one_of(
        st.lists(children, max_size=3),
        st.dictionaries(st.text(min_size=1, max_size=5), children, max_size=3),
    ),
    max_leaves=10,
)
DOCUMENT = st.dictionaries(st.text(min_size=1, max_size=5), VALUE, max_size=4)


def test_later_keys_overwrite_earlier() -> None:
    assert merge_documents([{"a": 1}, {"a": 2, "b": 3}]) == {"a": 2, "b": 3}


def test_nested_values_are_replaced_not_merged() -> None:
    merged = merge_documents([{"db": {"host": "localhost", "port": 5432}}, {"db": {"password": "secret"}}])
    assert merged == {"db": {"password": "secret"}}


def test_merge_keeps_unrelated_keys() -> None:
    assert merge_documents([{"a": 1, "c": 9}, {"a": 2, "b": 3}]) == {"a": 2, "c": 9, "b": 3}


def test_merge_does_not_mutate_inputs() -> None:
    first = {"a": 1}
    second = {"a": 2}
    merge_documents([first, second])
    assert first == {"a": 1} and second == {"a": 2}


def test_last_document_discards_earlier_ones() -> None:
    assert last_document([{"a": 1, "c": 9}, {"a": 2, "b": 3}]) == {"a": 2, "b": 3}


def test_last_document_of_nothing_is_empty() -> None:
    assert last_document(iter([])) == {}


@given(DOCUMENT, DOCUMENT)
def test_every_key_comes_from_the_latest_document_holding_it(lhs, rhs) -> None:
    merged = merge_documents([lhs, rhs])
    assert set(merged) == set(lhs) | set(rhs)
    for key, value in merged.items():
        assert value == (rhs[key] if key in rhs else lhs[key])


@given(DOCUMENT, DOCUMENT, DOCUMENT)
def test_merge_associative(lhs, mid, rhs) -> None:
    left_first = merge_documents([merge_documents([lhs, mid]), rhs])
    right_first = merge_documents([lhs, merge_documents([mid, rhs])])
    assert left_first == right_first


@given(st.lists(DOCUMENT, max_size=5))
def test_last_document_equals_final_element(documents) -> None:
    expected = documents[-1] if documents else {}
    assert last_document(documents) == expected
