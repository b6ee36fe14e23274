from __future__ import annotations

from copy import deepcopy
from itertools import permutations

import pytest

from make_theme.builder.sections import (
    create_array_from_meta_keys,
    get_section_data,
    is_builder_page,
    list_section_types,
    order_section_data,
    post_type_supports_builder,
    reassemble_sections,
)
from make_theme.hooks import HookRegistry

from fakes import FakePost, builder_post


def test_reassembles_flat_keys_in_id_order() -> None:
    flat = {"a:title": "Hi", "a:type": "banner", "b:title": "Bye"}

    result = reassemble_sections(flat, ["b", "a"])

    assert result == {"b": {"title": "Bye"}, "a": {"title": "Hi", "type": "banner"}}
    assert list(result) == ["b", "a"]


def test_nested_paths_become_nested_dicts() -> None:
    flat = {"1:columns:1:title": "Left", "1:columns:2:title": "Right", "1:section-type": "text"}

    assert create_array_from_meta_keys(flat) == {
        "1": {
            "columns": {"1": {"title": "Left"}, "2": {"title": "Right"}},
            "section-type": "text",
        }
    }


def test_ids_without_data_and_data_without_ids_are_dropped() -> None:
    flat = {"a:title": "A", "b:title": "B", "c:title": "C"}

    assert reassemble_sections(flat, ["c", "missing", "a"]) == {"c": {"title": "C"}, "a": {"title": "A"}}


def test_numeric_ids_match_string_keys() -> None:
    flat = {"1234:title": "Banner"}

    assert reassemble_sections(flat, [1234]) == {"1234": {"title": "Banner"}}


def test_empty_or_malformed_id_list_gives_no_sections() -> None:
    data = {"a": {"title": "A"}}

    assert order_section_data(data, []) == {}
    assert order_section_data(data, None) == {}
    assert order_section_data(data, "a") == {}


def test_conflicting_paths_do_not_depend_on_key_order() -> None:
    forward = {"a:columns": "flat", "a:columns:1": "nested"}
    backward = {"a:columns:1": "nested", "a:columns": "flat"}

    assert create_array_from_meta_keys(forward) == {"a": {"columns": {"1": "nested"}}}
    assert create_array_from_meta_keys(backward) == {"a": {"columns": {"1": "nested"}}}


def test_stored_dict_value_and_nested_key_do_not_depend_on_key_order() -> None:
    forward = {"a:cols": {"x": 1}, "a:cols:1": "y"}
    backward = {"a:cols:1": "y", "a:cols": {"x": 1}}

    assert create_array_from_meta_keys(forward) == {"a": {"cols": {"1": "y"}}}
    assert create_array_from_meta_keys(backward) == {"a": {"cols": {"1": "y"}}}


def test_reassembly_leaves_the_input_untouched() -> None:
    flat = {"a:cols": {"x": 1}, "a:cols:1": "y", "b:items": [{"title": "one"}]}
    before = deepcopy(flat)

    result = reassemble_sections(flat, ["a", "b"])
    result["b"]["items"][0]["title"] = "changed"

    assert flat == before


def test_reassembly_is_idempotent() -> None:
    flat = {"x:title": "X", "x:settings": {"width": 2}, "y:columns:1:title": "Y", "y:columns": "flat"}

    first = reassemble_sections(flat, ["y", "x"])
    second = reassemble_sections(flat, ["y", "x"])

    assert first == second
    assert list(first) == list(second) == ["y", "x"]


@pytest.mark.parametrize("ids", list(permutations(["a", "b", "c"])))
def test_reordering_ids_changes_only_order(ids) -> None:
    flat = {"a:title": "A", "b:cols:1": {"w": 1}, "c:type": "banner", "d:title": "orphan"}
    baseline = reassemble_sections(flat, ["a", "b", "c"])

    result = reassemble_sections(flat, list(ids))

    assert list(result) == list(ids)
    assert set(result) == set(baseline)
    assert {key: result[key] for key in baseline} == baseline


def test_get_section_data_ignores_meta_without_the_builder_prefix() -> None:
    post = builder_post(
        {"100": {"section-type": "text", "title": "Hello"}},
        ["100"],
    )
    meta = post.meta_map()
    meta["_edit_lock"] = ["1"]

    assert get_section_data(post.id, meta) == {"100": {"section-type": "text", "title": "Hello"}}


def test_get_section_data_passes_through_filter() -> None:
    hooks = HookRegistry()
    hooks.add_filter("make_get_section_data", lambda data, post_id: {**data, "extra": {"post": post_id}})
    post = builder_post({"1": {"title": "One"}}, ["1"])

    result = get_section_data(post.id, post.meta_map(), hooks)

    assert result == {"1": {"title": "One"}, "extra": {"post": "42"}}


def test_list_section_types() -> None:
    sections = {"1": {"section-type": "banner"}, "2": {"title": "untyped"}}

    assert list_section_types(sections) == {"1": "banner", "2": None}


def test_is_builder_page_by_template_or_meta_flag() -> None:
    assert is_builder_page(FakePost()) is True
    assert is_builder_page(FakePost(page_template="default")) is False
    assert is_builder_page(FakePost(post_type="post", page_template=None, meta={"_ttfmake-use-builder": "1"})) is True
    assert is_builder_page(None) is False


def test_is_builder_page_filter_can_override() -> None:
    hooks = HookRegistry()
    hooks.add_filter("make_is_builder_page", lambda is_builder, post_id: False)

    assert is_builder_page(FakePost(), hooks) is False


def test_post_type_supports_builder() -> None:
    assert post_type_supports_builder("page", ["page"]) is True
    assert post_type_supports_builder("product", ["page"]) is False
