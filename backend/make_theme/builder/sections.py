# make_theme/builder/sections.py
"""
Builder section data.

Sections are saved as flat post meta: one row per field, keyed by a
colon-joined path (``_ttfmake:<section id>:<field>[:<sub field>...]``),
plus one ``_ttfmake-section-ids`` row holding the display order. Meta
storage has no order of its own, so the ID list alone decides it.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Iterable, Mapping, Optional

META_PREFIX = "_ttfmake:"
SECTION_IDS_KEY = "_ttfmake-section-ids"
USE_BUILDER_KEY = "_ttfmake-use-builder"
BUILDER_TEMPLATE = "template-builder.php"
KEY_DELIMITER = ":"


def create_array_from_meta_keys(flat: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Expand delimiter-joined keys into nested dicts.

        {"a:title": "Hi", "a:cols:1": "x"} -> {"a": {"title": "Hi", "cols": {"1": "x"}}}

    When one key is a prefix of another ("a:cols" and "a:cols:1"), the
    nested value wins whatever order the keys arrive in. Stored values are
    copied, never written into, even when they are dicts themselves.
    """
    result: Dict[str, Any] = {}
    # ids of the nodes built here; only these are descended into
    nodes = {id(result)}

    for key, value in flat.items():
        pieces = str(key).split(KEY_DELIMITER)
        current = result

        for step in pieces[:-1]:
            node = current.get(step)
            if not (isinstance(node, dict) and id(node) in nodes):
                node = {}
                nodes.add(id(node))
                current[step] = node
            current = node

        existing = current.get(pieces[-1])
        if isinstance(existing, dict) and id(existing) in nodes:
            continue

        current[pieces[-1]] = deepcopy(value)

    return result


def order_section_data(data: Mapping[str, Any], ids: Optional[Iterable[Any]]) -> Dict[str, Any]:
    """
    Project section data through the ID list, in ID order.

    IDs without data and data without an ID are left out silently.
    """
    ordered: Dict[str, Any] = {}
    if ids is None or isinstance(ids, (str, bytes, Mapping)):
        return ordered

    for section_id in ids:
        section_id = str(section_id)
        if section_id in data and section_id not in ordered:
            ordered[section_id] = data[section_id]

    return ordered


def reassemble_sections(flat: Mapping[str, Any], ids: Optional[Iterable[Any]]) -> Dict[str, Any]:
    return order_section_data(create_array_from_meta_keys(flat), ids)


def builder_meta(meta: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Builder fields from a post's meta (key -> list of stored values), with
    the prefix stripped and the first stored value kept.
    """
    fields: Dict[str, Any] = {}
    for key, values in meta.items():
        if not key.startswith(META_PREFIX):
            continue
        if isinstance(values, list):
            if not values:
                continue
            values = values[0]
        fields[key[len(META_PREFIX):]] = values
    return fields


def _first(values):
    if isinstance(values, list):
        return values[0] if values else None
    return values


def get_section_data(post_id, meta: Mapping[str, Any], hooks=None) -> Dict[str, Any]:
    """
    Ordered section data for a post: section id -> nested field dict.

    ``meta`` is every meta row of the post, key -> list of values. The
    result passes through the `make_get_section_data` filter.
    """
    ids = _first(meta.get(SECTION_IDS_KEY))
    ordered = reassemble_sections(builder_meta(meta), ids if isinstance(ids, list) else None)

    if hooks is not None:
        ordered = hooks.apply_filters("make_get_section_data", ordered, post_id)
    return ordered


def list_section_types(sections: Mapping[str, Any]) -> Dict[str, Optional[str]]:
    return {
        section_id: data.get("section-type") if isinstance(data, dict) else None
        for section_id, data in sections.items()
    }


def post_type_supports_builder(post_type: str, supported: Iterable[str]) -> bool:
    return post_type in set(supported)


def is_builder_page(post, hooks=None) -> bool:
    """
    Pages use the builder template; other post types flag it in meta.
    """
    if post is None:
        return False

    has_builder_template = getattr(post, "page_template", None) == BUILDER_TEMPLATE

    flag = post.get_meta(USE_BUILDER_KEY)
    try:
        has_builder_meta = int(flag) == 1
    except (TypeError, ValueError):
        has_builder_meta = False

    is_builder = has_builder_template or has_builder_meta

    if hooks is not None:
        is_builder = hooks.apply_filters("make_is_builder_page", is_builder, post.id)
    return bool(is_builder)

