from __future__ import annotations

from typing import Any, Dict, List, Optional


class FakePost:
    """Just enough of a Post for the theme components: id, template and meta."""

    def __init__(
        self,
        meta: Optional[Dict[str, Any]] = None,
        post_id: str = "42",
        post_type: str = "page",
        page_template: Optional[str] = "template-builder.php",
    ) -> None:
        self.id = post_id
        self.post_type = post_type
        self.page_template = page_template
        self._meta: Dict[str, List[Any]] = {key: [value] for key, value in (meta or {}).items()}

    def get_meta(self, key: str, single: bool = True) -> Any:
        values = self._meta.get(key, [])
        if single:
            return values[0] if values else None
        return list(values)

    def meta_map(self) -> Dict[str, List[Any]]:
        return {key: list(values) for key, values in self._meta.items()}


def builder_post(sections: Dict[str, Dict[str, Any]], order: List[Any], **kwargs: Any) -> FakePost:
    meta: Dict[str, Any] = {"_ttfmake-section-ids": order}
    for section_id, fields in sections.items():
        for field, value in fields.items():
            meta[f"_ttfmake:{section_id}:{field}"] = value
    return FakePost(meta=meta, **kwargs)
