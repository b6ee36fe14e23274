# make_theme/style/css.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

DEFAULT_MEDIA = "all"


@dataclass
class CSSRule:
    selectors: List[str]
    declarations: Dict[str, str]
    media: str = DEFAULT_MEDIA

    def render(self) -> str:
        body = "".join(f"{prop}:{value};" for prop, value in self.declarations.items())
        return f"{','.join(self.selectors)}{{{body}}}"


@dataclass
class CSSCollector:
    """
    Aggregates inline CSS rules contributed during a request.

    Rules keep insertion order. Rules without a media query render first,
    followed by one @media block per distinct query.
    """
    rules: List[CSSRule] = field(default_factory=list)

    def add(
        self,
        selectors: Iterable[str],
        declarations: Dict[str, object],
        media: str = DEFAULT_MEDIA,
    ) -> CSSRule:
        rule = CSSRule(
            selectors=[s for s in selectors if s],
            declarations={k: str(v) for k, v in declarations.items()},
            media=media or DEFAULT_MEDIA,
        )
        self.rules.append(rule)
        return rule

    def grouped(self) -> Dict[str, List[CSSRule]]:
        groups: Dict[str, List[CSSRule]] = {DEFAULT_MEDIA: []}
        for rule in self.rules:
            groups.setdefault(rule.media, []).append(rule)
        return groups

    def build(self) -> str:
        output = []
        for media, rules in self.grouped().items():
            if not rules:
                continue
            rendered = "\n".join(rule.render() for rule in rules)
            if media == DEFAULT_MEDIA:
                output.append(rendered)
            else:
                output.append(f"@media {media}{{\n{rendered}\n}}")
        return "\n".join(output)
