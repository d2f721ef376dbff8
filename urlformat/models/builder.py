# urlformat/models/builder.py
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..formatter import format_url
from ..query import QueryParams


@dataclass(frozen=True)
class FormatUrl:
    """Immutable URL builder; every ``with_*`` call returns a new value.

    >>> FormatUrl("https://api.example.com/") \\
    ...     .with_path_template("/user/:name") \\
    ...     .with_substitutes({"name": "alex"}) \\
    ...     .with_query_params({"active": "true"}) \\
    ...     .format_url()
    'https://api.example.com/user/alex?active=true'
    """

    base: str
    path_template: Optional[str] = None
    substitutes: Optional[Mapping[str, str]] = None
    query_params: Optional[Union[Mapping[str, Any], Tuple[Tuple[str, Any], ...]]] = None
    strict: Optional[bool] = None          # None => settings decide
    settings: Optional[Dict[str, Any]] = None

    @classmethod
    def new(cls, base: str) -> "FormatUrl":
        return cls(base=base)

    def with_path_template(self, path_template: str) -> "FormatUrl":
        return replace(self, path_template=path_template)

    def with_substitutes(self, substitutes: Mapping[str, str]) -> "FormatUrl":
        return replace(self, substitutes=MappingProxyType(dict(substitutes)))

    def with_query_params(self, params: QueryParams) -> "FormatUrl":
        frozen: Any
        if isinstance(params, Mapping):
            frozen = MappingProxyType(dict(params))
        else:
            frozen = tuple(tuple(pair) for pair in params)
        return replace(self, query_params=frozen)

    def with_strict(self, strict: bool = True) -> "FormatUrl":
        return replace(self, strict=strict)

    def with_settings(self, settings: Dict[str, Any]) -> "FormatUrl":
        return replace(self, settings=settings)

    def format_url(self) -> str:
        return format_url(
            self.base,
            self.path_template,
            self.substitutes,
            self.query_params,
            strict=self.strict,
            settings=self.settings,
        )
