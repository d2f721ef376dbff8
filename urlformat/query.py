# urlformat/query.py
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from .encoding import SPACE_PERCENT, percent_encode
from .errors import UnsupportedQueryValue

QueryParams = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _pairs(params: QueryParams) -> Iterable[Tuple[str, Any]]:
    if isinstance(params, Mapping):
        return params.items()
    return params


def query_value(key: str, value: Any) -> Optional[str]:
    """Flatten one query value to text; ``None`` means the pair is dropped."""
    if value is None:
        return None
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise UnsupportedQueryValue(key, value)


def encode_query(params: Optional[QueryParams] = None, space: str = SPACE_PERCENT) -> str:
    """Build ``k=v&k2=v2`` (no leading ``?``) in iteration order of ``params``."""
    if not params:
        return ""
    pairs: List[str] = []
    for key, value in _pairs(params):
        text = query_value(key, value)
        if text is None:
            continue
        pairs.append(f"{percent_encode(str(key), space)}={percent_encode(text, space)}")
    return "&".join(pairs)
