# urlformat/formatter.py
from typing import Any, Dict, Mapping, Optional

from .assembler import join_url
from .encoding import SPACE_CONVENTIONS
from .observability.logging import get_logger
from .query import QueryParams, encode_query
from .settings import DEFAULTS
from .template import resolve_template

logger = get_logger(__name__)


def format_url(
    base: str,
    path_template: Optional[str] = None,
    substitutions: Optional[Mapping[str, str]] = None,
    query_params: Optional[QueryParams] = None,
    *,
    strict: Optional[bool] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> str:
    """Resolve the path template, encode the query and join both onto ``base``.

    Substitutions only fill path placeholders; they never leak into the query.
    ``strict`` overrides ``settings["template"]["strict"]``.
    """
    settings = settings or {}
    template_settings = {**DEFAULTS["template"], **settings.get("template", {})}
    query_settings = {**DEFAULTS["query"], **settings.get("query", {})}
    if query_settings["space"] not in SPACE_CONVENTIONS:
        raise ValueError(f"Unknown query space convention: {query_settings['space']!r}")
    if strict is None:
        strict = template_settings["strict"]

    path = ""
    if path_template is not None or (strict and substitutions):
        path = resolve_template(path_template or "", substitutions, strict=strict)

    query = encode_query(query_params, space=query_settings["space"])

    url = join_url(base, path, query)
    logger.debug("url_formatted", has_path=bool(path), has_query=bool(query))
    return url
