# urlformat/template.py
import re
from typing import List, Mapping, Optional

from .encoding import percent_encode
from .errors import MissingSubstitution, UnusedSubstitution
from .models.route import MARKER, Placeholder
from .observability.logging import get_logger

logger = get_logger(__name__)

# ASCII only; a marker with no identifier after it is not a placeholder
PATTERN = re.compile(re.escape(MARKER) + r"([A-Za-z0-9_]+)")


def find_placeholders(template: str) -> List[Placeholder]:
    """Return the placeholder tokens of a path template, left to right."""
    return [Placeholder(name=m.group(1), start=m.start(), end=m.end()) for m in PATTERN.finditer(template)]


def resolve_template(
    template: str,
    substitutions: Optional[Mapping[str, str]] = None,
    strict: bool = False,
) -> str:
    """Replace every ``:name`` token with the percent-encoded value of ``substitutions[name]``.

    Literal template text is copied as is. Raises ``MissingSubstitution`` for the
    first token without a value, and in strict mode ``UnusedSubstitution`` for
    a key no token refers to.
    """
    substitutions = substitutions or {}
    tokens = find_placeholders(template)

    parts = []
    cursor = 0
    for token in tokens:
        if token.name not in substitutions:
            raise MissingSubstitution(token.name)
        parts.append(template[cursor:token.start])
        parts.append(percent_encode(str(substitutions[token.name])))
        cursor = token.end
    parts.append(template[cursor:])

    used = {token.name for token in tokens}
    unused = [key for key in substitutions if key not in used]
    if unused:
        if strict:
            raise UnusedSubstitution(unused[0])
        logger.debug("unused_substitutions", identifiers=unused)

    return "".join(parts)
