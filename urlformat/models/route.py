# urlformat/models/route.py
from dataclasses import dataclass

MARKER = ":"


@dataclass(frozen=True)
class Placeholder:
    name: str                 # identifier without the marker
    start: int                # index of the marker in the template
    end: int                  # index just past the identifier

    @property
    def raw(self) -> str:
        return MARKER + self.name
