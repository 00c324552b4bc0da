from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Sequence, TypeVar


CUSTOM = "custom"


@dataclass(frozen=True)
class OptionKey:
    """A key-value option passed to an environment or command.

    ``kind`` is the discriminant used for mutual exclusion; ``value`` is the
    payload and never takes part in the comparison. Subclasses list the kinds
    they render in ``payload_types``, mapped to the payload type each expects.
    """

    kind: str
    value: Any = None

    payload_types: ClassVar[dict[str, type | tuple[type, ...]]] = {CUSTOM: str}

    def __post_init__(self) -> None:
        expected = self.payload_types.get(self.kind)
        if expected is None:
            raise ValueError(f"unsupported {type(self).__name__} kind: {self.kind}")
        if not isinstance(self.value, expected):
            raise ValueError(
                f"{type(self).__name__} {self.kind} payload must be {_type_names(expected)}, "
                f"got {type(self.value).__name__}"
            )

    @property
    def is_custom(self) -> bool:
        return self.kind == CUSTOM

    def render(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.render()


def _type_names(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


K = TypeVar("K", bound=OptionKey)


def add_key(keys: list[K], key: K) -> None:
    """Append ``key``, first dropping any earlier key of the same kind.

    Custom keys are appended unconditionally and may repeat.
    """
    if not key.is_custom:
        for index, existing in enumerate(keys):
            if existing.kind == key.kind:
                del keys[index]
                break
    keys.append(key)


def render_key_lines(keys: Sequence[OptionKey], indent: str) -> str:
    # One key per line keeps individual keys easy to find in the output.
    return "".join(f"{indent}{key.render()},\n" for key in keys)


def render_environment(name: str, keys: Sequence[OptionKey], children: Sequence[Any]) -> str:
    out = f"\\begin{{{name}}}"
    if keys:
        out += "[\n" + render_key_lines(keys, "\t") + "]"
    out += "\n"
    for child in children:
        out += f"{child.render()}\n"
    return out + f"\\end{{{name}}}"
