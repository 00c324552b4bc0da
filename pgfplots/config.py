from __future__ import annotations

from dataclasses import asdict, dataclass
import os
from typing import Any, Mapping


_ENV_KEYS: dict[str, str] = {
    "PGFPLOTS_ENGINE": "engine",
    "PGFPLOTS_PDFLATEX": "pdflatex",
    "PGFPLOTS_TECTONIC": "tectonic",
    "PGFPLOTS_COMPILE_TIMEOUT": "timeout_s",
    "PGFPLOTS_TMPDIR": "tmp_dir",
}

ENGINE_NAMES: tuple[str, ...] = ("pdflatex", "tectonic")


@dataclass(frozen=True)
class CompilerSettings:
    """Executables and limits used when compiling standalone documents."""

    engine: str = "pdflatex"
    pdflatex: str = "pdflatex"
    tectonic: str = "tectonic"
    timeout_s: float = 60.0
    tmp_dir: str | None = None


DEFAULT_SETTINGS = CompilerSettings()


def resolve_compiler_settings(
    overrides: Mapping[str, Any] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> CompilerSettings:
    """Merge defaults, ``PGFPLOTS_*`` environment variables and explicit overrides.

    Explicit overrides win over the environment.
    """

    env = os.environ if environ is None else environ
    raw: dict[str, Any] = asdict(DEFAULT_SETTINGS)
    for env_key, field_name in _ENV_KEYS.items():
        value = env.get(env_key)
        if value is not None and value.strip():
            raw[field_name] = value.strip()
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown compiler setting: {key}")
            raw[key] = value

    engine = str(raw["engine"]).strip().lower()
    if engine not in ENGINE_NAMES:
        raise ValueError(f"Setting `engine` must be one of {', '.join(ENGINE_NAMES)}")

    for key in ("pdflatex", "tectonic"):
        if not isinstance(raw[key], str) or not raw[key].strip():
            raise ValueError(f"Setting `{key}` must be a non-empty string")

    try:
        timeout_s = float(raw["timeout_s"])
    except (TypeError, ValueError) as exc:
        raise ValueError("Setting `timeout_s` must be a number") from exc
    if timeout_s <= 0:
        raise ValueError("Setting `timeout_s` must be > 0")

    tmp_dir = raw["tmp_dir"]
    if tmp_dir is not None:
        tmp_dir = os.fspath(tmp_dir)

    return CompilerSettings(
        engine=engine,
        pdflatex=raw["pdflatex"].strip(),
        tectonic=raw["tectonic"].strip(),
        timeout_s=timeout_s,
        tmp_dir=tmp_dir,
    )
