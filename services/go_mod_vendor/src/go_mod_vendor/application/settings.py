from __future__ import annotations

from dataclasses import dataclass
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

from go_mod_vendor.domain.diagnostics import Diagnostic, FileLocation, Severity
from go_mod_vendor.domain.result import Result

SETTINGS_FILE = ".go-mod-vendor.toml"


@dataclass(frozen=True)
class VendorSettings:
    mod_cache: Path | None = None
    go: str = "go"


def _invalid(path: Path, message: str) -> Diagnostic:
    return Diagnostic(
        code="SETTINGS_INVALID",
        rule="settings.schema",
        severity=Severity.ERROR,
        message=message,
        location=FileLocation(str(path)),
    )


def read_settings(path: Path) -> Result[VendorSettings]:
    if not path.exists():
        return Result(value=VendorSettings())
    try:
        raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="SETTINGS_PARSE_FAILED",
                    rule="settings.parse",
                    severity=Severity.ERROR,
                    message=str(e),
                    location=FileLocation(str(path)),
                )
            ]
        )

    section = raw.get("settings", {})
    if not isinstance(section, dict):
        return Result(diagnostics=[_invalid(path, "[settings] must be a table")])

    diagnostics: list[Diagnostic] = []
    mod_cache = section.get("mod_cache")
    if mod_cache is not None and not isinstance(mod_cache, str):
        diagnostics.append(_invalid(path, "settings.mod_cache must be a string"))
    go = section.get("go", "go")
    if not isinstance(go, str) or not go:
        diagnostics.append(_invalid(path, "settings.go must be a non-empty string"))
    if diagnostics:
        return Result(diagnostics=diagnostics)

    cache_path: Path | None = None
    if mod_cache:
        cache_path = Path(mod_cache)
        if not cache_path.is_absolute():
            cache_path = path.parent.resolve() / cache_path
    return Result(value=VendorSettings(mod_cache=cache_path, go=go))


def resolve_mod_cache(
    option: Path | None,
    settings: VendorSettings,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Pick the module cache root; always absolute, since go rejects relative ones."""
    if option is not None:
        return option.resolve()
    if settings.mod_cache is not None:
        return settings.mod_cache.resolve()
    env = os.environ if environ is None else environ
    if env.get("GOMODCACHE"):
        return Path(env["GOMODCACHE"]).resolve()
    gopath = env.get("GOPATH", "")
    first = gopath.split(os.pathsep)[0] if gopath else ""
    if first:
        return Path(first).resolve() / "pkg" / "mod"
    return Path.home() / "go" / "pkg" / "mod"
