"""doctor.py – Diagnostic command for the engine boundary.

Validates the pieces the ctypes layer depends on in a single command:
``imflags.toml``, the cimgui shared library, and every engine symbol the
package calls for the configured struct-return convention, with a warning
when the library only exports the other convention's getters.

Usage::

    imflags doctor
    imflags doctor --json
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import typer

from imflags.cli import JsonOption, json_print
from imflags.config import CONVENTIONS, EngineConfig, load_config
from imflags.ffi import PROTOTYPES, VEC2_GETTERS, Engine, load_library

app = typer.Typer(help="Check imflags.toml and the cimgui library.", rich_markup_mode="rich")

# ---------------------------------------------------------------------------
# Check result data
# ---------------------------------------------------------------------------

_PASS = "pass"
_FAIL = "fail"
_WARN = "warn"

_STATUS_ICONS = {_PASS: "✓", _FAIL: "✗", _WARN: "!"}


@dataclass
class CheckResult:
    """Result of a single diagnostic check."""

    name: str
    status: str  # "pass", "fail", "warn"
    message: str
    fix: str = ""

    def to_dict(self) -> dict[str, str]:
        """Serialize to a plain dict for JSON output."""
        d: dict[str, str] = {
            "name": self.name,
            "status": self.status,
            "message": self.message,
        }
        if self.fix:
            d["fix"] = self.fix
        return d


@dataclass
class DoctorReport:
    """Aggregated results from all diagnostic checks."""

    checks: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True if no checks failed."""
        return all(c.status != _FAIL for c in self.checks)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict for JSON output."""
        return {
            "passed": self.passed,
            "summary": {
                status: sum(1 for c in self.checks if c.status == status)
                for status in (_PASS, _FAIL, _WARN)
            },
            "checks": [c.to_dict() for c in self.checks],
        }


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------


def required_symbols(convention: str) -> list[str]:
    """Engine symbols the package calls under *convention*."""
    suffixes = set(CONVENTIONS.values())
    plain = [name for name in PROTOTYPES if not name.endswith(tuple(suffixes))]
    return plain + [name + CONVENTIONS[convention] for name in VEC2_GETTERS]


def check_config(root: Path | None) -> tuple[CheckResult, EngineConfig | None]:
    """Check that imflags.toml exists and parses."""
    try:
        cfg = load_config(root)
    except FileNotFoundError as e:
        return (
            CheckResult(
                name="imflags.toml",
                status=_FAIL,
                message=str(e),
                fix="Create imflags.toml with an [engine] section and a 'library' key.",
            ),
            None,
        )
    except (KeyError, ValueError) as e:
        return (
            CheckResult(
                name="imflags.toml",
                status=_FAIL,
                message=f"Config error: {e}",
                fix="Check the [engine] section of imflags.toml.",
            ),
            None,
        )
    return (
        CheckResult(
            name="imflags.toml",
            status=_PASS,
            message=f"Parsed successfully (convention: {cfg.convention})",
        ),
        cfg,
    )


def check_library(cfg: EngineConfig) -> tuple[CheckResult, Engine | None]:
    """Check that the cimgui library loads."""
    try:
        lib = load_library(cfg.library)
    except OSError as e:
        return (
            CheckResult(
                name="cimgui library",
                status=_FAIL,
                message=str(e),
                fix="Build cimgui as a shared library and point 'library' at it.",
            ),
            None,
        )
    return (
        CheckResult(name="cimgui library", status=_PASS, message=f"Loaded {cfg.library}"),
        Engine(lib, cfg.convention),
    )


def check_symbols(engine: Engine) -> CheckResult:
    """Check that every required engine symbol is exported."""
    missing = [name for name in required_symbols(engine.convention) if not engine.has(name)]
    if missing:
        other = "by_value" if engine.convention == "out_param" else "out_param"
        return CheckResult(
            name="Engine symbols",
            status=_FAIL,
            message=f"Missing: {', '.join(missing)}",
            fix=f"Rebuild cimgui with the legacy getters, or try convention = \"{other}\".",
        )
    return CheckResult(
        name="Engine symbols",
        status=_PASS,
        message=f"All {len(required_symbols(engine.convention))} symbols resolved",
    )


def check_convention(engine: Engine) -> CheckResult:
    """Warn when the library only exports the other convention's getters."""
    other = "by_value" if engine.convention == "out_param" else "out_param"

    def exported(convention: str) -> bool:
        return all(engine.has(name + CONVENTIONS[convention]) for name in VEC2_GETTERS)

    if not exported(engine.convention) and exported(other):
        return CheckResult(
            name="Struct-return convention",
            status=_WARN,
            message=(
                f"Configured {engine.convention!r}, but the library exports "
                f"the {CONVENTIONS[other]} getters"
            ),
            fix=f'Set convention = "{other}" in imflags.toml.',
        )
    return CheckResult(
        name="Struct-return convention",
        status=_PASS,
        message=f"{engine.convention} ({CONVENTIONS[engine.convention]})",
    )


def run_doctor(root: Path | None = None) -> DoctorReport:
    """Run every check, stopping at the first one later checks depend on."""
    report = DoctorReport()
    result, cfg = check_config(root)
    report.checks.append(result)
    if cfg is None:
        return report

    result, engine = check_library(cfg)
    report.checks.append(result)
    if engine is None:
        return report

    report.checks.append(check_symbols(engine))
    report.checks.append(check_convention(engine))
    return report


@app.command()
def main(json_output: bool = JsonOption) -> None:
    """Run diagnostic checks on the engine configuration."""
    report = run_doctor()

    if json_output:
        json_print(report.to_dict())
    else:
        print("\nimflags doctor")
        print("=" * 60)
        for check in report.checks:
            icon = _STATUS_ICONS.get(check.status, "?")
            print(f"  {icon}  {check.name}: {check.message}")
            if check.fix:
                print(f"       Fix: {check.fix}")
        print("=" * 60)

    if not report.passed:
        raise typer.Exit(code=1)


def main_entry() -> None:
    """Run the Typer CLI application."""
    app()


if __name__ == "__main__":
    main_entry()
