"""
Nox multi-session runner for the feather SDK.

Sessions:
  - lint   : ruff + black + mypy over Python sources
  - unit   : unit tests across the supported interpreters
  - all    : lint + unit on the default interpreter

Pass extra args to pytest like:
  nox -f tests/noxfile.py -s unit -- -k "bech32" -vv
"""

from __future__ import annotations

from pathlib import Path

import nox

# Reuse envs to speed up local iteration
nox.options.reuse_venv = True
nox.options.stop_on_first_error = False

REPO_ROOT = Path(__file__).resolve().parents[1]
PY_PATHS = [
    "feather_sdk",
    "tests",
]

# Default python matrix for test sessions
TEST_PYTHONS = ["3.10", "3.11", "3.12"]


def _install_test_stack(session: nox.Session) -> None:
    session.run("python", "-m", "pip", "install", "--upgrade", "pip", silent=True)
    session.install("-e", f"{REPO_ROOT}[test]")


@nox.session(name="lint", python="3.11")
def lint(session: nox.Session) -> None:
    """Static analysis: ruff, black (check), mypy."""
    session.install(
        "ruff>=0.6.0",
        "black>=24.3.0",
        "mypy>=1.10.0",
    )
    # mypy needs runtime deps to import modules
    session.install("-e", str(REPO_ROOT))

    with session.chdir(str(REPO_ROOT)):
        session.run("ruff", "check", *PY_PATHS)
        session.run("black", "--check", *PY_PATHS)
        session.run(
            "mypy",
            "--pretty",
            "--show-error-codes",
            "--ignore-missing-imports",
            "feather_sdk",
        )


@nox.session(name="unit", python=TEST_PYTHONS)
def unit(session: nox.Session) -> None:
    """Unit tests."""
    _install_test_stack(session)
    with session.chdir(str(REPO_ROOT)):
        session.run("pytest", "-q", *session.posargs)


@nox.session(name="all", python="3.11")
def all_(session: nox.Session) -> None:
    """Run a sensible default stack locally."""
    session.notify("lint")
    session.notify("unit-3.11")
