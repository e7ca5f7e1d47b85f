"""Scenario registry: named scenarios for the CLI."""

from __future__ import annotations

import logging
import shlex
from datetime import datetime

from icsim.app.runner import Runner

lg = logging.getLogger(__name__)


def _run(runner: Runner, *lines: str) -> bool:
    """Run command lines, stopping at the first failure."""
    for line in lines:
        if not runner.execute(line):
            return False
    return True


def _expect_failure(runner: Runner, line: str) -> bool:
    """Run a command that must fail. Returns True if it did."""
    if runner.execute(line):
        lg.error("expected '%s' to fail", line)
        return False
    lg.info("'%s' failed as expected", line)
    return True


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def scenario_demo(runner: Runner, *, card: str = "CARD001", pin: str = "1234") -> bool:
    """Connect, read, authenticate, write, remove and disconnect."""
    if not _run(runner, "connect", "list", f"insert id={shlex.quote(card)}", "read"):
        return False
    runner.execute(f"auth pin={shlex.quote(pin)}")
    stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
    if not _run(runner, f"write key=LastAccess value={shlex.quote(stamp)}", "read"):
        return False
    return _run(runner, "remove", "disconnect")


def scenario_mynumber(
    runner: Runner, *, card: str = "MYNUMBER001", pin: str = "1234"
) -> bool:
    """Verify the PIN of a MyNumber card, then read its record and certificate."""
    if not _run(runner, "connect", f"insert id={shlex.quote(card)}"):
        return False
    ok = runner.execute(f"verify_pin pin={shlex.quote(pin)}")
    if ok:
        ok = _run(runner, "mynumber", "cert", "display")
    return _run(runner, "remove", "disconnect") and ok


def scenario_errors(runner: Runner) -> bool:
    """Trigger each reader error; the reader stays usable afterwards."""
    ok = _expect_failure(runner, "insert id=CARD001")  # not connected
    ok &= _run(runner, "connect")
    ok &= _expect_failure(runner, "insert id=NOPE")
    ok &= _expect_failure(runner, "read")
    ok &= _run(runner, "status", "insert id=CARD001")
    ok &= _expect_failure(runner, "mynumber")
    ok &= _run(runner, "remove", "status", "disconnect")
    return bool(ok)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

# (name, description, callable(runner, **opts), {option: (type, default, desc)})
SCENARIOS = [
    ("demo", "Connect, read, authenticate, write and remove a card",
     lambda r, **o: scenario_demo(r, card=o["card"], pin=o["pin"]),
     {"card": ("str", "CARD001", "card to insert"),
      "pin": ("str", "1234", "PIN to authenticate with")}),
    ("mynumber", "PIN check, record and certificate of a MyNumber card",
     lambda r, **o: scenario_mynumber(r, card=o["card"], pin=o["pin"]),
     {"card": ("str", "MYNUMBER001", "MyNumber card to insert"),
      "pin": ("str", "1234", "card PIN")}),
    ("errors", "Trigger NotFound, InvalidState and TypeMismatch",
     lambda r, **_: scenario_errors(r),
     {}),
]


def _parse_opt(value: str, type_name: str) -> object:
    """Convert a CLI option string to the declared type."""
    if type_name == "bool":
        return value.lower() in ("true", "1", "yes")
    if type_name == "int":
        return int(value)
    return value


def run_scenario(
    runner: Runner,
    scenario: int | str | None = None,
    opts: dict | None = None,
) -> bool:
    """Look up and run a scenario by number or name."""
    idx = _resolve_scenario(scenario)
    if idx is None:
        return False

    name, _, fn, opt_defs = SCENARIOS[idx]

    # Merge CLI opts over defaults
    merged: dict = {k: dflt for k, (_, dflt, _) in opt_defs.items()}
    if opts:
        for k, v in opts.items():
            if k not in opt_defs:
                lg.warning("unknown option '%s' for scenario '%s'", k, name)
                continue
            merged[k] = _parse_opt(v, opt_defs[k][0]) if isinstance(v, str) else v

    lg.info("===== %s =====", name)
    return fn(runner, **merged)


def _resolve_scenario(scenario: int | str | None) -> int | None:
    """Resolve a scenario number (1-based) or name to a 0-based index."""
    if scenario is None:
        return 0  # default: demo

    # Try by number
    if isinstance(scenario, int):
        if not (1 <= scenario <= len(SCENARIOS)):
            lg.error("scenario %d out of range (1-%d)", scenario, len(SCENARIOS))
            return None
        return scenario - 1

    # Try by name
    for i, (name, *_) in enumerate(SCENARIOS):
        if name == scenario:
            return i
    lg.error("unknown scenario: %s", scenario)
    return None
