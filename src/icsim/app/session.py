"""Reader session orchestrator.

Constructs the full stack (ReaderSession -> Terminal -> Runner),
runs a scenario, a command file or the REPL, and disconnects.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from icsim.app.commands import COMMAND_MODULES
from icsim.app.runner import Runner
from icsim.app.scenarios import run_scenario
from icsim.core.mynumber import MyNumberTerminal
from icsim.core.reader import Catalog, LoggingReaderObserver, ReaderSession

lg = logging.getLogger(__name__)


def session(
    scenario: int | str | None = None,
    opts: dict | None = None,
    file: str | None = None,
    interactive: bool = False,
    *,
    catalog: Catalog | None = None,
    delay=None,
    accepted_pins: Iterable[str] = (),
) -> bool:
    """Open a reader session and run a scenario, a file or the REPL.

    Returns True when the scenario or file completed without failure.
    """
    reader = ReaderSession(catalog, delay=delay, accepted_pins=accepted_pins)
    reader.addObserver(LoggingReaderObserver())
    terminal = MyNumberTerminal(reader)
    runner = Runner(terminal, COMMAND_MODULES)

    ok = True
    try:
        if file:
            ok = runner.run_file(file)
        elif interactive:
            runner.run_interactive()
        else:
            ok = run_scenario(runner, scenario, opts)
    except Exception as exc:
        terminal.on_error(exc)
        ok = False
    finally:
        runner.close()
    return ok
