# filename : main.py
# created  : 10/19/2026


import logging

from icsim.app.session import session
from icsim.core.reader import Catalog, Latency, NoDelay, SleepDelay

lg = logging.getLogger(__name__)

DEFAULT_ACCEPTED_PINS = ("1234", "0000")


def main(
    scenario: int | str | None = None,
    opts: dict | None = None,
    file: str | None = None,
    interactive: bool = False,
    catalog: str | None = None,
    latency: float = 1.0,
    accepted_pins: tuple[str, ...] = DEFAULT_ACCEPTED_PINS,
) -> bool:
    lg.debug("icsim v1")
    cards = Catalog.from_file(catalog) if catalog else None
    delay = NoDelay() if latency == 0 else SleepDelay(Latency().scaled(latency))
    return session(
        scenario=scenario,
        opts=opts,
        file=file,
        interactive=interactive,
        catalog=cards,
        delay=delay,
        accepted_pins=accepted_pins,
    )
