# filename : scripts.py
# created  : 10/19/2026


import logging
import sys

import click

from icsim.core.reader.logging import EVENT, TRACE

lg = logging.getLogger(__name__)


@click.command()
@click.option("-v", "--verbose", is_flag=True, help="TRACE level (show latency waits).")
@click.option(
    "-s",
    "--scenario",
    default=None,
    help="Scenario number or name to run, or 'list' to show scenarios.",
)
@click.option(
    "-o",
    "--opt",
    multiple=True,
    help="Scenario option as key=value (repeatable).",
)
@click.option(
    "-f",
    "--file",
    "file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Run commands from a scenario file.",
)
@click.option(
    "-i",
    "--interactive",
    is_flag=True,
    help="Interactive REPL.",
)
@click.option(
    "-c",
    "--catalog",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON card catalog (default: built-in demo cards).",
)
@click.option(
    "--latency",
    type=click.FloatRange(min=0),
    default=1.0,
    show_default=True,
    help="Scale factor for simulated reader latency (0 disables waiting).",
)
@click.option(
    "--accept-pin",
    "accept_pins",
    multiple=True,
    help="Universal test PIN accepted by authenticate (repeatable). "
         "Default: 1234 and 0000.",
)
def icsim(verbose, scenario, opt, file, interactive, catalog, latency, accept_pins):

    logging.basicConfig(
        level=TRACE if verbose else EVENT,
        format="%(levelname)-8s %(name)s: %(message)s",
    )

    from icsim.app.scenarios import SCENARIOS

    if scenario == "list":
        for i, (name, desc, _, opt_defs) in enumerate(SCENARIOS, 1):
            click.echo(f"  {i}. {name:20s} {desc}")
            for oname, (otype, odefault, odesc) in opt_defs.items():
                click.echo(f"       -o {oname}={str(odefault):12s} {odesc} ({otype})")
        return

    # Resolve scenario: try int first, then keep as name string
    scenario_ref = None
    if scenario is not None:
        try:
            scenario_ref = int(scenario)
        except ValueError:
            scenario_ref = scenario

    opts = {}
    for item in opt:
        if "=" not in item:
            raise click.BadParameter(f"expected key=value, got '{item}'", param_hint="'-o'")
        k, v = item.split("=", 1)
        opts[k] = v

    from icsim.app.main import DEFAULT_ACCEPTED_PINS, main
    from icsim.core.reader import CatalogError

    try:
        ok = main(
            scenario=scenario_ref,
            opts=opts,
            file=file,
            interactive=interactive,
            catalog=catalog,
            latency=latency,
            accepted_pins=accept_pins or DEFAULT_ACCEPTED_PINS,
        )
    except CatalogError as exc:
        raise click.BadParameter(str(exc), param_hint="'-c'") from exc
    if not ok:
        sys.exit(1)
