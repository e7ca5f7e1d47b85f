"""Command runner for the reader console: scripts and the interactive prompt."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import partial
try:
    import readline
except ImportError:
    readline = None  # type: ignore[assignment]
import shlex
from types import ModuleType

from icsim.app.cardinfo import SessionInfo
from icsim.core.generic import DisconnectMessage
from icsim.core.reader.types import ReaderState

lg = logging.getLogger(__name__)

EXIT_COMMANDS = ("quit", "exit")
PROMPT = "icsim> "


@dataclass(frozen=True)
class Command:
    """One entry of the runner's command table."""

    name: str
    call: Callable[..., bool]
    params: tuple[str, ...] = ()
    raw: bool = False
    summary: str = ""


def _keyword_params(func) -> tuple[str, ...]:
    sig = inspect.signature(func)
    return tuple(
        name for name, p in sig.parameters.items()
        if p.kind is p.KEYWORD_ONLY
    )


def _parse_value(s: str) -> int | str | bool:
    """Convert an argument of a non-raw command.

    true/yes and false/no become bools, decimal numbers become ints,
    anything else stays a string.
    """
    flag = {"true": True, "yes": True, "false": False, "no": False}.get(s.lower())
    if flag is not None:
        return flag
    try:
        return int(s)
    except ValueError:
        return s


def parse_command(line: str) -> tuple[str, dict[str, str]] | None:
    """Split a command line into (name, raw_kwargs).

    Returns None for blank and comment lines. A bare word is a flag
    and maps to "true".
    """
    text = line.split("#", 1)[0].strip()
    if not text:
        return None
    name, *args = shlex.split(text)
    kwargs: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        kwargs[key] = value if sep else "true"
    return name, kwargs


class Runner:
    """Drives a terminal from command lines.

    Command functions are synchronous. They talk to the terminal through
    send(), which runs the terminal coroutine to completion on the
    runner's own event loop.
    """

    def __init__(self, terminal, command_modules: Iterable[ModuleType]) -> None:
        self._terminal = terminal
        self._info = SessionInfo()
        self._stop_on_error = True
        self._loop = asyncio.new_event_loop()
        self._settings: dict[str, Callable[[str], None]] = {
            "log": self._set_log,
            "stop_on_error": self._set_stop_on_error,
        }
        self._commands: dict[str, Command] = {}
        for mod in command_modules:
            raw = getattr(mod, "_raw_commands", set())
            for attr, func in inspect.getmembers(mod, inspect.isfunction):
                if attr.startswith("cmd_"):
                    self._add(func, partial(func, self), raw=attr[4:] in raw)
        self._add(Runner.cmd_help, self.cmd_help)
        self._add(Runner.cmd_set, self.cmd_set, raw=True)

    def _add(self, func, call, *, raw: bool = False) -> None:
        name = func.__name__[4:]
        summary = (func.__doc__ or "").strip().split("\n")[0]
        self._commands[name] = Command(name, call, _keyword_params(func), raw, summary)

    @property
    def info(self) -> SessionInfo:
        return self._info

    @property
    def terminal(self):
        return self._terminal

    @property
    def commands(self) -> dict[str, Command]:
        return dict(self._commands)

    def send(self, message):
        """Send a message to the terminal and wait for its result."""
        return self._loop.run_until_complete(self._terminal.send(message))

    def close(self) -> None:
        """Disconnect the reader if needed and close the event loop."""
        if self._loop.is_closed():
            return
        try:
            if self._terminal.session.get_status() is not ReaderState.NOT_CONNECTED:
                self.send(DisconnectMessage())
        finally:
            self._loop.close()

    # --- Settings ---

    def _set_log(self, value: str) -> None:
        level = logging.getLevelName(value.upper())
        if not isinstance(level, int):
            lg.warning("unknown log level: %s", value)
            return
        logging.getLogger().setLevel(level)
        lg.info("log = %s", value.upper())

    def _set_stop_on_error(self, value: str) -> None:
        self._stop_on_error = value.lower() in ("true", "yes", "1")
        lg.info("stop_on_error = %s", self._stop_on_error)

    # --- Built-in commands ---

    def cmd_help(self) -> bool:
        """List available commands."""
        rows = [f"  {c.name:12s} {c.summary}" for _, c in sorted(self._commands.items())]
        lg.info("Commands:\n%s", "\n".join(rows))
        return True

    def cmd_set(self, **kwargs: str) -> bool:
        """Change runner settings (log=LEVEL, stop_on_error=BOOL)."""
        for key, value in kwargs.items():
            setter = self._settings.get(key)
            if setter is None:
                lg.warning("unknown setting: %s", key)
                continue
            setter(value)
        return True

    # --- Execution ---

    def execute(self, line: str) -> bool:
        """Run one command line. Returns True on success.

        Raises StopIteration for quit/exit. Command errors are logged
        and reported as failure.
        """
        parsed = parse_command(line)
        if parsed is None:
            return True
        name, raw_kwargs = parsed
        if name in EXIT_COMMANDS:
            raise StopIteration
        command = self._commands.get(name)
        if command is None:
            lg.error("unknown command: %s", name)
            return False
        if command.raw:
            kwargs = raw_kwargs
        else:
            kwargs = {k: _parse_value(v) for k, v in raw_kwargs.items()}
        try:
            return command.call(**kwargs)
        except TypeError as exc:
            lg.error("bad arguments for '%s': %s", name, exc)
            return False
        except Exception as exc:
            lg.error("command '%s' failed: %s", name, exc)
            return False

    def completions(self, buffer: str, text: str) -> list[str]:
        """Candidates for the word *text* at the end of *buffer*.

        The first word completes to a command name, later words to the
        command's parameters (or setting names after 'set') not yet given.
        """
        words = buffer.lstrip().split()
        if not words or (len(words) == 1 and not buffer.endswith(" ")):
            names = sorted([*self._commands, *EXIT_COMMANDS])
            return [n for n in names if n.startswith(text)]
        if words[0] == "set":
            keys = list(self._settings)
        else:
            command = self._commands.get(words[0])
            keys = list(command.params) if command is not None else []
        given = {w.partition("=")[0] for w in words[1:]}
        return [f"{k}=" for k in keys if k not in given and f"{k}=".startswith(text)]

    def _complete(self, text: str, state: int) -> str | None:
        if state == 0:
            self._matches = self.completions(readline.get_line_buffer(), text)
        return self._matches[state] if state < len(self._matches) else None

    def run_lines(self, lines: Iterable[str], source: str = "<script>") -> bool:
        """Execute command lines in order. Returns True if all succeed.

        quit/exit ends the script successfully.
        """
        for number, line in enumerate(lines, 1):
            try:
                ok = self.execute(line)
            except StopIteration:
                lg.info("%s:%d: quit", source, number)
                return True
            if not ok and self._stop_on_error:
                lg.error("stopped at %s:%d: %s", source, number, line.strip())
                return False
        return True

    def run_file(self, path: str) -> bool:
        """Execute a command script. Returns True if all commands succeed."""
        with open(path, encoding="utf-8") as f:
            return self.run_lines(f.readlines(), source=path)

    def run_interactive(self) -> None:
        """Read commands from the terminal until quit/exit or EOF."""
        if readline is not None:
            readline.set_completer(self._complete)
            readline.set_completer_delims(" ")
            readline.parse_and_bind("tab: complete")
        lg.info("interactive mode, type 'help' for commands and 'quit' to exit")
        while True:
            try:
                line = input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                print()
                return
            try:
                self.execute(line)
            except StopIteration:
                return
