"""The shell — command interpreter for the disk scheduling simulator.

The shell reads a command string, splits it into a command name and
arguments, dispatches to the matching handler, and returns a string
result.  It drives a ``DiskSimulator`` session: load a workload, tweak
the settings, run an algorithm, compare all of them, export the trace.

Design choices:
    - **Returns strings, not prints.**  This keeps the shell fully
      testable; the REPL decides how to display output.
    - **Command dispatch via a dict.**  Adding a command means writing a
      method and adding one dict entry.
    - **Errors become ``Error: ...`` strings.**  Bad input never raises
      out of ``execute``.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from disk_sim.config import ConfigError
from disk_sim.dispatcher import Algorithm
from disk_sim.export import format_comparison, format_trace, trace_to_csv
from disk_sim.logging import LogLevel
from disk_sim.simulator import DiskSimulator
from disk_sim.workload import (
    SAMPLE_WORKLOAD,
    WorkloadError,
    clamp,
    parse_csv,
    parse_requests,
    random_workload,
)

# Type alias for a command handler: takes a list of args, returns output.
_Handler: TypeAlias = Callable[[list[str]], str]

_SWITCH_VALUES = {"on": True, "off": False}


class Shell:
    """Command interpreter bound to one simulation session."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, simulator: DiskSimulator | None = None) -> None:
        """Create a shell, with a fresh session unless one is given."""
        self._sim = simulator or DiskSimulator()

        # Command dispatch table: maps command names to handler methods.
        self._commands: dict[str, _Handler] = {
            "help": self._cmd_help,
            "requests": self._cmd_requests,
            "add": self._cmd_add,
            "clear": self._cmd_clear,
            "sample": self._cmd_sample,
            "random": self._cmd_random,
            "load": self._cmd_load,
            "head": self._cmd_head,
            "disk": self._cmd_disk,
            "algo": self._cmd_algo,
            "direction": self._cmd_direction,
            "edge": self._cmd_edge,
            "jump": self._cmd_jump,
            "config": self._cmd_config,
            "run": self._cmd_run,
            "trace": self._cmd_trace,
            "metrics": self._cmd_metrics,
            "compare": self._cmd_compare,
            "export": self._cmd_export,
            "log": self._cmd_log,
            "history": self._cmd_history,
            "exit": self._cmd_exit,
        }

    @property
    def simulator(self) -> DiskSimulator:
        """Return the session this shell drives."""
        return self._sim

    @property
    def command_names(self) -> list[str]:
        """Return every command name, sorted."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute one command.

        Args:
            command: The raw command string (e.g. "algo c-scan").

        Returns:
            The command output, or an error message.

        """
        parts = command.split()
        if not parts:
            return ""
        name, args = parts[0], parts[1:]
        handler = self._commands.get(name)
        if handler is None:
            return f"Unknown command: {name}"
        try:
            return handler(args)
        except (ConfigError, WorkloadError) as e:
            return f"Error: {e}"

    # -- Workload ----------------------------------------------------------

    def _cmd_help(self, _args: list[str]) -> str:
        """List available commands."""
        return "Available commands: " + ", ".join(self.command_names)

    def _cmd_requests(self, args: list[str]) -> str:
        """Show the request queue, or replace it with the given tracks."""
        if args:
            self._sim.set_requests(parse_requests(" ".join(args), self._sim.config.disk_max))
        requests = self._sim.requests
        if not requests:
            return "No requests."
        return f"{len(requests)} request(s): " + ", ".join(str(r) for r in requests)

    def _cmd_add(self, args: list[str]) -> str:
        if not args:
            return "Usage: add <track> [track ...]"
        tracks = parse_requests(" ".join(args), self._sim.config.disk_max)
        for track in tracks:
            self._sim.add_request(track)
        return f"Added {len(tracks)} request(s)."

    def _cmd_clear(self, _args: list[str]) -> str:
        self._sim.clear()
        return "Request queue cleared."

    def _cmd_sample(self, _args: list[str]) -> str:
        """Load the classic demo workload."""
        disk_max = self._sim.config.disk_max
        self._sim.set_requests(clamp(track, disk_max) for track in SAMPLE_WORKLOAD)
        return self._cmd_requests([])

    def _cmd_random(self, args: list[str]) -> str:
        """Load ``count`` random requests (default 20), optionally seeded."""
        if len(args) > 2:  # noqa: PLR2004
            return "Usage: random [count] [seed]"
        count = _parse_int(args[0], "count") if args else 20
        rng = random.Random(_parse_int(args[1], "seed")) if len(args) > 1 else None  # noqa: S311
        self._sim.set_requests(random_workload(count, self._sim.config.disk_max, rng=rng))
        return self._cmd_requests([])

    def _cmd_load(self, args: list[str]) -> str:
        """Load requests from a CSV file."""
        if len(args) != 1:
            return "Usage: load <file.csv>"
        try:
            text = Path(args[0]).read_text(encoding="utf-8")
        except OSError as e:
            return f"Error: cannot read {args[0]}: {e.strerror}"
        disk_max = self._sim.config.disk_max
        self._sim.set_requests(clamp(track, disk_max) for track in parse_csv(text))
        return self._cmd_requests([])

    # -- Settings ----------------------------------------------------------

    def _cmd_head(self, args: list[str]) -> str:
        if args:
            self._sim.configure(head_start=_parse_int(args[0], "head"))
        return f"Head starts at track {self._sim.config.head_start}."

    def _cmd_disk(self, args: list[str]) -> str:
        if args:
            self._sim.configure(disk_max=_parse_int(args[0], "disk_max"))
        return f"Disk tracks: 0..{self._sim.config.disk_max}"

    def _cmd_algo(self, args: list[str]) -> str:
        """Show or switch the scheduling algorithm."""
        if args:
            self._sim.algorithm = Algorithm.parse(args[0])
        return f"Algorithm: {self._sim.algorithm}"

    def _cmd_direction(self, args: list[str]) -> str:
        if args:
            self._sim.configure(direction=args[0])
        return f"Direction: {self._sim.config.direction}"

    def _cmd_edge(self, args: list[str]) -> str:
        """Toggle SCAN's boundary visit."""
        if args:
            self._sim.configure(use_edge=_parse_switch(args[0], "edge"))
        return f"SCAN edge visit: {_switch_name(self._sim.config.use_edge)}"

    def _cmd_jump(self, args: list[str]) -> str:
        """Toggle whether C-SCAN's wraparound jump counts as movement."""
        if args:
            self._sim.configure(count_jump=_parse_switch(args[0], "jump"))
        return f"C-SCAN count jump: {_switch_name(self._sim.config.count_jump)}"

    def _cmd_config(self, _args: list[str]) -> str:
        config = self._sim.config
        return "\n".join(
            [
                f"algorithm:  {self._sim.algorithm}",
                f"disk_max:   {config.disk_max}",
                f"head_start: {config.head_start}",
                f"direction:  {config.direction}",
                f"use_edge:   {_switch_name(config.use_edge)}",
                f"count_jump: {_switch_name(config.count_jump)}",
            ]
        )

    # -- Simulation --------------------------------------------------------

    def _cmd_run(self, _args: list[str]) -> str:
        """Run the selected algorithm and show its trace and metrics."""
        result = self._sim.run()
        return f"{format_trace(result.trace)}\n{result.algorithm}: {result.metrics}"

    def _cmd_trace(self, _args: list[str]) -> str:
        result = self._sim.last_result
        if result is None:
            return "Error: nothing has been run yet"
        return format_trace(result.trace)

    def _cmd_metrics(self, _args: list[str]) -> str:
        result = self._sim.last_result
        if result is None:
            return "Error: nothing has been run yet"
        return f"{result.algorithm}: {result.metrics}"

    def _cmd_compare(self, _args: list[str]) -> str:
        """Run all six algorithms on the current workload."""
        return format_comparison(self._sim.compare())

    def _cmd_export(self, args: list[str]) -> str:
        """Print the last trace as CSV, or write it to a file."""
        result = self._sim.last_result
        if result is None:
            return "Error: nothing has been run yet"
        text = trace_to_csv(result.trace)
        if not args:
            return text.rstrip("\n")
        try:
            Path(args[0]).write_text(text, encoding="utf-8")
        except OSError as e:
            return f"Error: cannot write {args[0]}: {e.strerror}"
        return f"Wrote {len(result.trace)} step(s) to {args[0]}"

    def _cmd_log(self, args: list[str]) -> str:
        """Show session events, optionally from a minimum level."""
        level = LogLevel.DEBUG
        if args:
            try:
                level = LogLevel.parse(args[0])
            except ValueError as e:
                return f"Error: {e}"
        entries = self._sim.log.at_least(level)
        if not entries:
            return "No log entries."
        return "\n".join(str(e) for e in entries)

    def _cmd_history(self, _args: list[str]) -> str:
        """List completed runs and the one with the least movement."""
        best = self._sim.log.best_run()
        if best is None:
            return "No runs yet."
        lines = [str(run) for run in self._sim.log.runs()]
        lines.append(f"Least movement: #{best.number} {best.algorithm}")
        return "\n".join(lines)

    def _cmd_exit(self, _args: list[str]) -> str:
        return self.EXIT_SENTINEL


def _parse_int(text: str, name: str) -> int:
    try:
        return int(text)
    except ValueError:
        msg = f"{name} must be an integer (got '{text}')"
        raise ConfigError(msg) from None


def _parse_switch(text: str, name: str) -> bool:
    value = _SWITCH_VALUES.get(text.lower())
    if value is None:
        msg = f"{name} must be 'on' or 'off' (got '{text}')"
        raise ConfigError(msg)
    return value


def _switch_name(value: bool) -> str:  # noqa: FBT001
    return "on" if value else "off"
