"""Interactive REPL (Read-Eval-Print Loop) for the simulator.

The REPL is the thin I/O wrapper around the shell:

    1. **Read** — display a prompt and read user input.
    2. **Eval** — pass the command to ``shell.execute()``.
    3. **Print** — display the result.
    4. **Loop** — repeat until the shell returns the exit sentinel.

The helper functions (``build_prompt``, ``format_banner``) are pure and
testable.  The ``run()`` function is the I/O entrypoint.
"""

import readline

from disk_sim.shell import Shell

_BANNER_WIDTH = 38


def format_banner() -> str:
    """Return the welcome banner shown when the REPL starts."""
    border = "=" * _BANNER_WIDTH
    return (
        f"\n  {border}\n        Disk Scheduling Simulator\n"
        f"   FCFS SSTF SCAN C-SCAN LOOK C-LOOK\n  {border}\n\n"
        "Type 'sample' to load a demo workload, 'help' for commands, 'exit' to quit.\n"
    )


def build_prompt(shell: Shell) -> str:
    """Build a prompt showing the selected algorithm, e.g. ``disk[SCAN] $ ``."""
    return f"disk[{shell.simulator.algorithm}] $ "


def complete_command(shell: Shell, text: str, state: int) -> str | None:
    """Return the *state*-th command name starting with *text* (readline protocol)."""
    matches = [name for name in shell.command_names if name.startswith(text)]
    return matches[state] if state < len(matches) else None


def run() -> None:
    """Run the interactive REPL until ``exit``, Ctrl+C or Ctrl+D."""
    shell = Shell()

    # Wire up tab completion of command names via readline.
    readline.set_completer(lambda text, state: complete_command(shell, text, state))
    readline.set_completer_delims(" \t")
    readline.parse_and_bind("tab: complete")

    print(format_banner())  # noqa: T201

    try:
        while True:
            try:
                command = input(build_prompt(shell))
            except EOFError:
                # Ctrl+D: graceful exit
                print()  # noqa: T201
                break

            result = shell.execute(command)
            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201

    except KeyboardInterrupt:
        # Ctrl+C: graceful exit
        print("\nInterrupted.")  # noqa: T201
