"""Interactive front end: welcome screen, train set-up and the simulation run."""

from __future__ import annotations

import argparse
import os
import random
import re
import subprocess
import sys
import threading
import time
from typing import Callable, Mapping, Sequence, TextIO

from bakumetro.monitor import SystemMonitor
from bakumetro.network import TransitNetwork
from bakumetro.train import (
    DEFAULT_SHIFT_LIMIT,
    DEFAULT_SIM_LIMIT,
    StopLocks,
    TrainOperator,
)

CLEAR_SEQUENCE = "\033[2J\033[1;1H"
MAX_TRAINS_PER_LINE = 10
BAR_WIDTH = 6

LINES: tuple[tuple[str, str], ...] = (
    ("Red", "🟥"),
    ("Green", "🟩"),
    ("Purple", "🟪"),
    ("Light Green", "💚"),
)

_TRANSIT_ART = (
    "  🚉 ==== Baku Metro ==== 🚆",
    "  |  [  🚄  ]  |  🚈  |  ",
    "  |==============|======|  ",
    "  |  [  🚃  ]  |  🚇  |  ",
    "  |===🛤️🛤️🛤️🛤️===|======|  ",
    "  🚄 Welcome Aboard! 🚉",
)
_FAINT_KEEP = set(" |=[]")
_FANS = ("🌀", "🔄", "⚙️")
_SPINNERS = ("🔄", "⏳", "⚙️", "🔧")
_STEAM = ("💨", "🌫️")
_LOADING_STEPS = (
    "Loading Red line routes... 🟥",
    "Loading Green line routes... 🟩",
    "Loading Purple line routes... 🟪",
    "Loading Light Green routes... 💚",
    "Initializing stations... 🛤️",
    "Configuring train schedules... 🚆",
    "Setting up mutex locks... 🔒",
    "Calibrating system monitor... 📊",
    "Finalizing train assignments... 🚄",
    "Starting metro operations... 🎉",
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _run_clear_command() -> None:
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def clear_display() -> None:
    """Clear the terminal screen."""
    print(CLEAR_SEQUENCE, end="", flush=True)
    _run_clear_command()


def progress_bar(percent: int) -> str:
    """Render the loading bar with the train at a position set by ``percent``."""
    train_pos = (percent // 10) % BAR_WIDTH
    filled = percent // 20
    cells = (
        "🚆" if j == train_pos else "=" if j < filled else " "
        for j in range(BAR_WIDTH)
    )
    return "[" + "".join(cells) + "]"


def _fan_row(step: int) -> str:
    return " ".join(_FANS[(step + k) % len(_FANS)] for k in range(3))


def read_train_count(
    line_name: str,
    emoji: str,
    input_func: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> int:
    """Ask until a whole number from 0 to 10 is given and return it."""
    out = sys.stdout if output is None else output
    while True:
        answer = input_func(f"{emoji} {line_name} line: ")
        match = _LEADING_INT.match(answer)
        if match is not None:
            count = int(match.group(1))
            if 0 <= count <= MAX_TRAINS_PER_LINE:
                return count
        print("❌ Invalid input! Please enter a number between 0 and 10.", file=out)


class SimulationManager:
    """Sets up the trains, runs them in parallel and reports the result."""

    def __init__(self) -> None:
        self.network = TransitNetwork()
        self.monitor = SystemMonitor()
        self.output_lock = threading.Lock()
        self.stop_locks = StopLocks()
        self.output: TextIO = sys.stdout
        self.input_func: Callable[[str], str] = input
        self.sleep: Callable[[float], None] = time.sleep
        self.run_clear_command = True
        self.sim_limit = DEFAULT_SIM_LIMIT
        self.shift_limit = DEFAULT_SHIFT_LIMIT
        self.rng: random.Random | None = None

    def _write(self, text: str = "") -> None:
        self.output.write(text)
        self.output.flush()

    def _clear(self) -> None:
        self._write(CLEAR_SEQUENCE)
        if self.run_clear_command:
            _run_clear_command()

    def _write_art(self, lines: Sequence[str]) -> None:
        for line in lines:
            self._write(f"  {line}\n")

    def show_welcome(self) -> None:
        """Play the animated welcome screen."""
        self._clear()
        self._write("\n\n\n  🚉 Baku Metro Simulation 🚆\n\n")
        self.sleep(1.0)

        self._clear()
        self._write("\n\n")
        for index, line in enumerate(_TRANSIT_ART):
            faint = "".join(c if c in _FAINT_KEEP else " " for c in line)
            self._write(f"  {faint}\n")
            self.sleep(0.3)
            self._clear()
            self._write("\n\n")
            self._write_art(_TRANSIT_ART[: index + 1])
            self.sleep(0.5)
        self._write("\n  Initializing system... ⏳\n\n")

        for step in range(6):
            self._clear()
            self._write("\n\n")
            self._write_art(_TRANSIT_ART)
            self._write("\n  Initializing system... ⏳\n")
            self._write(f"  Fans: {_fan_row(step)}\n\n")
            self.sleep(0.5)

        self.sleep(1.0)
        self._clear()

    def collect_train_counts(self) -> dict[str, int]:
        """Ask for the number of trains on each line and return them by line name."""
        self._clear()
        self._write("🚉 Baku Metro Control Center 🚆\n")
        self._write("Enter the number of trains for each line (0-10 per line):\n\n")

        counts = {
            name: read_train_count(name, emoji, self.input_func, self.output)
            for name, emoji in LINES
        }

        self._clear()
        header = "🚄 Preparing Metro System... 🚉\n\n"
        self._write(header)
        per_step = 100 // len(_LOADING_STEPS)
        for step, label in enumerate(_LOADING_STEPS):
            percent = (step + 1) * per_step
            self._write(f"{progress_bar(percent)} {percent}% {_STEAM[step % len(_STEAM)]}\n")
            self._write(f"{_SPINNERS[step % len(_SPINNERS)]} {label}\n")
            self._write(f"Fans: {_fan_row(step)}\n")
            self.sleep(0.5)
            if step < len(_LOADING_STEPS) - 1:
                self._clear()
                self._write(header)

        self._clear()
        self._write("✅ Train Configuration Confirmed:\n")
        for name, emoji in LINES:
            self._write(f"{emoji} {name} line: {counts[name]} trains 🚆\n")
        self._write("\nLaunching metro operations... 🚄\n")
        self.sleep(2.0)
        return counts

    def build_operators(self, counts: Mapping[str, int]) -> list[TrainOperator]:
        """Create the trains, numbered from 1, alternating direction on each line."""
        operators: list[TrainOperator] = []
        for name, _ in LINES:
            for i in range(counts.get(name, 0)):
                operators.append(
                    TrainOperator(
                        len(operators) + 1,
                        name,
                        i % 2 == 0,
                        self.network,
                        self.monitor,
                        output_lock=self.output_lock,
                        stop_locks=self.stop_locks,
                        sim_limit=self.sim_limit,
                        shift_limit=self.shift_limit,
                        sleep=self.sleep,
                        rng=self.rng,
                    )
                )
        return operators

    def start_operations(self) -> None:
        """Run the whole simulation and print the financial summary."""
        self.show_welcome()
        counts = self.collect_train_counts()
        threads = [
            threading.Thread(target=operator.start_journey, name=f"train-{operator.operator_id}")
            for operator in self.build_operators(counts)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.monitor.print_summary(self.output)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive metro simulation."""
    parser = argparse.ArgumentParser(
        prog="bakumetro", description="Simulate trains running on the Baku metro."
    )
    parser.parse_args(argv)
    SimulationManager().start_operations()
    return 0


if __name__ == "__main__":
    sys.exit(main())