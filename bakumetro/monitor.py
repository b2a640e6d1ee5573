"""Thread-safe accounting of passengers and running costs."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from typing import TextIO

TICKET_PRICE = 0.5
UPKEEP_COST = 500.0


@dataclass(frozen=True)
class Summary:
    """Financial result of a simulation run."""

    total_riders: int
    revenue: float
    energy_expense: float
    incident_expense: float
    upkeep_cost: float
    total_expense: float
    profit: float


class SystemMonitor:
    """Collects passenger counts and expenses reported by running trains."""

    def __init__(self) -> None:
        self._total_riders = 0
        self._active_riders = 0
        self._energy_expense = 0.0
        self._incident_expense = 0.0
        self._rider_lock = threading.Lock()
        self._cost_lock = threading.Lock()

    @property
    def total_riders(self) -> int:
        return self._total_riders

    @property
    def active_riders(self) -> int:
        return self._active_riders

    def record_passengers(self, boarding: int, alighting: int) -> None:
        """Account for passengers boarding and leaving a train."""
        with self._rider_lock:
            self._active_riders = max(0, self._active_riders - alighting + boarding)
            if boarding > 0:
                self._total_riders += boarding

    def log_energy_cost(self, cost: float) -> None:
        with self._cost_lock:
            self._energy_expense += cost

    def log_incident_cost(self, cost: float) -> None:
        with self._cost_lock:
            self._incident_expense += cost

    def summary(self) -> Summary:
        """Compute revenue, expenses and profit from what has been recorded."""
        with self._rider_lock:
            riders = self._total_riders
        with self._cost_lock:
            energy = self._energy_expense
            incidents = self._incident_expense
        revenue = riders * TICKET_PRICE
        total_expense = energy + incidents + UPKEEP_COST
        return Summary(
            total_riders=riders,
            revenue=revenue,
            energy_expense=energy,
            incident_expense=incidents,
            upkeep_cost=UPKEEP_COST,
            total_expense=total_expense,
            profit=revenue - total_expense,
        )

    def format_summary(self) -> list[str]:
        """Return the report lines shown at the end of a run."""
        s = self.summary()
        return [
            f"Total passengers served: {s.total_riders}",
            f"Revenue: {s.revenue:.2f} Bucks",
            f"Fuel expenses: {s.energy_expense:.2f} Bucks",
            f"Incident expenses: {s.incident_expense:.2f} Bucks",
            f"Maintenance cost: {s.upkeep_cost:.2f} Bucks",
            f"Total expenses: {s.total_expense:.2f} Bucks",
            f"Net profit: {s.profit:.2f} Bucks",
        ]

    def print_summary(self, file: TextIO | None = None) -> None:
        """Write the report to ``file`` (standard output by default)."""
        out = sys.stdout if file is None else file
        for line in self.format_summary():
            print(line, file=out)