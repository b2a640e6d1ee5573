"""A single train running back and forth along one metro line."""

from __future__ import annotations

import math
import random
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from bakumetro.monitor import SystemMonitor
from bakumetro.network import TransitNetwork

SPEED_KMH = 40.0
SIM_SCALE = 120.0
MIN_TRAVEL_MS = 250
FUEL_COST_PER_KM = 0.1
INCIDENT_COST = 50.0
FAULT_PROBABILITY = 0.01
LOG_PAUSE = 0.1
DEFAULT_SIM_LIMIT = 10 * 60.0
DEFAULT_SHIFT_LIMIT = 5 * 60.0

_BADGES = {
    "Red": "\U0001F534",
    "Green": "\U0001F7E2",
    "Purple": "\U0001F7E3",
    "Light Green": "\U0001F49A",
}

# Upper bound (exclusive) of passengers who may board at each station.
_STOP_TRAFFIC = {
    "Icheri Sheher": 300, "Memar Acemi 2": 300, "Sahil": 250, "28 May": 400,
    "Ganjlik": 200, "Nariman Narimanov": 220, "Bakmil": 100, "Ulduz": 150,
    "Koroglu": 250, "Kara Karaev": 180, "Neftchilar": 150,
    "Khalglar Dostlugu": 200, "Ahmedli": 220, "Azi Aslanov": 180,
    "Jafar Jabbarly": 200, "Hatai": 100, "Khojasan": 80, "Avtovagzal": 180,
    "8 Noyabr": 220, "Nizami": 250, "Elmlar Akademiyasy": 200,
    "Inshaatchilar": 180, "20 January": 220, "Memar Ajami": 230,
    "Nasimi": 210, "Azadlig Prospekti": 190, "Darnagul": 170,
}


def line_badge(route_name: str) -> str:
    """Coloured marker for a line, or an empty string for an unknown line."""
    return _BADGES.get(route_name, "")


def is_high_traffic_time(moment: datetime | None = None) -> bool:
    """True during the morning (7-9) and evening (17-19) rush hours."""
    hour = (moment or datetime.now()).hour
    return 7 <= hour < 9 or 17 <= hour < 19


def estimate_travel_time(distance: float) -> int:
    """Simulated travel time in milliseconds for ``distance`` kilometres."""
    if distance <= 0 or math.isnan(distance) or math.isinf(distance):
        return MIN_TRAVEL_MS
    real_seconds = int(distance / SPEED_KMH * 3600)
    sim_ms = int(real_seconds / SIM_SCALE * 1000)
    return max(MIN_TRAVEL_MS, sim_ms)


@dataclass
class TrainData:
    """Running state of one train."""

    riders: int = 0
    total_km: float = 0.0
    max_riders: int = 500


class StopLocks:
    """One lock per station, so only one train stands at a platform at a time."""

    def __init__(self) -> None:
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def lock_for(self, stop: str) -> threading.Lock:
        """Return the lock of ``stop``, creating it on first use."""
        with self._guard:
            lock = self._locks.get(stop)
            if lock is None:
                lock = self._locks[stop] = threading.Lock()
            return lock


_SHARED_STOP_LOCKS = StopLocks()
_SHARED_OUTPUT_LOCK = threading.Lock()


class TrainOperator:
    """Drives one train along its line in shifts until the time limit is up."""

    def __init__(
        self,
        operator_id: int,
        route_name: str,
        forward: bool,
        network: TransitNetwork,
        monitor: SystemMonitor,
        output_lock: threading.Lock | None = None,
        stop_locks: StopLocks | None = None,
        sim_limit: float = DEFAULT_SIM_LIMIT,
        shift_limit: float = DEFAULT_SHIFT_LIMIT,
        sleep: Callable[[float], None] = time.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self.operator_id = operator_id
        self.route_name = route_name
        self.forward = forward
        self.network = network
        self.monitor = monitor
        self.output_lock = output_lock if output_lock is not None else _SHARED_OUTPUT_LOCK
        self.stop_locks = stop_locks if stop_locks is not None else _SHARED_STOP_LOCKS
        self.sim_limit = sim_limit
        self.shift_limit = shift_limit
        self.sleep = sleep
        self.rng = rng if rng is not None else random.Random()
        self.data = TrainData()

    def secure_log(self, message: str) -> None:
        """Print a message while holding the shared output lock."""
        with self.output_lock:
            print(message, flush=True)
            self.sleep(LOG_PAUSE)

    def _tag(self) -> str:
        return f"Train {self.operator_id} ({self.route_name})"

    def _with_badge(self, message: str) -> str:
        badge = line_badge(self.route_name)
        return f"{message} {badge}" if badge else message

    def start_journey(self) -> None:
        """Run the train until the simulation time limit expires."""
        route = self.network.route(self.route_name)
        stops = list(route.stops)
        if not stops:
            raise ValueError(f"No stops in route {self.route_name}")

        hub = route.hub
        hub_index = stops.index(hub) if hub in stops else 0
        if hub_index:
            current = hub_index
        else:
            current = 0 if self.forward else len(stops) - 1
        direction = 1 if self.forward else -1

        clock = time.monotonic
        sim_start = clock()
        shift_number = 1

        self.secure_log(f"🚆 {self._tag()} departing from {hub} 🚉")

        while clock() - sim_start < self.sim_limit:
            shift_start = clock()
            shift_message = f"⏰ {self._tag()} shift {shift_number} started "
            badge = line_badge(self.route_name)
            if badge:
                shift_message += f"{badge} \u2705"
            self.secure_log(shift_message)

            while (clock() - shift_start < self.shift_limit
                   and clock() - sim_start < self.sim_limit):
                current, direction = self._serve_stop(stops, current, direction)

            self.monitor.log_energy_cost(self.data.total_km * FUEL_COST_PER_KM)
            if not route.is_shuttle:
                self.secure_log(
                    f"🏁 {self._tag()} shift {shift_number} completed, returned to {hub} 🏠"
                )
            else:
                with self.stop_locks.lock_for(stops[current]):
                    self.secure_log(
                        f"🏁 {self._tag()} shift {shift_number} completed, "
                        f"stationed at {stops[current]} 🚉"
                    )
            shift_number += 1

        self.monitor.log_energy_cost(self.data.total_km * FUEL_COST_PER_KM)
        if not route.is_shuttle:
            self.secure_log(f"🎉 {self._tag()} simulation ended, at {hub} 🏁")
        else:
            with self.stop_locks.lock_for(stops[current]):
                self.secure_log(f"🎉 {self._tag()} simulation ended, at {stops[current]} 🏁")

    def _serve_stop(self, stops: list[str], current: int, direction: int) -> tuple[int, int]:
        """Stop at ``stops[current]``, travel on, and return the next position."""
        if not 0 <= current < len(stops):
            raise IndexError(f"Invalid stop index {current}")
        stop = stops[current]
        target = current + direction
        has_next = 0 <= target < len(stops)
        next_stop = stops[target] if has_next else "End of Route"

        with self.stop_locks.lock_for(stop):
            self.secure_log(self._with_badge(
                f"🛤️ {self._tag()} reached {stop}, heading to {next_stop} 🚅"
            ))

            traffic = _STOP_TRAFFIC.get(stop)
            if traffic is None:
                raise ValueError(f"Stop {stop} not found in stop traffic")
            if traffic == 0:
                raise ValueError(f"Zero traffic value for stop {stop}")

            riders_off = min(self.data.riders, self.rng.randint(0, 100))
            riders_on = self.rng.randint(0, 100) % traffic
            if is_high_traffic_time():
                riders_on *= 2

            self.monitor.record_passengers(riders_on, riders_off)
            self.data.riders = min(self.data.max_riders,
                                   self.data.riders - riders_off + riders_on)
            self.secure_log(self._with_badge(
                f"👥 {self._tag()}: {riders_off} alighted 🚶, {riders_on} boarded 🧳, "
                f"current: {self.data.riders} passengers"
            ))

            stop_ms = self.rng.randint(20, 40) * 1000 // 120
            self.sleep(stop_ms / 1000)
            self.secure_log(f"🚪 {self._tag()} leaving {stop} 👋")

        if has_next:
            distance = self.network.distance_between(stop, stops[target])
            if distance <= 0 or math.isnan(distance) or math.isinf(distance):
                raise ValueError(f"Invalid distance between {stop} and {stops[target]}")
            self.data.total_km += distance
            travel_ms = estimate_travel_time(distance)
            self.secure_log(
                f"🚄 Train {self.operator_id} traveling to {stops[target]} "
                f"({travel_ms / 1000:.6f}s) 🕒"
            )
            self.sleep(travel_ms / 1000)

        if self.rng.random() < FAULT_PROBABILITY:
            self.secure_log(
                f"⚠️ {self._tag()} experienced a fault 🛠️, cost: 300 bucks 💸"
            )
            self.monitor.log_incident_cost(INCIDENT_COST)

        current += direction
        if not 0 <= current < len(stops):
            direction = -direction
            current += 2 * direction
        return current, direction