import io
import threading

import pytest

from bakumetro.monitor import TICKET_PRICE, UPKEEP_COST, SystemMonitor


@pytest.fixture
def monitor():
    return SystemMonitor()


def test_boarding_counts_towards_total(monitor):
    monitor.record_passengers(7, 0)
    monitor.record_passengers(5, 3)
    assert monitor.total_riders == 12
    assert monitor.active_riders == 9


def test_active_riders_never_negative(monitor):
    monitor.record_passengers(2, 10)
    assert monitor.active_riders == 0
    assert monitor.total_riders == 2


def test_negative_boarding_not_added_to_total(monitor):
    monitor.record_passengers(4, 0)
    monitor.record_passengers(-3, 0)
    assert monitor.total_riders == 4
    assert monitor.active_riders == 1


def test_summary_invariants(monitor):
    monitor.record_passengers(40, 0)
    monitor.log_energy_cost(12.5)
    monitor.log_energy_cost(2.5)
    monitor.log_incident_cost(50.0)
    s = monitor.summary()
    assert s.total_riders == 40
    assert s.revenue == pytest.approx(40 * TICKET_PRICE)
    assert s.energy_expense == pytest.approx(15.0)
    assert s.incident_expense == pytest.approx(50.0)
    assert s.upkeep_cost == UPKEEP_COST == 500.0
    assert s.total_expense == pytest.approx(s.energy_expense + s.incident_expense + s.upkeep_cost)
    assert s.profit == pytest.approx(s.revenue - s.total_expense)


def test_empty_summary_loses_upkeep(monitor):
    s = monitor.summary()
    assert s.revenue == 0
    assert s.profit == -UPKEEP_COST


def test_format_summary_lines(monitor):
    monitor.record_passengers(3, 0)
    lines = monitor.format_summary()
    assert len(lines) == 7
    assert lines[0] == "Total passengers served: 3"
    assert lines[4] == "Maintenance cost: 500.00 Bucks"
    assert all(line.endswith(" Bucks") for line in lines[1:])


def test_print_summary_writes_formatted_lines(monitor):
    monitor.record_passengers(10, 2)
    monitor.log_incident_cost(50.0)
    buffer = io.StringIO()
    monitor.print_summary(buffer)
    assert buffer.getvalue() == "\n".join(monitor.format_summary()) + "\n"


def test_concurrent_recording(monitor):
    def worker():
        for _ in range(1000):
            monitor.record_passengers(1, 0)
            monitor.log_energy_cost(1.0)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert monitor.total_riders == 8000
    assert monitor.active_riders == 8000
    assert monitor.summary().energy_expense == pytest.approx(8000.0)