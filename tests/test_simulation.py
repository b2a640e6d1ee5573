import io
from unittest import mock

import pytest

from bakumetro.simulation import (
    CLEAR_SEQUENCE,
    SimulationManager,
    clear_display,
    main,
    progress_bar,
    read_train_count,
)


def _scripted(answers):
    prompts = []
    remaining = list(answers)

    def ask(prompt):
        prompts.append(prompt)
        return remaining.pop(0)

    return ask, prompts


def _quiet_manager(answers=()):
    manager = SimulationManager()
    manager.output = io.StringIO()
    manager.run_clear_command = False
    sleeps = []
    manager.sleep = sleeps.append
    manager.input_func, prompts = _scripted(answers)
    return manager, sleeps, prompts


def test_clear_display_writes_escape_sequence(capsys):
    with mock.patch("subprocess.run") as run:
        clear_display()
    assert CLEAR_SEQUENCE in capsys.readouterr().out
    assert run.call_count == 1


def test_progress_bar_start():
    assert progress_bar(0) == "[🚆     ]"


def test_progress_bar_full():
    assert progress_bar(100) == "[====🚆 ]"


@pytest.mark.parametrize("percent", range(0, 101, 10))
def test_progress_bar_has_one_train(percent):
    bar = progress_bar(percent)
    assert bar.startswith("[") and bar.endswith("]")
    inner = bar[1:-1]
    assert inner.count("🚆") == 1
    assert len(inner) == 6


def test_read_train_count_accepts_valid_number():
    ask, prompts = _scripted(["3"])
    out = io.StringIO()
    assert read_train_count("Red", "🟥", ask, out) == 3
    assert prompts == ["🟥 Red line: "]
    assert out.getvalue() == ""


def test_read_train_count_retries_on_bad_input():
    ask, prompts = _scripted(["11", "-1", "abc", "7"])
    out = io.StringIO()
    assert read_train_count("Green", "🟩", ask, out) == 7
    assert len(prompts) == 4
    assert out.getvalue().count("Invalid input") == 3


@pytest.mark.parametrize("answer, expected", [("0", 0), ("10", 10), ("  4 trains", 4)])
def test_read_train_count_limits(answer, expected):
    ask, _ = _scripted([answer])
    assert read_train_count("Purple", "🟪", ask, io.StringIO()) == expected


def test_read_train_count_propagates_end_of_input():
    def ask(prompt):
        raise EOFError

    with pytest.raises(EOFError):
        read_train_count("Red", "🟥", ask, io.StringIO())


def test_collect_train_counts_returns_counts_by_line():
    manager, sleeps, prompts = _quiet_manager(["1", "2", "x", "3", "4"])
    counts = manager.collect_train_counts()
    assert counts == {"Red": 1, "Green": 2, "Purple": 3, "Light Green": 4}
    text = manager.output.getvalue()
    assert "Red line: 1 trains" in text
    assert "Light Green line: 4 trains" in text
    assert "Starting metro operations" in text
    assert len(prompts) == 5
    assert all(s > 0 for s in sleeps)


def test_show_welcome_draws_art():
    manager, sleeps, _ = _quiet_manager()
    manager.show_welcome()
    text = manager.output.getvalue()
    assert "Welcome Aboard!" in text
    assert "Initializing system" in text
    assert text.endswith(CLEAR_SEQUENCE)
    assert sleeps and all(s > 0 for s in sleeps)


def test_build_operators_numbers_and_directions():
    manager, _, _ = _quiet_manager()
    operators = manager.build_operators({"Red": 2, "Green": 1, "Purple": 0, "Light Green": 1})
    assert [op.operator_id for op in operators] == [1, 2, 3, 4]
    assert [op.route_name for op in operators] == ["Red", "Red", "Green", "Light Green"]
    assert [op.forward for op in operators] == [True, False, True, True]
    assert all(op.monitor is manager.monitor for op in operators)


def test_build_operators_empty():
    manager, _, _ = _quiet_manager()
    assert manager.build_operators({"Red": 0, "Green": 0, "Purple": 0, "Light Green": 0}) == []


def test_start_operations_with_no_trains_reports_loss():
    manager, _, _ = _quiet_manager(["0", "0", "0", "0"])
    manager.start_operations()
    text = manager.output.getvalue()
    assert "Total passengers served: 0" in text
    assert "Net profit: -500.00 Bucks" in text


def test_start_operations_runs_trains(capsys):
    manager, _, _ = _quiet_manager(["1", "0", "0", "1"])
    manager.sim_limit = 0.0
    manager.start_operations()
    printed = capsys.readouterr().out
    assert "Train 1 (Red) departing from Bakmil" in printed
    assert "Train 2 (Light Green) simulation ended, at Hatai" in printed
    assert "Maintenance cost: 500.00 Bucks" in manager.output.getvalue()


def test_main_runs_interactively(capsys):
    with mock.patch("builtins.input", side_effect=["0", "0", "0", "0"]), \
            mock.patch("time.sleep"), mock.patch("subprocess.run"):
        assert main([]) == 0
    assert "Net profit: -500.00 Bucks" in capsys.readouterr().out


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0