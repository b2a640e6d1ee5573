# bakumetro

A terminal simulation of the Baku Metro. You choose how many trains run on each
of four lines: Red, Green, Purple and the Light Green shuttle. Each train then
runs in its own thread. Trains move between stations and take on and let off
passengers. Only one train can stand at a station at a time, and now and then a
train breaks down. At the end the program prints a summary with the number of
passengers carried, revenue, fuel and incident costs, maintenance and net profit.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install .[test]
pytest
```

## Running

```
bakumetro
```

The command takes no options other than `--help`. It opens with a short welcome
animation and clears the screen between frames. To clear the screen it writes an
ANSI clear sequence and also runs `clear`, or `cls` on Windows. It then asks for
the number of trains on each line. The answer must be a whole number from 0 to 10;
anything else gets an error message and the question again.

Trains are numbered from 1 across all lines. On each line the trains alternate
direction: the first runs forward, the second backward, and so on. A train starts
at its line's hub station. If the hub is the first stop of the line, it starts at
the end it is heading away from. It turns round at each end of the line.

Each train works five-minute shifts until ten minutes of wall-clock time have
passed. During rush hours (07:00–09:00 and 17:00–19:00 local time) twice as many
passengers board. A train holds at most 500 passengers. Fuel costs 0.1 per
kilometre travelled, and each breakdown adds 50.00 to incident expenses. Revenue
is 0.5 per boarding passenger, and maintenance is a fixed 500.00.

## Using the library

### `bakumetro.network`

`TransitNetwork` holds the fixed line layout and track lengths:

```python
from bakumetro.network import TransitNetwork

network = TransitNetwork()
red = network.route("Red")                            # a frozen Route dataclass
print(red.hub)                                        # Bakmil
print(red.stops[:3])                                  # ('Icheri Sheher', 'Sahil', '28 May')
print(network.distance_between("28 May", "Sahil"))   # 0.5
print(network.distance_between("Sahil", "Hatai"))     # 0.0 (not adjacent)
print(sorted(network.routes))                         # read-only mapping of all lines
```

- `route()` raises `KeyError` for an unknown line.
- `distance_between()` works in either direction. It returns `0.0` for stations
  that are not adjacent.

### `bakumetro.monitor`

`SystemMonitor` is a thread-safe tally of passengers and costs:

```python
from bakumetro.monitor import SystemMonitor

monitor = SystemMonitor()
monitor.record_passengers(120, 0)     # boarding, alighting
monitor.log_energy_cost(3.5)
monitor.log_incident_cost(50.0)

summary = monitor.summary()           # a frozen Summary dataclass
print(summary.revenue, summary.profit)
monitor.print_summary()               # the report lines, to stdout or a given file
```

`format_summary()` returns the report as a list of lines.

### `bakumetro.train`

- `TrainOperator` drives one train along its route. Call `start_journey()` to run
  it. Its constructor accepts the following keyword arguments:
  - an output lock
  - a `StopLocks` instance
  - the simulation and shift limits in seconds
  - a `sleep` function
  - a `random.Random`

  These let it run quickly and reproducibly. `start_journey()` raises `KeyError`
  for an unknown line and `ValueError` for missing station data.
- `StopLocks` hands out one lock per station, so only one train occupies a
  station at a time.
- `estimate_travel_time(distance)` converts kilometres into simulated
  milliseconds. It never returns less than 250.
- `is_high_traffic_time(moment)` tells whether a time falls in rush hours.
- `line_badge(route_name)` returns the coloured marker used in a line's messages.

### `bakumetro.simulation`

`SimulationManager` ties the pieces together:

- `show_welcome()` plays the welcome animation.
- `collect_train_counts()` asks for the train counts and returns them as a dict
  keyed by line name.
- `build_operators(counts)` creates the trains.
- `start_operations()` runs everything and prints the summary.

Its `output`, `input_func`, `sleep`, `run_clear_command`, `sim_limit`,
`shift_limit` and `rng` attributes can be set before a run.

`read_train_count()`, `progress_bar()` and `clear_display()` are also available.
`main()` is the entry point of the `bakumetro` command.

## What it does not do

The network layout is fixed; lines and stations cannot be loaded from a file. The
command is interactive only, with no way to pass train counts on the command
line. Results are printed, not saved.