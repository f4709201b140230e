# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. The philosophers sit in a ring and share a fork with each
neighbour. A monitor thread ends the banquet in two cases. The first is a
philosopher who goes too long without starting a meal. The second is every
philosopher having eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philo <number_of_philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [must_eat]
```

You can also run it as `python -m philo.cli` with the same arguments.

All times are in milliseconds.

- `number_of_philosophers`: how many philosophers, and so how many forks, are at the table. It must be at least 1.
- `time_to_die`: how long a philosopher may go without starting a meal before dying. It must not be negative.
- `time_to_eat`: how long a meal takes. A philosopher holds both forks during the meal.
- `time_to_sleep`: how long a philosopher sleeps after eating. It must not be negative.
- `must_eat` (optional): once every philosopher has eaten this many times, the banquet ends. When this argument is given, a report of each philosopher's meal count is printed at the end. A value of 0 sets no meal target, so only a death ends the banquet. It must not be negative.

The first three arguments must be whole numbers: an optional `+` or `-`
followed by digits only. The last two are read leniently. Leading whitespace
is skipped, the leading integer is taken, and anything after it is ignored.

With the wrong number of arguments, the program prints a usage line and
exits with status 0. With arguments it cannot accept, it prints
`Could not parse arguments` and exits with status 1.

### Output

The banquet's output sits between two lines of dashes. Each action is
printed as the milliseconds elapsed since the start, followed by the
philosopher's id:

```
0 1 has taken his fork
0 1 has taken right fork
0 1 is eating
200 1 released his fork
200 1 released fork
200 1 is sleeping
400 1 is thinking
```

When a philosopher starves, the monitor prints `<time> <id> died` and the
banquet stops. A single philosopher has only one fork. That philosopher
prints `timestamp: <time> ms philosopher 1 took his fork` and waits until
starving.

When `must_eat` is given, the report shows these lines for each philosopher:

```
I am philosopher ID: 1
I ate 7 meals
I ate enough
I ate just enough
-----------------------
```

### Examples

```
philo 5 800 200 200
philo 4 410 200 200 7
philo 1 800 200 200
```

## Using it as a library

```python
from philo.arguments import parse_arguments
from philo.table import Table

settings = parse_arguments(["4", "410", "200", "200", "3"])
table = Table(settings)
dead = table.run()      # the Philosopher who died, or None
table.report()
```

- `philo.arguments.parse_arguments(args)` takes the arguments that follow
  the program name. It returns a frozen `Settings`, or raises
  `ArgumentError`, which is a subclass of `ValueError`.
- `philo.arguments.is_valid_number(text)` and `parse_long(text)` are the
  checks and the reader used on each argument.
- `philo.table.Table(settings, out=None)` seats the philosophers and writes
  to `out`, which defaults to standard output. `Table.run()` holds the
  banquet to its end. `Table.monitor()` is the watching loop that `run`
  starts in its own thread. `Table.report()` writes the meal report.
- `philo.table.Philosopher` and `philo.table.ProgramStatus` are the
  per-seat and shared state that the table uses.
- `philo.table.timestamp_ms()` returns the wall-clock time in milliseconds.