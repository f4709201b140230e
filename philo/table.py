"""The dining philosophers: forks, philosophers and the table that runs them."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philo.arguments import Settings

_POLL_SECONDS = 0.0005
_OUTPUT_LOCK = threading.Lock()


def timestamp_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def _emit(out: TextIO, line: str) -> None:
    with _OUTPUT_LOCK:
        out.write(line + "\n")


@dataclass
class ProgramStatus:
    """State shared by every thread of one banquet."""

    stop: bool = False
    fed_up: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def should_stop(self) -> bool:
        with self.lock:
            return self.stop

    def request_stop(self) -> None:
        with self.lock:
            self.stop = True

    def add_fed_up(self) -> int:
        """Count one more philosopher who has eaten enough; return the total."""
        with self.lock:
            self.fed_up += 1
            return self.fed_up


class Philosopher:
    """One seat at the table, owning the fork on its own side."""

    def __init__(
        self,
        id: int,
        settings: Settings,
        program: ProgramStatus,
        start_time: int,
        out: TextIO | None = None,
    ) -> None:
        self.id = id
        self.time_to_eat = settings.time_to_eat
        self.time_to_sleep = settings.time_to_sleep
        self.time_to_die = settings.time_to_die
        self.must_eat_n = settings.must_eat_n
        self.number_of_philosophers = settings.number_of_philosophers
        self.meals_count = 0
        self.program = program
        self.start_time = start_time
        self.last_meal = start_time
        self.fork = threading.Lock()
        self.left: Philosopher = self
        self.right: Philosopher = self
        self.thread: threading.Thread | None = None
        self.out = out if out is not None else sys.stdout

    def __repr__(self) -> str:
        return f"Philosopher(id={self.id}, meals={self.meals_count})"

    def _say(self, action: str, now: int | None = None) -> None:
        now = timestamp_ms() if now is None else now
        _emit(self.out, f"{now - self.start_time} {self.id} {action}")

    def _grab(self, fork: threading.Lock) -> bool:
        """Wait for a fork; give up only once the banquet has stopped."""
        while not fork.acquire(timeout=_POLL_SECONDS * 2):
            if self.program.should_stop():
                return False
        return True

    def _still_running(self, release: bool) -> bool:
        with self.program.lock:
            if self.program.stop:
                if release:
                    self.release_forks(False)
                return False
        return True

    def starved(self, now: int | None = None) -> bool:
        """True once ``time_to_die`` has passed since the last meal."""
        now = timestamp_ms() if now is None else now
        return now - self.last_meal >= self.time_to_die

    def take_forks(self) -> bool:
        """Pick up own fork, then the right neighbour's; False if stopped."""
        if not self._grab(self.fork):
            return False
        if self.program.should_stop():
            self.fork.release()
            return False
        self._say("has taken his fork")
        if not self._grab(self.right.fork):
            self.fork.release()
            return False
        with self.program.lock:
            if self.program.stop:
                self.fork.release()
                self.right.fork.release()
                return False
            self._say("has taken right fork")
        return True

    def release_forks(self, announce: bool) -> None:
        self.fork.release()
        if announce:
            self._say("released his fork")
        if self.right is not self:
            self.right.fork.release()
            if announce:
                self._say("released fork")

    def eat(self) -> None:
        if self.program.should_stop():
            return
        now = timestamp_ms()
        self._say("is eating", now)
        with self.program.lock:
            self.last_meal = now
        time.sleep(max(self.time_to_eat, 0) / 1000)
        self.meals_count += 1
        if self.meals_count == self.must_eat_n and self.must_eat_n > 0:
            self.program.add_fed_up()

    def sleep(self) -> None:
        if self.program.should_stop():
            return
        self._say("is sleeping")
        time.sleep(max(self.time_to_sleep, 0) / 1000)

    def think(self) -> None:
        if self.program.should_stop():
            return
        self._say("is thinking")

    def _dine_alone(self) -> None:
        with self.fork:
            _emit(
                self.out,
                f"timestamp: {timestamp_ms() - self.start_time} ms "
                f"philosopher {self.id} took his fork",
            )
            while not self.starved():
                time.sleep(_POLL_SECONDS)

    def run(self) -> None:
        """Eat, sleep and think until the banquet stops."""
        if self.id % 2 == 0:
            time.sleep(0.001)
        while True:
            if not self._still_running(False):
                return
            if self.number_of_philosophers == 1:
                self._dine_alone()
                return
            if not self.take_forks():
                return
            if not self._still_running(True):
                return
            self.eat()
            if not self._still_running(True):
                return
            self.release_forks(True)
            if not self._still_running(False):
                return
            self.sleep()
            if not self._still_running(False):
                return
            self.think()


class Table:
    """A ring of philosophers sharing forks, watched by a monitor."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.program = ProgramStatus()
        self.start_time = timestamp_ms()
        self.philosophers = [
            Philosopher(seat, settings, self.program, self.start_time, self.out)
            for seat in range(1, settings.number_of_philosophers + 1)
        ]
        count = len(self.philosophers)
        for index, philosopher in enumerate(self.philosophers):
            philosopher.left = self.philosophers[(index + 1) % count]
            philosopher.right = self.philosophers[index - 1]

    def monitor(self) -> Philosopher | None:
        """Watch until everyone is fed or someone starves; return the dead one."""
        status = self.program
        count = len(self.philosophers)
        while True:
            with status.lock:
                if status.fed_up == count:
                    status.stop = True
                    return None
            for philosopher in self.philosophers:
                now = timestamp_ms()
                with status.lock:
                    if now - philosopher.last_meal >= philosopher.time_to_die:
                        _emit(
                            self.out,
                            f"{now - philosopher.start_time} {philosopher.id} died",
                        )
                        status.stop = True
                        return philosopher
            time.sleep(_POLL_SECONDS)

    def run(self) -> Philosopher | None:
        """Hold the banquet to its end; return the philosopher who died, if any."""
        outcome: list[Philosopher | None] = []
        watcher = threading.Thread(target=lambda: outcome.append(self.monitor()))
        watcher.start()
        for philosopher in self.philosophers:
            philosopher.thread = threading.Thread(target=philosopher.run)
            philosopher.thread.start()
        for philosopher in self.philosophers:
            philosopher.thread.join()
        watcher.join()
        return outcome[0] if outcome else None

    def report(self) -> None:
        """Write how many meals each philosopher had."""
        for philosopher in self.philosophers:
            meals, needed = philosopher.meals_count, philosopher.must_eat_n
            _emit(self.out, f"I am philosopher ID: {philosopher.id}")
            _emit(self.out, f"I ate {meals} meals")
            if meals >= needed:
                _emit(self.out, "I ate enough")
            else:
                _emit(self.out, "I did not eat enough")
            if meals == needed:
                _emit(self.out, "I ate just enough")
            _emit(self.out, "-----------------------")