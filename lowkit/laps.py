"""Lap counting for cars passing a checkpoint."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Iterable, TextIO


@dataclass
class Car:
    """A car taking part in the race."""

    id: int
    laps: int = 0


@dataclass
class Race:
    """The state of a race: every car seen so far and its lap count."""

    out: TextIO | None = None
    cars: list[Car] = field(default_factory=list)

    def _write(self, text: str) -> None:
        (self.out or sys.stdout).write(text)

    def find_car(self, car_id: int) -> Car | None:
        """Return the car with this id, or None if it has not joined."""
        return next((car for car in self.cars if car.id == car_id), None)

    def add_car(self, car_id: int) -> Car:
        """Add a new car with no laps and announce it."""
        car = Car(car_id)
        self.cars.append(car)
        self._write(f"Car {car_id} joined the race\n")
        return car

    def reset(self) -> None:
        """Forget every car."""
        self.cars.clear()

    def race_state(self, ids: Iterable[int]) -> tuple[Car, ...]:
        """Record a lap for each id, print the standings and return them.

        An empty sequence of ids resets the race.
        """
        ids = list(ids)
        if not ids:
            self.reset()
            return ()
        for car_id in ids:
            car = self.find_car(car_id)
            if car is None:
                self.add_car(car_id)
            else:
                car.laps += 1
        self.cars.sort(key=lambda car: car.id)
        lines = ["Race state:"]
        lines.extend(f"Car {car.id} [{car.laps} laps]" for car in self.cars)
        self._write("\n".join(lines) + "\n")
        return tuple(replace(car) for car in self.cars)


_race = Race()


def race_state(ids: Iterable[int]) -> tuple[Car, ...]:
    """Update the shared race with ``ids`` and print its state."""
    return _race.race_state(ids)


def main(argv: list[str] | None = None) -> int:
    """Run a short demonstration race."""
    ids1 = [1, 42, 101]
    ids2 = [11]
    for ids in (ids1, ids1, ids1, ids2, ids1, ids2, ids1, ids2, ids1, ids2):
        race_state(ids)
        print("--")
    race_state([])
    return 0


if __name__ == "__main__":
    sys.exit(main())