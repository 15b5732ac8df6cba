from collections.abc import Iterator
from dataclasses import dataclass
from timeit import Timer
from typing import Annotated, Self

from tabulate import tabulate
from typer import Option, Typer

from coldstream import Observable

DEFAULT_SIZES = [0, 1, 10, 100, 1000, 10000]


def consume(value: int) -> None:
    pass


@dataclass(frozen=True, slots=True)
class Measure:
    size: int
    seconds: float

    @classmethod
    def take(cls, size: int, repeat: int) -> Self:
        observable = Observable.from_(range(size))
        timer = Timer(lambda: observable.subscribe(next=consume))
        return cls(size, min(timer.repeat(repeat=repeat, number=1)))

    def row(self, baseline: Self) -> tuple[int, str, str]:
        total = f"{self.seconds * 10**6:.2f}"

        if not self.size:
            return self.size, total, "-"

        # The empty stream only pays for subscription and teardown.
        per_value = (self.seconds - baseline.seconds) / self.size * 10**9
        return self.size, total, f"{per_value:.1f}"


def measure(sizes: list[int], repeat: int) -> Iterator[tuple[int, str, str]]:
    baseline = Measure.take(0, repeat)

    for size in sorted(sizes):
        yield Measure.take(size, repeat).row(baseline)


cli = Typer()


@cli.command()
def main(
    sizes: Annotated[list[int] | None, Option("--size", "-s", min=0)] = None,
    repeat: Annotated[int, Option("--repeat", "-r", min=1)] = 200,
):
    rows = measure(sizes or DEFAULT_SIZES, repeat)
    headers = ("Values", "Subscription (μs)", "Per value (ns)")
    print(tabulate(rows, headers=headers))


if __name__ == "__main__":
    cli()
