"""Small classic exercises: conversions, sequences, Hanoi, Booth multiplication."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a temperature from degrees Celsius to degrees Fahrenheit."""
    return celsius * 9.0 / 5.0 + 32.0


def multiplication_table(number: int, upto: int = 10) -> list[str]:
    """Return the lines ``"n * i = n*i"`` for i from 1 to ``upto``."""
    return [f"{number} * {i} = {number * i}" for i in range(1, upto + 1)]


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting 0, 1."""
    terms: list[int] = []
    a, b = 0, 1
    for _ in range(count):
        terms.append(a)
        a, b = b, a + b
    return terms


@dataclass(frozen=True)
class Move:
    """One move of a Tower of Hanoi solution."""

    disk: int
    source: str
    target: str
    spare: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.target}"


def _hanoi(disks: int, source: str, target: str, spare: str) -> Iterator[Move]:
    if disks == 0:
        return
    yield from _hanoi(disks - 1, source, spare, target)
    yield Move(disks, source, target, spare)
    yield from _hanoi(disks - 1, spare, target, source)


def hanoi_moves(
    disks: int, source: str = "A", target: str = "B", spare: str = "C"
) -> list[Move]:
    """Return the moves carrying ``disks`` disks from ``source`` to ``target``.

    Raises ValueError for a negative number of disks.
    """
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    return list(_hanoi(disks, source, target, spare))


def reverse_each_word(text: str) -> str:
    """Reverse every space-separated word in place, keeping the spacing."""
    return " ".join(word[::-1] for word in text.split(" "))


@dataclass(frozen=True)
class BoothStep:
    """A row of a Booth multiplication trace.

    ``operation`` is "initial", "subtract" (A = A - BR), "add" (A = A + BR)
    or "shift"; every non-initial step ends with an arithmetic right shift.
    ``q0`` and ``q_prev`` are the bits examined before the step, and the
    registers are shown most significant bit first after it.
    """

    q0: int
    q_prev: int
    operation: str
    accumulator: str
    multiplier: str
    count: int


def _signed_width(value: int) -> int:
    """Bits needed to hold ``value`` in two's complement."""
    magnitude = value if value >= 0 else ~value
    return magnitude.bit_length() + 1


def _booth(multiplicand: int, multiplier: int) -> tuple[list[BoothStep], int]:
    width = max(_signed_width(multiplicand), _signed_width(multiplier))
    if multiplicand == -(1 << (width - 1)):
        width += 1
    mask = (1 << width) - 1
    sign_bit = 1 << (width - 1)
    m = multiplicand & mask
    accumulator, q, q_prev = 0, multiplier & mask, 0

    def bits(value: int) -> str:
        return format(value, f"0{width}b")

    steps = [BoothStep(q & 1, q_prev, "initial", bits(accumulator), bits(q), width)]
    for count in reversed(range(width)):
        q0, before = q & 1, q_prev
        if q0 == 1 and q_prev == 0:
            accumulator = (accumulator - m) & mask
            operation = "subtract"
        elif q0 == 0 and q_prev == 1:
            accumulator = (accumulator + m) & mask
            operation = "add"
        else:
            operation = "shift"
        q_prev = q & 1
        q = (q >> 1) | ((accumulator & 1) << (width - 1))
        accumulator = (accumulator >> 1) | (accumulator & sign_bit)
        steps.append(
            BoothStep(q0, before, operation, bits(accumulator), bits(q), count)
        )

    combined = (accumulator << width) | q
    if combined & (1 << (2 * width - 1)):
        combined -= 1 << (2 * width)
    return steps, combined


def booth_trace(multiplicand: int, multiplier: int) -> list[BoothStep]:
    """Return the register trace of Booth's algorithm on two signed integers."""
    return _booth(multiplicand, multiplier)[0]


def booth_multiply(multiplicand: int, multiplier: int) -> int:
    """Multiply two signed integers with Booth's algorithm."""
    return _booth(multiplicand, multiplier)[1]


@dataclass
class Student:
    """A student record with a roll number and marks."""

    name: str
    roll: int
    marks: float

    def describe(self) -> str:
        """Return the record as display lines."""
        return f"Roll number: {self.roll}\nName: {self.name}\nMarks: {self.marks:g}"