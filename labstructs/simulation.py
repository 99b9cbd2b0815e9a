"""Two-queue, single-server service simulation."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union

from labstructs.queues import MAX_QUEUE_LENGTH, ArrayQueue, LinkedQueue, QueueStats

EPS = 1e-9

_NAMES = {
    "array": ("Первая Очередь", "Вторая очередь"),
    "list": ("Первая очередь", "Вторая очередь"),
}


class QueueKind(Enum):
    """Storage used for the simulated queues."""

    ARRAY = "array"
    LIST = "list"


@dataclass(frozen=True)
class TimeRange:
    """Uniformly distributed time interval."""

    low: float
    high: float

    def sample(self, rng: random.Random) -> float:
        """Draw a time from the interval."""
        return (self.high - self.low) * rng.random() + self.low

    def mean(self) -> float:
        return (self.high + self.low) / 2


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def _percent_error(actual: float, expected: float) -> Optional[float]:
    if abs(expected) > EPS:
        return abs(100 * (actual - expected) / expected)
    return None


def _format_percent(value: Optional[float]) -> str:
    return "0" if value is None else f"{value:.6f}%"


@dataclass
class SimulationResult:
    """Counters and derived figures of one simulation run."""

    kind: QueueKind
    n: int
    total_time: float
    work_time: float
    entered1: int
    left1: int
    entered2: int
    left2: int
    elapsed_us: int
    mean_arrival1: float
    mean_arrival2: float
    model_error: Optional[float]
    input_error1: Optional[float]
    input_error2: Optional[float]
    idle_time: float
    overflowed: bool
    stats1: QueueStats
    stats2: QueueStats
    freed_addresses: list[int] = field(default_factory=list)
    reused: int = 0

    def report_lines(self) -> list[str]:
        """Summary lines as shown after a run."""
        lines = ["Очередь заполнена."] if self.overflowed else []
        lines.append(f"Общее время моделирования: {self.total_time:.6f}")
        counts = [
            f"Число вошедших в 1 очередь: {self.entered1}",
            f"Число вышедших из 1 очереди: {self.left1}",
            f"Число вошедших во 2 очередь: {self.entered2}",
            f"Число вышедших из 2 очереди: {self.left2}",
        ]
        means = [
            f"Среднее время обработки заявки 1 очереди: {self.mean_arrival1:.6f}",
            f"Среднее время обработки заявки 2 очереди: {self.mean_arrival2:.6f}",
        ]
        inputs = [
            f"Погрешность ввода 1 очереди: {_format_percent(self.input_error1)}",
            f"Погрешность ввода 2 очереди: {_format_percent(self.input_error2)}",
        ]
        if self.kind is QueueKind.ARRAY:
            if self.model_error is None:
                lines.append("Погрешность моделирования: 0")
            else:
                lines.append(f"Погрешность работы ОА: {self.model_error:.6f}%")
            lines.append("")
            lines.extend(means)
            lines.extend(counts)
            lines.append(f"Время работы (мкс): {self.elapsed_us}")
            lines.append("")
            lines.extend(inputs)
            lines.append(f"Время простоя ОА: {self.idle_time:.6f}")
        else:
            lines.append(
                f"Погрешность времени моделирования: {_format_percent(self.model_error)}"
            )
            lines.append("")
            lines.extend(counts)
            lines.append(f"Время работы (мкс): {self.elapsed_us}")
            lines.extend(means)
            lines.extend(inputs)
            lines.append(f"Время простоя ОА (в усл. ед. в.): {self.idle_time:.6f}")
        lines.append("")
        return lines


def simulate(
    kind: QueueKind,
    n: int,
    interval: int,
    t1: TimeRange,
    t2: TimeRange,
    t3: TimeRange,
    t4: TimeRange,
    rng: Optional[random.Random] = None,
    progress: Optional[Callable[[str], None]] = None,
) -> SimulationResult:
    """Run the service model until ``n`` first-queue requests are served.

    ``t1`` and ``t2`` are the arrival intervals of the two queues, ``t3`` and
    ``t4`` their service times.  The first queue has priority.  ``progress``
    receives a status block every ``interval`` served first-queue requests.
    """
    kind = QueueKind(kind)
    if n < 0:
        raise ValueError("n must not be negative")
    if interval <= 0:
        raise ValueError("interval must be positive")
    rng = rng if rng is not None else random.Random()

    name1, name2 = _NAMES[kind.value]
    stats1, stats2 = QueueStats(name1), QueueStats(name2)
    released: dict[int, None] = {}
    queue1: Union[ArrayQueue, LinkedQueue]
    queue2: Union[ArrayQueue, LinkedQueue]
    if kind is QueueKind.ARRAY:
        queue1, queue2 = ArrayQueue(MAX_QUEUE_LENGTH), ArrayQueue(MAX_QUEUE_LENGTH)
        limit = n + 1
    else:
        queue1, queue2 = LinkedQueue(released), LinkedQueue(released)
        limit = n

    entered1 = left1 = entered2 = left2 = 0
    shown = 0
    clock = 0.0
    next1 = next2 = service = 0.0
    work1 = work2 = 0.0
    serving = 0
    overflowed = False

    started = time.process_time()
    while left1 < limit:
        if len(queue1) >= MAX_QUEUE_LENGTH or len(queue2) >= MAX_QUEUE_LENGTH:
            overflowed = True
            break

        if abs(next1) < EPS:
            next1 = t1.sample(rng)
        if abs(next2) < EPS:
            next2 = t2.sample(rng)

        if abs(service) < EPS:
            if not queue1.is_empty():
                service = t3.sample(rng)
                serving = 1
                queue1.pop()
                stats1.record_out()
                work1 += service
            elif not queue2.is_empty():
                service = t4.sample(rng)
                serving = 2
                queue2.pop()
                stats2.record_out()
                work2 += service

        if abs(service) < EPS:
            step = next1 if next1 - next2 < EPS else next2
        else:
            step = next2 if next2 - service < EPS else service
            if next1 - step < EPS:
                step = next1

        if abs(step - service) < EPS:
            service = 0.0
            if serving == 1:
                left1 += 1
            if serving == 2:
                left2 += 1

        if left1 == n:
            break

        if abs(step - next1) < EPS:
            queue1.push("1")
            stats1.record_in()
            entered1 += 1
        if abs(step - next2) < EPS:
            queue2.push("2")
            stats2.record_in()
            entered2 += 1

        next1 -= step
        next2 -= step
        if service >= step:
            service -= step
        clock += step

        if left1 % interval == 0 and left1 != shown:
            shown = left1
            if progress is not None:
                block = [
                    f"Обработано заявок 1го типа: {left1}",
                    *stats1.describe(),
                    *stats2.describe(),
                    "",
                ]
                progress("\n".join(block))
    elapsed_us = int((time.process_time() - started) * 1_000_000)

    mean_in1 = t1.mean()
    mean_out1 = t3.mean()
    mean_in2 = t2.mean()
    total_in1 = n * mean_in1
    total_out1 = n * mean_out1
    model_time = total_in1 if total_in1 - total_out1 > EPS else total_out1
    expected_in1 = _divide(clock, mean_in1)
    expected_in2 = _divide(clock, mean_in2)
    work_time = work1 + work2

    freed: list[int] = []
    reused = 0
    if isinstance(queue1, LinkedQueue) and isinstance(queue2, LinkedQueue):
        freed = queue1.released
        reused = queue1.reused + queue2.reused

    return SimulationResult(
        kind=kind,
        n=n,
        total_time=clock,
        work_time=work_time,
        entered1=entered1,
        left1=left1,
        entered2=entered2,
        left2=left2,
        elapsed_us=elapsed_us,
        mean_arrival1=mean_in1,
        mean_arrival2=mean_in2,
        model_error=_percent_error(clock, model_time),
        input_error1=_percent_error(entered1, expected_in1),
        input_error2=_percent_error(entered2, expected_in2),
        idle_time=abs(clock - work_time),
        overflowed=overflowed,
        stats1=stats1,
        stats2=stats2,
        freed_addresses=freed,
        reused=reused,
    )