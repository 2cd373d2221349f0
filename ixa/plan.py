"""A priority queue of plans ordered by time, priority and insertion order.

Adding a plan is O(log n); cancelling a plan is O(1). Cancelled plans stay
in the heap and are skipped when they reach the front.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PlanId:
    """Identifier of a plan added to a :class:`Queue`."""

    value: int


@dataclass(frozen=True, eq=True)
class PlanSchedule:
    """Time, id and priority of a plan.

    Schedules order by increasing time, then priority, then plan id.
    """

    plan_id: int
    time: float
    priority: Any = None

    def _key(self) -> tuple:
        return (self.time, self.priority, self.plan_id)

    def __lt__(self, other: PlanSchedule) -> bool:
        return self._key() < other._key()

    def __le__(self, other: PlanSchedule) -> bool:
        return self._key() <= other._key()

    def __gt__(self, other: PlanSchedule) -> bool:
        return self._key() > other._key()

    def __ge__(self, other: PlanSchedule) -> bool:
        return self._key() >= other._key()


@dataclass
class Plan(Generic[T]):
    """A payload intended to be used at the given time."""

    time: float
    data: T


class Queue(Generic[T]):
    """Stores plans sorted by time; ties broken by priority, then by order added."""

    def __init__(self) -> None:
        self._heap: list[PlanSchedule] = []
        self._data: dict[int, T] = {}
        self._counter = 0

    def add_plan(self, time: float, data: T, priority: Any = None) -> PlanId:
        """Add a plan and return an id that can be used to cancel it."""
        logger.debug("adding plan at %s", time)
        plan_id = self._counter
        heapq.heappush(self._heap, PlanSchedule(plan_id, time, priority))
        self._data[plan_id] = data
        self._counter += 1
        return PlanId(plan_id)

    def cancel_plan(self, plan_id: PlanId) -> T | None:
        """Cancel a plan, returning its data, or None if it is no longer pending."""
        logger.debug("cancel plan %s", plan_id)
        return self._data.pop(plan_id.value, None)

    def is_empty(self) -> bool:
        """True when no entries remain, cancelled ones included."""
        return not self._heap

    def next_time(self) -> float | None:
        """Time of the entry at the front of the queue, if any."""
        return self._heap[0].time if self._heap else None

    def clear(self) -> None:
        """Remove every plan and reset the id counter."""
        self._data.clear()
        self._heap.clear()
        self._counter = 0

    def peek(self) -> tuple[PlanSchedule, T] | None:
        """Return the first live schedule in heap order together with its data."""
        for entry in self._heap:
            if entry.plan_id in self._data:
                return entry, self._data[entry.plan_id]
        return None

    def get_next_plan(self) -> Plan[T] | None:
        """Remove and return the earliest live plan, or None if there is none."""
        logger.debug("getting next plan")
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry.plan_id in self._data:
                return Plan(entry.time, self._data.pop(entry.plan_id))
        return None

    def list_schedules(self, at_most: int = 0) -> list[PlanSchedule]:
        """Live schedules in heap order, at most ``at_most`` of them (0 means all)."""
        items: list[PlanSchedule] = []
        for entry in self._heap:
            if entry.plan_id in self._data:
                items.append(entry)
                if len(items) == at_most:
                    break
        return items

    def remaining_plan_count(self) -> int:
        """Number of entries still in the heap, cancelled ones included."""
        return len(self._heap)