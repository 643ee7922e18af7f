"""Disk scheduling algorithms — turning a request queue into head motion.

When several requests wait for the disk, the arm has to move between
tracks to service them.  The dominant cost is **seek time**: how far the
arm travels.  A scheduling algorithm decides the *order* of service, and
with it the total distance covered.

Think of the disk arm like an elevator in a building:
    - **FCFS** — stop at every floor in the order buttons were pressed.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **SCAN** — go all the way up, then all the way down (elevator).
    - **C-SCAN** — go all the way up, fly back to the bottom, go up again.
    - **LOOK** — like SCAN, but turn around at the last request instead
      of the top floor.
    - **C-LOOK** — like C-SCAN, but fly back only as far as the lowest
      waiting request.

Every policy implements the ``DiskPolicy`` protocol (Strategy pattern)
and returns a full ``Trace`` rather than just an order, so boundary
visits and wraparound jumps are visible to whoever animates or exports
the run.

Policies are pure: they read the request sequence, never mutate it, and
keep no state between calls.  Duplicate tracks are distinct requests;
within a sweep, equal tracks are serviced in their original order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeAlias

from disk_sim.tracks import NOT_SERVED, Direction, Step, Trace, seek_distance

if TYPE_CHECKING:
    from collections.abc import Sequence

# An (original index, track) pair.
_Request: TypeAlias = tuple[int, int]


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    def simulate(self, requests: Sequence[int], *, head: int) -> Trace:
        """Return the head movements needed to service every request.

        Args:
            requests: Track numbers to visit, in arrival order.
            head: Starting position of the disk head.

        Returns:
            The trace of steps in chronological order.

        """
        ...  # pragma: no cover


class _Head:
    """The moving head for the duration of one simulation.

    Records a ``Step`` for every move so that the finished trace is
    continuous by construction.
    """

    def __init__(self, start: int) -> None:
        self.position = start
        self._steps: list[Step] = []

    def move(
        self, to: int, *, served_index: int | None = NOT_SERVED, charged: bool = True
    ) -> None:
        """Move the head to *to*, recording the step.

        An uncharged move (C-SCAN's free flyback) is recorded with zero
        distance.
        """
        distance = seek_distance(self.position, to) if charged else 0
        self._steps.append(Step(self.position, to, distance, served_index))
        self.position = to

    def service(self, batch: Sequence[_Request]) -> None:
        """Visit each request of *batch* in the given order."""
        for index, track in batch:
            self.move(track, served_index=index)

    def trace(self) -> Trace:
        return tuple(self._steps)


def _sweep_order(batch: list[_Request], direction: Direction) -> list[_Request]:
    """Sort *batch* in the order a sweep in *direction* meets it.

    ``sorted`` is stable (also with ``reverse=True``), so duplicates keep
    their original relative order.
    """
    return sorted(batch, key=lambda r: r[1], reverse=direction is Direction.DOWN)


def _partition(
    requests: Sequence[int], head: int, direction: Direction
) -> tuple[list[_Request], list[_Request]]:
    """Split requests into those ahead of the head and those behind it.

    A request exactly at the head counts as ahead in either direction.
    The ahead batch is returned in sweep order; the behind batch in
    arrival order.
    """
    ahead: list[_Request] = []
    behind: list[_Request] = []
    for index, track in enumerate(requests):
        is_ahead = track >= head if direction is Direction.UP else track <= head
        (ahead if is_ahead else behind).append((index, track))
    return _sweep_order(ahead, direction), behind


class FCFSPolicy:
    """First Come, First Served — service in arrival order.

    The simplest policy.  Fair (no starvation), but the arm zigzags
    across the disk, producing high total seek time.
    """

    def simulate(self, requests: Sequence[int], *, head: int) -> Trace:
        """Visit requests in their original order."""
        arm = _Head(head)
        arm.service(list(enumerate(requests)))
        return arm.trace()


class SSTFPolicy:
    """Shortest Seek Time First — always go to the nearest request.

    A greedy algorithm that minimises each individual seek.  Ties are
    broken by the lower original index, so repeated runs are identical.

    Real-world analogy: an elevator that always goes to the nearest
    floor with a waiting passenger.  Floors far from the action might
    wait a very long time.
    """

    def simulate(self, requests: Sequence[int], *, head: int) -> Trace:
        """Visit requests nearest-first from the current head."""
        arm = _Head(head)
        pending = set(range(len(requests)))
        while pending:
            nearest = min(pending, key=lambda i: (seek_distance(requests[i], arm.position), i))
            pending.remove(nearest)
            arm.move(requests[nearest], served_index=nearest)
        return arm.trace()


class SCANPolicy:
    """SCAN (elevator algorithm) — sweep one direction, then reverse.

    The arm services everything ahead of it, then turns around once and
    services the rest.  With ``use_edge`` the arm first rides on to the
    disk edge before turning, which is how the textbook algorithm
    behaves; without it, SCAN turns at the last request like LOOK.

    Args:
        direction: Initial sweep direction.
        disk_max: Highest track number on the disk.
        use_edge: Visit the boundary track before reversing.

    """

    def __init__(
        self, *, direction: Direction = Direction.UP, disk_max: int = 199, use_edge: bool = True
    ) -> None:
        """Create a SCAN policy with an initial direction."""
        self._direction = Direction(direction)
        self._disk_max = disk_max
        self._use_edge = use_edge

    def simulate(self, requests: Sequence[int], *, head: int) -> Trace:
        """Return the SCAN trace."""
        arm = _Head(head)
        ahead, behind = _partition(requests, head, self._direction)
        arm.service(ahead)
        if behind:
            edge = self._direction.boundary(self._disk_max)
            if self._use_edge and arm.position != edge:
                arm.move(edge)
            arm.service(_sweep_order(behind, self._direction.opposite))
        return arm.trace()


class CSCANPolicy:
    """Circular SCAN — sweep one direction, jump back, sweep again.

    Unlike SCAN, C-SCAN only services requests while moving in one
    direction.  After reaching the edge the arm jumps to the opposite
    edge and sweeps the same way again.  Requests near either end of the
    disk wait about the same time.

    The jump is always recorded as a step.  ``count_jump`` decides
    whether it is charged as ``disk_max`` tracks of movement or as zero
    (an idealised instantaneous return).

    Args:
        direction: Sweep direction.
        disk_max: Highest track number on the disk.
        count_jump: Charge the wraparound jump as head movement.

    """

    def __init__(
        self, *, direction: Direction = Direction.UP, disk_max: int = 199, count_jump: bool = False
    ) -> None:
        """Create a C-SCAN policy with sweep direction."""
        self._direction = Direction(direction)
        self._disk_max = disk_max
        self._count_jump = count_jump

    def simulate(self, requests: Sequence[int], *, head: int) -> Trace:
        """Return the C-SCAN trace."""
        arm = _Head(head)
        ahead, behind = _partition(requests, head, self._direction)
        arm.service(ahead)
        if behind:
            edge = self._direction.boundary(self._disk_max)
            if arm.position != edge:
                arm.move(edge)
            arm.move(self._direction.opposite.boundary(self._disk_max), charged=self._count_jump)
            arm.service(_sweep_order(behind, self._direction))
        return arm.trace()


class LOOKPolicy:
    """LOOK — SCAN that only goes as far as the last request.

    The arm never visits an edge unless a request sits there, so no
    non-serving steps are produced.

    Args:
        direction: Initial sweep direction.

    """

    def __init__(self, *, direction: Direction = Direction.UP) -> None:
        """Create a LOOK policy with an initial direction."""
        self._direction = Direction(direction)

    def simulate(self, requests: Sequence[int], *, head: int) -> Trace:
        """Return the LOOK trace."""
        arm = _Head(head)
        ahead, behind = _partition(requests, head, self._direction)
        arm.service(ahead)
        arm.service(_sweep_order(behind, self._direction.opposite))
        return arm.trace()


class CLOOKPolicy:
    """Circular LOOK — C-SCAN that jumps to the extreme request.

    After the first sweep the arm jumps straight to the farthest waiting
    request on the other side (the lowest one when sweeping up) and
    sweeps the same direction again.  The jump is recorded as its own
    non-serving step, charged like any other seek; the request it lands
    on is then serviced with a zero-distance step.

    Args:
        direction: Sweep direction.

    """

    def __init__(self, *, direction: Direction = Direction.UP) -> None:
        """Create a C-LOOK policy with sweep direction."""
        self._direction = Direction(direction)

    def simulate(self, requests: Sequence[int], *, head: int) -> Trace:
        """Return the C-LOOK trace."""
        arm = _Head(head)
        ahead, behind = _partition(requests, head, self._direction)
        arm.service(ahead)
        if behind:
            wrapped = _sweep_order(behind, self._direction)
            arm.move(wrapped[0][1])
            arm.service(wrapped)
        return arm.trace()


# -- Functional entry points --------------------------------------------------


def simulate_fcfs(requests: Sequence[int], head: int) -> Trace:
    """Simulate First Come, First Served."""
    return FCFSPolicy().simulate(requests, head=head)


def simulate_sstf(requests: Sequence[int], head: int) -> Trace:
    """Simulate Shortest Seek Time First."""
    return SSTFPolicy().simulate(requests, head=head)


def simulate_scan(
    requests: Sequence[int],
    head: int,
    disk_max: int,
    direction: Direction = Direction.UP,
    use_edge: bool = True,  # noqa: FBT001, FBT002
) -> Trace:
    """Simulate SCAN."""
    policy = SCANPolicy(direction=direction, disk_max=disk_max, use_edge=use_edge)
    return policy.simulate(requests, head=head)


def simulate_cscan(
    requests: Sequence[int],
    head: int,
    disk_max: int,
    direction: Direction = Direction.UP,
    count_jump: bool = False,  # noqa: FBT001, FBT002
) -> Trace:
    """Simulate C-SCAN."""
    policy = CSCANPolicy(direction=direction, disk_max=disk_max, count_jump=count_jump)
    return policy.simulate(requests, head=head)


def simulate_look(requests: Sequence[int], head: int, direction: Direction = Direction.UP) -> Trace:
    """Simulate LOOK."""
    return LOOKPolicy(direction=direction).simulate(requests, head=head)


def simulate_clook(
    requests: Sequence[int], head: int, direction: Direction = Direction.UP
) -> Trace:
    """Simulate C-LOOK."""
    return CLOOKPolicy(direction=direction).simulate(requests, head=head)
