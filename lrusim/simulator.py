"""LRU page-fault simulation over a trace for every frame count."""

from __future__ import annotations

import re
import sys
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO

from lrusim.pagequeue import PageQueue
from lrusim.trace import TraceRecord, read_trace

PROGRESS_INTERVAL = 100000

_USAGE = (
    "usage: {prog} input_byutr_file frame_size\n"
    "\nframe_size:\n\t1: 512 bytes\n\t2: 1KB\n\t3: 2KB\n\t4: 4KB\n"
)


@dataclass(frozen=True)
class FrameGeometry:
    """Page size (as offset bits) and the largest frame count to simulate."""

    option: int
    offset_bits: int
    max_frames: int


_GEOMETRIES = {
    1: FrameGeometry(1, 9, 8192),
    2: FrameGeometry(2, 10, 4096),
    3: FrameGeometry(3, 11, 2048),
    4: FrameGeometry(4, 12, 1024),
}


def geometry_for_option(option: int) -> FrameGeometry:
    """Map a menu option 1-4 to its page geometry."""
    try:
        return _GEOMETRIES[option]
    except KeyError:
        raise ValueError(f"invalid frame size option: {option} (must be 1-4)") from None


@dataclass(frozen=True)
class SimulationResult:
    """Fault counts; faults[i] is the count with i + 1 frames."""

    total_accesses: int
    faults: tuple[int, ...]

    @property
    def max_frames(self) -> int:
        return len(self.faults)

    def faults_for(self, frames: int) -> int:
        if not 1 <= frames <= self.max_frames:
            raise ValueError(f"frame count must be 1-{self.max_frames}")
        return self.faults[frames - 1]

    def miss_rate(self, frames: int) -> float:
        """Fraction of accesses that faulted with the given frame count."""
        misses = self.faults_for(frames)
        if self.total_accesses == 0:
            return float("nan")
        return misses / self.total_accesses

    def to_csv(self) -> str:
        """The results as CSV text."""
        lines = [
            f"Total Accesses:,{self.total_accesses}",
            "Frames,Missees,Miss Rate",
        ]
        lines.extend(
            f"{frames},{misses},{self.miss_rate(frames):f}"
            for frames, misses in enumerate(self.faults, start=1)
        )
        return "\n".join(lines) + "\n"


def simulate(
    records: Iterable[TraceRecord],
    geometry: FrameGeometry,
    progress: TextIO | None = None,
) -> SimulationResult:
    """Run the LRU stack simulation, optionally reporting progress."""
    queue = PageQueue(geometry.max_frames)
    depth_counts: Counter[int] = Counter()
    misses = 0
    accesses = 0
    for record in records:
        page_num = record.addr >> geometry.offset_bits
        accesses += 1
        if progress is not None and accesses % PROGRESS_INTERVAL == 0:
            progress.write(f"{accesses} samples read, last page: {page_num}\r")
        depth = queue.access(page_num)
        if depth == -1:
            misses += 1
        else:
            depth_counts[depth] += 1

    # A hit at depth d faults for every frame count f <= d.
    faults = []
    hits_at_or_beyond = sum(depth_counts.values())
    for frames in range(1, geometry.max_frames + 1):
        hits_at_or_beyond -= depth_counts[frames - 1]
        faults.append(misses + hits_at_or_beyond)
    return SimulationResult(accesses, tuple(faults))


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: simulate a trace file and print CSV results."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write(_USAGE.format(prog="lrusim"))
        return 1
    path, option_text = args
    try:
        trace_file = open(path, "rb")
    except OSError:
        sys.stderr.write(f"cannot open {path} for reading\n")
        return 1
    with trace_file:
        try:
            geometry = geometry_for_option(_atoi(option_text))
        except ValueError:
            sys.stderr.write(
                f"invalid frame size option: {option_text} (must be 1-4)\n"
            )
            return 1
        sys.stderr.write(
            f"Frame size option {geometry.option}: {geometry.offset_bits} offset bits, "
            f"{geometry.max_frames} max frames, algorithm=LRU\n"
        )
        try:
            result = simulate(read_trace(trace_file), geometry, progress=sys.stderr)
        except ValueError as exc:
            sys.stderr.write(f"{path}: {exc}\n")
            return 1
    sys.stderr.write(f"\n{result.total_accesses} total accesses processed\n")
    sys.stdout.write(result.to_csv())
    return 0


if __name__ == "__main__":
    sys.exit(main())