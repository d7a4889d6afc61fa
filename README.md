# lrusim

`lrusim` reads a BYU-format binary memory address trace and simulates LRU
page replacement. A single pass over the trace gives the number of page
faults for every frame count from 1 up to a maximum.

## Installation

```
pip install .
```

## Command line

```
lrusim TRACE_FILE FRAME_SIZE > results.csv
```

`FRAME_SIZE` selects the page geometry:

| Option | Page size | Offset bits | Max frames |
|--------|-----------|-------------|------------|
| 1      | 512 bytes | 9           | 8192       |
| 2      | 1 KB      | 10          | 4096       |
| 3      | 2 KB      | 11          | 2048       |
| 4      | 4 KB      | 12          | 1024       |

The command reads `FRAME_SIZE` the way `atoi` does: it uses the leading
digits and ignores anything after them. The page number of each access is
the record's address shifted right by the offset bits.

Standard error receives the chosen geometry, a progress line every 100000
accesses and the total number of accesses. Standard output receives the CSV:

```
Total Accesses:,<n>
Frames,Missees,Miss Rate
1,<faults>,<rate>
2,<faults>,<rate>
...
```

The command exits with status 1 in these cases, after printing a message to
standard error:

- it is not given exactly two arguments (it prints the usage text);
- the trace file cannot be opened;
- the option is not between 1 and 4;
- the trace ends in a partial record.

## Library use

```python
from lrusim.trace import read_trace
from lrusim.simulator import geometry_for_option, simulate

geometry = geometry_for_option(4)
with open("trace.byutr", "rb") as stream:
    result = simulate(read_trace(stream), geometry)

print(result.faults_for(64), result.miss_rate(64))
print(result.to_csv())
```

### `lrusim.trace`

- `TraceRecord` is a frozen dataclass with the fields `addr`, `reqtype`,
  `size`, `attr`, `proc` and `time`. On disk a record is 12 little-endian
  bytes (`RECORD_SIZE`). `TraceRecord.from_bytes(data)` decodes a record and
  `to_bytes()` encodes one. Both raise `ValueError` on a wrong length or a
  field that is out of range. The `request_type` property returns the
  `RequestType` for `reqtype`.
- `RequestType` is an `IntEnum` of the bus request codes, from `FETCH`
  through `SMIACK`.
- `read_trace(stream)` yields the records of a binary stream. It raises
  `ValueError` if the stream ends in a partial record.

### `lrusim.pagequeue`

`PageQueue(max_size)` is the LRU stack on its own. `access(page_num)`
returns the page's depth from the most recently used end (0 for the most
recent) and moves the page to that end. For a page that is not in the queue
it returns `-1` and inserts the page. If the queue is then over capacity,
the least recently used page is evicted. `len()` gives the number of pages
held. Iteration runs from least to most recently used. `format()` returns
the page numbers in that order, separated by spaces.

### `lrusim.simulator`

- `geometry_for_option(option)` returns the `FrameGeometry` (`option`,
  `offset_bits`, `max_frames`) for options 1 to 4. It raises `ValueError`
  for any other option.
- `simulate(records, geometry, progress=None)` runs the simulation and
  returns a `SimulationResult`. If `progress` is a text stream, a progress
  line is written to it every 100000 accesses.
- `SimulationResult` has `total_accesses`, `faults` (the entry at index
  `i` is the count for `i + 1` frames), `max_frames`, `faults_for(frames)`,
  `miss_rate(frames)` and `to_csv()`. `miss_rate` is NaN for an empty
  trace.
- `main(argv=None)` is the command's entry point and returns the exit
  status.

## Scope

Only LRU replacement is simulated. There is no other replacement policy and
no tool to write trace files. `TraceRecord.to_bytes` can be used to build
traces by hand.

## Running the tests

```
pip install .[test]
pytest
```