# graphessentials

Sparse graph building blocks and graph algorithms in plain Python, with no
third-party dependencies.

## Installing

```
pip install .
```

## Modules

### Sparse formats: `graphessentials.formats`

- `Coo` holds parallel lists: `row_indices`, `column_indices` and `nonzero_values`. If the lists are left empty, they are allocated as zeros of length `number_of_nonzeros`.
- `Csr` holds `row_offsets`, `column_indices` and `nonzero_values`.
- `Csr.from_coo(coo)` converts a `Coo` to a `Csr`. It keeps duplicates and keeps the entry order within each row. A row index out of range raises `IndexError`.
- `Csr.write_binary(path)` writes a binary file. The file holds three sizes (rows, columns, nonzeros), then the offsets, then the columns as 32-bit integers, then the values as 32-bit floats.
- `Csr.read_binary(path)` reads such a file back. A truncated file raises `ValueError`.

### Matrix Market input: `graphessentials.matrix_market`

- `MatrixMarket().load(path)` reads a coordinate `.mtx` file into a 0-based `Coo`.
  - It accepts `real`, `integer` and `pattern` data. Pattern entries get the value `1.0`.
  - In `symmetric` files, each off-diagonal entry is mirrored.
  - After loading, the instance records `filename`, `dataset`, `code`, `format`, `data` and `scheme`.
- `read_banner(stream)` parses the banner line into a `TypeCode`.
- `read_size(stream)` skips comment lines and returns `(rows, columns, nonzeros)`.
- Every failure raises `MatrixMarketError`. Its `code` attribute is one of the module's error constants, such as `PREMATURE_EOF` or `UNSUPPORTED_TYPE`. Complex data is rejected.

### Graphs: `graphessentials.graph` and `graphessentials.properties`

- `from_csr(rows, columns, row_offsets, column_indices, values, views=View.CSR)` builds a `Graph`.
  - The `views` argument takes any combination of `View.CSR`, `View.CSC` and `View.COO`.
  - Requesting CSR and CSC together raises `NotImplementedError`.
- Each view (`CsrView`, `CscView`, `CooView`) offers `number_of_neighbors`, `source_vertex`, `destination_vertex`, `starting_edge`, `edge` and `edge_weight`.
- `Graph.view(kind)` returns one view and raises `KeyError` when it is absent.
- `Graph.contains(kind)` tells whether a view is present.
- `Graph` itself answers the same queries through its first available view, in the order CSR, CSC, COO.
- `set_view`, `unset_view`, `has_view` and `toggle_view` manipulate `View` flags.
- The module also defines `GraphProperties`, `VertexPair` and `EdgePair`.

### Frontiers and operators: `graphessentials.frontier` and `graphessentials.operators`

- `Frontier` is a growable list of active elements. Its capacity is kept separate from its length.
  - Methods: `push_back`, `fill`, `sequence`, `reserve` (scaled by `resizing_factor`), `sort` (`SortOrder.ASCENDING` or `SortOrder.DESCENDING`) and `is_empty`.
  - It also supports indexing and iteration.
- `advance(graph, op, input_frontier, output_frontier, ...)` calls `op(src, dst, edge, weight)` for every neighbour of every valid input vertex.
  - With `AdvanceIOType.GRAPH` as input type, it visits every vertex of the graph.
  - It writes one output slot per visited edge: the neighbour, or `INVALID_VERTEX` when `op` returned false.
  - With `AdvanceIOType.NONE` as output type, it writes nothing.
  - `AdvanceDirection.FORWARD` uses the CSR view. `BACKWARD` uses the CSC view. `OPTIMIZED` raises `NotImplementedError`.
  - Load balancing accepts `MERGE_PATH`, `THREAD_MAPPED` and `BLOCK_MAPPED`, which all do the same sequential work. Other values raise `NotImplementedError`.
- `parallel_for(graph, op, kind)` calls `op` on every vertex index (`ParallelForEach.VERTEX`) or on every edge index (any other kind).

### Algorithms

- `graphessentials.bc`: betweenness centrality.
  - `run(graph, source, bc_values)` adds the halved dependencies of one source to `bc_values`.
  - `run_all(graph)` runs every source concurrently through `batch.execute`. It returns a `BcResult(values, elapsed)`.
  - Both need a CSR view.
- `graphessentials.geo`: fills in unknown (NaN) `Coordinates` over a number of passes.
  - `run(graph, coordinates, total_iterations, spatial_iterations=1000)` places each unknown vertex using its known neighbours:
    - one neighbour: at that neighbour's location;
    - two neighbours: at their spherical `midpoint`;
    - more than two: at their `spatial_median`.
  - Helpers: `radians`, `degrees`, `mean` and `haversine` (kilometres by default).
- `graphessentials.reference`: sequential reference algorithms.
  - `bfs`, `sssp`, `color` and `ppr` each return a `ReferenceRun(values, elapsed)`.
  - `count_mismatches`, `count_close_mismatches` and `count_color_conflicts` check results.

### Utilities

- `graphessentials.search`: binary searches `execute`, `lower_bound`, `upper_bound` and `rightmost`.
- `graphessentials.convert`: `offsets_to_indices` and `indices_to_offsets`.
- `graphessentials.random`: `minstd(index)` and `uniform_distribution(begin, end)`, a deterministic minimal-standard generator.
- `graphessentials.filepath`: `extract_filename`, `extract_dataset`, `is_market` and `is_binary_csr`.
- `graphessentials.timing`: `Timer`, a millisecond stopwatch usable as a context manager, and `RunLog`, which collects per-run times.
- `graphessentials.batch`: `execute(job, number_of_jobs)` runs `job(j)` in threads and returns the sum of the results.

## Example

```python
from graphessentials.formats import Csr
from graphessentials.matrix_market import MatrixMarket
from graphessentials import reference

coo = MatrixMarket().load("graph.mtx")
csr = Csr.from_coo(coo)
result = reference.sssp(csr, 0)
print(result.values, result.elapsed)
```

## What it does not do

- There is no command-line program. Everything is used as a library.
- All work runs in-process on the CPU. The load-balancing and direction options only select views or raise errors. They do not change how the work is scheduled.
- `FilterAlgorithm` and `UniquifyAlgorithm` are enumerations only. There are no filter or uniquify operators.
- Matrix Market files are read, never written. Dense array files and complex data are not supported. Skew-symmetric and Hermitian files are not expanded.

## Running the tests

```
pip install .[test]
pytest
```