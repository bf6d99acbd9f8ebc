# polymesh

Read a two-dimensional polygonal mesh from three CSV files, check its edges
and polygons, and write its points and edges as ASCII UCD (`.inp`) files
that ParaView can open.

## Input files

The mesh is described by three files in one directory. Each has one header
line, which is skipped; fields are separated by semicolons (spaces work too),
and blank lines are ignored.

| File          | Fields on each line                                     |
|---------------|---------------------------------------------------------|
| `Cell0Ds.csv` | `Id;Marker;X;Y`                                         |
| `Cell1Ds.csv` | `Id;Marker;Origin;End`                                  |
| `Cell2Ds.csv` | `Id;Marker;NumVertices;Vertices...;NumEdges;Edges...`   |

Point and edge ids must run from 0 to the number of lines minus one.
Points and edges with a non-zero marker are grouped by marker, in the order
they were read; the polygon marker is read and discarded. A missing file, an
empty `Cell0Ds.csv` or `Cell1Ds.csv`, a field that is not a non-negative
integer where one is expected, a coordinate that is not a number, a line with
too few fields or an id out of range raises `MeshError`.

## Command line

```
polymesh [DIRECTORY] [-o OUTPUT_DIR]
```

`DIRECTORY` holds the three CSV files and defaults to the current directory;
`OUTPUT_DIR` (default: the current directory) receives the output. The
command:

1. loads the mesh and prints the result of the two checks: whether any
   polygon has an edge shorter than `1e-16`, and whether any polygon has an
   area below `1e-12`;
2. prints, for each marker in increasing order, the ids of the points and of
   the edges that carry it;
3. writes `Cell0Ds.inp` (every point as a point cell) and `Cell1Ds.inp`
   (the points and the edges as line cells).

The exit status is 1 when the mesh cannot be read or the output cannot be
written, and 0 otherwise. A failed check is reported on standard output but
does not change the exit status.

## Library

```python
from polymesh.mesh import MeshError, PolygonalMesh, import_mesh

try:
    mesh = import_mesh(".")          # loads, then prints the check results
except MeshError as error:
    print(f"bad mesh: {error}")
```

`PolygonalMesh.from_directory(directory)` loads the three files without
printing anything. A mesh can also be filled step by step with
`load_cell0ds`, `load_cell1ds` and `load_cell2ds`, each taking a file path.

A loaded `PolygonalMesh` holds:

- `cell0ds_id`, `cell0ds_coordinates` (`(x, y, 0.0)` triples indexed by
  point id) and `cell0d_markers`;
- `cell1ds_id`, `cell1ds_extrema` (`(origin, end)` pairs indexed by edge id)
  and `cell1d_markers`;
- `cell2ds_id`, `cell2ds_vertices` and `cell2ds_edges`;
- `num_cell0ds`, `num_cell1ds` and `num_cell2ds`.

The checks return the first offender instead of raising:
`check_edge_lengths()` gives `(polygon index, edge id)` of the first
zero-length edge or `None`; `check_areas()` gives the index of the first
polygon of zero area or `None`. Areas come from the shoelace formula, so
self-overlapping polygons are not handled.

## UCD export

`polymesh.ucd` writes ASCII UCD files on its own. Points are `(x, y, z)`
triples; ids in the file start at 1 and numbers are written as `%.16e`.

- `export_points(path, points, point_properties=(), materials=None)` — every
  point as a point cell; the properties are attached to those cells.
- `export_segments(path, points, segments, ...)` — `(origin, end)` pairs as
  line cells.
- `export_polygons(path, points, polygons, ...)` — triangles and
  quadrilaterals only.
- `export_polyhedra(path, points, polyhedra, ...)` — tetrahedra only.

Other vertex counts raise `ValueError`. Per-point and per-cell data are given
as `UCDProperty(label, unit_label, num_components, data)`, with
`num_components` values per entity laid out entity after entity. Material ids
are used only when there is one per cell; otherwise every cell gets 0. The
lower-level `create_*_cells` functions, `UCDCell`, `CellType` and
`write_ucd_ascii` are available for building files by hand.

## Limits

The package only writes UCD files; it does not read them. The command
exports points and edges, not polygons, and no model data is written.

## Tests

```
pip install -e ".[test]"
pytest
```