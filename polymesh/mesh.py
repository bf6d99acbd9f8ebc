"""Polygonal meshes read from the Cell0Ds, Cell1Ds and Cell2Ds CSV files."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Union

PathType = Union[str, "PathLike[str]"]

CELL0DS_FILE = "Cell0Ds.csv"
CELL1DS_FILE = "Cell1Ds.csv"
CELL2DS_FILE = "Cell2Ds.csv"

EDGE_LENGTH_TOLERANCE = 1e-16
AREA_TOLERANCE = 1e-12


class MeshError(Exception):
    """Raised when a mesh file is missing, empty or malformed."""


def _read_rows(path: PathType) -> list[list[str]]:
    """Return the fields of every data line, the header line left out."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise MeshError(f"File '{path}' cannot be opened") from exc
    return [line.replace(";", " ").split() for line in lines[1:] if line.strip()]


def _to_int(token: str, path: PathType) -> int:
    try:
        value = int(token)
    except ValueError:
        raise MeshError(f"Invalid integer '{token}' in '{path}'") from None
    if value < 0:
        raise MeshError(f"Negative value '{token}' in '{path}'")
    return value


def _to_float(token: str, path: PathType) -> float:
    try:
        return float(token)
    except ValueError:
        raise MeshError(f"Invalid number '{token}' in '{path}'") from None


def _take(fields: list[str], count: int, path: PathType) -> list[str]:
    if len(fields) < count:
        raise MeshError(f"Line '{' '.join(fields)}' in '{path}' has too few fields")
    return fields[:count]


@dataclass
class PolygonalMesh:
    """Points, edges and polygons of a two-dimensional mesh.

    Coordinates are (x, y, z) triples with z always zero; edges are
    (origin, end) pairs of point ids.  Markers map a non-zero marker to the
    ids that carry it, in the order they were read.
    """

    cell0ds_id: list[int] = field(default_factory=list)
    cell0ds_coordinates: list[tuple[float, float, float]] = field(default_factory=list)
    cell0d_markers: dict[int, list[int]] = field(default_factory=dict)

    cell1ds_id: list[int] = field(default_factory=list)
    cell1ds_extrema: list[tuple[int, int]] = field(default_factory=list)
    cell1d_markers: dict[int, list[int]] = field(default_factory=dict)

    cell2ds_id: list[int] = field(default_factory=list)
    cell2ds_vertices: list[list[int]] = field(default_factory=list)
    cell2ds_edges: list[list[int]] = field(default_factory=list)

    @property
    def num_cell0ds(self) -> int:
        return len(self.cell0ds_id)

    @property
    def num_cell1ds(self) -> int:
        return len(self.cell1ds_id)

    @property
    def num_cell2ds(self) -> int:
        return len(self.cell2ds_id)

    def load_cell0ds(self, path: PathType) -> None:
        """Read the points: id, marker, x and y on every line."""
        rows = _read_rows(path)
        if not rows:
            raise MeshError("There is no cell 0D")
        ids: list[int] = []
        coordinates = [(0.0, 0.0, 0.0)] * len(rows)
        markers: dict[int, list[int]] = {}
        for fields in rows:
            id_token, marker_token, x_token, y_token = _take(fields, 4, path)
            point_id = _to_int(id_token, path)
            marker = _to_int(marker_token, path)
            if point_id >= len(rows):
                raise MeshError(f"Point id {point_id} out of range in '{path}'")
            coordinates[point_id] = (_to_float(x_token, path), _to_float(y_token, path), 0.0)
            ids.append(point_id)
            if marker != 0:
                markers.setdefault(marker, []).append(point_id)
        self.cell0ds_id = ids
        self.cell0ds_coordinates = coordinates
        self.cell0d_markers = markers

    def load_cell1ds(self, path: PathType) -> None:
        """Read the edges: id, marker, origin and end on every line."""
        rows = _read_rows(path)
        if not rows:
            raise MeshError("There is no cell 1D")
        ids: list[int] = []
        extrema = [(0, 0)] * len(rows)
        markers: dict[int, list[int]] = {}
        for fields in rows:
            id_token, marker_token, origin_token, end_token = _take(fields, 4, path)
            edge_id = _to_int(id_token, path)
            marker = _to_int(marker_token, path)
            if edge_id >= len(rows):
                raise MeshError(f"Edge id {edge_id} out of range in '{path}'")
            extrema[edge_id] = (_to_int(origin_token, path), _to_int(end_token, path))
            ids.append(edge_id)
            if marker != 0:
                markers.setdefault(marker, []).append(edge_id)
        self.cell1ds_id = ids
        self.cell1ds_extrema = extrema
        self.cell1d_markers = markers

    def load_cell2ds(self, path: PathType) -> None:
        """Read the polygons: id, marker, vertex count, vertices, edge count, edges."""
        ids: list[int] = []
        vertices: list[list[int]] = []
        edges: list[list[int]] = []
        for fields in _read_rows(path):
            tokens = iter(fields)

            def next_int() -> int:
                try:
                    return _to_int(next(tokens), path)
                except StopIteration:
                    raise MeshError(
                        f"Line '{' '.join(fields)}' in '{path}' has too few fields"
                    ) from None

            ids.append(next_int())
            next_int()  # every polygon carries marker 0
            vertices.append([next_int() for _ in range(next_int())])
            edges.append([next_int() for _ in range(next_int())])
        self.cell2ds_id = ids
        self.cell2ds_vertices = vertices
        self.cell2ds_edges = edges

    def check_edge_lengths(self) -> tuple[int, int] | None:
        """Return (polygon index, edge id) of the first zero-length edge, or None."""
        for polygon, edge_ids in enumerate(self.cell2ds_edges):
            for edge_id in edge_ids:
                origin, end = self.cell1ds_extrema[edge_id]
                x_origin, y_origin, _ = self.cell0ds_coordinates[origin]
                x_end, y_end, _ = self.cell0ds_coordinates[end]
                if math.hypot(x_origin - x_end, y_origin - y_end) < EDGE_LENGTH_TOLERANCE:
                    return polygon, edge_id
        return None

    def check_areas(self) -> int | None:
        """Return the index of the first polygon with zero area, or None.

        The shoelace formula is used, so polygons must not overlap themselves.
        """
        for polygon, vertex_ids in enumerate(self.cell2ds_vertices):
            area = 0.0
            for first, second in zip(vertex_ids, vertex_ids[1:] + vertex_ids[:1]):
                x1, y1, _ = self.cell0ds_coordinates[first]
                x2, y2, _ = self.cell0ds_coordinates[second]
                area += x1 * y2 - x2 * y1
            if 0.5 * abs(area) < AREA_TOLERANCE:
                return polygon
        return None

    @classmethod
    def from_directory(cls, directory: PathType) -> "PolygonalMesh":
        """Load a mesh from the three CSV files in ``directory``."""
        base = Path(directory)
        mesh = cls()
        mesh.load_cell0ds(base / CELL0DS_FILE)
        mesh.load_cell1ds(base / CELL1DS_FILE)
        mesh.load_cell2ds(base / CELL2DS_FILE)
        return mesh


def import_mesh(directory: PathType) -> PolygonalMesh:
    """Load a mesh, print the outcome of the edge and area checks, return it."""
    mesh = PolygonalMesh.from_directory(directory)

    bad_edge = mesh.check_edge_lengths()
    if bad_edge is None:
        print("There are no length zero edges ")
    else:
        polygon, edge_id = bad_edge
        print(f"There is an error at polygon with ID {polygon}, edge with ID {edge_id} has 0 length")

    bad_polygon = mesh.check_areas()
    if bad_polygon is None:
        print("There are no zero area polygons")
    else:
        print(f"There is an error at polygon with ID {bad_polygon}: it has zero area")

    return mesh