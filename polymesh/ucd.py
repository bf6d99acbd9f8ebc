"""Writing of points, segments, polygons and polyhedra in the ASCII UCD format."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Sequence, Union

PathType = Union[str, "PathLike[str]"]
Point = Sequence[float]

_SEPARATOR = " "


class CellType(enum.Enum):
    """Kinds of cells known to the UCD format."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7

    def label(self) -> str:
        """Return the keyword that names this cell type in a UCD file."""
        try:
            return _LABELS[self]
        except KeyError:
            raise ValueError("Type not supported") from None


_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}


@dataclass(frozen=True)
class UCDProperty:
    """A named quantity attached to every point or every cell.

    ``data`` holds ``num_components`` values per entity, entity after entity.
    """

    label: str
    unit_label: str
    num_components: int
    data: Sequence[float]


@dataclass(frozen=True)
class UCDCell:
    """One cell: its type, the ids of its points and its material id."""

    type: CellType
    point_ids: tuple[int, ...] = field(default_factory=tuple)
    material_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "point_ids", tuple(int(i) for i in self.point_ids))

    def label(self) -> str:
        """Return the UCD keyword of this cell's type."""
        return self.type.label()


def _material(materials: Sequence[int] | None, count: int, index: int) -> int:
    if materials is not None and len(materials) == count:
        return int(materials[index])
    return 0


def create_point_cells(
    points: Sequence[Point], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make one point cell for every point."""
    count = len(points)
    return [
        UCDCell(CellType.POINT, (index,), _material(materials, count, index))
        for index in range(count)
    ]


def create_line_cells(
    segments: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make one line cell for every (origin, end) pair of point ids."""
    count = len(segments)
    return [
        UCDCell(
            CellType.LINE,
            (int(segment[0]), int(segment[1])),
            _material(materials, count, index),
        )
        for index, segment in enumerate(segments)
    ]


def create_polygon_cells(
    polygons: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make triangle or quadrilateral cells from lists of vertex ids."""
    count = len(polygons)
    cells = []
    for index, vertices in enumerate(polygons):
        if len(vertices) == 3:
            cell_type = CellType.TRIANGLE
        elif len(vertices) == 4:
            cell_type = CellType.QUADRILATERAL
        else:
            raise ValueError("Polygon type not supported")
        cells.append(UCDCell(cell_type, tuple(vertices), _material(materials, count, index)))
    return cells


def create_polyhedra_cells(
    polyhedra: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make tetrahedron cells from lists of four vertex ids."""
    count = len(polyhedra)
    cells = []
    for index, vertices in enumerate(polyhedra):
        if len(vertices) != 4:
            raise ValueError("Polygon type not supported")
        cells.append(
            UCDCell(CellType.TETRAHEDRON, tuple(vertices), _material(materials, count, index))
        )
    return cells


def _scientific(value: float) -> str:
    return "%.16e" % float(value)


def _property_lines(properties: Sequence[UCDProperty], count: int) -> Iterable[str]:
    if not properties:
        return
    yield _SEPARATOR.join(
        [str(len(properties))] + [str(prop.num_components) for prop in properties]
    )
    for prop in properties:
        yield f"{prop.label},{_SEPARATOR}{prop.unit_label}"
    for entity in range(count):
        fields = [str(entity + 1)]
        for prop in properties:
            start = prop.num_components * entity
            fields.extend(
                _scientific(prop.data[start + component])
                for component in range(prop.num_components)
            )
        yield _SEPARATOR.join(fields)


def _ucd_lines(
    points: Sequence[Point],
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
) -> Iterable[str]:
    # the trailing zero states that no model data follows
    yield _SEPARATOR.join(
        str(n) for n in (len(points), len(cells), len(point_properties), len(cell_properties), 0)
    )
    for index, (x, y, z) in enumerate(points, start=1):
        yield _SEPARATOR.join([str(index), _scientific(x), _scientific(y), _scientific(z)])
    for index, cell in enumerate(cells, start=1):
        yield _SEPARATOR.join(
            [str(index), str(cell.material_id), cell.label()]
            + [str(point_id + 1) for point_id in cell.point_ids]
        )
    yield from _property_lines(point_properties, len(points))
    yield from _property_lines(cell_properties, len(cells))


def write_ucd_ascii(
    file_path: PathType,
    points: Sequence[Point],
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
) -> None:
    """Write points, cells and their properties to an ASCII UCD file.

    Every point is an (x, y, z) triple; ids in the file start at 1.
    """
    lines = list(_ucd_lines(points, point_properties, cells, cell_properties))
    with open(file_path, "w", encoding="utf-8") as handle:
        handle.writelines(line + "\n" for line in lines)


def export_points(
    file_path: PathType,
    points: Sequence[Point],
    point_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Write every point as a point cell; the properties belong to those cells."""
    write_ucd_ascii(
        file_path, points, (), create_point_cells(points, materials), point_properties
    )


def export_segments(
    file_path: PathType,
    points: Sequence[Point],
    segments: Sequence[Sequence[int]],
    point_properties: Sequence[UCDProperty] = (),
    segment_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Write points and the segments joining them."""
    write_ucd_ascii(
        file_path,
        points,
        point_properties,
        create_line_cells(segments, materials),
        segment_properties,
    )


def export_polygons(
    file_path: PathType,
    points: Sequence[Point],
    polygons: Sequence[Sequence[int]],
    point_properties: Sequence[UCDProperty] = (),
    polygon_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Write points and triangular or quadrilateral polygons."""
    write_ucd_ascii(
        file_path,
        points,
        point_properties,
        create_polygon_cells(polygons, materials),
        polygon_properties,
    )


def export_polyhedra(
    file_path: PathType,
    points: Sequence[Point],
    polyhedra: Sequence[Sequence[int]],
    point_properties: Sequence[UCDProperty] = (),
    polyhedra_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Write points and tetrahedra."""
    write_ucd_ascii(
        file_path,
        points,
        point_properties,
        create_polyhedra_cells(polyhedra, materials),
        polyhedra_properties,
    )