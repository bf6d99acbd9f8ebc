import pytest

from polymesh.ucd import (
    CellType,
    UCDCell,
    UCDProperty,
    create_line_cells,
    create_point_cells,
    create_polygon_cells,
    create_polyhedra_cells,
    export_points,
    export_polygons,
    export_polyhedra,
    export_segments,
    write_ucd_ascii,
)

POINTS = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)]


def _read(path):
    lines = path.read_text(encoding="utf-8").splitlines()
    header = [int(v) for v in lines[0].split()]
    n_points, n_cells = header[0], header[1]
    points = []
    for line in lines[1 : 1 + n_points]:
        fields = line.split()
        points.append((int(fields[0]), tuple(float(v) for v in fields[1:])))
    cells = []
    for line in lines[1 + n_points : 1 + n_points + n_cells]:
        fields = line.split()
        cells.append((int(fields[0]), int(fields[1]), fields[2], [int(v) for v in fields[3:]]))
    rest = lines[1 + n_points + n_cells :]
    return header, points, cells, rest


@pytest.mark.parametrize(
    "cell_type, label",
    [
        (CellType.POINT, "pt"),
        (CellType.LINE, "line"),
        (CellType.TRIANGLE, "tri"),
        (CellType.QUADRILATERAL, "quad"),
        (CellType.HEXAHEDRON, "hex"),
        (CellType.PRISM, "prism"),
        (CellType.TETRAHEDRON, "tet"),
        (CellType.PYRAMID, "pyr"),
    ],
)
def test_cell_type_labels(cell_type, label):
    assert cell_type.label() == label
    assert UCDCell(cell_type, (0,), 0).label() == label


def test_unknown_type_has_no_label():
    with pytest.raises(ValueError):
        CellType.UNKNOWN.label()
    with pytest.raises(ValueError):
        UCDCell(CellType.UNKNOWN, (), 0).label()


def test_point_cells_use_matching_materials():
    cells = create_point_cells(POINTS[:3], [5, 6, 7])
    assert [c.point_ids for c in cells] == [(0,), (1,), (2,)]
    assert [c.material_id for c in cells] == [5, 6, 7]
    assert all(c.type is CellType.POINT for c in cells)


def test_point_cells_ignore_mismatched_materials():
    cells = create_point_cells(POINTS, [5, 6])
    assert [c.material_id for c in cells] == [0, 0, 0, 0]
    assert [c.material_id for c in create_point_cells(POINTS)] == [0, 0, 0, 0]


def test_line_cells():
    cells = create_line_cells([(0, 1), (1, 2)], [3, 4])
    assert [c.point_ids for c in cells] == [(0, 1), (1, 2)]
    assert [c.material_id for c in cells] == [3, 4]
    assert all(c.type is CellType.LINE for c in cells)
    assert [c.material_id for c in create_line_cells([(0, 1), (1, 2)], [3])] == [0, 0]


def test_polygon_cells_types():
    cells = create_polygon_cells([[0, 1, 2], [0, 1, 2, 3]], [1, 2])
    assert [c.type for c in cells] == [CellType.TRIANGLE, CellType.QUADRILATERAL]
    assert cells[1].point_ids == (0, 1, 2, 3)
    assert [c.material_id for c in cells] == [1, 2]


def test_polygon_cells_reject_other_sizes():
    with pytest.raises(ValueError, match="not supported"):
        create_polygon_cells([[0, 1, 2, 3, 4]])
    with pytest.raises(ValueError):
        create_polygon_cells([[0, 1]])


def test_polyhedra_cells():
    cells = create_polyhedra_cells([[0, 1, 2, 3]])
    assert cells[0].type is CellType.TETRAHEDRON
    assert cells[0].point_ids == (0, 1, 2, 3)
    with pytest.raises(ValueError):
        create_polyhedra_cells([[0, 1, 2]])


def test_export_segments_round_trip(tmp_path):
    path = tmp_path / "segments.inp"
    segments = [(0, 1), (1, 2), (2, 3), (3, 0)]
    export_segments(path, POINTS, segments)
    header, points, cells, rest = _read(path)
    assert header == [4, 4, 0, 0, 0]
    assert [p for _, p in points] == POINTS
    assert [i for i, _ in points] == [1, 2, 3, 4]
    assert [c[2] for c in cells] == ["line"] * 4
    assert [[v - 1 for v in c[3]] for c in cells] == [list(s) for s in segments]
    assert rest == []


def test_coordinates_are_scientific_with_sixteen_digits(tmp_path):
    path = tmp_path / "p.inp"
    export_segments(path, [(1.0, 0.5, 0.0), (2.0, 0.0, 0.0)], [(0, 1)])
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[1] == "1 1.0000000000000000e+00 5.0000000000000000e-01 0.0000000000000000e+00"
    assert lines[3] == "1 0 line 1 2"


def test_coordinates_survive_full_precision(tmp_path):
    path = tmp_path / "precise.inp"
    pts = [(0.1, 1.0 / 3.0, -2.5e-7), (123456.789, -0.0001, 1e10)]
    export_segments(path, pts, [(0, 1)])
    _, points, _, _ = _read(path)
    for (_, read), original in zip(points, pts):
        for a, b in zip(read, original):
            assert a == pytest.approx(b, rel=1e-15)


def test_export_points_writes_properties_as_cell_properties(tmp_path):
    path = tmp_path / "points.inp"
    prop = UCDProperty("temperature", "K", 1, [10.0, 20.0, 30.0, 40.0])
    export_points(path, POINTS, [prop], [1, 2, 3, 4])
    header, _, cells, rest = _read(path)
    assert header == [4, 4, 0, 1, 0]
    assert [c[1] for c in cells] == [1, 2, 3, 4]
    assert [c[2] for c in cells] == ["pt"] * 4
    assert rest[0].split() == ["1", "1"]
    assert rest[1] == "temperature, K"
    values = [float(line.split()[1]) for line in rest[2:]]
    assert values == [10.0, 20.0, 30.0, 40.0]


def test_point_properties_with_several_components(tmp_path):
    path = tmp_path / "props.inp"
    velocity = UCDProperty("velocity", "m/s", 2, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0])
    pressure = UCDProperty("pressure", "Pa", 1, [0.5, 1.5, 2.5, 3.5])
    export_polygons(path, POINTS, [[0, 1, 2, 3]], [velocity, pressure])
    header, _, cells, rest = _read(path)
    assert header == [4, 1, 2, 0, 0]
    assert cells[0][2] == "quad"
    assert rest[0].split() == ["2", "2", "1"]
    assert rest[1:3] == ["velocity, m/s", "pressure, Pa"]
    rows = [line.split() for line in rest[3:]]
    assert [int(r[0]) for r in rows] == [1, 2, 3, 4]
    assert [float(v) for v in rows[1][1:]] == [3.0, 4.0, 1.5]


def test_export_polyhedra(tmp_path):
    path = tmp_path / "tet.inp"
    pts = POINTS[:3] + [(0.0, 0.0, 1.0)]
    export_polyhedra(path, pts, [[0, 1, 2, 3]], materials=[9])
    _, _, cells, _ = _read(path)
    assert cells == [(1, 9, "tet", [1, 2, 3, 4])]


def test_write_ucd_ascii_with_cells_directly(tmp_path):
    path = tmp_path / "direct.inp"
    cells = [UCDCell(CellType.TRIANGLE, (0, 1, 2), 3)]
    cell_prop = UCDProperty("area", "m^2", 1, [0.5])
    write_ucd_ascii(path, POINTS[:3], [], cells, [cell_prop])
    header, _, read_cells, rest = _read(path)
    assert header == [3, 1, 0, 1, 0]
    assert read_cells == [(1, 3, "tri", [1, 2, 3])]
    assert float(rest[-1].split()[1]) == 0.5


def test_unwritable_path_raises(tmp_path):
    with pytest.raises(OSError):
        export_segments(tmp_path / "missing" / "x.inp", POINTS, [(0, 1)])