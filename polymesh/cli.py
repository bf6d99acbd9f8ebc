"""Command that loads a mesh and exports its points and edges as UCD files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Mapping, Sequence

from polymesh.mesh import MeshError, import_mesh
from polymesh.ucd import export_points, export_segments


def format_markers(markers: Mapping[int, Sequence[int]], kind: str) -> str:
    """Describe each marker, in increasing order, with the ids that carry it."""
    lines = []
    for marker in sorted(markers):
        lines.append(f"Marker value {marker}, {kind} IDs associated to the Marker: ")
        lines.append("".join(f"{item} " for item in markers[marker]))
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="polymesh",
        description="Check a polygonal mesh and export it in the UCD format.",
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="directory holding the Cell*Ds.csv files"
    )
    parser.add_argument(
        "-o", "--output-dir", default=".", help="directory for the exported .inp files"
    )
    args = parser.parse_args(argv)

    try:
        mesh = import_mesh(args.directory)
    except MeshError as exc:
        print(f"Error in the reading of the mesh: {exc}", file=sys.stderr)
        return 1

    print("Markers associated to their points: ")
    text = format_markers(mesh.cell0d_markers, "Point")
    if text:
        print(text)
    print("Markers associated to each segment: ")
    text = format_markers(mesh.cell1d_markers, "segment")
    if text:
        print(text)

    output = Path(args.output_dir)
    try:
        export_points(output / "Cell0Ds.inp", mesh.cell0ds_coordinates)
        export_segments(output / "Cell1Ds.inp", mesh.cell0ds_coordinates, mesh.cell1ds_extrema)
    except OSError as exc:
        print(f"Error in the export of the mesh: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())