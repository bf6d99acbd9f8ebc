"""Read and check two-dimensional polygonal meshes and write them as UCD files."""

__version__ = "1.0.0"
__all__ = ["cli", "mesh", "ucd"]