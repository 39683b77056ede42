"""Building blocks for 2D games: shapes, meshes, paths, buffers, spatial lookup and resources."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "objects",
    "jump_points",
    "path",
    "dynamic_buffer",
    "static_buffer",
    "spatial_index",
    "frame_time",
    "utility",
    "resource_manager",
]