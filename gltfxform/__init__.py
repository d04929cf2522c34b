"""glTF node transforms, small 3D math types and vertex index/joint streams."""

__version__ = "0.1.0"
__all__ = ["math", "transform", "vertex_data"]