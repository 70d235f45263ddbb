"""Software rasterizer with viewport clipping, a transform pipeline and a small drawing script language."""

__version__ = "0.1.0"