"""Road network graphs: loading, extent, map projection and shortest-path lengths."""

__version__ = "0.1.0"
__all__ = ["__version__"]