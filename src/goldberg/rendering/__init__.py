"""Matplotlib previews of generated meshes."""

from goldberg.rendering.static import render_mpl

__all__ = ["render_mpl"]
