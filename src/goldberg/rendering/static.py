"""Static matplotlib preview: :func:`render_mpl` entry point."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.colors import to_rgb
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from goldberg.model import TriangleMesh

#: A colour accepted by :func:`render_mpl`: any matplotlib colour
#: string (CSS name or hex) or an RGB tuple with values in ``[0, 1]``.
Colour = str | tuple[float, float, float]


def _shaded_colours(
    mesh: TriangleMesh,
    base: tuple[float, float, float],
    light: np.ndarray,
) -> np.ndarray:
    """Lambert-shade *base* per triangle against a *light* direction."""
    tris = mesh.vertices[mesh.triangles]
    normals = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
    normals /= np.maximum(np.linalg.norm(normals, axis=1, keepdims=True), 1e-12)
    intensity = 0.35 + 0.65 * np.clip(normals @ light, 0.0, 1.0)
    return np.clip(np.outer(intensity, base), 0.0, 1.0)


def _light_direction(elevation: float, azimuth: float) -> np.ndarray:
    """Unit vector towards a camera at (*elevation*, *azimuth*) degrees."""
    el, az = np.radians(elevation), np.radians(azimuth)
    return np.array([
        np.cos(el) * np.cos(az),
        np.cos(el) * np.sin(az),
        np.sin(el),
    ])


def _draw_mesh(
    ax: Axes,
    mesh: TriangleMesh,
    *,
    face_colour: Colour,
    edge_colour: Colour,
    edge_width: float,
    elevation: float,
    azimuth: float,
) -> None:
    light = _light_direction(elevation, azimuth)
    collection = Poly3DCollection(
        mesh.vertices[mesh.triangles],
        facecolors=_shaded_colours(mesh, to_rgb(face_colour), light),
        edgecolors=to_rgb(edge_colour),
        linewidths=edge_width,
    )
    ax.add_collection3d(collection)

    extent = float(np.max(np.abs(mesh.vertices))) if mesh.n_vertices else 1.0
    for setter in (ax.set_xlim, ax.set_ylim, ax.set_zlim):
        setter(-extent, extent)
    ax.set_box_aspect((1, 1, 1))
    ax.view_init(elev=elevation, azim=azimuth)
    ax.set_axis_off()


def render_mpl(
    mesh: TriangleMesh,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 150,
    face_colour: Colour = "#9ecae1",
    edge_colour: Colour = (0.15, 0.15, 0.15),
    edge_width: float = 0.3,
    background: Colour = "white",
    elevation: float = 20.0,
    azimuth: float = 30.0,
    show: bool | None = None,
) -> Figure:
    """Render a :class:`~goldberg.model.TriangleMesh` as a 3D preview.

    Triangles are drawn with flat Lambert shading lit from the camera
    direction.  Fan triangles share the colour of their neighbours, so
    the original hexagons and primary faces read as shaded polygons.

    Example usage::

        from goldberg import generate_dodecahedral, render_mpl

        render_mpl(generate_dodecahedral(2), "sphere.png")

    Args:
        mesh: The mesh to draw.
        output: Optional file path to save the figure.  The format is
            inferred from the extension.  Ignored when *ax* is given.
        ax: Optional 3D axes (``projection="3d"``) to draw into.  The
            caller then owns the figure; *output*, *figsize*, *dpi*,
            *background* and *show* are ignored.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution for raster output formats.
        face_colour: Base colour of the faces before shading.
        edge_colour: Colour of triangle edges.
        edge_width: Line width of triangle edges in points.  Use 0 to
            hide edges.
        background: Figure background colour.
        elevation: Camera elevation in degrees.
        azimuth: Camera azimuth in degrees.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None`` and ``False`` otherwise.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.

    Raises:
        ValueError: If *edge_width* is negative or *ax* is not
            attached to a figure.
    """
    if edge_width < 0:
        raise ValueError(f"edge_width must be non-negative, got {edge_width}")

    style = dict(
        face_colour=face_colour,
        edge_colour=edge_colour,
        edge_width=edge_width,
        elevation=elevation,
        azimuth=azimuth,
    )

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_mesh(ax, mesh, **style)
        return fig

    fig = plt.figure(figsize=figsize, dpi=dpi)
    fig.set_facecolor(to_rgb(background))
    ax = fig.add_subplot(projection="3d")
    ax.set_facecolor(to_rgb(background))
    _draw_mesh(ax, mesh, **style)

    if output is not None:
        fig.savefig(str(output), dpi=dpi, bbox_inches="tight")

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
