"""
Plotly views of states projected through a space's registered projections.
"""
from typing import List, Optional, Sequence

import numpy as np
import plotly.graph_objects as go

from motion_geometry.src.spaces.projections import SubsetProjection


def _axis_titles(space, projection) -> List[str]:
    if isinstance(projection, SubsetProjection):
        return [space.get_dimension_name(i) or f"dim{i}" for i in projection.indices]
    return [f"p{i}" for i in range(projection.get_dimension())]


def plot_projected_states(space,
                          states: Sequence,
                          trajectory: Optional[Sequence] = None,
                          projection_name: Optional[str] = None,
                          title: str = "Projected States") -> go.Figure:
    """
    Scatter plot of states in a projection of the space.

    Parameters
    ----------
    space : StateSpace
        Space the states belong to. It must have been set up so that its
        projections are registered.
    states : Sequence
        States drawn as markers.
    trajectory : Sequence, optional
        States drawn as a connected line (e.g. an interpolated path).
    projection_name : str, optional
        Registered projection to use. Defaults to the default projection.
    title : str
        Plot title.

    Returns
    -------
    go.Figure
        2D figure for projections of dimension 1 or 2 (dimension 1 is plotted
        against the state index), 3D figure otherwise using the first three
        projected coordinates.
    """
    if projection_name is None:
        projection = space.get_default_projection()
    else:
        projection = space.get_projection(projection_name)
    axis_titles = _axis_titles(space, projection)

    layers = [(projection.project_states(states), 'markers', "Samples")]
    if trajectory is not None:
        layers.append((projection.project_states(trajectory), 'lines+markers', "Trajectory"))

    fig = go.Figure()
    k = projection.get_dimension()
    for points, mode, name in layers:
        if k == 1:
            fig.add_trace(go.Scatter(x=np.arange(len(points)), y=points[:, 0], mode=mode, name=name))
        elif k == 2:
            fig.add_trace(go.Scatter(x=points[:, 0], y=points[:, 1], mode=mode, name=name))
        else:
            fig.add_trace(go.Scatter3d(
                x=points[:, 0], y=points[:, 1], z=points[:, 2],
                mode=mode,
                marker=dict(size=3, opacity=0.8),
                name=name
            ))

    if k == 1:
        fig.update_layout(xaxis_title="sample", yaxis_title=axis_titles[0])
    elif k == 2:
        fig.update_layout(xaxis_title=axis_titles[0], yaxis_title=axis_titles[1])
    else:
        fig.update_layout(scene=dict(
            xaxis_title=axis_titles[0],
            yaxis_title=axis_titles[1],
            zaxis_title=axis_titles[2],
        ))
    fig.update_layout(title=title, width=800, height=600)
    return fig
