"""
Interactive hinge plots using Plotly.
Backbone curves with acceptance markers, for reviewing records before they
are written to the model.
"""

from typing import Optional

import plotly.graph_objects as go

from steelhinge.io.hinge_records import HingeRecord

LEVEL_COLORS = {"IO": "green", "LS": "orange", "CP": "red"}


def plot_backbone(record: HingeRecord, title: Optional[str] = None) -> go.Figure:
    """
    Plot the normalized backbone curve of a hinge record.

    Args:
        record: Hinge record to plot
        title: Figure title (defaults to the DOF type)

    Returns:
        plotly Figure object

    Example:
        >>> fig = plot_backbone(record, title="IPE400_V1_M3")
        >>> fig.show()
    """
    fig = go.Figure()

    x = [p.displacement for p in record.backbone]
    y = [p.force for p in record.backbone]
    labels = [p.station for p in record.backbone]

    fig.add_trace(go.Scatter(
        x=x,
        y=y,
        mode='lines+markers+text',
        text=labels,
        textposition='top center',
        line=dict(color='steelblue', width=2),
        marker=dict(size=7),
        name='Backbone',
        hovertemplate='<b>%{text}</b><br>' +
                      'Deformation: %{x:.3f}<br>' +
                      'Force: %{y:.3f}<br>' +
                      '<extra></extra>'
    ))

    # Acceptance limits as vertical lines on both branches
    for point in record.acceptance:
        color = LEVEL_COLORS.get(point.level, 'gray')
        for value in (point.positive, point.negative):
            fig.add_vline(
                x=value,
                line=dict(color=color, dash='dash', width=1),
                annotation_text=point.level,
                annotation_position='top',
            )

    is_moment = record.dof_type.startswith("Moment")
    fig.update_layout(
        title=title or f"Backbone ({record.dof_type})",
        xaxis_title='Rotation / θy' if is_moment else 'Displacement / δy',
        yaxis_title='Moment / My' if is_moment else 'Force / Py',
        hovermode='closest',
        showlegend=False,
        template='plotly_white',
    )
    return fig
