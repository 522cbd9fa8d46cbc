"""OutlineChart - Plotly rendering of a ski outline.

Renders the top view of a ski:
- Filled closed outline
- Sidecut control points
- Mount point with setback label
- Tip/Tail labels
"""

import logging

import plotly.graph_objects as go

from skishape_designer.constants import ChartConfig, StyleConfig
from skishape_designer.model.ski_outline import SkiOutline

logger = logging.getLogger(__name__)


class OutlineChart:
    """Renders ski outlines using Plotly.

    Example:
        chart = OutlineChart(width=1100, height=320)
        fig = chart.render(outline=outline)
        st.plotly_chart(fig)
    """

    def __init__(
        self,
        width: int,
        height: int,
    ) -> None:
        """Initialize outline chart renderer.

        Args:
            width: Chart width in pixels
            height: Chart height in pixels
        """
        self.width = width
        self.height = height

    def render(
        self,
        outline: SkiOutline,
        show_control_points: bool = True,
    ) -> go.Figure:
        """Render the outline top view.

        Args:
            outline: Outline to visualize
            show_control_points: Also draw the sidecut control points

        Returns:
            Plotly Figure object.
        """
        if not outline.outline:
            raise ValueError("Outline must have points to render")

        # Close the path explicitly
        points = list(outline.outline) + [outline.outline[0]]

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=[p.x for p in points],
                y=[p.y for p in points],
                fill="toself",
                fillcolor=StyleConfig.OUTLINE_FILL,
                line=dict(color=StyleConfig.OUTLINE_LINE, width=1),
                mode="lines",
                name="Outline",
                hoverinfo="skip",
            )
        )

        if show_control_points:
            self._add_control_points(fig=fig, outline=outline)

        self._add_mount_point(fig=fig, outline=outline)
        self._add_tip_tail_labels(fig=fig, outline=outline)

        params = outline.params
        half_height = max(outline.max_width / 2, params.tip_arc_radius, params.tail_arc_radius)
        padding = ChartConfig.PADDING_MM
        fig.update_layout(
            width=self.width,
            height=self.height,
            margin=dict(l=10, r=10, t=30, b=10),
            showlegend=False,
            plot_bgcolor="white",
            xaxis=dict(range=[-padding, params.total_length + padding], title="Length (mm)"),
            yaxis=dict(
                range=[-half_height - padding, half_height + padding],
                scaleanchor="x",
                scaleratio=1,
                title="Width (mm)",
            ),
        )
        return fig

    def _add_control_points(self, fig: go.Figure, outline: SkiOutline) -> None:
        """Mark the sidecut control points on the upper half."""
        fig.add_trace(
            go.Scatter(
                x=[p.x for p in outline.control_points],
                y=[p.y for p in outline.control_points],
                mode="markers",
                marker=dict(color=StyleConfig.CONTROL_POINT_COLOR, size=ChartConfig.CONTROL_POINT_SIZE),
                name="Control Points",
                hovertemplate="x: %{x:.0f}mm<br>half width: %{y:.1f}mm<extra></extra>",
            )
        )

    def _add_mount_point(self, fig: go.Figure, outline: SkiOutline) -> None:
        """Red mount point on the centerline with its setback label."""
        mount = outline.mount_point
        fig.add_trace(
            go.Scatter(
                x=[mount.x],
                y=[mount.y],
                mode="markers",
                marker=dict(color=StyleConfig.MOUNT_POINT_COLOR, size=ChartConfig.MOUNT_POINT_SIZE),
                name="Mount Point",
                hoverinfo="skip",
            )
        )
        fig.add_annotation(
            x=mount.x,
            y=mount.y,
            text=f"Mount Point Setback: {outline.params.setback:g} mm",
            showarrow=False,
            xanchor="left",
            yanchor="top",
            xshift=5,
            font=dict(color=StyleConfig.MOUNT_POINT_COLOR, size=12),
        )

    def _add_tip_tail_labels(self, fig: go.Figure, outline: SkiOutline) -> None:
        """Tip label at x=0, tail label at the far end."""
        for label, x, anchor in (
            ("Tip", 0.0, "left"),
            ("Tail", outline.params.total_length, "right"),
        ):
            fig.add_annotation(
                x=x,
                y=outline.max_width / 2,
                text=label,
                showarrow=False,
                xanchor=anchor,
                yanchor="bottom",
                font=dict(color=StyleConfig.LABEL_COLOR, size=16),
            )
