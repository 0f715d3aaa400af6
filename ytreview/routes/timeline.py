"""
Timeline routes.

Stateless endpoints a rendering shell can call with the annotations it
holds and the duration its player reports.
"""

from fastapi import APIRouter, HTTPException, status
from typing import Optional

from ytreview.models.timeline import (
    TimelineRequest,
    ExpandRequest,
    TimelineResponse,
    MarkerResponse,
    ClusterData,
    OverlayResponse,
    DotResponse
)
from ytreview.timeline.expansion import layout_overlay
from ytreview.timeline.render import TimelineView, render_timeline

router = APIRouter(prefix="/timeline", tags=["Timeline"])


def _sorted_view(data: TimelineRequest) -> TimelineView:
    annotations = sorted(data.annotations, key=lambda a: a.timecode)
    return render_timeline(annotations, data.duration)


@router.post("/render", response_model=TimelineResponse)
async def render(data: TimelineRequest):
    """
    Cluster annotations and return the markers to draw.

    Annotations are sorted by timecode first, the order the store keeps.
    """
    view = _sorted_view(data)

    return TimelineResponse(
        max_time=view.max_time,
        markers=[
            MarkerResponse(
                kind=m.kind,
                cluster_index=m.cluster_index,
                position=m.position,
                color=m.color,
                title=m.title,
                count=m.count,
                annotation_id=m.annotation_id,
                timecode=m.timecode
            )
            for m in view.markers
        ],
        clusters=[ClusterData.model_validate(c.to_dict()) for c in view.clusters]
    )


@router.post("/expand", response_model=Optional[OverlayResponse])
async def expand(data: ExpandRequest):
    """
    Lay out one cluster's members around its badge.

    Returns null for single-member clusters.
    """
    view = _sorted_view(data)
    cluster = view.cluster_at(data.cluster_index)

    if cluster is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Cluster not found"
        )

    overlay = layout_overlay(data.cluster_index, cluster)
    if overlay is None:
        return None

    return OverlayResponse(
        cluster_index=overlay.cluster_index,
        center_position=overlay.center_position,
        radius=overlay.radius,
        width=overlay.width,
        height=overlay.height,
        dots=[
            DotResponse(
                annotation_id=d.annotation_id,
                timecode=d.timecode,
                color=d.color,
                tooltip=d.tooltip,
                offset_x=d.offset_x,
                offset_y=d.offset_y
            )
            for d in overlay.dots
        ]
    )
