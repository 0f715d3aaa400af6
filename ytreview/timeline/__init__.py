"""
Timeline core: annotation store, clustering, rendering, expansion overlay
and the review session that drives them.
"""

from .store import AnnotationStore
from .clustering import Cluster, cluster_annotations, compute_max_time, CLUSTER_THRESHOLD
from .render import (
    AnnotationListItem,
    AnnotationListView,
    render_list,
    render_list_html,
    TimelineView,
    TimelineMarker,
    ClusterSnapshot,
    MemberSnapshot,
    status_color,
    cluster_color,
    render_clusters,
    render_timeline,
    render_html
)
from .expansion import ExpansionView, ExpansionOverlay, ExpansionDot, layout_overlay
from .status import can_transition, validate_transition
from .session import ReviewSession, Player

__all__ = [
    "AnnotationListItem",
    "AnnotationListView",
    "render_list",
    "render_list_html",
    "AnnotationStore",
    "Cluster",
    "cluster_annotations",
    "compute_max_time",
    "CLUSTER_THRESHOLD",
    "TimelineView",
    "TimelineMarker",
    "ClusterSnapshot",
    "MemberSnapshot",
    "status_color",
    "cluster_color",
    "render_clusters",
    "render_timeline",
    "render_html",
    "ExpansionView",
    "ExpansionOverlay",
    "ExpansionDot",
    "layout_overlay",
    "can_transition",
    "validate_transition",
    "ReviewSession",
    "Player"
]
