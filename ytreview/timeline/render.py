"""
Timeline rendering.

Turns clusters into markers: a cluster with one member becomes a plain
marker colored by that member's status, larger clusters become a badge
with a member count and an aggregate color. Each render stores a snapshot
of its clusters on the view so the expansion overlay and seek-on-click work
from what was drawn, not from the live store.
"""

import html
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from ytreview.models.annotation import Annotation, AnnotationStatus
from ytreview.utils.youtube import format_time
from .clustering import Cluster, cluster_annotations, compute_max_time

PENDING_COLOR = "#ffd700"
ACCEPTED_COLOR = "#52b788"
REJECTED_COLOR = "#e74c3c"

STATUS_COLORS = {
    AnnotationStatus.PENDING: PENDING_COLOR,
    AnnotationStatus.ACCEPTED: ACCEPTED_COLOR,
    AnnotationStatus.REJECTED: REJECTED_COLOR,
}

MARKER = "marker"
CLUSTER = "cluster"


def status_color(status: AnnotationStatus) -> str:
    return STATUS_COLORS[AnnotationStatus(status)]


def cluster_color(statuses: Iterable[AnnotationStatus]) -> str:
    """
    Aggregate color for a cluster badge.

    Green only when every member is Accepted, red only when every member is
    Rejected, amber for anything else.
    """
    statuses = set(AnnotationStatus(s) for s in statuses)
    if statuses == {AnnotationStatus.ACCEPTED}:
        return ACCEPTED_COLOR
    if statuses == {AnnotationStatus.REJECTED}:
        return REJECTED_COLOR
    return PENDING_COLOR


@dataclass(frozen=True)
class MemberSnapshot:
    """What a rendered cluster remembers about one annotation."""
    id: str
    timecode: float
    status: AnnotationStatus
    author: str
    text: str

    @property
    def label(self) -> str:
        return f"{self.author}: {self.text}"

    @classmethod
    def of(cls, annotation: Annotation) -> "MemberSnapshot":
        return cls(
            id=annotation.id,
            timecode=annotation.timecode,
            status=annotation.status,
            author=annotation.author,
            text=annotation.text
        )


@dataclass(frozen=True)
class ClusterSnapshot:
    position: float
    members: Tuple[MemberSnapshot, ...]

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "annotations": [
                {
                    "id": m.id,
                    "timecode": m.timecode,
                    "status": int(m.status),
                    "author": m.author,
                    "text": m.text,
                }
                for m in self.members
            ],
        }


@dataclass(frozen=True)
class TimelineMarker:
    """A plain marker (``kind == "marker"``) or a cluster badge (``kind == "cluster"``)."""
    kind: str
    cluster_index: int
    position: float
    color: str
    title: str
    count: int = 1
    annotation_id: Optional[str] = None
    timecode: Optional[float] = None

    @property
    def is_cluster(self) -> bool:
        return self.kind == CLUSTER


@dataclass
class TimelineView:
    """Output of one render pass."""
    max_time: float
    markers: List[TimelineMarker] = field(default_factory=list)
    clusters: List[ClusterSnapshot] = field(default_factory=list)

    def cluster_at(self, index: int) -> Optional[ClusterSnapshot]:
        if 0 <= index < len(self.clusters):
            return self.clusters[index]
        return None

    def marker_at(self, index: int) -> Optional[TimelineMarker]:
        if 0 <= index < len(self.markers):
            return self.markers[index]
        return None

    @property
    def is_empty(self) -> bool:
        return not self.markers


def _render_cluster(index: int, cluster: Cluster) -> TimelineMarker:
    if cluster.is_single:
        annotation = cluster.members[0]
        return TimelineMarker(
            kind=MARKER,
            cluster_index=index,
            position=cluster.position,
            color=status_color(annotation.status),
            title=f"{annotation.label} ({format_time(annotation.timecode)})",
            annotation_id=annotation.id,
            timecode=annotation.timecode
        )

    return TimelineMarker(
        kind=CLUSTER,
        cluster_index=index,
        position=cluster.position,
        color=cluster_color(a.status for a in cluster.members),
        title="\n".join(a.label for a in cluster.members),
        count=cluster.size
    )


def render_clusters(clusters: Sequence[Cluster], max_time: float) -> TimelineView:
    """Render clusters, keeping their creation order as marker order."""
    return TimelineView(
        max_time=max_time,
        markers=[_render_cluster(i, c) for i, c in enumerate(clusters)],
        clusters=[
            ClusterSnapshot(
                position=c.position,
                members=tuple(MemberSnapshot.of(a) for a in c.members)
            )
            for c in clusters
        ]
    )


def render_timeline(annotations: Sequence[Annotation], duration: Optional[float]) -> TimelineView:
    """Derive the scale, cluster and render in one pass."""
    max_time = compute_max_time(annotations, duration)
    if not annotations:
        return TimelineView(max_time=max_time)
    return render_clusters(cluster_annotations(annotations, max_time), max_time)


def render_html(view: TimelineView) -> str:
    """Markup for server-side shells. An empty view renders only the line."""
    parts = ['<div class="timeline-line"></div>']

    for marker in view.markers:
        title = html.escape(marker.title)
        if marker.is_cluster:
            parts.append(
                f'<div class="timeline-cluster" data-cluster="{marker.cluster_index}" '
                f'style="left: {marker.position}%; background-color: {marker.color};" '
                f'title="{title}">'
                f'<span class="cluster-count">{marker.count}</span></div>'
            )
        else:
            parts.append(
                f'<div class="timeline-marker" data-annotation="{html.escape(marker.annotation_id or "")}" '
                f'data-timecode="{marker.timecode}" '
                f'style="left: {marker.position}%; background-color: {marker.color};" '
                f'title="{title}"></div>'
            )

    return "".join(parts)


# -----------------------------
# Annotation list
# -----------------------------

EMPTY_LIST_TEXT = "No comments yet"

STATUS_CLASSES = {
    AnnotationStatus.PENDING: "pending",
    AnnotationStatus.ACCEPTED: "accepted",
    AnnotationStatus.REJECTED: "rejected",
}

STATUS_LABELS = {
    AnnotationStatus.PENDING: "Pending",
    AnnotationStatus.ACCEPTED: "✓ Accept",
    AnnotationStatus.REJECTED: "✗ Reject",
}


@dataclass(frozen=True)
class AnnotationListItem:
    """One row of the comment list, with the state of its action buttons."""
    id: str
    author: str
    text: str
    timecode: float
    time_label: str
    status: AnnotationStatus
    status_class: str
    status_text: str

    @property
    def accept_active(self) -> bool:
        return self.status == AnnotationStatus.ACCEPTED

    @property
    def reject_active(self) -> bool:
        return self.status == AnnotationStatus.REJECTED

    @classmethod
    def of(cls, annotation: Annotation) -> "AnnotationListItem":
        status = AnnotationStatus(annotation.status)
        return cls(
            id=annotation.id,
            author=annotation.author,
            text=annotation.text,
            timecode=annotation.timecode,
            time_label=format_time(annotation.timecode),
            status=status,
            status_class=STATUS_CLASSES[status],
            status_text=STATUS_LABELS[status]
        )


@dataclass
class AnnotationListView:
    items: List[AnnotationListItem] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def placeholder(self) -> Optional[str]:
        """Text shown instead of rows when there are no comments."""
        return EMPTY_LIST_TEXT if self.is_empty else None

    def item(self, annotation_id: str) -> Optional[AnnotationListItem]:
        return next((i for i in self.items if i.id == annotation_id), None)


def render_list(annotations: Sequence[Annotation]) -> AnnotationListView:
    """List rows in timecode order."""
    ordered = sorted(annotations, key=lambda a: a.timecode)
    return AnnotationListView(items=[AnnotationListItem.of(a) for a in ordered])


def render_list_html(view: AnnotationListView) -> str:
    """
    Markup for the comment list.

    Rows carry ``data-action`` buttons (delete, reject, accept) and a
    ``data-seek`` timecode; the host wires them to the session.
    """
    if view.is_empty:
        return f'<p class="annotations-empty">{EMPTY_LIST_TEXT}</p>'

    rows = []
    for item in view.items:
        item_id = html.escape(item.id)
        reject_class = "reject-btn active" if item.reject_active else "reject-btn"
        accept_class = "accept-btn active" if item.accept_active else "accept-btn"
        rows.append(
            f'<div class="annotation-item {item.status_class}" data-id="{item_id}">'
            f'<div class="annotation-meta">'
            f'<span class="annotation-author">{html.escape(item.author)}</span>'
            f'<span class="annotation-timecode" data-seek="{item.timecode}">{item.time_label}</span>'
            f'</div>'
            f'<div class="annotation-text">{html.escape(item.text)}</div>'
            f'<div class="annotation-actions">'
            f'<button class="delete-btn" data-action="delete" data-id="{item_id}">🗑️ Delete</button>'
            f'<button class="{reject_class}" data-action="reject" data-id="{item_id}">✗ Reject</button>'
            f'<button class="{accept_class}" data-action="accept" data-id="{item_id}">✓ Accept</button>'
            f'</div>'
            f'</div>'
        )
    return "".join(rows)
