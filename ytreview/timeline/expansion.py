"""
Cluster expansion overlay.

Hovering a cluster badge fans its members out on a circle around the
badge. At most one overlay exists at a time: expanding always removes the
current overlay first. The overlay is dismissed only when the pointer
leaves the whole overlay box, so moving between dots keeps it open.

The view is a two-state toggle, ``collapsed`` or ``expanded(index)``. The
hosting UI reports pointer positions relative to the overlay center and
the view decides containment.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .render import ClusterSnapshot, TimelineView, status_color

logger = logging.getLogger(__name__)

CLOUD_RADIUS = 40.0
OVERLAY_WIDTH = 150.0
OVERLAY_HEIGHT = 160.0

COLLAPSED = "collapsed"
EXPANDED = "expanded"


@dataclass(frozen=True)
class ExpansionDot:
    annotation_id: str
    timecode: float
    color: str
    tooltip: str
    offset_x: float
    offset_y: float


@dataclass(frozen=True)
class ExpansionOverlay:
    """Radial layout of one cluster's members, offsets in pixels from the badge."""
    cluster_index: int
    center_position: float
    dots: Tuple[ExpansionDot, ...]
    radius: float = CLOUD_RADIUS
    width: float = OVERLAY_WIDTH
    height: float = OVERLAY_HEIGHT

    def contains(self, dx: float, dy: float) -> bool:
        """Whether a point relative to the overlay center lies inside the overlay box."""
        return abs(dx) <= self.width / 2 and abs(dy) <= self.height / 2


def layout_overlay(
    cluster_index: int,
    cluster: ClusterSnapshot,
    radius: float = CLOUD_RADIUS
) -> Optional[ExpansionOverlay]:
    """Place one dot per member, stepping ``2*pi/n`` around the circle from angle 0."""
    count = len(cluster.members)
    if count <= 1:
        return None

    angle_step = (math.pi * 2) / count
    dots: List[ExpansionDot] = []
    for i, member in enumerate(cluster.members):
        angle = angle_step * i
        dots.append(ExpansionDot(
            annotation_id=member.id,
            timecode=member.timecode,
            color=status_color(member.status),
            tooltip=member.label,
            offset_x=math.cos(angle) * radius,
            offset_y=math.sin(angle) * radius
        ))

    return ExpansionOverlay(
        cluster_index=cluster_index,
        center_position=cluster.position,
        dots=tuple(dots),
        radius=radius
    )


class ExpansionView:
    """
    Single-slot expansion state for the last rendered timeline.

    Args:
        seek: Called with a timecode when a dot or plain marker is clicked
    """

    def __init__(self, seek: Callable[[float], None]):
        self._seek = seek
        self._view: Optional[TimelineView] = None
        self._overlay: Optional[ExpansionOverlay] = None

    def attach(self, view: TimelineView) -> None:
        """Swap in a freshly rendered timeline. Any open overlay belonged to the old one."""
        self.collapse()
        self._view = view

    @property
    def state(self) -> str:
        return EXPANDED if self._overlay is not None else COLLAPSED

    @property
    def overlay(self) -> Optional[ExpansionOverlay]:
        return self._overlay

    @property
    def expanded_index(self) -> Optional[int]:
        return self._overlay.cluster_index if self._overlay is not None else None

    def expand(self, cluster_index: int) -> Optional[ExpansionOverlay]:
        """
        Open the overlay for a cluster, closing any other one first.

        Does nothing for unknown indices and for clusters with a single
        member, which can happen when a trigger outlives a re-render.
        """
        self.collapse()

        if self._view is None:
            return None
        cluster = self._view.cluster_at(cluster_index)
        if cluster is None:
            logger.debug(f"Ignoring expand for unknown cluster {cluster_index}")
            return None

        self._overlay = layout_overlay(cluster_index, cluster)
        return self._overlay

    def collapse(self) -> bool:
        """Remove the overlay. Returns True only if one was open."""
        if self._overlay is None:
            return False
        self._overlay = None
        return True

    def pointer_moved(self, dx: float, dy: float) -> bool:
        """
        Report a pointer position relative to the overlay center.

        Returns True if this move left the overlay and collapsed it.
        """
        if self._overlay is None or self._overlay.contains(dx, dy):
            return False
        return self.collapse()

    def pointer_left_overlay(self) -> bool:
        """The pointer left the overlay box entirely."""
        return self.collapse()

    def is_badge_hidden(self, cluster_index: int) -> bool:
        """A badge is hidden and ignores the pointer while its overlay is open."""
        return self._overlay is not None and self._overlay.cluster_index == cluster_index

    def hover_badge(self, cluster_index: int) -> Optional[ExpansionOverlay]:
        if self.is_badge_hidden(cluster_index):
            return self._overlay
        return self.expand(cluster_index)

    def click_dot(self, dot_index: int) -> bool:
        """
        Seek to a dot's timecode.

        Returns True when the click was consumed, so the host must not pass
        it on to the badge underneath.
        """
        if self._overlay is None or not 0 <= dot_index < len(self._overlay.dots):
            return False
        self._seek(self._overlay.dots[dot_index].timecode)
        return True

    def click_marker(self, cluster_index: int) -> bool:
        """Seek to a plain marker's timecode. Badges ignore clicks."""
        if self._view is None:
            return False
        marker = self._view.marker_at(cluster_index)
        if marker is None or marker.is_cluster or marker.timecode is None:
            return False
        self._seek(marker.timecode)
        return True
