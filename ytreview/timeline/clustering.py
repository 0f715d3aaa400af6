"""
Greedy proximity clustering of annotations on a 0-100 timeline axis.

Annotations are visited in store order (ascending timecode). Each one joins
the first existing cluster, in creation order, whose current position is
closer than ``CLUSTER_THRESHOLD``; the cluster's position is then recomputed
as the mean of its members. Because that mean moves as members are added,
the result depends on visiting order and two clusters can end up closer
than the threshold after later merges. Both are expected.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ytreview.models.annotation import Annotation

CLUSTER_THRESHOLD = 2.0

# Padding added past the last annotation when the video duration is unknown
FALLBACK_PADDING = 60.0


@dataclass
class Cluster:
    """Annotations sharing one spot on the timeline."""
    position: float
    members: List[Annotation] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def is_single(self) -> bool:
        return len(self.members) == 1


def compute_max_time(annotations: Sequence[Annotation], duration: Optional[float]) -> float:
    """
    Scale denominator for the timeline.

    Uses the video duration when it is known and positive, otherwise the
    latest timecode plus ``FALLBACK_PADDING`` so markers stay off the edge.
    """
    if duration is not None and duration > 0:
        return float(duration)
    latest = max((a.timecode for a in annotations), default=0.0)
    return latest + FALLBACK_PADDING


def position_of(annotation: Annotation, max_time: float) -> float:
    return annotation.timecode / max_time * 100


def _mean_position(members: Sequence[Annotation], max_time: float) -> float:
    return sum(position_of(a, max_time) for a in members) / len(members)


def cluster_annotations(
    annotations: Iterable[Annotation],
    max_time: float,
    threshold: float = CLUSTER_THRESHOLD
) -> List[Cluster]:
    """
    Group annotations into clusters, returned in creation order.

    Args:
        annotations: Annotations in store order
        max_time: Positive scale denominator (see ``compute_max_time``)
        threshold: Maximum distance on the 0-100 axis, exclusive

    Returns:
        Clusters whose members partition the input
    """
    if max_time <= 0:
        raise ValueError(f"max_time must be positive, got {max_time}")

    clusters: List[Cluster] = []

    for annotation in annotations:
        position = position_of(annotation, max_time)

        found = next(
            (c for c in clusters if abs(c.position - position) < threshold),
            None
        )

        if found is not None:
            found.members.append(annotation)
            found.position = _mean_position(found.members, max_time)
        else:
            clusters.append(Cluster(position=position, members=[annotation]))

    return clusters
