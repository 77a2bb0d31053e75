"""
Similarity and diversity analytics built on Delta E.

Functions:
    color_similarity: Delta E plus an exp(-dE/10) similarity score
    find_nearest_color / find_nearest_colors: nearest candidates to a target
    are_colors_distinguishable: Delta E above a JND threshold
    color_distance_matrix: symmetric N x N Delta E matrix
    analyze_palette_diversity: summary statistics of a palette's pairwise distances
"""
from __future__ import annotations
import math
from collections import deque
from dataclasses import dataclass
from typing import Any, List, Sequence

import numpy as np

from ..colors.color import Color
from ..colors.parse import parse_color
from .delta_e import DeltaEAlgorithm, JND_THRESHOLDS, delta_e, resolve_algorithm

SIMILARITY_DECAY = 10.0
# Distances at which the diversity components saturate
DIVERSITY_AVERAGE_CAP = 50.0
DIVERSITY_STDDEV_CAP = 30.0
CLUSTER_THRESHOLD_FACTOR = 1.5


@dataclass(frozen=True)
class ColorSimilarity:
    similarity: float
    delta_e: float
    algorithm: DeltaEAlgorithm
    perceptible: bool


@dataclass(frozen=True)
class NearestColor:
    color: Color
    index: int
    delta_e: float


@dataclass(frozen=True)
class PaletteDiversity:
    diversity_score: float
    average_delta_e: float
    min_delta_e: float
    max_delta_e: float
    standard_deviation: float
    distinguishable_percentage: float
    cluster_count: int


def color_similarity(
    color1: Any,
    color2: Any,
    algorithm: DeltaEAlgorithm | str = DeltaEAlgorithm.CIE2000,
    **options: Any,
) -> ColorSimilarity:
    algorithm = resolve_algorithm(algorithm)
    distance = delta_e(color1, color2, algorithm, **options)
    return ColorSimilarity(
        similarity=math.exp(-distance / SIMILARITY_DECAY),
        delta_e=distance,
        algorithm=algorithm,
        perceptible=distance > JND_THRESHOLDS[algorithm],
    )


def find_nearest_colors(
    target: Any,
    candidates: Sequence[Any],
    count: int = 5,
    algorithm: DeltaEAlgorithm | str = DeltaEAlgorithm.CIE2000,
    **options: Any,
) -> List[NearestColor]:
    """Candidates ordered by ascending Delta E from ``target`` (stable for ties)."""
    target = parse_color(target)
    ranked = [
        NearestColor(color=color, index=i, delta_e=delta_e(target, color, algorithm, **options))
        for i, color in enumerate(parse_color(c) for c in candidates)
    ]
    ranked.sort(key=lambda item: item.delta_e)
    return ranked[:max(count, 0)]


def find_nearest_color(
    target: Any,
    candidates: Sequence[Any],
    algorithm: DeltaEAlgorithm | str = DeltaEAlgorithm.CIE2000,
    **options: Any,
) -> NearestColor:
    if not candidates:
        raise ValueError("find_nearest_color needs at least one candidate")
    return find_nearest_colors(target, candidates, 1, algorithm, **options)[0]


def are_colors_distinguishable(
    color1: Any,
    color2: Any,
    threshold: float = 2.3,
    algorithm: DeltaEAlgorithm | str = DeltaEAlgorithm.CIE2000,
    **options: Any,
) -> bool:
    return delta_e(color1, color2, algorithm, **options) > threshold


def color_distance_matrix(
    colors: Sequence[Any],
    algorithm: DeltaEAlgorithm | str = DeltaEAlgorithm.CIE2000,
    **options: Any,
) -> np.ndarray:
    """
    Pairwise Delta E as an (N, N) float array with a zero diagonal.

    Only the upper triangle is computed and mirrored, so asymmetric measures
    (CMC) use the earlier color as the reference.
    """
    parsed = [parse_color(c) for c in colors]
    n = len(parsed)
    matrix = np.zeros((n, n), dtype=float)
    for i in range(n):
        for j in range(i + 1, n):
            matrix[i, j] = matrix[j, i] = delta_e(parsed[i], parsed[j], algorithm, **options)
    return matrix


def _count_clusters(matrix: np.ndarray, threshold: float) -> int:
    n = matrix.shape[0]
    visited = [False] * n
    clusters = 0
    for start in range(n):
        if visited[start]:
            continue
        clusters += 1
        visited[start] = True
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for j in range(n):
                if not visited[j] and matrix[current, j] < threshold:
                    visited[j] = True
                    queue.append(j)
    return clusters


def analyze_palette_diversity(
    colors: Sequence[Any],
    algorithm: DeltaEAlgorithm | str = DeltaEAlgorithm.CIE2000,
    **options: Any,
) -> PaletteDiversity:
    """
    Summarize how spread out a palette is.

    Pairs farther apart than the algorithm's JND (2.3 for CIEDE2000, 2.5
    otherwise) count as distinguishable; colors closer than 1.5 x JND are
    linked when counting clusters. The score weighs average distance (0.4),
    spread (0.3) and distinguishable share (0.3), capped at 1.
    """
    algorithm = resolve_algorithm(algorithm)
    if len(colors) < 2:
        return PaletteDiversity(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, len(colors))

    matrix = color_distance_matrix(colors, algorithm, **options)
    distances = matrix[np.triu_indices(matrix.shape[0], k=1)]

    average = float(distances.mean())
    # population standard deviation
    stddev = float(distances.std())
    jnd = 2.3 if algorithm == DeltaEAlgorithm.CIE2000 else 2.5
    distinguishable = float(np.count_nonzero(distances > jnd)) / distances.size * 100

    score = (
        min(average / DIVERSITY_AVERAGE_CAP, 1.0) * 0.4
        + min(stddev / DIVERSITY_STDDEV_CAP, 1.0) * 0.3
        + distinguishable / 100 * 0.3
    )
    return PaletteDiversity(
        diversity_score=min(score, 1.0),
        average_delta_e=average,
        min_delta_e=float(distances.min()),
        max_delta_e=float(distances.max()),
        standard_deviation=stddev,
        distinguishable_percentage=distinguishable,
        cluster_count=_count_clusters(matrix, jnd * CLUSTER_THRESHOLD_FACTOR),
    )
