"""
Dominant-color extraction with K-means++.

Samples are 8-bit RGB rows. Distances use the "redmean" weighting, which
leans on green and shifts weight between red and blue with the pair's mean
red level:

    w_r = 2 + r_mean / 256,  w_g = 4,  w_b = 2 + (255 - r_mean) / 256

Centers are the rounded channel means of their members. Iteration stops when
no center moves by 1 unit or more, or after 30 rounds.
"""
from __future__ import annotations
import warnings
from dataclasses import dataclass
from typing import Any, List, Optional, Union

import numpy as np

from ..colors.color import Color
from ..errors import ArgumentError

MAX_ITERATIONS = 30
MOVEMENT_TOLERANCE = 1.0
ALPHA_THRESHOLD = 128
WHITE_CUTOFF = 240
BLACK_CUTOFF = 15

SeedLike = Union[None, int, np.random.Generator]


@dataclass(frozen=True)
class Cluster:
    center: Color
    size: int
    weight: float

    @property
    def hex(self) -> str:
        return self.center.to_hex()


def redmean_distance(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Weighted RGB distance; broadcasts over leading axes of (..., 3) arrays."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    r_mean = (a[..., 0] + b[..., 0]) / 2
    d = a - b
    return np.sqrt(
        (2 + r_mean / 256) * d[..., 0] ** 2
        + 4 * d[..., 1] ** 2
        + (2 + (255 - r_mean) / 256) * d[..., 2] ** 2
    )


def as_samples(pixels: Any) -> np.ndarray:
    """Coerce pixels to an (N, 3) float array, dropping an alpha column."""
    arr = np.asarray(pixels, dtype=float)
    if arr.size == 0:
        return np.empty((0, 3), dtype=float)
    if arr.ndim != 2 or arr.shape[1] not in (3, 4):
        raise ValueError(f"Expected pixels shaped (N, 3) or (N, 4), got {arr.shape}")
    return np.clip(arr[:, :3], 0, 255)


def pixels_from_rgba_buffer(
    buffer: Any,
    alpha_threshold: int = ALPHA_THRESHOLD,
    ignore_white: bool = False,
    ignore_black: bool = False,
) -> np.ndarray:
    """
    Turn a flat RGBA byte buffer into (N, 3) uint8 samples.

    Pixels with alpha below ``alpha_threshold`` are dropped, as are
    near-white (all channels > 240) and near-black (all < 15) pixels when
    requested.
    """
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(buffer, dtype=np.uint8)
    else:
        flat = np.asarray(buffer, dtype=np.uint8).ravel()
    if flat.size % 4:
        raise ValueError(f"RGBA buffer length must be a multiple of 4, got {flat.size}")

    rgba = flat.reshape(-1, 4)
    keep = rgba[:, 3] >= alpha_threshold
    rgb = rgba[:, :3]
    if ignore_white:
        keep &= ~np.all(rgb > WHITE_CUTOFF, axis=1)
    if ignore_black:
        keep &= ~np.all(rgb < BLACK_CUTOFF, axis=1)
    return rgb[keep].copy()


def kmeans_plus_plus(samples: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
    """Pick ``k`` initial centers, each with probability proportional to squared distance."""
    n = samples.shape[0]
    centers = [samples[rng.integers(n)]]
    nearest = redmean_distance(samples, centers[0])
    for _ in range(1, k):
        weights = nearest ** 2
        total = weights.sum()
        # every sample already sits on a center
        if total <= 0:
            index = rng.integers(n)
        else:
            index = rng.choice(n, p=weights / total)
        centers.append(samples[index])
        nearest = np.minimum(nearest, redmean_distance(samples, samples[index]))
    return np.array(centers, dtype=float)


def assign(samples: np.ndarray, centers: np.ndarray) -> np.ndarray:
    return np.argmin(redmean_distance(samples[:, None, :], centers[None, :, :]), axis=1)


def kmeans_palette(
    pixels: Any,
    k: int,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = MOVEMENT_TOLERANCE,
    seed: SeedLike = None,
) -> List[Cluster]:
    """
    Cluster pixel samples into at most ``k`` dominant colors.

    Args:
        pixels: (N, 3) or (N, 4) array-like of 8-bit channels
        k: number of clusters, at least 1
        max_iterations: hard cap on refinement rounds
        tolerance: stop once every center moves less than this
        seed: int seed or numpy Generator for reproducible initialisation
    Returns:
        Non-empty clusters sorted by size, largest first. Empty input gives
        an empty list; k >= N gives one singleton cluster per sample.
    Raises:
        ArgumentError: k < 1
    """
    if k < 1:
        raise ArgumentError(f"k must be at least 1, got {k}")
    samples = as_samples(pixels)
    n = samples.shape[0]
    if n == 0:
        return []
    if k >= n:
        return [Cluster(center=Color(*row), size=1, weight=1 / n) for row in samples]

    rng = np.random.default_rng(seed)
    centers = kmeans_plus_plus(samples, k, rng)

    converged = False
    for _ in range(max_iterations):
        labels = assign(samples, centers)
        updated = centers.copy()
        for j in range(k):
            members = samples[labels == j]
            if len(members):
                updated[j] = np.floor(members.mean(axis=0) + 0.5)
        movement = redmean_distance(updated, centers)
        centers = updated
        if movement.max() < tolerance:
            converged = True
            break
    if not converged:
        warnings.warn(f"K-means stopped after {max_iterations} iterations without converging", RuntimeWarning)

    labels = assign(samples, centers)
    counts = np.bincount(labels, minlength=k)
    clusters = [
        Cluster(center=Color(*centers[j]), size=int(counts[j]), weight=float(counts[j]) / n)
        for j in range(k)
        if counts[j] > 0
    ]
    clusters.sort(key=lambda c: c.size, reverse=True)
    return clusters


def extract_palette(pixels: Any, count: int = 5, seed: SeedLike = None) -> List[Color]:
    """Dominant colors of ``pixels``, most common first."""
    return [cluster.center for cluster in kmeans_palette(pixels, count, seed=seed)]
