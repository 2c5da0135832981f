"""Seeded, vectorised Perlin noise.

The flow-field engines (noise lines, contour lines, pearls, black hole, ...)
sample noise for whole particle arrays at once, so :class:`PerlinNoise`
accepts scalars or numpy arrays and broadcasts them.  The permutation table
is shuffled with the caller's ``random.Random``; two instances built from
equally seeded sources produce identical fields.
"""

from __future__ import annotations

import random

import numpy as np


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


def _grad(h: np.ndarray, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
    h = h & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    return np.where((h & 1) == 0, u, -u) + np.where((h & 2) == 0, v, -v)


class PerlinNoise:
    """Improved Perlin noise with octave summing.

    Args:
        rng: Random source used to shuffle the permutation table.
        octaves: Number of octaves summed per sample.
        falloff: Amplitude multiplier applied to each successive octave.

    ``noise()`` returns values in ``[0, 1]``, matching the convention of the
    Processing-style ``noise()`` helpers the engines are written against.
    """

    def __init__(self, rng: random.Random, octaves: int = 4, falloff: float = 0.5) -> None:
        if octaves < 1:
            raise ValueError("octaves must be >= 1")
        perm = list(range(256))
        rng.shuffle(perm)
        self._perm = np.array(perm * 2, dtype=np.int64)
        self.octaves = octaves
        self.falloff = falloff

    def _raw(self, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
        p = self._perm
        fx, fy, fz = np.floor(x), np.floor(y), np.floor(z)
        xi = fx.astype(np.int64) & 255
        yi = fy.astype(np.int64) & 255
        zi = fz.astype(np.int64) & 255
        x, y, z = x - fx, y - fy, z - fz
        u, v, w = _fade(x), _fade(y), _fade(z)

        a = p[xi] + yi
        aa = p[a] + zi
        ab = p[a + 1] + zi
        b = p[xi + 1] + yi
        ba = p[b] + zi
        bb = p[b + 1] + zi

        return _lerp(
            w,
            _lerp(
                v,
                _lerp(u, _grad(p[aa], x, y, z), _grad(p[ba], x - 1, y, z)),
                _lerp(u, _grad(p[ab], x, y - 1, z), _grad(p[bb], x - 1, y - 1, z)),
            ),
            _lerp(
                v,
                _lerp(u, _grad(p[aa + 1], x, y, z - 1), _grad(p[ba + 1], x - 1, y, z - 1)),
                _lerp(
                    u,
                    _grad(p[ab + 1], x, y - 1, z - 1),
                    _grad(p[bb + 1], x - 1, y - 1, z - 1),
                ),
            ),
        )

    def noise(self, x, y=0.0, z=0.0):
        """Sample the field at ``(x, y, z)``.

        Args:
            x: Scalar or array of x coordinates.
            y: Scalar or array of y coordinates (broadcast against *x*).
            z: Scalar or array of z coordinates (broadcast against *x*).

        Returns:
            A float when every argument is scalar, otherwise an array of the
            broadcast shape.  Values lie in ``[0, 1]``.
        """
        x, y, z = np.broadcast_arrays(
            np.asarray(x, dtype=float), np.asarray(y, dtype=float), np.asarray(z, dtype=float)
        )
        total = np.zeros(x.shape, dtype=float)
        amplitude, frequency, norm = 1.0, 1.0, 0.0
        for _ in range(self.octaves):
            total += amplitude * self._raw(x * frequency, y * frequency, z * frequency)
            norm += amplitude
            amplitude *= self.falloff
            frequency *= 2.0
        result = np.clip(0.5 + 0.5 * total / norm, 0.0, 1.0)
        if result.ndim == 0:
            return float(result)
        return result
