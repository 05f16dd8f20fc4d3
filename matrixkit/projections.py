#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Projection and transform matrices

Pure formulas, all angles in radians. 3D transforms act on column
vectors: p' = M @ p.
"""

import math
from typing import Sequence

import numpy as np

from .errors import ZeroVectorError
from .products import cross, normalize


def degrees_to_radians(angle: float) -> float:
    return angle * math.pi / 180.0


def radians_to_degrees(angle: float) -> float:
    return angle * 180.0 / math.pi


def projection_matrix(fov: float, aspect_ratio: float, near: float, far: float) -> np.ndarray:
    """
    Perspective projection matrix (right-handed, OpenGL clip space).

    Parameters
    ----------
    fov : float
        Vertical field of view in radians, 0 < fov < pi.
    aspect_ratio : float
        Viewport width / height.
    near, far : float
        Distances to the clipping planes.

    Returns
    -------
    P : (4, 4) ndarray
    """
    if not 0.0 < fov < math.pi:
        raise ValueError("fov must lie strictly between 0 and pi radians")
    if aspect_ratio == 0:
        raise ValueError("aspect_ratio must be non-zero")
    if near == far:
        raise ValueError("near and far clipping planes must differ")

    f = 1.0 / math.tan(fov / 2.0)
    depth = far - near
    return np.array(
        [
            [f / aspect_ratio, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, -(far + near) / depth, -(2.0 * far * near) / depth],
            [0.0, 0.0, -1.0, 0.0],
        ]
    )


def homogeneous(M: np.ndarray) -> np.ndarray:
    """Embed a 3x3 linear map into the upper-left block of a 4x4 identity."""
    M = np.asarray(M)
    if M.shape != (3, 3):
        raise ValueError(f"expected a 3x3 matrix, got shape {M.shape}")
    H = np.eye(4, dtype=np.result_type(M, float))
    H[:3, :3] = M
    return H


def translation_matrix(x: float, y: float, z: float) -> np.ndarray:
    T = np.eye(4)
    T[:3, 3] = (x, y, z)
    return T


def translation_matrix_2d(x: float, y: float) -> np.ndarray:
    """Homogeneous 2D translation acting on (x, y, 1)."""
    T = np.eye(3)
    T[:2, 2] = (x, y)
    return T


def look_at_matrix(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """
    Right-handed camera matrix: world space to eye space.

    The camera sits at `eye` and looks down its own -z axis towards
    `target`; `up` fixes the roll and need not be unit length or
    orthogonal to the viewing direction.

    Raises
    ------
    ValueError      : a point does not have 3 components.
    ZeroVectorError : eye == target, or up is parallel to the view direction.
    """
    eye, target, up = (np.asarray(p, dtype=float) for p in (eye, target, up))
    for p in (eye, target, up):
        if p.shape != (3,):
            raise ValueError(f"expected 3 components, got shape {p.shape}")
    if np.array_equal(eye, target):
        raise ZeroVectorError("eye and target coincide, view direction undefined")
    back = normalize(eye - target)
    right = cross(up, back)
    if not right.any():
        raise ZeroVectorError("up is parallel to the view direction")
    right = normalize(right)
    true_up = cross(back, right)

    M = np.eye(4)
    M[0, :3], M[1, :3], M[2, :3] = right, true_up, back
    M[:3, 3] = -M[:3, :3] @ eye
    return M


def view_matrix(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """look_at_matrix with y pointing down, as in Vulkan clip space."""
    return np.diag([1.0, -1.0, 1.0, 1.0]) @ look_at_matrix(eye, target, up)


def scaling_matrix(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([x, y, z]).astype(float)


def rotation_x(angle: float) -> np.ndarray:
    s, c = math.sin(angle), math.cos(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def rotation_y(angle: float) -> np.ndarray:
    s, c = math.sin(angle), math.cos(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def rotation_z(angle: float) -> np.ndarray:
    s, c = math.sin(angle), math.cos(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def rotation_matrix(x: float, y: float, z: float) -> np.ndarray:
    """Rotation about x, then y, then z: Rz @ Ry @ Rx."""
    return rotation_z(z) @ rotation_y(y) @ rotation_x(x)


def axis_angle_matrix(axis: Sequence[float], angle: float) -> np.ndarray:
    """
    Rodrigues rotation by `angle` about `axis` (normalised here).
    """
    axis = np.asarray(axis, dtype=float)
    if axis.shape != (3,):
        raise ValueError(f"axis must have 3 components, got shape {axis.shape}")
    length = np.linalg.norm(axis)
    if length == 0:
        raise ZeroVectorError("rotation axis must be non-zero")
    x, y, z = axis / length
    s, c = math.sin(angle), math.cos(angle)
    t = 1.0 - c
    return np.array(
        [
            [c + x * x * t, x * y * t - z * s, x * z * t + y * s],
            [y * x * t + z * s, c + y * y * t, y * z * t - x * s],
            [z * x * t - y * s, z * y * t + x * s, c + z * z * t],
        ]
    )
