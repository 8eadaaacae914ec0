"""
Quaternion utilities for camera orientation.

All quaternions use wxyz format (w, x, y, z).
w is the scalar component, (x, y, z) is the vector component.
Every function returns a freshly allocated array.
"""

from __future__ import annotations

import numpy as np


def quat_identity() -> np.ndarray:
    """Identity rotation (wxyz)."""
    return np.array([1.0, 0.0, 0.0, 0.0])


def quat_normalize(q: np.ndarray) -> np.ndarray:
    """
    Normalize quaternion to unit length.

    Degenerate (near-zero) input falls back to the identity rotation.
    """
    q = np.asarray(q, dtype=np.float64)
    norm = np.linalg.norm(q)
    if norm < 1e-12:
        return quat_identity()
    return q / norm


def quat_inverse(q: np.ndarray) -> np.ndarray:
    """Inverse of a unit quaternion (its conjugate)."""
    w, x, y, z = quat_normalize(q)
    return np.array([w, -x, -y, -z])


def quat_dot(q1: np.ndarray, q2: np.ndarray) -> float:
    """Four-component dot product."""
    return float(np.dot(np.asarray(q1, dtype=np.float64), np.asarray(q2, dtype=np.float64)))


def quat_from_unit_vectors(v_from: np.ndarray, v_to: np.ndarray) -> np.ndarray:
    """
    Shortest-arc rotation taking direction ``v_from`` onto ``v_to``.

    Parameters
    ----------
    v_from : np.ndarray
        Source direction (3,), normalized internally
    v_to : np.ndarray
        Destination direction (3,), normalized internally

    Returns
    -------
    np.ndarray
        Rotation quaternion (wxyz format)
    """
    a = np.asarray(v_from, dtype=np.float64)
    b = np.asarray(v_to, dtype=np.float64)
    a = a / np.linalg.norm(a)
    b = b / np.linalg.norm(b)

    r = float(np.dot(a, b)) + 1.0

    if r < 1e-12:
        # Opposite vectors: rotate 180 degrees about any perpendicular axis
        if abs(a[0]) > abs(a[2]):
            q = np.array([0.0, -a[1], a[0], 0.0])
        else:
            q = np.array([0.0, 0.0, -a[2], a[1]])
    else:
        c = np.cross(a, b)
        q = np.array([r, c[0], c[1], c[2]])

    return quat_normalize(q)


def quat_rotate_vector(q: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Rotate a 3-vector by a quaternion."""
    return quat_to_rotation_matrix(q) @ np.asarray(v, dtype=np.float64)


def quat_to_rotation_matrix(q: np.ndarray) -> np.ndarray:
    """
    Convert quaternion to 3x3 rotation matrix.

    Parameters
    ----------
    q : np.ndarray
        Quaternion (wxyz format)

    Returns
    -------
    np.ndarray
        3x3 rotation matrix
    """
    w, x, y, z = quat_normalize(q)

    xx = x * x
    yy = y * y
    zz = z * z
    xy = x * y
    xz = x * z
    yz = y * z
    wx = w * x
    wy = w * y
    wz = w * z

    return np.array(
        [
            [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy)],
            [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx)],
            [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy)],
        ]
    )


def rotation_matrix_to_quat(R: np.ndarray) -> np.ndarray:
    """
    Convert 3x3 rotation matrix to quaternion.

    Uses Shepperd's method for numerical stability.
    """
    trace = R[0, 0] + R[1, 1] + R[2, 2]

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (R[2, 1] - R[1, 2]) * s
        y = (R[0, 2] - R[2, 0]) * s
        z = (R[1, 0] - R[0, 1]) * s
    elif R[0, 0] > R[1, 1] and R[0, 0] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2])
        w = (R[2, 1] - R[1, 2]) / s
        x = 0.25 * s
        y = (R[0, 1] + R[1, 0]) / s
        z = (R[0, 2] + R[2, 0]) / s
    elif R[1, 1] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2])
        w = (R[0, 2] - R[2, 0]) / s
        x = (R[0, 1] + R[1, 0]) / s
        y = 0.25 * s
        z = (R[1, 2] + R[2, 1]) / s
    else:
        s = 2.0 * np.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1])
        w = (R[1, 0] - R[0, 1]) / s
        x = (R[0, 2] + R[2, 0]) / s
        y = (R[1, 2] + R[2, 1]) / s
        z = 0.25 * s

    return quat_normalize(np.array([w, x, y, z]))


def look_at_quat(eye: np.ndarray, target: np.ndarray, up: np.ndarray) -> np.ndarray:
    """
    Orientation for a camera at ``eye`` looking at ``target``.

    Camera convention: looks down local -Z with local +Y as up.

    Parameters
    ----------
    eye : np.ndarray
        Camera position (3,)
    target : np.ndarray
        Point to look at (3,)
    up : np.ndarray
        World up hint (3,)

    Returns
    -------
    np.ndarray
        Orientation quaternion (wxyz format)
    """
    eye = np.asarray(eye, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)

    # Local +Z points from target toward the camera
    z_axis = eye - target
    if np.linalg.norm(z_axis) < 1e-12:
        z_axis = np.array([0.0, 0.0, 1.0])
    z_axis = z_axis / np.linalg.norm(z_axis)

    x_axis = np.cross(up, z_axis)
    if np.linalg.norm(x_axis) < 1e-12:
        # up parallel to view direction: nudge z and retry
        if abs(abs(up[2]) - 1.0) < 1e-12:
            z_axis = z_axis + np.array([1e-4, 0.0, 0.0])
        else:
            z_axis = z_axis + np.array([0.0, 0.0, 1e-4])
        z_axis = z_axis / np.linalg.norm(z_axis)
        x_axis = np.cross(up, z_axis)
    x_axis = x_axis / np.linalg.norm(x_axis)

    y_axis = np.cross(z_axis, x_axis)

    R = np.stack([x_axis, y_axis, z_axis], axis=1)
    return rotation_matrix_to_quat(R)
