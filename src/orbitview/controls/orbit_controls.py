"""
Orbit controller: turns pointer, wheel, touch and key input into camera
motion around a target point.

DESIGN: Pending Deltas, Single Commit Point
===========================================

Input handlers never move the camera directly. They accumulate intent:

- rotation delta (theta, phi) in radians
- pan offset, a world-space vector added to the target
- scale, a multiplicative radius factor (perspective dolly)

update() is the only place the camera pose is written. It converts the
camera offset to spherical coordinates in a "Y-is-up" frame, applies the
pending deltas (all of them, or a damping_factor fraction when damping is
on), clamps angles and radius, writes position/orientation back and reports
whether the pose changed.

Gesture lifecycle:
- pointerdown / touchstart classify the gesture (see interaction.gestures)
  and emit START
- pointermove / touchmove feed deltas and call update()
- pointerup / touchend emit END and return to NONE
- wheel is a one-shot START -> dolly -> END

Orthographic cameras dolly by changing camera.zoom directly; that change is
reported through the next update().
"""

from __future__ import annotations

import logging
import math

import numpy as np

from src.orbitview.config.settings import OrbitControlsConfig
from src.orbitview.interaction.events import EventBus, EventType
from src.orbitview.interaction.gestures import (
    WHEEL_COMPATIBLE_STATES,
    GestureState,
    resolve_mouse_state,
    resolve_touch_state,
)
from src.orbitview.interaction.input_surface import (
    CONTEXT_MENU,
    KEY_DOWN,
    POINTER_DOWN,
    POINTER_MOVE,
    POINTER_UP,
    TOUCH_END,
    TOUCH_MOVE,
    TOUCH_START,
    WHEEL,
    ContextMenuEvent,
    InputSurface,
    KeyEvent,
    PointerEvent,
    TouchEvent,
    WheelEvent,
)
from src.orbitview.rendering.camera import Camera
from src.orbitview.rendering.quaternion_utils import (
    quat_dot,
    quat_from_unit_vectors,
    quat_inverse,
    quat_rotate_vector,
)
from src.orbitview.rendering.spherical import Spherical
from src.shared.math import TWO_PI, clamp, clamp_azimuth, wrap_angle

logger = logging.getLogger(__name__)

# Squared displacement / small-angle rotation threshold for change detection
CHANGE_EPS = 1e-6

# update() never produces a radius below this
MIN_RADIUS = 1e-6

# Wheel / drag dolly step before zoom_speed is applied
ZOOM_BASE = 0.95

WORLD_UP = np.array([0.0, 1.0, 0.0])

EVENT_SOURCE = "orbit_controls"


class OrbitControls:
    """
    Orbit, dolly and pan a camera around ``target``.

    Parameters
    ----------
    camera : Camera
        Camera to drive. Its position, orientation and zoom are mutated in place.
    surface : InputSurface
        Source of input events. Listeners are attached immediately.
    config : OrbitControlsConfig | None
        Limits and toggles. A default config is created if omitted.
    event_bus : EventBus | None
        Channel for START / END / CHANGE notifications.

    Attributes
    ----------
    target : np.ndarray
        (3,) orbit pivot, mutated in place by panning
    events : EventBus
        Notification channel
    state : GestureState
        Active gesture
    grabbing : bool
        True between a successful pointer-down and the matching pointer-up
    """

    def __init__(
        self,
        camera: Camera,
        surface: InputSurface,
        config: OrbitControlsConfig | None = None,
        event_bus: EventBus | None = None,
    ):
        self.camera = camera
        self.surface = surface
        self.config = config if config is not None else OrbitControlsConfig()
        self.events = event_bus if event_bus is not None else EventBus(name="orbit-controls")

        self.target = np.zeros(3)
        self.state = GestureState.NONE
        self.grabbing = False

        # Committed spherical offset (from the last update())
        self._spherical = Spherical()

        # Pending deltas
        self._delta_theta = 0.0
        self._delta_phi = 0.0
        self._pan_offset = np.zeros(3)
        self._scale = 1.0
        self._zoom_changed = False

        # Gesture anchors in pixels
        self._rotate_start = np.zeros(2)
        self._pan_start = np.zeros(2)
        self._dolly_start = np.zeros(2)

        # Pose at the last reported change
        self._last_position: np.ndarray | None = None
        self._last_quaternion: np.ndarray | None = None

        # Snapshot for reset()
        self.target0 = self.target.copy()
        self.position0 = self.camera.position.copy()
        self.zoom0 = self.camera.zoom

        # Bound once so dispose() removes the very same objects
        self._surface_listeners = {
            CONTEXT_MENU: self._on_context_menu,
            POINTER_DOWN: self._on_pointer_down,
            WHEEL: self._on_wheel,
            TOUCH_START: self._on_touch_start,
            TOUCH_MOVE: self._on_touch_move,
            TOUCH_END: self._on_touch_end,
            KEY_DOWN: self._on_key_down,
        }
        self._gesture_listeners = {
            POINTER_MOVE: self._on_pointer_move,
            POINTER_UP: self._on_pointer_up,
        }
        for name, handler in self._surface_listeners.items():
            self.surface.add_event_listener(name, handler)
        self._disposed = False

        self.update()
        logger.debug(f"OrbitControls attached to {self.surface.name} for {type(camera).__name__}")

    # =========================================================================
    # Public API
    # =========================================================================

    def get_polar_angle(self) -> float:
        """Polar angle (radians from the up axis) after the last update()."""
        return self._spherical.phi

    def get_azimuthal_angle(self) -> float:
        """Azimuth angle (radians, in (-pi, pi]) after the last update()."""
        return self._spherical.theta

    def get_distance(self) -> float:
        """Radius after the last update()."""
        return self._spherical.radius

    def save_state(self) -> None:
        """Overwrite the reset() snapshot with the current target, position and zoom."""
        self.target0 = self.target.copy()
        self.position0 = self.camera.position.copy()
        self.zoom0 = self.camera.zoom
        logger.info(
            f"Saved orbit state: target={self.target0.tolist()} "
            f"position={self.position0.tolist()} zoom={self.zoom0}"
        )

    def reset(self) -> None:
        """
        Restore the saved snapshot.

        Pending deltas are discarded, the projection is refreshed, exactly one
        CHANGE is emitted and the gesture state returns to NONE.
        """
        self._clear_deltas()
        self.target[:] = self.target0
        self.camera.position[:] = self.position0
        self.camera.zoom = self.zoom0
        self.camera.update_projection_matrix()

        # Restore the snapshot verbatim; the next update() re-derives the same pose
        self.camera.look_at(self.target)
        self._spherical = Spherical.from_vector(
            quat_rotate_vector(self._to_y_up(), self.camera.position - self.target)
        )
        self._remember_pose()
        self._zoom_changed = False
        self.state = GestureState.NONE
        self.grabbing = False

        self.events.emit(EventType.CHANGE, source=EVENT_SOURCE)
        logger.info("Orbit state reset")

    def dispose(self) -> None:
        """Detach every listener this controller registered. Safe to call repeatedly."""
        if self._disposed:
            return
        for name, handler in self._surface_listeners.items():
            self.surface.remove_event_listener(name, handler)
        self._detach_gesture_listeners()
        self._disposed = True
        self.state = GestureState.NONE
        self.grabbing = False
        logger.debug(f"OrbitControls disposed ({self.surface.name})")

    @property
    def disposed(self) -> bool:
        return self._disposed

    def update(self) -> bool:
        """
        Apply pending deltas and write the camera pose.

        Returns
        -------
        bool
            True if position, orientation or zoom changed noticeably since the
            last reported change (a CHANGE event is emitted in that case)
        """
        self._commit_pose()

        moved = (
            self._last_position is None
            or float(np.sum((self.camera.position - self._last_position) ** 2)) > CHANGE_EPS
        )
        # Small-angle approximation: cos(x/2) ~ 1 - x^2 / 8
        turned = (
            self._last_quaternion is None
            or 8.0 * (1.0 - abs(quat_dot(self._last_quaternion, self.camera.quaternion))) > CHANGE_EPS
        )

        if self._zoom_changed or moved or turned:
            self._remember_pose()
            self._zoom_changed = False
            self.events.emit(EventType.CHANGE, source=EVENT_SOURCE)
            return True

        return False

    # -------------------------------------------------------------------------
    # Programmatic motion
    # -------------------------------------------------------------------------

    def rotate_left(self, angle: float) -> None:
        """Queue an azimuth rotation (positive turns the camera to the left)."""
        self._delta_theta -= angle

    def rotate_up(self, angle: float) -> None:
        """Queue a polar rotation (positive tilts the camera upward)."""
        self._delta_phi -= angle

    def pan(self, delta_x: float, delta_y: float) -> None:
        """
        Queue a pan by a screen-space delta in pixels (right and down positive).

        Perspective cameras scale the delta by the visible height at the
        target distance; orthographic cameras by frustum size over zoom.
        Unsupported cameras disable panning and log a warning.
        A surface with zero width or height ignores the pan.
        """
        perspective = self.camera.as_perspective()
        orthographic = self.camera.as_orthographic()
        matrix = self.camera.matrix

        if perspective is not None:
            target_distance = float(np.linalg.norm(perspective.position - self.target))
            # half of the fov is center to top of screen
            target_distance *= math.tan(math.radians(perspective.fov / 2.0))
            # only client_height, so aspect ratio does not distort speed
            height = self.surface.client_height
            if height <= 0.0:
                return
            self._pan_left(2.0 * delta_x * target_distance / height, matrix)
            self._pan_up(2.0 * delta_y * target_distance / height, matrix)
        elif orthographic is not None:
            width, height = self.surface.client_width, self.surface.client_height
            if width <= 0.0 or height <= 0.0:
                return
            self._pan_left(
                delta_x * (orthographic.right - orthographic.left) / orthographic.zoom / width,
                matrix,
            )
            self._pan_up(
                delta_y * (orthographic.top - orthographic.bottom) / orthographic.zoom / height,
                matrix,
            )
        else:
            logger.warning(
                f"Unsupported camera type {type(self.camera).__name__} - pan disabled"
            )
            self.config.enable_pan = False

    def dolly_in(self, dolly_scale: float) -> None:
        """Queue a dolly toward the target (perspective) or zoom in (orthographic)."""
        perspective = self.camera.as_perspective()
        orthographic = self.camera.as_orthographic()
        if perspective is not None:
            self._scale *= dolly_scale
        elif orthographic is not None:
            self._set_zoom(orthographic.zoom / dolly_scale)
        else:
            self._disable_zoom()

    def dolly_out(self, dolly_scale: float) -> None:
        """Queue a dolly away from the target (perspective) or zoom out (orthographic)."""
        perspective = self.camera.as_perspective()
        orthographic = self.camera.as_orthographic()
        if perspective is not None:
            self._scale /= dolly_scale
        elif orthographic is not None:
            self._set_zoom(orthographic.zoom * dolly_scale)
        else:
            self._disable_zoom()

    def dolly(self, distance: float, *, update: bool = True) -> None:
        """
        Move toward the target by ``distance`` world units.

        Negative distances move away. The resulting radius respects the
        distance limits. Orthographic cameras zoom by the equivalent ratio.

        Parameters
        ----------
        distance : float
            World units to travel toward the target
        update : bool
            Run update() afterwards
        """
        radius = max(MIN_RADIUS, float(np.linalg.norm(self.camera.position - self.target)))
        desired = clamp(radius - distance, self.config.min_distance, self.config.max_distance)
        desired = max(MIN_RADIUS, desired)
        self.dolly_in(desired / radius)
        if update:
            self.update()

    def set_target(self, x: float, y: float, z: float, *, update: bool = True) -> None:
        """Move the orbit pivot, keeping the camera position."""
        self.target[:] = (x, y, z)
        if update:
            self.update()

    def fit_to_sphere(self, center, radius: float, *, update: bool = True) -> None:
        """
        Frame a bounding sphere.

        The target moves to ``center``. Perspective cameras back off along the
        current viewing direction until the sphere fits both field-of-view
        axes; orthographic cameras keep their offset and change zoom instead.

        Parameters
        ----------
        center : array-like
            (3,) sphere center
        radius : float
            Sphere radius in world units
        update : bool
            Run update() afterwards
        """
        center = np.asarray(center, dtype=np.float64).reshape(3)
        radius = max(float(radius), MIN_RADIUS)
        self._clear_deltas()

        offset = self.camera.position - self.target
        length = float(np.linalg.norm(offset))
        if length < MIN_RADIUS:
            # Local +Z points from target toward the camera
            direction = self.camera.rotation_matrix[:, 2]
        else:
            direction = offset / length

        perspective = self.camera.as_perspective()
        orthographic = self.camera.as_orthographic()
        if perspective is not None:
            half_v = math.radians(perspective.fov) / 2.0
            half_h = math.atan(math.tan(half_v) * perspective.aspect)
            distance = radius / math.sin(min(half_v, half_h))
            distance = max(MIN_RADIUS, clamp(distance, self.config.min_distance, self.config.max_distance))
            self.target[:] = center
            self.camera.position[:] = center + direction * distance
        elif orthographic is not None:
            extent = min(
                abs(orthographic.right - orthographic.left),
                abs(orthographic.top - orthographic.bottom),
            )
            self.target[:] = center
            self.camera.position[:] = center + offset
            self._set_zoom(extent / (2.0 * radius))
        else:
            logger.warning(
                f"Unsupported camera type {type(self.camera).__name__} - fit moves the target only"
            )
            self.target[:] = center
            self.camera.position[:] = center + offset

        logger.debug(f"Fit to sphere center={center.tolist()} radius={radius}")
        if update:
            self.update()

    def fit_to_bounds(self, box_min, box_max, *, update: bool = True) -> None:
        """Frame an axis-aligned box through its bounding sphere."""
        lo = np.asarray(box_min, dtype=np.float64).reshape(3)
        hi = np.asarray(box_max, dtype=np.float64).reshape(3)
        center = (lo + hi) / 2.0
        self.fit_to_sphere(center, float(np.linalg.norm(hi - lo)) / 2.0, update=update)

    # =========================================================================
    # Geometry kernel
    # =========================================================================

    def _commit_pose(self) -> None:
        cfg = self.config
        camera = self.camera

        to_y_up = self._to_y_up()
        from_y_up = quat_inverse(to_y_up)

        offset = quat_rotate_vector(to_y_up, camera.position - self.target)
        spherical = Spherical.from_vector(offset)

        if cfg.auto_rotate and self.state is GestureState.NONE:
            self.rotate_left(self._auto_rotation_angle())

        if cfg.enable_damping:
            spherical.theta += self._delta_theta * cfg.damping_factor
            spherical.phi += self._delta_phi * cfg.damping_factor
        else:
            spherical.theta += self._delta_theta
            spherical.phi += self._delta_phi

        spherical.theta = clamp_azimuth(
            wrap_angle(spherical.theta), cfg.min_azimuth_angle, cfg.max_azimuth_angle
        )
        spherical.phi = clamp(spherical.phi, cfg.min_polar_angle, cfg.max_polar_angle)
        spherical.make_safe()

        spherical.radius *= self._scale
        spherical.radius = max(
            MIN_RADIUS, clamp(spherical.radius, cfg.min_distance, cfg.max_distance)
        )

        if cfg.enable_damping:
            self.target += self._pan_offset * cfg.damping_factor
        else:
            self.target += self._pan_offset

        offset = quat_rotate_vector(from_y_up, spherical.to_vector())
        camera.position[:] = self.target + offset
        camera.look_at(self.target)
        self._spherical = spherical

        if cfg.enable_damping:
            self._delta_theta *= 1.0 - cfg.damping_factor
            self._delta_phi *= 1.0 - cfg.damping_factor
            self._pan_offset *= 1.0 - cfg.damping_factor
        else:
            self._delta_theta = 0.0
            self._delta_phi = 0.0
            self._pan_offset = np.zeros(3)

        self._scale = 1.0

    def _to_y_up(self) -> np.ndarray:
        # so camera.up is the orbit axis
        return quat_from_unit_vectors(self.camera.up, WORLD_UP)

    def _remember_pose(self) -> None:
        self._last_position = self.camera.position.copy()
        self._last_quaternion = np.array(self.camera.quaternion, dtype=np.float64)

    def _clear_deltas(self) -> None:
        self._delta_theta = 0.0
        self._delta_phi = 0.0
        self._pan_offset = np.zeros(3)
        self._scale = 1.0

    def _auto_rotation_angle(self) -> float:
        # One revolution per minute at speed 1.0, assuming 60 calls per second
        return TWO_PI / 60.0 / 60.0 * self.config.auto_rotate_speed

    def _zoom_scale(self) -> float:
        return ZOOM_BASE ** self.config.zoom_speed

    def _pan_left(self, distance: float, matrix: np.ndarray) -> None:
        # X column of the camera matrix
        self._pan_offset = self._pan_offset + matrix[:3, 0] * -distance

    def _pan_up(self, distance: float, matrix: np.ndarray) -> None:
        if self.config.screen_space_panning:
            v = matrix[:3, 1]
        else:
            v = np.cross(self.camera.up, matrix[:3, 0])
        self._pan_offset = self._pan_offset + v * distance

    def _set_zoom(self, zoom: float) -> None:
        self.camera.zoom = clamp(zoom, self.config.min_zoom, self.config.max_zoom)
        self.camera.update_projection_matrix()
        self._zoom_changed = True

    def _disable_zoom(self) -> None:
        logger.warning(
            f"Unsupported camera type {type(self.camera).__name__} - dolly/zoom disabled"
        )
        self.config.enable_zoom = False

    # =========================================================================
    # Gesture handlers
    # =========================================================================

    def _accepts_input(self) -> bool:
        return self.config.enabled and not self._disposed

    def _attach_gesture_listeners(self) -> None:
        for name, handler in self._gesture_listeners.items():
            self.surface.add_event_listener(name, handler)

    def _detach_gesture_listeners(self) -> None:
        for name, handler in self._gesture_listeners.items():
            self.surface.remove_event_listener(name, handler)

    def _rotate_by_pixels(self, delta: np.ndarray) -> None:
        height = self.surface.client_height
        if height <= 0.0:
            return
        delta = delta * self.config.rotate_speed
        self.rotate_left(TWO_PI * delta[0] / height)  # yes, height
        self.rotate_up(TWO_PI * delta[1] / height)

    def _on_context_menu(self, event: ContextMenuEvent) -> None:
        if not self._accepts_input():
            return
        event.prevent_default()

    def _on_pointer_down(self, event: PointerEvent) -> None:
        if not self._accepts_input():
            return

        # Prevent the host from scrolling and take keyboard focus
        event.prevent_default()
        self.surface.focus()

        action = self.config.mouse_buttons.action_for(event.button)
        state = resolve_mouse_state(action, event.has_modifier, self.config)
        if state is GestureState.NONE:
            self.state = GestureState.NONE
            return

        anchor = np.array([event.client_x, event.client_y], dtype=np.float64)
        if state is GestureState.ROTATE:
            self._rotate_start = anchor
        elif state is GestureState.PAN:
            self._pan_start = anchor
        else:
            self._dolly_start = anchor

        self.state = state
        self.grabbing = True
        self._attach_gesture_listeners()
        logger.debug(f"Pointer gesture started: {state.name}")
        self.events.emit(EventType.START, source=EVENT_SOURCE)

    def _on_pointer_move(self, event: PointerEvent) -> None:
        if not self._accepts_input():
            return
        event.prevent_default()

        point = np.array([event.client_x, event.client_y], dtype=np.float64)
        cfg = self.config

        if self.state is GestureState.ROTATE:
            if not cfg.enable_rotate:
                return
            self._rotate_by_pixels(point - self._rotate_start)
            self._rotate_start = point
            self.update()
        elif self.state is GestureState.DOLLY:
            if not cfg.enable_zoom:
                return
            delta_y = point[1] - self._dolly_start[1]
            if delta_y > 0:
                self.dolly_out(self._zoom_scale())
            elif delta_y < 0:
                self.dolly_in(self._zoom_scale())
            self._dolly_start = point
            self.update()
        elif self.state is GestureState.PAN:
            if not cfg.enable_pan:
                return
            delta = (point - self._pan_start) * cfg.pan_speed
            self.pan(delta[0], delta[1])
            self._pan_start = point
            self.update()

    def _on_pointer_up(self, event: PointerEvent) -> None:
        # Teardown runs even when disabled
        self.grabbing = False
        self._detach_gesture_listeners()
        logger.debug(f"Pointer gesture ended: {self.state.name}")
        self.events.emit(EventType.END, source=EVENT_SOURCE)
        self.state = GestureState.NONE

    def _on_wheel(self, event: WheelEvent) -> None:
        if (
            not self._accepts_input()
            or not self.config.enable_zoom
            or self.state not in WHEEL_COMPATIBLE_STATES
        ):
            return

        event.prevent_default()
        event.stop_propagation()

        self.events.emit(EventType.START, source=EVENT_SOURCE)
        if event.delta_y < 0:
            self.dolly_in(self._zoom_scale())
        elif event.delta_y > 0:
            self.dolly_out(self._zoom_scale())
        self.update()
        self.events.emit(EventType.END, source=EVENT_SOURCE)

    def _on_key_down(self, event: KeyEvent) -> None:
        cfg = self.config
        if not self._accepts_input() or not cfg.enable_keys or not cfg.enable_pan:
            return

        keys = cfg.keys
        step = cfg.key_pan_speed
        pans = {
            keys.up: (0.0, step),
            keys.bottom: (0.0, -step),
            keys.left: (step, 0.0),
            keys.right: (-step, 0.0),
        }
        if event.key_code not in pans:
            return

        self.pan(*pans[event.key_code])
        # keep the host from scrolling on cursor keys
        event.prevent_default()
        self.update()

    # -------------------------------------------------------------------------
    # Touch
    # -------------------------------------------------------------------------

    @staticmethod
    def _touch_center(event: TouchEvent) -> np.ndarray:
        touches = event.touches
        if len(touches) == 1:
            return np.array([touches[0].page_x, touches[0].page_y], dtype=np.float64)
        return 0.5 * np.array(
            [touches[0].page_x + touches[1].page_x, touches[0].page_y + touches[1].page_y],
            dtype=np.float64,
        )

    @staticmethod
    def _touch_distance(event: TouchEvent) -> float:
        a, b = event.touches[0], event.touches[1]
        return math.hypot(a.page_x - b.page_x, a.page_y - b.page_y)

    def _on_touch_start(self, event: TouchEvent) -> None:
        if not self._accepts_input():
            return
        event.prevent_default()

        cfg = self.config
        state = resolve_touch_state(len(event.touches), cfg)

        if state in (GestureState.TOUCH_ROTATE, GestureState.TOUCH_DOLLY_ROTATE):
            if cfg.enable_rotate:
                self._rotate_start = self._touch_center(event)
        if state in (GestureState.TOUCH_PAN, GestureState.TOUCH_DOLLY_PAN):
            if cfg.enable_pan:
                self._pan_start = self._touch_center(event)
        if state in (GestureState.TOUCH_DOLLY_PAN, GestureState.TOUCH_DOLLY_ROTATE):
            if cfg.enable_zoom:
                self._dolly_start = np.array([0.0, self._touch_distance(event)])

        self.state = state
        if state is not GestureState.NONE:
            logger.debug(f"Touch gesture started: {state.name} ({len(event.touches)} touches)")
            self.events.emit(EventType.START, source=EVENT_SOURCE)

    def _touch_rotate(self, event: TouchEvent) -> None:
        point = self._touch_center(event)
        self._rotate_by_pixels(point - self._rotate_start)
        self._rotate_start = point

    def _touch_pan(self, event: TouchEvent) -> None:
        point = self._touch_center(event)
        delta = (point - self._pan_start) * self.config.pan_speed
        self.pan(delta[0], delta[1])
        self._pan_start = point

    def _touch_dolly(self, event: TouchEvent) -> None:
        distance = self._touch_distance(event)
        start = self._dolly_start[1]
        # Coincident fingers give no usable ratio
        if start > 0.0 and distance > 0.0:
            self.dolly_out((distance / start) ** self.config.zoom_speed)
        self._dolly_start = np.array([0.0, distance])

    def _on_touch_move(self, event: TouchEvent) -> None:
        if not self._accepts_input():
            return
        event.prevent_default()
        event.stop_propagation()

        cfg = self.config
        state = self.state
        two_finger = state in (GestureState.TOUCH_DOLLY_PAN, GestureState.TOUCH_DOLLY_ROTATE)
        if two_finger and len(event.touches) < 2:
            return

        if state is GestureState.TOUCH_ROTATE:
            if not cfg.enable_rotate:
                return
            self._touch_rotate(event)
        elif state is GestureState.TOUCH_PAN:
            if not cfg.enable_pan:
                return
            self._touch_pan(event)
        elif state is GestureState.TOUCH_DOLLY_PAN:
            if not (cfg.enable_zoom or cfg.enable_pan):
                return
            if cfg.enable_zoom:
                self._touch_dolly(event)
            if cfg.enable_pan:
                self._touch_pan(event)
        elif state is GestureState.TOUCH_DOLLY_ROTATE:
            if not (cfg.enable_zoom or cfg.enable_rotate):
                return
            if cfg.enable_zoom:
                self._touch_dolly(event)
            if cfg.enable_rotate:
                self._touch_rotate(event)
        else:
            self.state = GestureState.NONE
            return

        self.update()

    def _on_touch_end(self, event: TouchEvent) -> None:
        if not self._accepts_input():
            return
        logger.debug(f"Touch gesture ended: {self.state.name}")
        self.events.emit(EventType.END, source=EVENT_SOURCE)
        self.state = GestureState.NONE


__all__ = ["OrbitControls", "CHANGE_EPS", "MIN_RADIUS"]
