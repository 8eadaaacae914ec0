"""
Configuration import/export for the orbit controller.

Exports and imports controller settings (limits, toggles, remapping tables)
and, optionally, the saved camera pose to/from YAML files.

File layout::

    version: 1
    controls:            # OrbitControlsConfig.to_dict()
      enable_damping: true
      ...
    camera:              # only when exported from a live controller
      target: [x, y, z]
      position: [x, y, z]
      zoom: 1.0
      polar_angle: 1.23
      azimuth_angle: -0.4
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np
import yaml

from src.orbitview.config.settings import OrbitControlsConfig
from src.shared.exceptions import ConfigError

if TYPE_CHECKING:
    from src.orbitview.controls.orbit_controls import OrbitControls

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def _vec3_list(v) -> list[float]:
    return [float(c) for c in np.asarray(v, dtype=np.float64).reshape(3)]


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError("Config file not found", config_path=str(path)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML: {e}", config_path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML value must be a mapping", config_path=str(path))
    return data


def export_controls_config(
    source: OrbitControls | OrbitControlsConfig,
    output_path: Path | str,
) -> None:
    """
    Export controller configuration to a YAML file.

    Parameters
    ----------
    source : OrbitControls | OrbitControlsConfig
        A live controller (config plus saved camera pose) or a bare config
    output_path : Path | str
        Path to output YAML file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(source, OrbitControlsConfig):
        config = source
        controls = None
    else:
        config = source.config
        controls = source

    export_data: dict[str, Any] = {
        "version": FORMAT_VERSION,
        "controls": config.to_dict(),
    }

    if controls is not None:
        export_data["camera"] = {
            "target": _vec3_list(controls.target0),
            "position": _vec3_list(controls.position0),
            "zoom": float(controls.zoom0),
            "polar_angle": float(controls.get_polar_angle()),
            "azimuth_angle": float(controls.get_azimuthal_angle()),
        }

    with open(output_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(export_data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Exported controls config to {output_path}")


def import_controls_config(input_path: Path | str) -> OrbitControlsConfig:
    """
    Import controller configuration from a YAML file.

    Parameters
    ----------
    input_path : Path | str
        Path to YAML file written by export_controls_config()

    Returns
    -------
    OrbitControlsConfig
        Parsed configuration (defaults for missing fields)

    Raises
    ------
    ConfigError
        If the file is missing, malformed or holds invalid values
    """
    input_path = Path(input_path)
    data = _read_yaml(input_path)

    version = data.get("version", FORMAT_VERSION)
    if version != FORMAT_VERSION:
        logger.warning(f"Config version {version} differs from {FORMAT_VERSION}; reading anyway")

    controls = data.get("controls", {})
    if not isinstance(controls, dict):
        raise ConfigError("'controls' must be a mapping", config_path=str(input_path), field_name="controls")

    config = OrbitControlsConfig.from_dict(controls, config_path=str(input_path))
    logger.info(f"Imported controls config from {input_path}")
    return config


def apply_camera_pose(controls: OrbitControls, input_path: Path | str) -> bool:
    """
    Restore the camera pose stored in a YAML file onto a controller.

    The pose becomes the controller's saved state, so reset() returns to it.

    Parameters
    ----------
    controls : OrbitControls
        Controller to update
    input_path : Path | str
        Path to YAML file written by export_controls_config()

    Returns
    -------
    bool
        True if the file contained a camera section and it was applied
    """
    input_path = Path(input_path)
    data = _read_yaml(input_path)

    camera = data.get("camera")
    if not camera:
        logger.info(f"No camera pose in {input_path}")
        return False

    try:
        target = _vec3_list(camera["target"])
        position = _vec3_list(camera["position"])
        zoom = float(camera.get("zoom", controls.camera.zoom))
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid camera pose: {e}", config_path=str(input_path), field_name="camera") from e

    controls.target[:] = target
    controls.camera.position[:] = position
    if zoom != controls.camera.zoom:
        controls.camera.zoom = zoom
        controls.camera.update_projection_matrix()
    controls.save_state()
    controls.reset()

    logger.info(f"Applied camera pose from {input_path}")
    return True
