"""
Export utilities for specimen outputs.

Meshes are written through trimesh; reports as JSON. Formats without a
native writer (STEP, IGES) get a textual parameter dump instead.

UNIT CONVENTIONS
----------------
All geometric values are in MILLIMETERS, both internally and on disk.
"""

from typing import Optional, Dict, Any, Union, TYPE_CHECKING
from pathlib import Path
import json
import time
import logging

from specimen_policies import OutputPolicy, OperationReport
from ..core.types import SpecimenParams, Profile

if TYPE_CHECKING:
    import trimesh

logger = logging.getLogger(__name__)

MESH_FORMATS = ("stl", "ply", "obj")


def make_run_dir(
    output_policy: Optional[OutputPolicy] = None,
    run_name: Optional[str] = None,
) -> Path:
    """
    Create and return the directory one generation run writes into.

    ``run_name`` wins over the policy's naming convention; otherwise a
    fixed ``run`` directory or a ``run_<timestamp>`` one is used.
    """
    policy = output_policy or OutputPolicy()

    if not run_name:
        if policy.naming_convention == "timestamped":
            run_name = "run_" + time.strftime("%Y%m%d_%H%M%S")
        else:
            run_name = "run"

    run_dir = Path(policy.output_dir) / run_name
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def save_mesh(
    mesh: "trimesh.Trimesh",
    path: Union[str, Path],
) -> Path:
    """
    Write a solid to disk in the format named by the file extension.

    Raises
    ------
    ValueError
        If the extension is not one of ``MESH_FORMATS``.
    """
    target = Path(path)
    fmt = target.suffix.lower().lstrip(".")
    if fmt not in MESH_FORMATS:
        raise ValueError(f"Unsupported mesh format '{fmt}'. Valid formats: {MESH_FORMATS}")

    target.parent.mkdir(parents=True, exist_ok=True)
    mesh.export(str(target), file_type=fmt)
    logger.info(f"Wrote {len(mesh.faces)} faces to {target}")
    return target


def write_json(
    data: Union[Dict[str, Any], OperationReport],
    path: Union[str, Path],
) -> Path:
    """Dump a dict, or anything with ``to_dict``, as indented JSON."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    payload = data.to_dict() if hasattr(data, "to_dict") else data
    target.write_text(json.dumps(payload, indent=2, default=str))

    logger.info(f"Wrote report {target}")
    return target


def format_parameter_dump(
    params: SpecimenParams,
    profile: Profile,
    fmt: str,
) -> str:
    """Text placeholder describing a specimen for formats with no writer."""
    if params.use_tapered_transition:
        transition = f"Tapered ({params.taper_angle:g}°)"
    else:
        transition = params.transition_type

    return (
        f"{fmt.upper()} export information:\n"
        f"------------------------\n"
        f"No {fmt.upper()} writer is available; this file records the specimen "
        f"parameters instead.\n"
        f"\n"
        f"Specimen Parameters:\n"
        f"{json.dumps(params.to_dict(), indent=2)}\n"
        f"\n"
        f"Profile Information:\n"
        f"- Total Length: {profile.total_length:.2f} mm\n"
        f"- Gauge Length: {profile.gauge_length:.2f} mm\n"
        f"- Diameter: {profile.gauge_diameter:.2f} mm\n"
        f"- Transition Type: {transition}\n"
    )


def write_parameter_dump(
    params: SpecimenParams,
    profile: Profile,
    path: Union[str, Path],
    fmt: Optional[str] = None,
) -> Path:
    """
    Write the textual parameter dump.

    ``fmt`` defaults to the file extension (e.g. "step", "iges").
    """
    output_path = Path(path)
    if fmt is None:
        fmt = output_path.suffix.lstrip(".") or "txt"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(format_parameter_dump(params, profile, fmt), encoding="utf-8")
    logger.info(f"Saved {fmt.upper()} parameter dump to {output_path}")

    return output_path


__all__ = [
    "MESH_FORMATS",
    "make_run_dir",
    "save_mesh",
    "write_json",
    "format_parameter_dump",
    "write_parameter_dump",
]
