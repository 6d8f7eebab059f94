"""
Public API for specimen generation.

Usage:
    from specimen.api import generate_specimen, generate_gauge_section
    from specimen.core import SpecimenParams

    result = generate_specimen(SpecimenParams(lattice_type="vertical"))
    result.gauge_solid.export("gauge.stl")
"""

from .generate import (
    generate_gauge_section,
    generate_specimen,
    SpecimenResult,
)
from .export import (
    make_run_dir,
    save_mesh,
    write_json,
    format_parameter_dump,
    write_parameter_dump,
)
from .worker import GenerationWorker, WorkerResult

__all__ = [
    "generate_gauge_section",
    "generate_specimen",
    "SpecimenResult",
    "make_run_dir",
    "save_mesh",
    "write_json",
    "format_parameter_dump",
    "write_parameter_dump",
    "GenerationWorker",
    "WorkerResult",
]
