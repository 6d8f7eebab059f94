"""
Specimen Lattice - Geometry Library

This module provides parametric generation of axisymmetric dog-bone fatigue
specimens and lattice void structures carved into their gauge section.

Primary Output: void-bearing gauge section solid + revolved outer solid

Main Entry Points:
    - generate_specimen(): Full pipeline for one parameter set
    - generate_gauge_section(): Gauge cylinder with lattice voids
    - generate_profile(): Half profile of the specimen outline
    - generate_lattice(): Primitive solids of a lattice family
    - estimate_void_fraction(): Analytic weight-saving estimate

Example:
    >>> from specimen import SpecimenParams, generate_specimen
    >>>
    >>> params = SpecimenParams(lattice_type="vertical-grid", lattice_offset=0.6)
    >>> result = generate_specimen(params, standard="E466")
    >>> result.gauge_solid.export("gauge.stl")
"""

from .core import SpecimenParams, Profile, Point2D, LatticeParams
from .ops import generate_profile, revolve_profile, generate_lattice, combine
from .analysis import estimate_void_fraction, estimate_specimen_volume
from .specs import get_standard_template
from .api import generate_specimen, generate_gauge_section, GenerationWorker

__version__ = "0.1.0"

__all__ = [
    # Types
    "SpecimenParams",
    "Profile",
    "Point2D",
    "LatticeParams",
    # Operations
    "generate_profile",
    "revolve_profile",
    "generate_lattice",
    "combine",
    # Analysis
    "estimate_void_fraction",
    "estimate_specimen_volume",
    # Templates
    "get_standard_template",
    # High-level API
    "generate_specimen",
    "generate_gauge_section",
    "GenerationWorker",
]
