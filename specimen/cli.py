"""
Command-Line Interface

CLI for generating lattice-lightened fatigue specimens, validating designs
and estimating their weight saving.
"""

import argparse
import json
import logging
import sys
from typing import Optional, List

from specimen_policies import LatticePolicy, CombinePolicy, OutputPolicy, LATTICE_FAMILIES
from specimen_validity import validate_specimen
from .core.types import SpecimenParams
from .ops.profile import generate_profile
from .analysis.volume import estimate_specimen_volume
from .specs.templates import get_standard_template, list_standards
from .api.generate import generate_specimen
from .api.export import make_run_dir, save_mesh, write_json, write_parameter_dump

_PARAM_OPTIONS = (
    ("--grip-length", "grip_length", float),
    ("--grip-diameter", "grip_diameter", float),
    ("--gauge-length", "gauge_length", float),
    ("--gauge-diameter", "gauge_diameter", float),
    ("--fillet-radius", "fillet_radius", float),
    ("--taper-angle", "taper_angle", float),
    ("--lattice-size", "lattice_size", float),
    ("--lattice-thickness", "lattice_thickness", float),
    ("--lattice-offset", "lattice_offset", float),
)


def _add_param_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--standard", "-s",
        type=str,
        default="E466",
        help="Test standard for templates and validation (default: E466)",
    )
    parser.add_argument(
        "--params", "-p",
        type=str,
        default=None,
        help="JSON file with specimen parameters (overrides the template)",
    )
    parser.add_argument(
        "--lattice", "-l",
        type=str,
        choices=sorted(LATTICE_FAMILIES),
        default=None,
        help="Lattice type",
    )
    parser.add_argument(
        "--tapered",
        action="store_true",
        help="Use a straight tapered transition",
    )
    parser.add_argument(
        "--transition",
        type=str,
        choices=["tangent-arc", "spline", "conical"],
        default=None,
        help="Transition type",
    )
    for flag, _, kind in _PARAM_OPTIONS:
        parser.add_argument(flag, type=kind, default=None)


def params_from_args(args: argparse.Namespace) -> SpecimenParams:
    """Template of the standard, then the JSON file, then explicit options."""
    params = get_standard_template(args.standard)

    if args.params:
        with open(args.params) as f:
            params = params.updated_from(json.load(f))

    changes = {}
    for _, name, _ in _PARAM_OPTIONS:
        value = getattr(args, name)
        if value is not None:
            changes[name] = value
    if args.lattice is not None:
        changes["lattice_type"] = args.lattice
    if args.transition is not None:
        changes["transition_type"] = args.transition
    if args.tapered:
        changes["use_tapered_transition"] = True

    return params.with_changes(**changes) if changes else params


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="specimen-lattice",
        description="Parametric fatigue specimens with lattice-lightened gauge sections",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate specimen meshes")
    _add_param_arguments(gen_parser)
    gen_parser.add_argument(
        "--output", "-O",
        type=str,
        default="./output",
        help="Output directory (default: ./output)",
    )
    gen_parser.add_argument(
        "--format", "-f",
        type=str,
        choices=["stl", "ply", "obj", "step", "iges"],
        default=None,
        help="Output format; step/iges write a parameter dump (default: the output policy's mesh format)",
    )
    gen_parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for randomized strut inclusion (default: 0)",
    )
    gen_parser.add_argument(
        "--max-union",
        type=int,
        default=50,
        help="Maximum primitives unioned per lattice (default: 50)",
    )

    val_parser = subparsers.add_parser("validate", help="Validate a specimen design")
    _add_param_arguments(val_parser)

    est_parser = subparsers.add_parser("estimate", help="Estimate volume and weight saving")
    _add_param_arguments(est_parser)

    tpl_parser = subparsers.add_parser("template", help="Print a standard template")
    tpl_parser.add_argument(
        "standard",
        type=str,
        nargs="?",
        default=None,
        help=f"Standard name ({', '.join(list_standards())})",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "generate":
        return run_generate(args)
    elif args.command == "validate":
        return run_validate(args)
    elif args.command == "estimate":
        return run_estimate(args)
    elif args.command == "template":
        return run_template(args)

    return 1


def run_generate(args: argparse.Namespace) -> int:
    """Run the generate command."""
    params = params_from_args(args)
    output_policy = OutputPolicy(output_dir=args.output)
    run_dir = make_run_dir(output_policy)
    fmt = args.format or output_policy.mesh_format

    if fmt in ("step", "iges"):
        profile = generate_profile(params)
        path = write_parameter_dump(params, profile, run_dir / f"specimen.{fmt}")
        print(f"No {fmt.upper()} writer available; wrote parameter dump to {path}")
        return 0

    print(f"Generating specimen with {params.lattice_type} lattice...")
    result = generate_specimen(
        params,
        standard=args.standard,
        lattice_policy=LatticePolicy(seed=args.seed),
        combine_policy=CombinePolicy(max_union_operands=args.max_union),
    )

    save_mesh(result.gauge_solid, run_dir / f"gauge_section.{fmt}")
    if output_policy.save_outer_solid and result.outer_solid is not None:
        save_mesh(result.outer_solid, run_dir / f"specimen_outer.{fmt}")
    if output_policy.save_reports:
        write_json(result, run_dir / "specimen_report.json")

    print(f"\nValidation: {result.validation.message}")
    print(f"Void fraction: {result.void_fraction:.3f}")
    if result.degraded:
        print("Warning: lattice could not be applied; gauge section is a plain cylinder")
    print(f"Outputs written to {run_dir}")
    return 0


def run_validate(args: argparse.Namespace) -> int:
    """Run the validate command."""
    params = params_from_args(args)
    result = validate_specimen(params, args.standard)
    print(result.message)
    return 0 if result.valid else 2


def run_estimate(args: argparse.Namespace) -> int:
    """Run the estimate command."""
    params = params_from_args(args)
    volume = estimate_specimen_volume(params, generate_profile(params))
    print(json.dumps(volume, indent=2))
    return 0


def run_template(args: argparse.Namespace) -> int:
    """Run the template command."""
    standards = [args.standard] if args.standard else list_standards()
    templates = {s: get_standard_template(s).to_dict() for s in standards}
    print(json.dumps(templates, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
