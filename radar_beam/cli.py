"""
Command-line interface for radar-beam.

Provides CLI commands for:
- Computing beam diagrams
- Listing the angles of an elevation schedule
- Writing an example configuration file
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from radar_beam import __version__


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def build_config(args: argparse.Namespace):
    """Build a DiagramConfig from a config file and CLI overrides."""
    from radar_beam.config import ConfigurationManager, DiagramConfig
    from radar_beam.scan import ElevationSchedule

    if args.config:
        config = ConfigurationManager().load_config(args.config).config
    else:
        config = DiagramConfig()

    if args.latitude is not None:
        config.site.latitude_deg = args.latitude
    if args.altitude is not None:
        config.site.altitude_m = args.altitude
    if args.max_range is not None:
        config.range.max_range_km = args.max_range
    if args.sections is not None:
        config.range.n_sections = args.sections
    if args.tiers:
        config.scan.tiers = ElevationSchedule.parse(args.tiers).pairs()
    if args.format:
        config.output.format = args.format

    return config


def run_diagram(args: argparse.Namespace) -> int:
    """Compute a beam diagram and save or print it."""
    from radar_beam import BeamDiagram

    config = build_config(args)

    if args.list_elevations:
        for angle in config.scan.schedule():
            print(f"{angle:.1f}")
        return 0

    diagram = BeamDiagram(config)
    if diagram.validation_errors:
        for error in diagram.validation_errors:
            print(f"Error: {error}")
        return 1

    result = diagram.run()

    if args.output:
        output_path = diagram.save_result(result, args.output, format=config.output.format)
        print(f"Results saved to: {output_path}")
    else:
        print(f"\nBeam heights at {config.range.max_range_km:g} km slant range:")
        print(f"  Site: lat {config.site.latitude_deg:.2f} deg, alt {config.site.altitude_m:.1f} m")
        print(f"  {'Elevation [deg]':>16} {'Altitude [km]':>14} {'Distance [km]':>14}")
        for elevation, path in result.pairs():
            last = path.points[-1]
            print(
                f"  {elevation:16.1f} {last.altitude_m / 1000:14.3f} "
                f"{last.distance_m / 1000:14.3f}"
            )

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="radar-beam: Radar beam heights under 4/3 Earth refraction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Beam heights for the default schedule at 36 N
    radar-beam

    # Mountain-top site, custom schedule, CSV output
    radar-beam --latitude 47.5 --altitude 1800 --tiers "0:5,20:10,100:0" -o beams.csv -f csv

    # Plot from a configuration file
    radar-beam --config diagram.yaml --output beams.png --format png
        """,
    )

    # Global options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"radar-beam {__version__}",
    )

    # Configuration options
    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to JSON or YAML configuration file",
    )
    parser.add_argument(
        "--example-config",
        type=str,
        metavar="PATH",
        help="Write an example JSON configuration to PATH and exit",
    )

    # Site options
    parser.add_argument(
        "--latitude",
        type=float,
        help="Site latitude [degrees]",
    )
    parser.add_argument(
        "--altitude",
        type=float,
        help="Site altitude [m]",
    )

    # Sampling options
    parser.add_argument(
        "--max-range",
        type=float,
        help="Maximum slant range [km]",
    )
    parser.add_argument(
        "--sections",
        type=int,
        help="Number of range intervals per beam",
    )
    parser.add_argument(
        "--tiers",
        type=str,
        help='Elevation tiers in tenths of a degree, e.g. "0:5,50:10,400:0"',
    )
    parser.add_argument(
        "--list-elevations",
        action="store_true",
        help="Print the elevation angles of the schedule and exit",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Output file path",
    )
    parser.add_argument(
        "-f", "--format",
        type=str,
        choices=["json", "csv", "png", "svg"],
        help="Output format",
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.example_config:
        from radar_beam.config import ConfigurationManager
        ConfigurationManager().save_example_config(args.example_config)
        print(f"Example configuration saved to: {args.example_config}")
        return 0

    try:
        return run_diagram(args)
    except Exception as e:
        logging.exception(f"Beam diagram failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
