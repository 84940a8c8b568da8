"""
Argument parser for classifierTournament.

Supports the ``run`` and ``attributes`` subcommands.
"""

import argparse
from typing import List, Optional


def comma_separated_items(value: str) -> List[str]:
    """Parse a comma-separated string into a list."""
    if not value:
        return []
    return [item.strip() for item in value.split(',')]


def positive_int(value: str) -> int:
    number = int(value)
    if number == 0 or number < -1:
        raise argparse.ArgumentTypeError("Expected a positive integer or -1")
    return number


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="classifier-tournament",
        description="Compare classification algorithms on one ARFF dataset with 10-fold cross-validation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    
    subparsers = parser.add_subparsers(dest='command', required=True)
    
    def add_common_options(p):
        """Add options shared by all subcommands."""
        p.add_argument('--data', type=str, required=True,
                       help="ARFF dataset path (last attribute is the class)")
        p.add_argument('--config', type=str, required=False, default=None,
                       help="YAML or JSON configuration file")
        p.add_argument('--log_level', type=str, required=False, default=None,
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help="Logging level (overrides the configuration file)")
        p.add_argument('--log_file', type=str, required=False, default=None,
                       help="Also write log records to this file")
    
    run_p = subparsers.add_parser('run', help='Run the tournament and report every candidate')
    add_common_options(run_p)
    run_p.add_argument('--output', type=str, required=False, default=None,
                       help="Directory for the results CSV and JSON summary (not written when omitted)")
    run_p.add_argument('--n_jobs', type=positive_int, required=False, default=None,
                       help="Candidates evaluated in parallel (-1 for all cores)")
    run_p.add_argument('--predict', type=comma_separated_items, required=False, default=None,
                       help="Comma-separated values for the non-class attributes to classify with the winner")
    
    attributes_p = subparsers.add_parser('attributes', help='List the attributes a prediction needs')
    add_common_options(attributes_p)
    
    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return create_argument_parser().parse_args(argv)
