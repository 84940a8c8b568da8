#!/usr/bin/env python3
"""
classifierTournament command-line entry point.

Two subcommands:
- run: load a dataset, run the tournament, print the results table and
  optionally save reports and classify one input row
- attributes: list the attributes a prediction needs
"""

import sys
from datetime import datetime
from typing import List, Optional

from classifierTournament.cli.argument_parser import parse_arguments
from classifierTournament.core.engine import TournamentEngine
from classifierTournament.core.exceptions import FormatError, NoDataError
from classifierTournament.evaluation.reporter import ResultsReporter
from classifierTournament.utils.config import Config, ConfigManager
from classifierTournament.utils.logger import get_logger, setup_logging


def build_config(args) -> Config:
    """Configuration file values overridden by command-line options."""
    manager = ConfigManager()
    if args.config:
        manager.load_from_file(args.config)
    
    overrides = {}
    if args.log_level:
        overrides['log_level'] = args.log_level
    if getattr(args, 'n_jobs', None) is not None:
        overrides['n_jobs'] = args.n_jobs
    if getattr(args, 'output', None):
        overrides['output_dir'] = args.output
    return manager.update_config(**overrides).get_config()


def handle_run(args, config: Config) -> None:
    engine = TournamentEngine(config)
    summary = engine.load(args.data)
    print(f"Dataset loaded: {args.data}")
    print(f"Rows: {summary.instance_count}")
    print(f"Class attribute: {summary.class_attribute_name}")
    
    engine.run_tournament()
    state = engine.state.tournament
    reporter = ResultsReporter()
    print()
    print(reporter.format_table(state))
    print()
    print(f"Best algorithm: {state.best.name}")
    print(f"Correctly classified: {state.best.correct_count:g}")
    
    if args.output:
        paths = reporter.save(state, config.output_dir)
        print(f"Results written to {paths['results']} and {paths['summary']}")
    
    if args.predict is not None:
        print(f"Predicted class: {engine.predict(args.predict)}")


def handle_attributes(args, config: Config) -> None:
    engine = TournamentEngine(config)
    summary = engine.load(args.data)
    print(f"Class attribute: {summary.class_attribute_name}")
    for attribute in engine.attributes_excluding_class():
        if attribute.is_nominal:
            print(f"{attribute.name}: nominal {{{', '.join(attribute.domain)}}}")
        else:
            print(f"{attribute.name}: numeric")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    args = parse_arguments(argv)
    
    handlers = {
        'run': handle_run,
        'attributes': handle_attributes,
    }
    handler = handlers.get(args.command)
    if handler is None:
        raise ValueError(f"Unknown command: {args.command}. Supported commands: {', '.join(handlers)}")
    
    try:
        config = build_config(args)
        setup_logging(config.log_level, args.log_file)
        logger = get_logger("main")
        
        start_time = datetime.now()
        handler(args, config)
        logger.info(f"{args.command} finished in {datetime.now() - start_time}")
    except KeyboardInterrupt:
        print(f"\n{args.command} interrupted")
        return 130
    except FileNotFoundError as e:
        print(f"File not found: {e}")
        return 2
    except (FormatError, NoDataError) as e:
        print(f"Data error: {e}")
        return 3
    except Exception as e:
        print(f"{args.command} failed: {type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
