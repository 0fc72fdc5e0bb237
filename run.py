#!/usr/bin/env python3
"""
PageLenz Configuration-Based Runner
Compares page replacement policies on a workload described by a YAML file.

Usage:
    python run.py --config pagelenz/config/configs/sample_80_20.yml
    python run.py --list-policies
    python run.py --config pagelenz/config/configs/sample_looping.yml --log-level DEBUG
"""

import argparse
import sys
import logging
from pathlib import Path

from pagelenz.config.config_loader import ConfigLoader, setup_logging
from pagelenz.analyzer.analyzer import Analyzer, format_results


def run_with_config(config_path: str, log_level_override: str = None, log_file_override: str = None):
    """
    Load configuration and run the policy comparison.

    Args:
        config_path: Path to YAML configuration file
        log_level_override: Override log level from config
        log_file_override: Override log file from config
    """
    try:
        # Load configuration
        loader = ConfigLoader(config_path)
        config = loader.load()

        # Override settings if provided
        if log_level_override:
            config['log_level'] = log_level_override
        if log_file_override:
            config['log_file'] = log_file_override

        # Setup logging
        setup_logging(config)
        logger = logging.getLogger('pagelenz')

        logger.info(f"Configuration loaded from: {config_path}")
        logger.info(f"Policies: {loader.get_policies()}")

        analyzer = Analyzer(
            loader.get_policies(),
            loader.get_dataloader(),
            loader.get_capacities(),
            seed=loader.get_seed(),
        )
        results = analyzer.run()
        print(format_results(results))

        logger.info("Analysis complete!")

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, TypeError) as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="PageLenz Configuration-Based Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all available policies and workloads
  python run.py --list-policies
  python run.py --list-workloads

  # Compare policies on an 80-20 hot-set workload
  python run.py --config pagelenz/config/configs/sample_80_20.yml

  # Show every eviction
  python run.py --config pagelenz/config/configs/sample_looping.yml --log-level DEBUG

  # Write the log to a file
  python run.py --config pagelenz/config/configs/sample_nonlocal.yml --log-file my_run.log
        """)

    parser.add_argument(
        '--config',
        type=str,
        help='Path to YAML configuration file'
    )
    parser.add_argument(
        '--list-policies',
        action='store_true',
        help='List all available replacement policies and exit'
    )
    parser.add_argument(
        '--list-workloads',
        action='store_true',
        help='List all available workload generators and exit'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Override log level from configuration'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        help='Override log file path from configuration'
    )
    parser.add_argument(
        '--template',
        action='store_true',
        help='Show configuration template and exit'
    )

    args = parser.parse_args(argv)

    if args.list_policies:
        ConfigLoader.list_policies()
        return

    if args.list_workloads:
        ConfigLoader.list_workloads()
        return

    if args.template:
        template_path = Path(__file__).parent / 'pagelenz' / 'config' / 'config_template.yml'
        if template_path.exists():
            print(f"\n{'='*70}")
            print("Configuration Template")
            print(f"{'='*70}\n")
            with open(template_path) as f:
                print(f.read())
        else:
            print(f"Template not found at {template_path}")
        return

    if args.config:
        run_with_config(args.config, args.log_level, args.log_file)
    else:
        parser.print_help()
        print("\nError: Please provide --config option or use --list-policies", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
