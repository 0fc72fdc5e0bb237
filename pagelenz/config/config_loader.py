"""
Configuration loader for PageLenz - handles YAML config files
and builds the policies, workload and capacities of a run.
"""

import yaml
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

from pagelenz.dataloader.dataloader import WorkloadLoader
from pagelenz.dataloader.impl.ArrayDataLoader import ArrayLoader
from pagelenz.dataloader.impl.TraceFileLoader import TraceFileLoader
from pagelenz.replacementpolicy.ReplacementPolicy import check_capacity
from pagelenz.replacementpolicy.registry import Policy
from pagelenz.workload.generators import ALIASES as WORKLOAD_ALIASES
from pagelenz.workload.generators import WORKLOADS, generate_workload


class ConfigLoader:
    """Loads and validates configuration files for policy comparisons."""

    # All available policies in PageLenz
    AVAILABLE_POLICIES = [p.value for p in Policy]

    DEFAULT_WORKLOAD = {'type': '80-20'}

    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

    OUTPUT_FORMATS = ['console', 'file', 'both']

    def __init__(self, config_path: str):
        """Initialize loader with config file path."""
        self.config_path = Path(config_path)
        self.config: Dict[str, Any] = {}
        self.logger = logging.getLogger(__name__)

    def load(self) -> Dict[str, Any]:
        """Load and parse the YAML configuration file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        self.logger.info(f"Loading configuration from: {self.config_path}")

        with open(self.config_path, 'r') as f:
            self.config = yaml.safe_load(f) or {}

        if not isinstance(self.config, dict):
            raise ValueError("Config must be a mapping of settings")

        self._validate_config()
        self.logger.info("Configuration loaded and validated successfully")
        return self.config

    def _validate_config(self) -> None:
        """Validate required configuration fields."""
        # Unknown names raise ValueError listing the available ones
        for name in self.get_policies():
            Policy.from_name(name)

        if 'capacity' not in self.config and 'capacities' not in self.config:
            raise ValueError("Config must specify 'capacity' or 'capacities' field")
        for capacity in self.get_capacities():
            try:
                check_capacity(capacity)
            except TypeError as e:
                raise ValueError(f"Invalid capacity {capacity!r}: {e}")

        if not self.get_input_trace():
            workload = self.get_workload_config()
            if not isinstance(workload, dict):
                raise ValueError("'workload' must be a mapping with a 'type' field")
            workload_type = str(workload.get('type', '')).lower()
            known = set(WORKLOADS) | set(WORKLOAD_ALIASES)
            if workload_type not in known:
                available = ', '.join(sorted(WORKLOADS))
                raise ValueError(
                    f"Unknown workload: {workload_type}\n"
                    f"Available workloads: {available}"
                )

        log_level = self.config.get('log_level', 'INFO')
        if not isinstance(log_level, str) or log_level.upper() not in self.LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {log_level!r}\n"
                f"Expected one of: {', '.join(self.LOG_LEVELS)}"
            )

        output_format = self.config.get('output_format', 'console')
        if not isinstance(output_format, str) or output_format.lower() not in self.OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output_format: {output_format!r}\n"
                f"Expected one of: {', '.join(self.OUTPUT_FORMATS)}"
            )

    def get_policies(self) -> List[str]:
        """Get policy names from config, all policies by default."""
        policies = self.config.get('policies', self.AVAILABLE_POLICIES)
        if isinstance(policies, str):
            policies = [policies]
        if not isinstance(policies, (list, tuple)) or not policies:
            raise ValueError("'policies' must be a policy name or a non-empty list of names")
        return list(policies)

    def get_capacities(self) -> List[int]:
        """Get the capacities to evaluate, in the order given.

        A single value under 'capacities' is treated as a one-element sweep.
        """
        if 'capacities' in self.config:
            capacities = self.config['capacities']
            key = 'capacities'
        else:
            capacities = self.config['capacity']
            key = 'capacity'
        if capacities is None:
            raise ValueError(f"'{key}' must not be empty")
        if not isinstance(capacities, (list, tuple)):
            capacities = [capacities]
        if not capacities:
            raise ValueError(f"'{key}' must list at least one capacity")
        return list(capacities)

    def get_seed(self) -> Optional[int]:
        """Get the seed shared by the random policy and generated workloads."""
        return self.config.get('seed')

    def get_workload_config(self) -> Dict[str, Any]:
        """Get the workload generator section."""
        return self.config.get('workload', self.DEFAULT_WORKLOAD)

    def get_dataloader(self) -> WorkloadLoader:
        """Create the loader for the configured trace or generated workload."""
        input_trace = self.get_input_trace()
        if input_trace:
            self.logger.info(f"Loading trace from: {input_trace}")
            return TraceFileLoader(input_trace)

        params = dict(self.get_workload_config())
        workload_type = params.pop('type')
        if self.get_seed() is not None:
            params.setdefault('seed', self.get_seed())
        return ArrayLoader(generate_workload(workload_type, **params))

    def get_log_file(self) -> Optional[str]:
        """Get log file path from config."""
        return self.config.get('log_file')

    def get_log_level(self) -> str:
        """Get log level from config."""
        return self.config.get('log_level', 'INFO').upper()

    def get_input_trace(self) -> Optional[str]:
        """Get input trace file path from config."""
        return self.config.get('input_trace')

    def get_output_format(self) -> str:
        """Get output format (console, file, or both)."""
        return self.config.get('output_format', 'console').lower()

    @classmethod
    def list_policies(cls) -> None:
        """Print all available policies."""
        print("\nAvailable Replacement Policies in PageLenz:\n")
        for i, name in enumerate(cls.AVAILABLE_POLICIES, 1):
            print(f"  {i:2d}. {name}")
        print(f"\nTotal: {len(cls.AVAILABLE_POLICIES)} policies\n")

    @staticmethod
    def list_workloads() -> None:
        """Print all available workload generators."""
        print("\nAvailable Workloads in PageLenz:\n")
        for i, name in enumerate(sorted(WORKLOADS), 1):
            print(f"  {i:2d}. {name}")
        print()


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Route the 'pagelenz' logger to the console and/or a log file.

    Replaces whatever handlers the logger already has, so calling this
    twice does not duplicate output.
    """
    level_name = str(config.get('log_level', 'INFO')).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log_level: {config.get('log_level')!r}")

    output_format = config.get('output_format', 'console').lower()
    log_file = config.get('log_file')

    handlers: List[logging.Handler] = []
    if output_format in ('console', 'both'):
        handlers.append(logging.StreamHandler())
    # A log file is honoured whatever the output format says
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logger = logging.getLogger('pagelenz')
    logger.setLevel(level)
    logger.handlers = []
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
