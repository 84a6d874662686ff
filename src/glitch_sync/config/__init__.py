"""
Configuration management.

Action input lookup, input layering and run configuration.
"""

from glitch_sync.config.inputs import get_input
from glitch_sync.config.loader import collect_inputs, load_inputs_file, load_run_config
from glitch_sync.config.resolver import resolve_config

__all__ = [
    "get_input",
    "collect_inputs",
    "load_inputs_file",
    "load_run_config",
    "resolve_config",
]
