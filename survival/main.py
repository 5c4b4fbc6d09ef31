"""
main.py
-------
Command-line entry point.

Usage:
    python -m survival                       # Default settings
    python -m survival --seed 42             # Reproducible enemy spawns
    python -m survival --config my.yaml      # Override settings.yaml
    python -m survival --log-level VERBOSE   # Show per-frame traces
"""

import argparse
import sys

from survival.core.debug.debug_logger import DebugLogger
from survival.core.runtime.game_loop import GameLoop
from survival.core.services.config_manager import load_config, apply_settings_overrides


DEFAULT_CONFIG_FILE = "settings.yaml"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Top-down arcade survival shooter")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE,
                        help="Settings file (.yaml, .json or .py)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for enemy spawn randomness")
    parser.add_argument("--log-level", default=None,
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Override the configured log level")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    # Explicit --config must exist; the bundled default may be absent
    strict = args.config != DEFAULT_CONFIG_FILE
    config = load_config(args.config, strict=strict)
    apply_settings_overrides(config)
    if args.log_level:
        DebugLogger.set_level(args.log_level)

    GameLoop(seed=args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
