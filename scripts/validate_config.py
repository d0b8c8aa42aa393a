#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from prt7_decoder.config.loader import ConfigLoader
from prt7_decoder.errors import ConfigurationError


def main() -> int:
    """Validate each YAML file given on the command line (defaults when none)."""
    paths = [Path(arg) for arg in sys.argv[1:]] or [None]
    all_valid = True

    for path in paths:
        label = str(path) if path else "built-in defaults"
        print(f"Validating {label}...")

        try:
            config = ConfigLoader.create(path).load()
        except ConfigurationError as e:
            print(f"  invalid: {e}")
            all_valid = False
            continue

        print(f"  ok: {config.serial.port} @ {config.serial.baudrate} baud, "
              f"{config.session.frame_budget} lines per session, "
              f"strict_rotation={config.session.strict_rotation}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
