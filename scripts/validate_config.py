#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fptour_app.config.loader import ConfigLoader
from fptour_app.config.validation import ConfigValidator, ValidationError


def validate_settings(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate defaults merged with settings.yaml from config_dir."""
    loader = ConfigLoader.create(config_dir)
    return ConfigValidator.validate_config(loader.merge_config())


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)
    print(f"Validating configuration in {loader.config_dir}...")

    try:
        errors = validate_settings(config_dir)
    except Exception as e:
        print(f"Error loading configuration: {e}")
        sys.exit(1)

    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    config = loader.load()
    print(f"Source timeout: {config.source.timeout_seconds}s, encoding: {config.source.encoding}")
    print(f"Tour document: {config.tour.html_source or '(none)'}")
    print("Configuration is valid")
    sys.exit(0)


if __name__ == "__main__":
    main()
