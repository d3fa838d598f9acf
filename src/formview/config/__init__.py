"""Configuration loading and defaults for formview helpers.

Main components:
- ConfigLoader: Load and validate render configuration YAML files
- Environment variable overrides (FORMVIEW_* variables)
- Default configuration values
"""

from formview.config.loader import ConfigLoader

__all__ = ["ConfigLoader"]
