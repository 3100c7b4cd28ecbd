"""
Unified test infrastructure for doctag.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the CLI in a subprocess
- tag_builders: Building ad-hoc tags with only the hooks a test needs
- sample_tags: A third-party style tag module for config-driven discovery
"""

from .file_utils import write, write_comment, write_source_file
from .cli_utils import run_cli, jload
from .tag_builders import make_tag, make_registry

__all__ = [
    "write", "write_comment", "write_source_file",
    "run_cli", "jload",
    "make_tag", "make_registry",
]
