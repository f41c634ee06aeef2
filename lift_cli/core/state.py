"""Runtime state container for CLI context."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from lift_cli.core.parser import InputParser


@dataclass
class CLIState:
    """CLI runtime options, loaded configuration and the input parser."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    parser: InputParser = field(default_factory=InputParser)
