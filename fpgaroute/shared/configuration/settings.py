"""Application settings dataclasses."""
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from ..exceptions import ValidationError
from ..utils.validation_utils import (
    validate_positive_number, validate_non_negative_number, validate_log_level
)


def _collect_errors(*checks: Callable[[], None]) -> List[str]:
    """Run validators and return their messages instead of raising."""
    errors = []
    for check in checks:
        try:
            check()
        except ValidationError as e:
            errors.append(str(e))
    return errors


@dataclass
class RouterSettings:
    """Single-net A* router settings."""
    max_expansions: int = 1_000_000   # Frontier pops allowed per sink
    skip_failed_nets: bool = True     # Orchestrator keeps going after a failed net
    progress_interval: int = 10       # Log orchestrator progress every N nets

    def validate(self) -> List[str]:
        errors = _collect_errors(
            lambda: validate_positive_number(self.max_expansions, "max_expansions"),
            lambda: validate_positive_number(self.progress_interval, "progress_interval"),
        )
        if not isinstance(self.max_expansions, int):
            errors.append(f"max_expansions must be an integer, got {self.max_expansions!r}")
        if not isinstance(self.skip_failed_nets, bool):
            errors.append(f"skip_failed_nets must be a boolean, got {self.skip_failed_nets!r}")
        return errors


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = "INFO"
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_output: bool = True
    file_output: bool = False
    log_file: str = "logs/fpgaroute.log"
    max_file_size_mb: int = 10
    backup_count: int = 5
    component_levels: Dict[str, str] = field(default_factory=dict)

    def validate(self) -> List[str]:
        checks = [
            lambda: validate_log_level(self.level),
            lambda: validate_positive_number(self.max_file_size_mb, "max_file_size_mb"),
            lambda: validate_non_negative_number(self.backup_count, "backup_count"),
        ]
        for component, level in self.component_levels.items():
            checks.append(lambda level=level, component=component:
                          validate_log_level(level, f"component_levels[{component}]"))
        return _collect_errors(*checks)


@dataclass
class ApplicationSettings:
    """Top-level settings."""
    version: str = "1.0.0"
    config_version: int = 1
    router: RouterSettings = field(default_factory=RouterSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def validate(self) -> Dict[str, List[str]]:
        """Validate every category; empty lists mean the category is valid."""
        return {
            'router': self.router.validate(),
            'logging': self.logging.validate(),
        }
