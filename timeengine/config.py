"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.models import WorkingHourRule
from .schemas import validate_clock_time
from .services.time_entry import ApprovalType

logger = logging.getLogger(__name__)

DEFAULT_BACKDATE_LIMIT_DAYS = 7


class WorkingHourRuleConfig(BaseModel):
    """Working-hour rule configuration."""
    name: str
    start_time: str
    end_time: str
    multiplier: float = 1.0

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        """Validate the rule boundary is a clock time."""
        return validate_clock_time(v)

    @field_validator("multiplier")
    @classmethod
    def validate_multiplier(cls, value: float) -> float:
        """Ensure the pay multiplier is between 1 and 3."""
        if not 1 <= value <= 3:
            raise ValueError(f"multiplier must be between 1 and 3, got {value}")
        return value

    def to_rule(self) -> WorkingHourRule:
        return WorkingHourRule(name=self.name, start_time=self.start_time, end_time=self.end_time)


def _standard_rules() -> List[WorkingHourRuleConfig]:
    return [
        WorkingHourRuleConfig(name="Day", start_time="08:00", end_time="18:00", multiplier=1.0),
        WorkingHourRuleConfig(name="Evening", start_time="18:00", end_time="22:00", multiplier=1.25),
        WorkingHourRuleConfig(name="Night", start_time="22:00", end_time="08:00", multiplier=1.5),
    ]


def _validate_limit(value: int) -> int:
    if not 0 <= value <= 365:
        raise ValueError(f"backdate_limit_days must be between 0 and 365, got {value}")
    return value


class Employee(BaseModel):
    """Employee configuration."""
    id: str
    name: str = ""
    backdate_limit_days: Optional[int] = None  # Falls back to the global limit

    @field_validator("backdate_limit_days")
    @classmethod
    def validate_backdate_limit(cls, value: Optional[int]) -> Optional[int]:
        """Validate the look-back window is within a year."""
        if value is None:
            return value
        return _validate_limit(value)


class AppConfig(BaseModel):
    """Application configuration."""
    backdate_limit_days: int = DEFAULT_BACKDATE_LIMIT_DAYS
    approval_type: ApprovalType = ApprovalType.NONE
    working_hour_rules: List[WorkingHourRuleConfig] = Field(default_factory=_standard_rules)
    employees: List[Employee] = Field(default_factory=list)

    @field_validator("backdate_limit_days")
    @classmethod
    def validate_backdate_limit(cls, value: int) -> int:
        """Validate the look-back window is within a year."""
        return _validate_limit(value)

    @field_validator("employees")
    @classmethod
    def validate_employees(cls, value: List[Employee]) -> List[Employee]:
        """Ensure employee ids are unique."""
        seen_ids: set[str] = set()
        for employee in value:
            id_key = employee.id.lower()
            if id_key in seen_ids:
                raise ValueError(f"Duplicate employee id detected: {employee.id}")
            seen_ids.add(id_key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        logger.debug("Loaded configuration from %s", config_path)
        return cls(**data)

    def rules(self) -> List[WorkingHourRule]:
        """Working-hour rules as domain objects."""
        return [rule.to_rule() for rule in self.working_hour_rules]

    def find_employee(self, employee_id: str) -> Employee | None:
        """Find an employee by id (case-insensitive)."""
        for employee in self.employees:
            if employee.id.lower() == employee_id.lower():
                return employee
        return None

    def backdate_limit_for(self, employee_id: str | None) -> int:
        """
        Resolve the look-back window for an employee.

        Unknown employees and employees without their own limit get the
        global ``backdate_limit_days``.
        """
        if employee_id:
            employee = self.find_employee(employee_id)
            if employee and employee.backdate_limit_days is not None:
                return employee.backdate_limit_days
        return self.backdate_limit_days


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load the config file, or built-in defaults when no file exists.

    An explicitly given path must exist.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if not default_path.exists():
        logger.info("No config.yaml found, using built-in defaults")
        return AppConfig()

    return AppConfig.load_from_yaml(default_path)
