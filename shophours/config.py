"""
Configuration management using Pydantic models loaded from YAML.
"""

from datetime import date, time
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.calculator import DEFAULT_MAX_ROLLOVER_DAYS
from .domain.models import OpenHours, Weekday


class HoursConfig(BaseModel):
    """Opening interval given as 'HH:mm' strings."""
    open: str
    close: str

    @field_validator("open", "close", mode="before")
    @classmethod
    def coerce_sexagesimal(cls, value):
        """Undo YAML 1.1 reading unquoted 18:00 as the integer 1080."""
        if isinstance(value, int) and not isinstance(value, bool):
            hours, minutes = divmod(value, 60)
            return f"{hours:02d}:{minutes:02d}"
        return value

    @field_validator("open", "close")
    @classmethod
    def validate_time(cls, value: str) -> str:
        """Ensure the value looks like HH:mm."""
        try:
            time.fromisoformat(value)
        except ValueError as exc:
            raise ValueError(f"Time must be in 'HH:mm' format, got '{value}'") from exc
        return value

    @model_validator(mode="after")
    def validate_order(self) -> "HoursConfig":
        """Ensure the interval opens before it closes."""
        if time.fromisoformat(self.close) <= time.fromisoformat(self.open):
            raise ValueError(
                f"The closing hour ({self.close}) cannot be equal to or earlier "
                f"than the opening hour ({self.open})."
            )
        return self

    def to_open_hours(self) -> OpenHours:
        return OpenHours(open=time.fromisoformat(self.open), close=time.fromisoformat(self.close))


class AppConfig(BaseModel):
    """Application configuration."""
    week: Dict[str, HoursConfig] = Field(default_factory=dict)
    dates: Dict[date, HoursConfig] = Field(default_factory=dict)
    closed_days: List[str] = Field(default_factory=list)
    closed_dates: List[date] = Field(default_factory=list)
    max_rollover_days: int = DEFAULT_MAX_ROLLOVER_DAYS
    log_level: str = "WARNING"

    @field_validator("week")
    @classmethod
    def validate_week(cls, value: Dict[str, HoursConfig]) -> Dict[str, HoursConfig]:
        """Ensure every key names a day of the week."""
        for name in value:
            Weekday.parse(name)
        return value

    @field_validator("closed_days")
    @classmethod
    def validate_closed_days(cls, value: List[str]) -> List[str]:
        """Ensure day names are valid and deduplicated."""
        seen: set[Weekday] = set()
        deduped: List[str] = []
        for name in value:
            day = Weekday.parse(name)
            if day not in seen:
                deduped.append(name)
                seen.add(day)
        return deduped

    @field_validator("max_rollover_days")
    @classmethod
    def validate_max_rollover_days(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("max_rollover_days must be greater than zero")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    def weekly_hours(self) -> Dict[Weekday, OpenHours]:
        """Configured weekday hours keyed by Weekday."""
        return {Weekday.parse(name): hours.to_open_hours() for name, hours in self.week.items()}

    def date_hours(self) -> Dict[date, OpenHours]:
        return {day: hours.to_open_hours() for day, hours in self.dates.items()}

    def closed_weekdays(self) -> List[Weekday]:
        return [Weekday.parse(name) for name in self.closed_days]

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
                f"Please create a shophours.yaml file. See shophours.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for shophours.yaml in current directory
    config_path = Path.cwd() / "shophours.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "shophours.yaml"

    return config_path


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load an explicit config file, or the default one if present.

    Without an explicit path a missing default file yields the defaults.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)
    return AppConfig()
