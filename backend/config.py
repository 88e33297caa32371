"""
Configuration parser for Week Planner.

Handles TOML file parsing into plain dataclasses.
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pytz

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Configuration for UI layout and fonts."""
    interface_font: str = "Sans"
    interface_font_size: int = 12
    text_font: str = "Sans"
    text_font_size: int = 10
    window_width: int = 1000
    window_height: int = 760


@dataclass
class ColorsConfig:
    """Configuration for UI colors."""
    host_event: str = "#1e5aa8"        # Blue, events the subject hosts
    attendee_event: str = "#c62828"    # Red, everything else
    grid_line: str = "#000000"
    panel_background: str = "#ffffff"
    header_background: str = "#f5f5f5"


@dataclass
class LabelsConfig:
    """Configuration for UI labels."""
    window_title: str = "Week Planner"
    host_view: str = "Host view"
    user: str = "User:"
    no_users: str = "No users"


@dataclass
class LocalizationConfig:
    """Localized day names, Sunday first."""
    day_names: list[str] = None

    def __post_init__(self):
        if self.day_names is None:
            self.day_names = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

    def get_day_name(self, index: int) -> str:
        """Get localized day name for a grid column (0=Sunday, 6=Saturday)."""
        return self.day_names[index] if 0 <= index < len(self.day_names) else ""


@dataclass
class Config:
    """Main configuration container for Week Planner."""

    default_user: str = ""
    host_view: bool = False
    timezone: str = "UTC"
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    colors: ColorsConfig = field(default_factory=ColorsConfig)
    labels: LabelsConfig = field(default_factory=LabelsConfig)
    localization: LocalizationConfig = field(default_factory=LocalizationConfig)
    source: Optional[Path] = None

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'weekplanner' / 'weekplanner.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a TOML file.

        Without an explicit path the default location is tried and
        defaults are used if nothing is there. An explicit path that does
        not exist is an error.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()
            if not config_path.exists():
                logger.debug("No configuration at %s, using defaults", config_path)
                return cls()
        elif not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        config = cls.from_dict(data)
        config.source = config_path
        logger.debug("Loaded configuration from %s (sections: %s)",
                     config_path, ", ".join(data.keys()) or "none")
        return config

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        """Build a Config from already parsed TOML data."""
        # Parse General section
        general = data.get('General', {})
        default_user = str(general.get('default_user', ''))

        host_view = general.get('host_view', False)
        if not isinstance(host_view, bool):
            raise ValueError(f"General.host_view must be true or false, got {host_view!r}")

        timezone = general.get('timezone', 'UTC')
        if timezone not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone in configuration: {timezone}")

        # Parse Layout section
        layout_data = data.get('Layout', {})
        layout = LayoutConfig(
            interface_font=layout_data.get('interface_font', LayoutConfig.interface_font),
            interface_font_size=layout_data.get('interface_font_size', LayoutConfig.interface_font_size),
            text_font=layout_data.get('text_font', LayoutConfig.text_font),
            text_font_size=layout_data.get('text_font_size', LayoutConfig.text_font_size),
            window_width=layout_data.get('window_width', LayoutConfig.window_width),
            window_height=layout_data.get('window_height', LayoutConfig.window_height),
        )

        # Parse Colors section
        colors_data = data.get('Colors', {})
        colors = ColorsConfig(
            host_event=colors_data.get('host_event', ColorsConfig.host_event),
            attendee_event=colors_data.get('attendee_event', ColorsConfig.attendee_event),
            grid_line=colors_data.get('grid_line', ColorsConfig.grid_line),
            panel_background=colors_data.get('panel_background', ColorsConfig.panel_background),
            header_background=colors_data.get('header_background', ColorsConfig.header_background),
        )

        # Parse Labels section
        labels_data = data.get('Labels', {})
        labels = LabelsConfig(
            window_title=labels_data.get('window_title', LabelsConfig.window_title),
            host_view=labels_data.get('host_view', LabelsConfig.host_view),
            user=labels_data.get('user', LabelsConfig.user),
            no_users=labels_data.get('no_users', LabelsConfig.no_users),
        )

        # Parse space-separated day names (if provided)
        localization_data = data.get('Localization', {})
        day_names_str = localization_data.get('day_names', '')
        day_names = day_names_str.split() if day_names_str else None
        if day_names is not None and len(day_names) != 7:
            logger.warning("Localization.day_names needs 7 names, got %d; using defaults",
                           len(day_names))
            day_names = None
        localization = LocalizationConfig(day_names=day_names)

        return cls(
            default_user=default_user,
            host_view=host_view,
            timezone=timezone,
            layout=layout,
            colors=colors,
            labels=labels,
            localization=localization,
        )
