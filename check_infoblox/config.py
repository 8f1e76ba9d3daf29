"""
Configuration management for the Infoblox check plugin.
Handles loading SNMP and logging defaults from an optional INI file.
"""

import os
import configparser
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .snmp.constants import (
    DEFAULT_MIB_DIRS,
    DEFAULT_SNMP_COMMUNITY,
    DEFAULT_SNMP_PORT,
    DEFAULT_SNMP_RETRIES,
    DEFAULT_SNMP_TIMEOUT,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CHECK_INFOBLOX_CONFIG"
DEFAULT_CONFIG_FILE = "check_infoblox.ini"


class ConfigError(Exception):
    """Raised when the configuration file holds invalid values."""


@dataclass
class Config:
    """Configuration settings for the plugin."""
    community: str = DEFAULT_SNMP_COMMUNITY
    port: int = DEFAULT_SNMP_PORT
    timeout: int = DEFAULT_SNMP_TIMEOUT
    retries: int = DEFAULT_SNMP_RETRIES
    mib_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_MIB_DIRS))
    log_file: Optional[str] = None


def config_path(path: Optional[str] = None) -> str:
    """Resolve the config file: explicit path, environment, working directory."""
    return path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from the INI file, falling back to defaults."""
    config_parser = configparser.ConfigParser()

    # Set default values
    default_config = {
        'snmp': {
            'community': DEFAULT_SNMP_COMMUNITY,
            'port': str(DEFAULT_SNMP_PORT),
            'timeout': str(DEFAULT_SNMP_TIMEOUT),
            'retries': str(DEFAULT_SNMP_RETRIES),
            'mib_dirs': ':'.join(DEFAULT_MIB_DIRS),
        },
        'logging': {
            'file': '',
        }
    }

    # Load default values
    config_parser.read_dict(default_config)

    filename = config_path(path)
    if os.path.exists(filename):
        try:
            config_parser.read(filename)
        except configparser.Error as e:
            raise ConfigError(f"Cannot parse {filename}: {e}") from e
        logger.debug(f"Read configuration from {filename}")
    elif path:
        raise ConfigError(f"Config file {filename} not found")
    else:
        logger.debug(f"Config file '{filename}' not found, using default values")

    # Extract values from config
    try:
        return Config(
            community=config_parser.get('snmp', 'community'),
            port=config_parser.getint('snmp', 'port'),
            timeout=config_parser.getint('snmp', 'timeout'),
            retries=config_parser.getint('snmp', 'retries'),
            mib_dirs=[d for d in config_parser.get('snmp', 'mib_dirs').split(':') if d],
            log_file=config_parser.get('logging', 'file') or None,
        )
    except (configparser.Error, ValueError) as e:
        raise ConfigError(f"Error loading configuration: {e}") from e
