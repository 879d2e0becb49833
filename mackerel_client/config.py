"""
Configuration loader.
Loads YAML configuration with environment variable substitution, or builds
the configuration from environment variables alone.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import logging

import yaml
from dotenv import load_dotenv

from mackerel_client.errors import ConfigError
from mackerel_client.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

ENV_PATTERN = re.compile(r'\$\{([A-Za-z0-9_]+)\}')


@dataclass(frozen=True)
class ClientConfig:
    """Settings needed to talk to the Mackerel API"""
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    verbose: bool = False

    def __repr__(self) -> str:
        # keep the API key out of logs
        return f"<ClientConfig(base_url='{self.base_url}', timeout={self.timeout})>"


def _substitute_env_vars(content: str) -> str:
    """
    Substitute environment variables in format ${VAR_NAME}.

    Args:
        content: YAML content with potential env vars

    Returns:
        Content with env vars substituted

    Raises:
        ConfigError: If required env var is not found
    """
    def replacer(match):
        var_name = match.group(1)
        var_value = os.environ.get(var_name)

        if var_value is None:
            raise ConfigError(f"Environment variable '{var_name}' not found. Set it in .env file or environment.")

        return var_value

    return ENV_PATTERN.sub(replacer, content)


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout: {value!r}")
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {timeout}")
    return timeout


def config_from_dict(section: Dict[str, Any]) -> ClientConfig:
    """
    Build a ClientConfig from the 'mackerel' configuration section.

    Args:
        section: Mapping with api_key and optional base_url, timeout,
            verify_ssl, user_agent and verbose keys

    Returns:
        ClientConfig instance

    Raises:
        ConfigError: If api_key is missing or a value is invalid
    """
    api_key = section.get('api_key')
    if not api_key:
        raise ConfigError("Configuration is missing 'api_key'")

    return ClientConfig(
        api_key=str(api_key),
        base_url=section.get('base_url', DEFAULT_BASE_URL),
        timeout=_parse_timeout(section.get('timeout', DEFAULT_TIMEOUT)),
        verify_ssl=bool(section.get('verify_ssl', True)),
        user_agent=section.get('user_agent', DEFAULT_USER_AGENT),
        verbose=bool(section.get('verbose', False))
    )


def load_config(config_path: str = "config.yaml") -> ClientConfig:
    """
    Load configuration from a YAML file.

    The file holds a top-level 'mackerel' section; ${VAR} references are
    replaced from the environment, after loading a .env file if present.

    Args:
        config_path: Path to configuration file

    Returns:
        ClientConfig instance

    Raises:
        ConfigError: If the file is missing, empty or invalid
    """
    load_dotenv()

    if not Path(config_path).exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        raw_content = f.read()

    try:
        raw_config = yaml.safe_load(_substitute_env_vars(raw_content))
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML: {e}")

    if not raw_config:
        raise ConfigError("Configuration file is empty")

    section = raw_config.get('mackerel') if isinstance(raw_config, dict) else None
    if not isinstance(section, dict):
        raise ConfigError("Configuration has no 'mackerel' section")

    config = config_from_dict(section)
    logger.info(f"Configuration loaded successfully from {config_path}")
    return config


def config_from_env() -> ClientConfig:
    """
    Build configuration from environment variables.

    Reads MACKEREL_APIKEY (required), MACKEREL_BASE_URL and MACKEREL_TIMEOUT,
    after loading a .env file if present.

    Returns:
        ClientConfig instance

    Raises:
        ConfigError: If MACKEREL_APIKEY is not set
    """
    load_dotenv()

    section: Dict[str, Any] = {'api_key': os.environ.get('MACKEREL_APIKEY')}
    if os.environ.get('MACKEREL_BASE_URL'):
        section['base_url'] = os.environ['MACKEREL_BASE_URL']
    if os.environ.get('MACKEREL_TIMEOUT'):
        section['timeout'] = os.environ['MACKEREL_TIMEOUT']

    if not section['api_key']:
        raise ConfigError("Environment variable 'MACKEREL_APIKEY' not found. Set it in .env file or environment.")

    return config_from_dict(section)
