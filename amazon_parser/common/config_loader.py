"""
Configuration Loader

Loads YAML configuration files and builds the parser settings,
with environment variables taking precedence over file defaults.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class ParserConfig:
    """Settings passed explicitly into the pipeline."""
    ollama_host: str = "http://localhost:11434"
    model: str = "llama3.2"
    temperature: float = 0.1
    top_p: float = 0.9
    ollama_timeout: Optional[float] = None
    fetch_timeout: float = 30
    port: int = 3001
    cors_origin: str = "*"


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'parser.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def load_parser_config(
    filename: Optional[str] = 'parser.yaml',
    env: Optional[Mapping[str, str]] = None,
) -> ParserConfig:
    """
    Build parser settings from a YAML file overlaid with environment variables.

    Args:
        filename: Config file in the config directory, or None to skip it
        env: Environment mapping (defaults to os.environ)

    Returns:
        ParserConfig instance
    """
    if env is None:
        env = os.environ

    data: Dict[str, Any] = {}
    if filename:
        try:
            data = load_config(filename)
        except FileNotFoundError as e:
            logger.warning("%s, using built-in defaults", e)

    ollama = data.get('ollama') or {}
    options = ollama.get('options') or {}
    fetch = data.get('fetch') or {}
    server = data.get('server') or {}
    defaults = ParserConfig()

    config = ParserConfig(
        ollama_host=ollama.get('host', defaults.ollama_host),
        model=ollama.get('model', defaults.model),
        temperature=float(options.get('temperature', defaults.temperature)),
        top_p=float(options.get('top_p', defaults.top_p)),
        ollama_timeout=_optional_float(ollama.get('timeout')),
        fetch_timeout=float(fetch.get('timeout', defaults.fetch_timeout)),
        port=int(server.get('port', defaults.port)),
        cors_origin=str(server.get('cors_origin', defaults.cors_origin)),
    )

    if env.get('OLLAMA_HOST'):
        config.ollama_host = env['OLLAMA_HOST']
    if env.get('OLLAMA_MODEL'):
        config.model = env['OLLAMA_MODEL']
    if env.get('OLLAMA_TIMEOUT'):
        config.ollama_timeout = _optional_float(env['OLLAMA_TIMEOUT'])
    if env.get('FETCH_TIMEOUT'):
        config.fetch_timeout = float(env['FETCH_TIMEOUT'])
    if env.get('PORT'):
        config.port = int(env['PORT'])
    if env.get('CORS_ORIGIN'):
        config.cors_origin = env['CORS_ORIGIN']

    return config
