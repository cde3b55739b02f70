"""Configuration management for the Zabbix API client."""

import os
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Union
from urllib.parse import urlparse

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

API_ENDPOINT = "api_jsonrpc.php"


class ZabbixConfig(BaseModel):
    """Configuration for the Zabbix API connection."""

    url: str = Field(..., description="Zabbix frontend URL or full api_jsonrpc.php endpoint")
    username: str = Field(..., description="Zabbix username")
    password: str = Field(..., description="Zabbix password")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    request_timeout: int = Field(default=30, description="Request timeout in seconds")
    log_requests: bool = Field(default=False, description="Log raw JSON-RPC requests and responses")

    @field_validator('url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Normalize the URL to the JSON-RPC endpoint."""
        if not v or not v.strip():
            raise ValueError("url cannot be empty")
        v = v.strip()

        # Add https:// if no scheme provided
        if not v.startswith(('http://', 'https://')):
            v = f'https://{v}'

        parsed = urlparse(v)
        if not parsed.netloc:
            raise ValueError(f"Invalid server URL format: {v}")

        if not parsed.path.endswith('.php'):
            v = f"{v.rstrip('/')}/{API_ENDPOINT}"
        return v

    @field_validator('username', 'password')
    @classmethod
    def validate_required_strings(cls, v: str) -> str:
        """Validate required string fields are not empty."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()

    @field_validator('request_timeout')
    @classmethod
    def validate_request_timeout(cls, v: int) -> int:
        """Validate request_timeout is reasonable."""
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        if v > 300:  # 5 minutes
            raise ValueError("request_timeout should not exceed 300 seconds")
        return v


class AppConfig(BaseModel):
    """Main application configuration."""

    zabbix: ZabbixConfig
    log_level: str = Field(default="INFO", description="Logging level")


def load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from a YAML or JSON file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger = logging.getLogger(__name__)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            if config_path.suffix.lower() in ['.yaml', '.yml']:
                return yaml.safe_load(f) or {}

            elif config_path.suffix.lower() == '.json':
                return json.load(f) or {}

            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    except Exception as e:
        logger.error(f"Failed to load config file {config_path}: {e}")
        raise


def find_config_file() -> Optional[Path]:
    """Find configuration file in standard locations."""
    search_paths = [
        Path.cwd() / "config.yaml",
        Path.cwd() / "config.yml",
        Path.cwd() / "config.json",
        Path.cwd() / ".zabbix-api.yaml",
        Path.cwd() / ".zabbix-api.yml",
        Path.cwd() / ".zabbix-api.json",
        Path.home() / ".config" / "zabbix-api" / "config.yaml",
        Path.home() / ".config" / "zabbix-api" / "config.yml",
        Path.home() / ".config" / "zabbix-api" / "config.json",
    ]

    for config_path in search_paths:
        if config_path.exists():
            return config_path

    return None


def merge_config(base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
    """Merge configuration dictionaries with override taking precedence."""
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value

    return merged


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.lower() in ('true', '1', 'yes', 'on')
    return bool(value)


def load_config(config_file: Optional[Union[str, Path]] = None) -> AppConfig:
    """Load configuration from multiple sources with priority order.

    Priority (highest to lowest):
    1. Environment variables (including .env)
    2. Specified config file (if provided)
    3. Auto-discovered config file
    4. Default values
    """
    logger = logging.getLogger(__name__)

    config_data: Dict[str, Any] = {}

    if config_file:
        config_path = Path(config_file)
        if config_path.exists():
            config_data = load_config_file(config_path)
            logger.info(f"Loaded configuration from: {config_path}")
        else:
            raise FileNotFoundError(f"Specified config file not found: {config_path}")
    else:
        config_path = find_config_file()
        if config_path:
            config_data = load_config_file(config_path)
            logger.info(f"Auto-discovered configuration file: {config_path}")

    load_dotenv()

    env_config = {
        "zabbix": {
            "url": os.getenv("ZABBIX_URL"),
            "username": os.getenv("ZABBIX_USERNAME"),
            "password": os.getenv("ZABBIX_PASSWORD"),
            "verify_ssl": os.getenv("ZABBIX_VERIFY_SSL"),
            "request_timeout": os.getenv("ZABBIX_REQUEST_TIMEOUT"),
            "log_requests": os.getenv("ZABBIX_LOG_REQUESTS"),
        },
        "log_level": os.getenv("LOG_LEVEL"),
    }

    # Remove None values from env config
    def remove_none_values(d):
        if isinstance(d, dict):
            return {k: remove_none_values(v) for k, v in d.items() if v is not None}
        return d

    final_config = merge_config(config_data, remove_none_values(env_config))

    zabbix_data = final_config.get("zabbix", {})
    zabbix_config = ZabbixConfig(
        url=zabbix_data.get("url", ""),
        username=zabbix_data.get("username", ""),
        password=zabbix_data.get("password", ""),
        verify_ssl=_as_bool(zabbix_data.get("verify_ssl"), True),
        request_timeout=int(zabbix_data.get("request_timeout", 30)),
        log_requests=_as_bool(zabbix_data.get("log_requests"), False),
    )

    return AppConfig(
        zabbix=zabbix_config,
        log_level=final_config.get("log_level", "INFO"),
    )
