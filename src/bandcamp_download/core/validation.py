"""
Configuration and input validation utilities.
"""

import importlib
from typing import List, Tuple
from urllib.parse import urlparse
from .config import (
    HTTP_CONFIG,
    DOWNLOAD_CONFIG,
    LOGGING_CONFIG,
    ERROR_MESSAGES,
)
from .exceptions import ConfigurationError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.

    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "mutagen": "mutagen",
        "json5": "json5",
        "rich": "rich",
    }

    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)

    return len(missing) == 0, missing


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )

    if HTTP_CONFIG["TIMEOUT"] <= 0:
        errors.append("HTTP TIMEOUT must be > 0")

    if not HTTP_CONFIG["USER_AGENT"]:
        errors.append("HTTP USER_AGENT must not be empty")

    if "{artwork_id}" not in DOWNLOAD_CONFIG["COVER_URL_TEMPLATE"]:
        errors.append("COVER_URL_TEMPLATE must contain an {artwork_id} placeholder")

    if not DOWNLOAD_CONFIG["TRACK_EXTENSION"].startswith("."):
        errors.append("TRACK_EXTENSION must start with a dot")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    for key in ("LEVEL", "VERBOSE_LEVEL"):
        if LOGGING_CONFIG[key] not in valid_log_levels:
            errors.append(f"LOG {key} must be one of: {', '.join(valid_log_levels)}")

    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)


def validate_page_url(url: str) -> str:
    """
    Validate a page URL given on the command line.

    Args:
        url: Album or catalog page URL

    Returns:
        The URL stripped of surrounding whitespace

    Raises:
        ConfigurationError: If the URL is not an absolute http(s) URL
    """
    if not isinstance(url, str) or not url.strip():
        raise ConfigurationError(f"{ERROR_MESSAGES['INVALID_URL']} URL must not be empty")

    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"{ERROR_MESSAGES['INVALID_URL']} {url}")

    return url
