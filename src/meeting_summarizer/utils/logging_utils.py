"""
Logging utilities for secure logging with secret masking.

Provides logging setup for the service and functions to mask sensitive
information (API keys, SMTP passwords) before configuration is logged.
"""
import logging
import re
from typing import Any, Dict, List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Common patterns for identifying secret field names
SECRET_KEYWORDS = [
    'PASSWORD', 'PASSWD', 'PWD', 'PASS',
    'ACCESS_TOKEN', 'API_TOKEN', 'BEARER', 'AUTH',
    'KEY', 'APIKEY', 'API_KEY', 'SECRET',
    'CREDENTIAL', 'CRED',
]

# Default mask for secrets
SECRET_MASK = '••••••••'


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def is_secret_field(field_name: str) -> bool:
    """
    Check if a field name indicates a secret value.

    Args:
        field_name: The field/key name to check

    Returns:
        True if field name matches secret patterns

    Examples:
        >>> is_secret_field('password')
        True
        >>> is_secret_field('host')
        False
        >>> is_secret_field('api_key')
        True
    """
    field_upper = field_name.upper()

    for keyword in SECRET_KEYWORDS:
        if keyword in field_upper:
            return True

    return False


def mask_dict(data: Dict[str, Any], mask: str = SECRET_MASK) -> Dict[str, Any]:
    """
    Mask secret values in a dictionary for safe logging.

    Nested dictionaries are masked recursively. Empty secret values are kept
    as-is so a missing credential still shows up as missing in the log.

    Examples:
        >>> mask_dict({'host': 'smtp.gmail.com', 'password': 'secret123'})
        {'host': 'smtp.gmail.com', 'password': '••••••••'}
    """
    masked = {}

    for key, value in data.items():
        if is_secret_field(key) and value:
            masked[key] = mask
        elif isinstance(value, dict):
            masked[key] = mask_dict(value, mask)
        else:
            masked[key] = value

    return masked


def mask_string(
    text: str,
    patterns: Optional[List[str]] = None,
    mask: str = SECRET_MASK
) -> str:
    """
    Mask sensitive patterns in strings, e.g. an API key echoed in an
    upstream error message.

    Examples:
        >>> mask_string('Incorrect API key provided: sk-abc123')
        'Incorrect API key provided: ••••••••'
    """
    if not patterns:
        patterns = [
            r'\bsk-[A-Za-z0-9_\-*]+',
            r'password[=:]\s*\S+',
            r'token[=:]\s*\S+',
            r'api[_-]?key[=:]\s*\S+',
        ]

    masked_text = text
    for pattern in patterns:
        masked_text = re.sub(
            pattern,
            lambda m: _mask_match(m.group(0), mask),
            masked_text,
            flags=re.IGNORECASE
        )

    return masked_text


def _mask_match(matched: str, mask: str) -> str:
    # Keep the "key=" prefix when there is one
    if re.search(r'[=:]', matched):
        return re.sub(r'([=:])\s*\S+', r'\1' + mask, matched)
    return mask


def safe_log_config(
    config: Dict[str, Any],
    name: str = "Configuration",
    mask: str = SECRET_MASK,
) -> str:
    """
    Create a safe log message for configuration with masked secrets.

    Examples:
        >>> safe_log_config({'host': 'smtp.gmail.com', 'password': 'x'}, "SMTP")
        "SMTP: {'host': 'smtp.gmail.com', 'password': '••••••••'}"
    """
    return f"{name}: {mask_dict(config, mask)}"
