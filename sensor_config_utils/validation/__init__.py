"""Module de validation."""

from sensor_config_utils.validation.base import Validator
from sensor_config_utils.validation.config_text import (
    ConfigTextValidator,
    check_config_text,
)

__all__ = [
    "Validator",
    "ConfigTextValidator",
    "check_config_text",
]
