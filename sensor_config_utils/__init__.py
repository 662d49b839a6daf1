"""
Sensor Config Utils - Configuration texte des types de capteurs.

Modules disponibles:
- iniconf: Conversion texte clé=valeur ↔ objet de configuration
  (parse_config_text, stringify_config_object, format_for_display)
- errors: Exceptions et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger)
- config: Paramètres de la bibliothèque (TOML, JSON, Pydantic)
- validation: Validation du texte saisi (ConfigTextValidator)
"""

__version__ = "1.0.0"

from sensor_config_utils.logging import Logger, FileLogger
from sensor_config_utils.config import (
    ConverterSettings,
    FileSettingsLoader,
    load_settings,
)
from sensor_config_utils.errors import (
    ApplicationError,
    ConfigurationError,
    ConfigFormatError,
    ConfigTextError,
    EmptyInputError,
    EmptySectionNameError,
    EmptyKeyError,
    MalformedLineError,
    EmptyConfigError,
    NameConflictError,
)
from sensor_config_utils.iniconf import (
    DisplayRow,
    IniTextParser,
    IniTextWriter,
    SensorConfigCodec,
    coerce_value,
    format_for_display,
    parse_config_text,
    stringify_config_object,
)
from sensor_config_utils.validation import (
    ConfigTextValidator,
    check_config_text,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "ConverterSettings",
    "FileSettingsLoader",
    "load_settings",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "ConfigFormatError",
    "ConfigTextError",
    "EmptyInputError",
    "EmptySectionNameError",
    "EmptyKeyError",
    "MalformedLineError",
    "EmptyConfigError",
    "NameConflictError",
    # IniConf
    "DisplayRow",
    "IniTextParser",
    "IniTextWriter",
    "SensorConfigCodec",
    "coerce_value",
    "format_for_display",
    "parse_config_text",
    "stringify_config_object",
    # Validation
    "ConfigTextValidator",
    "check_config_text",
]
