"""Module de gestion des erreurs."""

from sensor_config_utils.errors.base import ErrorHandler, ErrorHandlerChain
from sensor_config_utils.errors.exceptions import (ApplicationError,
                                                   ConfigurationError,
                                                   FileConfigurationError,
                                                   ConfigFormatError,
                                                   ValidationError,
                                                   ConfigTextError,
                                                   EmptyInputError,
                                                   EmptySectionNameError,
                                                   EmptyKeyError,
                                                   MalformedLineError,
                                                   EmptyConfigError,
                                                   NameConflictError)
from sensor_config_utils.errors.console_handler import ConsoleErrorHandler
from sensor_config_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ConfigFormatError",
    "ValidationError",
    "ConfigTextError",
    "EmptyInputError",
    "EmptySectionNameError",
    "EmptyKeyError",
    "MalformedLineError",
    "EmptyConfigError",
    "NameConflictError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
