"""Implémentation concrète du logger avec fichier."""

import logging
import os
from typing import Optional

from sensor_config_utils.config.settings import (
    DEFAULT_LOG_FORMAT,
    LoggingSettings,
)
from sensor_config_utils.logging.base import Logger


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite (unités comme ℃ ou %RH)
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    """

    def __init__(
        self,
        log_file: str,
        level: str = "INFO",
        log_format: str = DEFAULT_LOG_FORMAT,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            level: Nom du niveau de log (DEBUG, INFO, WARNING, ERROR)
            log_format: Format des messages (syntaxe logging)
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = log_file

        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        log_level = getattr(logging, level.upper(), logging.INFO)

        self.logger = logging.getLogger(f"sensor_config_utils.{log_file}")
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            formatter = logging.Formatter(log_format)

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler: Optional[logging.Handler] = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    @classmethod
    def from_settings(cls, settings: LoggingSettings) -> "FileLogger":
        """Construit un logger depuis la section [logging] des paramètres.

        Args:
            settings: Paramètres de logging validés.

        Returns:
            Instance de FileLogger.

        Raises:
            ValueError: Si aucun fichier de log n'est configuré.
        """
        if not settings.file:
            raise ValueError("logging.file doit être renseigné")
        return cls(
            settings.file,
            level=settings.level,
            log_format=settings.format,
            console_output=settings.console,
        )

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        if self.handler:
            self.handler.flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
        self._flush()
