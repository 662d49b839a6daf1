"""
    LoggerErrorHandler
"""
from sensor_config_utils.errors.base import ErrorHandler
from sensor_config_utils.errors.exceptions import (ApplicationError,
                                                   ConfigTextError)
from sensor_config_utils.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs via le Logger injecté."""

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = ApplicationError
                 ) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        """Log l'erreur avec différents niveaux selon la gravité.

        Les erreurs de saisie du texte de configuration sont des erreurs
        utilisateur : elles sont loggées en avertissement.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, ConfigTextError):
            self.logger.log_warning(f"{type(error).__name__}: {str(error)}")
        elif isinstance(error, self.base_error_type):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
