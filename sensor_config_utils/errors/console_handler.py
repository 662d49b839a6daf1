"""
    ConsoleErrorHandler (générique, configurable)
"""
from sensor_config_utils.errors.base import ErrorHandler
from sensor_config_utils.errors.exceptions import (ApplicationError,
                                                   ConfigFormatError,
                                                   ConfigTextError,
                                                   ConfigurationError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                             connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"}
                       prioritaire sur les messages par défaut.
        """
        self.base_error_type = base_error_type
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _handle_known_error(self, error: Exception) -> None:
        """Affiche le type et le message de l'erreur, suivi d'une
        suggestion de solution.

        Args:
            error: L'exception métier à traiter.
        """
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _solution_for(self, error: Exception) -> str:
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution

        if isinstance(error, ConfigTextError):
            if error.line_number is not None:
                return f"Corrigez la ligne {error.line_number} du texte."
            return "Saisissez au moins un paramètre clé=valeur."
        if isinstance(error, ConfigFormatError):
            return "La configuration stockée doit être un objet JSON."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        return "Voir les suggestions ci-dessus."

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )
