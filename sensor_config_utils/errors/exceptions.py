"""
Module contenant les exceptions personnalisées de sensor_config_utils.

Les erreurs de conversion du texte de configuration dérivent toutes de
ConfigTextError afin que l'appelant puisse afficher le message tel quel
à côté du champ fautif.
"""
from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de paramètres illisible ou incohérent."""
    pass


class ConfigFormatError(ConfigurationError):
    """Configuration stockée (JSON) illisible ou de forme inattendue."""
    pass


class ValidationError(ApplicationError):
    """Exception de base pour toutes les validations."""
    pass


class ConfigTextError(ValidationError):
    """Erreur de syntaxe dans un texte de configuration.

    Attributes:
        line_number: Position (1-based) de la ligne fautive, si connue.
        line: Contenu brut de la ligne fautive, si connu.
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None
    ) -> None:
        if line_number is not None:
            message = f"Ligne {line_number} : {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class EmptyInputError(ConfigTextError):
    """Le texte est vide, absent ou n'est pas une chaîne."""

    def __init__(self) -> None:
        super().__init__("Le contenu de la configuration ne peut pas être vide")


class EmptySectionNameError(ConfigTextError):
    """En-tête de section dont le nom est vide."""

    def __init__(
        self,
        line_number: Optional[int] = None,
        line: Optional[str] = None
    ) -> None:
        super().__init__(
            "le nom de section ne peut pas être vide", line_number, line
        )


class EmptyKeyError(ConfigTextError):
    """Ligne clé=valeur dont la clé est vide."""

    def __init__(
        self,
        line_number: Optional[int] = None,
        line: Optional[str] = None
    ) -> None:
        super().__init__(
            "la clé d'un paramètre ne peut pas être vide", line_number, line
        )


class MalformedLineError(ConfigTextError):
    """Ligne qui n'est ni un commentaire, ni une section, ni clé=valeur."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(f'format invalide : "{line}"', line_number, line)


class EmptyConfigError(ConfigTextError):
    """Texte bien formé mais ne contenant aucun paramètre."""

    def __init__(self) -> None:
        super().__init__(
            "La configuration est vide ou ne contient aucun paramètre"
        )


class NameConflictError(ConfigTextError):
    """Section portant le nom d'une clé déjà définie hors section."""

    def __init__(self, name: str, line_number: int, line: str) -> None:
        super().__init__(
            f"la section [{name}] porte le nom d'une clé déjà définie",
            line_number,
            line
        )
        self.name = name
