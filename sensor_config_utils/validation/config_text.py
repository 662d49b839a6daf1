"""Validation du texte de configuration saisi dans un formulaire."""

from typing import Any, Optional

from sensor_config_utils.errors.exceptions import ConfigTextError
from sensor_config_utils.iniconf.base import ConfigTextParser
from sensor_config_utils.iniconf.parser import IniTextParser
from sensor_config_utils.validation.base import Validator

REQUIRED_MESSAGE = "La configuration du capteur est obligatoire"


class ConfigTextValidator(Validator):
    """
    Vérifie qu'un texte de configuration est lisible.

    Lève l'exception du parseur telle quelle ; son message identifie
    la ligne fautive.
    """

    def __init__(
        self,
        text: Any,
        parser: Optional[ConfigTextParser] = None
    ) -> None:
        """
        Initialise le validateur.

        Args:
            text: Texte à valider
            parser: Parseur injectable (défaut: IniTextParser)
        """
        self.text = text
        self.parser = parser or IniTextParser()

    def validate(self) -> None:
        """
        Valide le texte.

        Raises:
            ConfigTextError: Si le texte est vide ou mal formé
        """
        self.parser.parse(self.text)


def check_config_text(text: Any) -> Optional[str]:
    """Règle de formulaire du champ de configuration.

    Args:
        text: Valeur du champ.

    Returns:
        Message d'erreur à afficher, ou None si le texte est valide.
    """
    if not text:
        return REQUIRED_MESSAGE
    try:
        ConfigTextValidator(text).validate()
    except ConfigTextError as e:
        return str(e)
    return None
