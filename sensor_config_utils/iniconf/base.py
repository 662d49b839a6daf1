"""Types et interfaces abstraites du convertisseur texte ↔ configuration.

Ce module définit :
- ConfigValue / ConfigObject : la forme de l'objet de configuration
- ConfigTextParser : contrat de lecture du texte
- ConfigTextWriter : contrat d'écriture du texte
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Union

ConfigValue = Union[bool, int, float, str]
"""Valeur scalaire typée d'un paramètre."""

ConfigSection = dict[str, ConfigValue]

ConfigObject = dict[str, Union[ConfigValue, ConfigSection]]
"""Objet de configuration.

Mode plat : {clé: valeur}. Mode sectionné : les clés hors section
(placées avant le premier en-tête) côtoient {nom_section: {clé: valeur}}.
L'ordre d'insertion des dict Python est l'ordre du texte.
"""

SCALAR_TYPES = (bool, int, float, str)


def is_scalar(value: Any) -> bool:
    """Indique si une valeur est un scalaire de configuration (ou None)."""
    return value is None or isinstance(value, SCALAR_TYPES)


def is_sectioned(config: Mapping[str, Any]) -> bool:
    """Indique si un objet de configuration contient au moins une entrée
    non scalaire (section ou valeur de forme inattendue).
    """
    return any(not is_scalar(value) for value in config.values())


class ConfigTextParser(ABC):
    """Interface pour la lecture d'un texte de configuration."""

    @abstractmethod
    def parse(self, text: str) -> ConfigObject:
        """Convertit un texte clé=valeur en objet de configuration.

        Args:
            text: Texte saisi par l'utilisateur.

        Returns:
            Objet de configuration construit en une seule passe.

        Raises:
            ConfigTextError: À la première erreur rencontrée.
        """
        pass


class ConfigTextWriter(ABC):
    """Interface pour l'écriture d'un texte de configuration."""

    @abstractmethod
    def stringify(self, config: Mapping[str, Any]) -> str:
        """Convertit un objet de configuration en texte clé=valeur.

        Args:
            config: Objet de configuration (plat ou sectionné).

        Returns:
            Texte relisible par un ConfigTextParser.
        """
        pass
