"""Lecture du texte de configuration clé=valeur.

Ce module fournit IniTextParser, qui construit un objet de configuration
depuis le texte saisi dans le formulaire d'un type de capteur :

    [General]
    unit=℃
    enable=true

    [Range]
    min=-40
    max=125

Un texte sans en-tête donne un objet plat ({clé: valeur}).
"""

import re
from typing import Any, Optional

from sensor_config_utils.errors.exceptions import (
    ConfigTextError,
    EmptyConfigError,
    EmptyInputError,
    MalformedLineError,
    NameConflictError,
)
from sensor_config_utils.iniconf.base import (
    ConfigObject,
    ConfigSection,
    ConfigTextParser,
)
from sensor_config_utils.iniconf.coercion import coerce_value
from sensor_config_utils.iniconf.lines import LineKind, classify_line
from sensor_config_utils.logging.base import Logger

_NEWLINE_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Découpe un texte sur ``\\r\\n`` ou ``\\n``."""
    return _NEWLINE_RE.split(text)


class IniTextParser(ConfigTextParser):
    """Parseur du texte de configuration.

    Échoue à la première erreur : aucun objet partiel n'est retourné.

    Attributes:
        logger: Logger optionnel.

    Example:
        >>> parser = IniTextParser()
        >>> parser.parse("baudRate=9600\\nparity=None")
        {'baudRate': 9600, 'parity': 'None'}
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        """Initialise le parseur.

        Args:
            logger: Logger optionnel pour tracer les conversions.
        """
        self.logger = logger

    def parse(self, text: Any) -> ConfigObject:
        """Convertit un texte clé=valeur en objet de configuration.

        Args:
            text: Texte saisi par l'utilisateur.

        Returns:
            Objet plat, ou sectionné si au moins un en-tête est présent.

        Raises:
            EmptyInputError: Si le texte est vide ou n'est pas une chaîne.
            EmptySectionNameError: Si un en-tête n'a pas de nom.
            EmptyKeyError: Si une clé est vide.
            MalformedLineError: Si une ligne n'est pas reconnue.
            NameConflictError: Si une section reprend le nom d'une clé.
            EmptyConfigError: Si aucun paramètre n'a été lu.
        """
        try:
            config = self._parse(text)
        except ConfigTextError as e:
            if self.logger:
                self.logger.log_error(f"Texte de configuration rejeté : {e}")
            raise

        if self.logger:
            sections = sum(1 for v in config.values() if isinstance(v, dict))
            self.logger.log_info(
                f"Configuration lue : {len(config) - sections} clé(s) hors "
                f"section, {sections} section(s)"
            )
        return config

    def _parse(self, text: Any) -> ConfigObject:
        if not isinstance(text, str) or not text:
            raise EmptyInputError()

        result: ConfigObject = {}
        # Scope courant : la racine tant qu'aucun en-tête n'est lu.
        current: dict = result
        key_count = 0

        for number, raw in enumerate(split_lines(text), start=1):
            line = classify_line(raw, number)

            if line.kind in (LineKind.BLANK, LineKind.COMMENT):
                continue

            if line.kind is LineKind.SECTION:
                current = self._open_section(result, line.name, number, raw)
            elif line.kind is LineKind.KEY_VALUE:
                current[line.key] = coerce_value(line.raw_value)
                key_count += 1
            else:
                raise MalformedLineError(number, raw)

        if key_count == 0:
            raise EmptyConfigError()

        return result

    @staticmethod
    def _open_section(
        result: ConfigObject, name: str, number: int, raw: str
    ) -> ConfigSection:
        """Ouvre une section, ou la rouvre si elle existe déjà."""
        existing = result.get(name)
        if existing is None:
            section: ConfigSection = {}
            result[name] = section
            return section
        if not isinstance(existing, dict):
            raise NameConflictError(name, number, raw)
        return existing


_default_parser = IniTextParser()


def parse_config_text(text: Any) -> ConfigObject:
    """Convertit un texte clé=valeur en objet de configuration.

    Utilise une instance IniTextParser par défaut, sans logger.

    Args:
        text: Texte saisi par l'utilisateur.

    Returns:
        Objet de configuration.

    Raises:
        ConfigTextError: À la première erreur rencontrée.
    """
    return _default_parser.parse(text)
