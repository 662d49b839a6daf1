"""Conversion entre la configuration stockée (JSON) et le texte éditable.

Les types de capteurs conservent leur configuration sous forme de
chaîne JSON. Pour l'édition, ce JSON est converti en texte clé=valeur ;
à l'enregistrement, le texte saisi est relu puis resérialisé en JSON.
"""

import json
from collections.abc import Mapping
from typing import Any, Optional

from sensor_config_utils.config.settings import ConverterSettings
from sensor_config_utils.errors.exceptions import ConfigFormatError
from sensor_config_utils.iniconf.base import ConfigObject
from sensor_config_utils.iniconf.display import DisplayRow, format_for_display
from sensor_config_utils.iniconf.labels import get_labels
from sensor_config_utils.iniconf.parser import IniTextParser
from sensor_config_utils.iniconf.writer import IniTextWriter
from sensor_config_utils.logging.base import Logger


class SensorConfigCodec:
    """Point d'entrée des conversions d'une configuration de capteur.

    Regroupe parseur, sérialiseur et formateur d'affichage, configurés
    depuis les paramètres de la bibliothèque.

    Attributes:
        logger: Logger optionnel, transmis au parseur et au sérialiseur.
        settings: Paramètres du convertisseur.

    Example:
        >>> codec = SensorConfigCodec()
        >>> codec.json_to_text('{"General": {"unit": "℃", "enable": true}}')
        '[General]\\nunit=℃\\nenable=true'
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        settings: Optional[ConverterSettings] = None
    ) -> None:
        """Initialise le codec.

        Args:
            logger: Logger optionnel.
            settings: Paramètres (défaut: ConverterSettings()).

        Raises:
            ConfigurationError: Si la langue des libellés est inconnue.
        """
        self.logger = logger
        self.settings = settings or ConverterSettings()
        self.parser = IniTextParser(logger)
        self.writer = IniTextWriter(logger, self.settings.quote_ambiguous)
        self.labels = get_labels(
            self.settings.display.locale, self.settings.display.labels
        )

    def parse(self, text: Any) -> ConfigObject:
        """Voir IniTextParser.parse."""
        return self.parser.parse(text)

    def stringify(self, config: Mapping[str, Any]) -> str:
        """Voir IniTextWriter.stringify."""
        return self.writer.stringify(config)

    def format_for_display(self, config: Mapping[str, Any]) -> list[DisplayRow]:
        """Lignes d'affichage avec les libellés configurés."""
        return format_for_display(config, self.labels)

    def from_json(self, blob: str) -> dict[str, Any]:
        """Relit une configuration stockée.

        Args:
            blob: Chaîne JSON stockée avec le type de capteur.

        Returns:
            Objet de configuration.

        Raises:
            ConfigFormatError: Si le JSON est invalide ou n'est pas un objet.
        """
        try:
            data = json.loads(blob)
        except (TypeError, json.JSONDecodeError) as e:
            raise ConfigFormatError(
                f"Données de configuration illisibles : {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigFormatError(
                "La configuration stockée doit être un objet JSON, "
                f"reçu: {type(data).__name__}"
            )
        return data

    def to_json(self, config: Mapping[str, Any]) -> str:
        """Sérialise une configuration pour le stockage.

        Le JSON est compact et conserve les caractères non ASCII (℃).
        """
        return json.dumps(config, ensure_ascii=False, separators=(",", ":"))

    def json_to_text(self, blob: str) -> str:
        """Convertit la configuration stockée en texte éditable.

        Raises:
            ConfigFormatError: Si le JSON est invalide.
        """
        return self.stringify(self.from_json(blob))

    def text_to_json(self, text: Any) -> str:
        """Convertit le texte saisi en configuration à stocker.

        Raises:
            ConfigTextError: Si le texte est invalide.
        """
        config = self.parse(text)
        if self.logger:
            self.logger.log_info("Texte de configuration converti en JSON")
        return self.to_json(config)
