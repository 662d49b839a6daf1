"""Modèles Pydantic des paramètres de la bibliothèque.

Exemple de fichier TOML accepté :

    quote_ambiguous = false

    [logging]
    level = "INFO"
    file = "/var/log/sensor_config.log"

    [display]
    locale = "zh"

    [display.labels]
    baudRate = "Débit (bauds)"
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    """Paramètres du FileLogger."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file: Optional[str] = None
    console: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Niveau de log inconnu: {v}. Valeurs possibles: {_LOG_LEVELS}"
            )
        return level


class DisplaySettings(BaseModel):
    """Paramètres du formateur d'affichage.

    Attributes:
        locale: Table de libellés à utiliser ("fr" ou "zh").
        labels: Libellés supplémentaires, prioritaires sur la table.
    """

    locale: str = "fr"
    labels: dict[str, str] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}


class ConverterSettings(BaseModel):
    """Paramètres complets du convertisseur.

    Attributes:
        logging: Paramètres de log.
        display: Paramètres d'affichage.
        quote_ambiguous: Mettre entre guillemets, à la sérialisation,
            les chaînes qui seraient relues avec un autre type.
    """

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    quote_ambiguous: bool = False

    model_config = {"extra": "forbid"}
