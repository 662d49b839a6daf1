"""Module iniconf : conversion texte clé=valeur ↔ objet de configuration.

Ce module fournit le format texte utilisé pour éditer les paramètres
d'un type de capteur (communication, plages de mesure, unités) :
- Conversion des valeurs (booléen, nombre, chaîne)
- Lecture du texte, plat ou découpé en sections ``[Nom]``
- Écriture de l'objet en texte
- Projection en lignes d'affichage avec libellés lisibles

Fonctions principales:
    - parse_config_text: texte → objet
    - stringify_config_object: objet → texte
    - format_for_display: objet → lignes d'affichage

Example:
    >>> from sensor_config_utils.iniconf import parse_config_text
    >>> parse_config_text("[Range]\\nmin=-40\\nmax=125")
    {'Range': {'min': -40, 'max': 125}}
"""

from sensor_config_utils.iniconf.base import (
    ConfigObject,
    ConfigTextParser,
    ConfigTextWriter,
    ConfigValue,
)
from sensor_config_utils.iniconf.codec import SensorConfigCodec
from sensor_config_utils.iniconf.coercion import coerce_value
from sensor_config_utils.iniconf.display import (
    DisplayRow,
    DisplaySection,
    format_for_display,
    group_display_rows,
)
from sensor_config_utils.iniconf.labels import (
    CHINESE_LABELS,
    FRENCH_LABELS,
    get_labels,
)
from sensor_config_utils.iniconf.lines import (
    ClassifiedLine,
    LineKind,
    classify_line,
)
from sensor_config_utils.iniconf.parser import IniTextParser, parse_config_text
from sensor_config_utils.iniconf.writer import (
    IniTextWriter,
    stringify_config_object,
)

__all__ = [
    # Types
    "ConfigValue",
    "ConfigObject",
    # Interfaces abstraites
    "ConfigTextParser",
    "ConfigTextWriter",
    # Implémentations
    "IniTextParser",
    "IniTextWriter",
    "SensorConfigCodec",
    # Lignes
    "LineKind",
    "ClassifiedLine",
    "classify_line",
    # Affichage
    "DisplayRow",
    "DisplaySection",
    "FRENCH_LABELS",
    "CHINESE_LABELS",
    "get_labels",
    # Fonctions utilitaires
    "coerce_value",
    "parse_config_text",
    "stringify_config_object",
    "format_for_display",
    "group_display_rows",
]
