"""Projection d'un objet de configuration en lignes d'affichage.

Utilisé par la vue en lecture seule d'une configuration : chaque
paramètre devient une ligne (section, clé, valeur, libellé).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from sensor_config_utils.iniconf.base import ConfigValue, is_sectioned
from sensor_config_utils.iniconf.labels import FRENCH_LABELS, label_for


@dataclass(frozen=True)
class DisplayRow:
    """Ligne d'affichage d'un paramètre.

    Attributes:
        section: Nom de la section, None en mode plat.
        key: Clé du paramètre.
        value: Valeur typée.
        label: Libellé lisible de la clé.
    """

    section: Optional[str]
    key: str
    value: ConfigValue
    label: str


@dataclass(frozen=True)
class DisplaySection:
    """Groupe de lignes d'une même section."""

    section: Optional[str]
    items: list[DisplayRow] = field(default_factory=list)


def format_for_display(
    config: Mapping[str, Any],
    labels: Optional[Mapping[str, str]] = None
) -> list[DisplayRow]:
    """Aplatit un objet de configuration en lignes d'affichage.

    Objet sectionné : seules les entrées des sections de type mapping
    sont retenues ; une section d'une autre forme (liste...) est
    ignorée sans erreur. Objet plat : une ligne par clé.

    Args:
        config: Objet plat ou sectionné.
        labels: Table {clé: libellé} (défaut: libellés français).

    Returns:
        Lignes dans l'ordre des sections et des clés.
    """
    labels = FRENCH_LABELS if labels is None else labels

    if not is_sectioned(config):
        return [
            DisplayRow(None, key, value, label_for(key, labels))
            for key, value in config.items()
        ]

    rows: list[DisplayRow] = []
    for section, values in config.items():
        if not isinstance(values, Mapping):
            continue
        rows.extend(
            DisplayRow(section, key, value, label_for(key, labels))
            for key, value in values.items()
        )
    return rows


def group_display_rows(rows: list[DisplayRow]) -> list[DisplaySection]:
    """Regroupe des lignes par section.

    Args:
        rows: Lignes produites par format_for_display.

    Returns:
        Un groupe par section, dans l'ordre d'apparition.
    """
    groups: dict[Optional[str], DisplaySection] = {}
    for row in rows:
        group = groups.get(row.section)
        if group is None:
            group = groups[row.section] = DisplaySection(row.section)
        group.items.append(row)
    return list(groups.values())
