"""Classification d'une ligne de texte de configuration."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sensor_config_utils.errors.exceptions import (
    EmptyKeyError,
    EmptySectionNameError,
)

_SECTION_RE = re.compile(r"\[(.+)\]")
_KEY_VALUE_RE = re.compile(r"([^=]*)=(.*)")

COMMENT_PREFIXES = (";", "#")


class LineKind(Enum):
    """Nature d'une ligne."""

    BLANK = "blank"
    COMMENT = "comment"
    SECTION = "section"
    KEY_VALUE = "key_value"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ClassifiedLine:
    """Ligne classée.

    Attributes:
        kind: Nature de la ligne.
        name: Nom de section (SECTION uniquement).
        key: Clé (KEY_VALUE uniquement).
        raw_value: Valeur brute avant conversion (KEY_VALUE uniquement).
    """

    kind: LineKind
    name: Optional[str] = None
    key: Optional[str] = None
    raw_value: Optional[str] = None


_BLANK = ClassifiedLine(LineKind.BLANK)
_COMMENT = ClassifiedLine(LineKind.COMMENT)
_MALFORMED = ClassifiedLine(LineKind.MALFORMED)


def classify_line(
    line: str, line_number: Optional[int] = None
) -> ClassifiedLine:
    """Classe une ligne de texte de configuration.

    Les en-têtes de section sont reconnus avant les paires clé=valeur.
    Une ligne non reconnue est retournée comme MALFORMED : c'est à
    l'appelant de décider de l'erreur à lever.

    Args:
        line: Ligne brute (les espaces autour sont ignorés).
        line_number: Position 1-based, reportée dans les erreurs.

    Returns:
        La ligne classée.

    Raises:
        EmptySectionNameError: Si l'en-tête ``[ ]`` n'a pas de nom.
        EmptyKeyError: Si la clé d'une ligne clé=valeur est vide.
    """
    stripped = line.strip()

    if not stripped:
        return _BLANK
    if stripped.startswith(COMMENT_PREFIXES):
        return _COMMENT

    match = _SECTION_RE.fullmatch(stripped)
    if match:
        name = match.group(1).strip()
        if not name:
            raise EmptySectionNameError(line_number, line)
        return ClassifiedLine(LineKind.SECTION, name=name)

    match = _KEY_VALUE_RE.fullmatch(stripped)
    if match:
        key = match.group(1).strip()
        if not key:
            raise EmptyKeyError(line_number, line)
        return ClassifiedLine(
            LineKind.KEY_VALUE, key=key, raw_value=match.group(2).strip()
        )

    return _MALFORMED
