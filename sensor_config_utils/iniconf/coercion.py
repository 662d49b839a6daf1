"""Conversion d'un jeton brut en valeur typée."""

import re

from sensor_config_utils.iniconf.base import ConfigValue

# Décimal uniquement : pas d'hexadécimal, d'exposant, ni de inf/nan.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)

_QUOTES = ('"', "'")


def strip_quotes(token: str) -> tuple[str, bool]:
    """Retire une paire de guillemets identiques entourant le jeton.

    Args:
        token: Jeton déjà débarrassé de ses espaces.

    Returns:
        Tuple (texte, True si des guillemets ont été retirés).
    """
    if len(token) >= 2 and token[0] in _QUOTES and token[-1] == token[0]:
        return token[1:-1], True
    return token, False


def parse_number(token: str) -> int | float | None:
    """Convertit un nombre décimal, ou retourne None.

    Args:
        token: Jeton à convertir.

    Returns:
        int sans partie décimale, float sinon, None si non numérique.
    """
    if not _NUMBER_RE.fullmatch(token):
        return None
    if "." in token:
        return float(token)
    return int(token)


def coerce_value(token: str) -> ConfigValue:
    """Convertit un jeton brut en valeur de configuration.

    Règles, dans l'ordre :
    1. Jeton entre guillemets : chaîne sans guillemets, sans autre
       conversion.
    2. ``true`` / ``false`` : booléen.
    3. Nombre décimal (signe et partie décimale optionnels) : int/float.
    4. Sinon : la chaîne telle quelle.

    Args:
        token: Jeton déjà débarrassé de ses espaces.

    Returns:
        Valeur typée.

    Example:
        >>> coerce_value("9600")
        9600
        >>> coerce_value('"9600"')
        '9600'
        >>> coerce_value("0x40")
        '0x40'
    """
    unquoted, quoted = strip_quotes(token)
    if quoted:
        return unquoted

    if token == "true":
        return True
    if token == "false":
        return False

    number = parse_number(token)
    if number is not None:
        return number

    return token
