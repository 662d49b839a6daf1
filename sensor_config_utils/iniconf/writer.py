"""Écriture d'un objet de configuration au format texte clé=valeur.

Inverse structurel d'IniTextParser : ``parse(stringify(parse(t)))`` est
égal à ``parse(t)``. La mise en forme d'origine (commentaires, espaces)
n'est pas conservée.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

from sensor_config_utils.iniconf.base import ConfigTextWriter, is_scalar
from sensor_config_utils.iniconf.coercion import coerce_value
from sensor_config_utils.logging.base import Logger


def format_number(value: int | float) -> str:
    """Écrit un nombre en notation décimale positionnelle.

    Les flottants très grands ou très petits sont écrits sans exposant
    et gardent toujours un point décimal, afin d'être relus comme le
    même flottant.

    Args:
        value: Nombre à écrire.

    Returns:
        Représentation textuelle.
    """
    if isinstance(value, int):
        return str(value)
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
        if "." not in text:
            text += ".0"
    return text


def format_value(value: Any, quote_ambiguous: bool = False) -> str:
    """Écrit une valeur scalaire.

    Args:
        value: Booléen, nombre, chaîne ou None.
        quote_ambiguous: Entourer de guillemets les chaînes qui seraient
            relues avec un autre type (ex: "42", "true", " a").

    Returns:
        Représentation textuelle de la valeur.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)

    text = str(value)
    if quote_ambiguous and _is_ambiguous(text):
        return f'"{text}"'
    return text


def _is_ambiguous(text: str) -> bool:
    """Indique si une chaîne ne serait pas relue à l'identique."""
    if text != text.strip():
        return True
    coerced = coerce_value(text)
    return not isinstance(coerced, str) or coerced != text


class IniTextWriter(ConfigTextWriter):
    """Sérialiseur des objets de configuration.

    Les clés hors section sont écrites en tête, sans en-tête ; chaque
    section suit avec son en-tête ``[Nom]`` et une ligne vide de
    séparation. Les entrées de forme inattendue (listes, sections
    imbriquées) sont ignorées.

    Attributes:
        logger: Logger optionnel.
        quote_ambiguous: Voir format_value.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        quote_ambiguous: bool = False
    ) -> None:
        self.logger = logger
        self.quote_ambiguous = quote_ambiguous

    def stringify(self, config: Mapping[str, Any]) -> str:
        """Convertit un objet de configuration en texte.

        Args:
            config: Objet plat ou sectionné.

        Returns:
            Texte sans ligne vide finale.
        """
        lines: list[str] = []
        sections: list[tuple[str, Mapping[str, Any]]] = []

        for name, value in config.items():
            if isinstance(value, Mapping):
                sections.append((name, value))
            elif is_scalar(value):
                lines.append(self._line(name, value))
            else:
                self._skip(name, value)

        if lines and sections:
            lines.append("")

        for name, values in sections:
            lines.append(f"[{name}]")
            for key, value in values.items():
                if is_scalar(value):
                    lines.append(self._line(key, value))
                else:
                    self._skip(f"{name}.{key}", value)
            lines.append("")

        return "\n".join(lines).rstrip()

    def _line(self, key: str, value: Any) -> str:
        return f"{key}={format_value(value, self.quote_ambiguous)}"

    def _skip(self, path: str, value: Any) -> None:
        if self.logger:
            self.logger.log_warning(
                f"Entrée {path} ignorée : type {type(value).__name__} "
                "non sérialisable"
            )


_default_writer = IniTextWriter()


def stringify_config_object(
    config: Mapping[str, Any], quote_ambiguous: bool = False
) -> str:
    """Convertit un objet de configuration en texte clé=valeur.

    Args:
        config: Objet plat ou sectionné.
        quote_ambiguous: Voir format_value.

    Returns:
        Texte relisible par parse_config_text.
    """
    if quote_ambiguous:
        return IniTextWriter(quote_ambiguous=True).stringify(config)
    return _default_writer.stringify(config)
