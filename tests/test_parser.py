"""Tests pour le parseur de texte de configuration."""

from unittest.mock import MagicMock

import pytest

from sensor_config_utils.errors import (
    ConfigTextError,
    EmptyConfigError,
    EmptyInputError,
    EmptyKeyError,
    EmptySectionNameError,
    MalformedLineError,
    NameConflictError,
    ValidationError,
)
from sensor_config_utils.iniconf import IniTextParser, parse_config_text
from sensor_config_utils.iniconf.parser import split_lines
from sensor_config_utils.logging import Logger


TEMPERATURE_TEXT = (
    "; Capteur de température\n"
    "[General]\n"
    "unit=℃\n"
    "protocol=Modbus RTU\n"
    "enable=true\n"
    "\n"
    "[Range]\n"
    "min=-40\n"
    "max=125\n"
    "accuracy=0.5\n"
    "\n"
    "[Communication]\n"
    "baudRate=9600\n"
    "parity=None\n"
    "address=1\n"
)


class TestSplitLines:
    """Tests pour split_lines."""

    def test_unix_newlines(self):
        """Découpe sur ``\\n``."""
        assert split_lines("a=1\nb=2") == ["a=1", "b=2"]

    def test_windows_newlines(self):
        """Découpe sur ``\\r\\n``."""
        assert split_lines("a=1\r\nb=2\r\n") == ["a=1", "b=2", ""]


class TestParseSectioned:
    """Tests du parsing avec sections."""

    def test_sectioned_example(self):
        """Exemple de référence à deux sections."""
        text = "[General]\nunit=℃\nenable=true\n\n[Range]\nmin=-40\nmax=125\n"
        assert parse_config_text(text) == {
            "General": {"unit": "℃", "enable": True},
            "Range": {"min": -40, "max": 125},
        }

    def test_full_temperature_config(self):
        """Configuration complète d'un capteur de température."""
        result = parse_config_text(TEMPERATURE_TEXT)

        assert list(result) == ["General", "Range", "Communication"]
        assert result["General"]["protocol"] == "Modbus RTU"
        assert result["Range"]["accuracy"] == 0.5
        assert result["Communication"] == {
            "baudRate": 9600,
            "parity": "None",
            "address": 1,
        }

    def test_key_order_preserved(self):
        """L'ordre des clés suit le texte."""
        result = parse_config_text("[S]\nz=1\na=2\nm=3")
        assert list(result["S"]) == ["z", "a", "m"]

    def test_windows_line_endings(self):
        """Les fins de ligne ``\\r\\n`` sont acceptées."""
        result = parse_config_text("[General]\r\nunit=Pa\r\n")
        assert result == {"General": {"unit": "Pa"}}

    def test_duplicate_key_last_wins(self):
        """Une clé répétée garde la dernière valeur."""
        result = parse_config_text("[A]\nx=1\nx=2")
        assert result == {"A": {"x": 2}}

    def test_repeated_section_merges(self):
        """Un en-tête répété complète la section existante."""
        result = parse_config_text("[A]\nx=1\n[B]\ny=2\n[A]\nz=3")
        assert result == {"A": {"x": 1, "z": 3}, "B": {"y": 2}}
        assert list(result) == ["A", "B"]

    def test_root_keys_before_first_section(self):
        """Les clés précédant le premier en-tête restent à la racine."""
        result = parse_config_text("version=2\n[General]\nunit=Pa")
        assert result == {"version": 2, "General": {"unit": "Pa"}}

    def test_empty_section_kept(self):
        """Une section sans clé est conservée si d'autres clés existent."""
        result = parse_config_text("[Empty]\n[A]\nx=1")
        assert result == {"Empty": {}, "A": {"x": 1}}

    def test_section_named_like_root_key_raises(self):
        """Une section ne peut pas reprendre le nom d'une clé racine."""
        with pytest.raises(NameConflictError) as exc_info:
            parse_config_text("General=1\n[General]\nunit=Pa")
        assert exc_info.value.line_number == 2
        assert exc_info.value.name == "General"


class TestParseFlat:
    """Tests du parsing sans section."""

    def test_flat_example(self):
        """Exemple de référence plat, sans enveloppe de section."""
        assert parse_config_text("baudRate=9600\nparity=None\n") == {
            "baudRate": 9600,
            "parity": "None",
        }

    def test_comments_and_blanks_ignored(self):
        """Commentaires et lignes vides sont ignorés."""
        text = "# série\n\n  ; autre\nport=502\n"
        assert parse_config_text(text) == {"port": 502}

    def test_quoted_values(self):
        """Les valeurs entre guillemets restent des chaînes."""
        result = parse_config_text("address=\"0x40\"\ncode='42'")
        assert result == {"address": "0x40", "code": "42"}
        assert isinstance(result["code"], str)


class TestParseErrors:
    """Tests des erreurs du parseur."""

    @pytest.mark.parametrize("text", ["", None, 42, b"a=1"])
    def test_empty_input(self, text):
        """Texte vide ou non textuel."""
        with pytest.raises(EmptyInputError):
            parse_config_text(text)

    def test_malformed_line(self):
        """Une ligne sans ``=`` ni crochets est signalée avec son numéro."""
        with pytest.raises(MalformedLineError) as exc_info:
            parse_config_text("General\nunit=C\n")
        assert exc_info.value.line_number == 1
        assert exc_info.value.line == "General"
        assert str(exc_info.value) == 'Ligne 1 : format invalide : "General"'

    def test_malformed_line_reports_raw_text(self):
        """La ligne est rapportée telle que saisie, à sa position."""
        with pytest.raises(MalformedLineError) as exc_info:
            parse_config_text("a=1\n\n   oops  \n")
        assert exc_info.value.line_number == 3
        assert exc_info.value.line == "   oops  "

    def test_empty_key(self):
        """Une clé vide est rejetée."""
        with pytest.raises(EmptyKeyError) as exc_info:
            parse_config_text("[A]\n=5\n")
        assert exc_info.value.line_number == 2

    def test_empty_section_name(self):
        """Un en-tête sans nom est rejeté."""
        with pytest.raises(EmptySectionNameError):
            parse_config_text("[ ]\nx=1")

    def test_comment_only_is_empty_config(self):
        """Un texte sans paramètre est rejeté."""
        with pytest.raises(EmptyConfigError):
            parse_config_text("; just a comment\n")

    def test_sections_without_keys_is_empty_config(self):
        """Des en-têtes seuls ne suffisent pas."""
        with pytest.raises(EmptyConfigError):
            parse_config_text("[A]\n[B]\n")

    def test_fail_fast_on_first_error(self):
        """Seule la première erreur est rapportée."""
        with pytest.raises(MalformedLineError) as exc_info:
            parse_config_text("bad\n=1\nalso bad")
        assert exc_info.value.line_number == 1

    def test_errors_are_validation_errors(self):
        """Toutes les erreurs dérivent de ValidationError."""
        with pytest.raises(ValidationError):
            parse_config_text("; rien")


class TestIniTextParserLogging:
    """Tests du logging d'IniTextParser."""

    def setup_method(self):
        """Crée un parseur avec un logger simulé."""
        self.logger = MagicMock(spec=Logger)
        self.parser = IniTextParser(self.logger)

    def test_success_logs_summary(self):
        """Un parsing réussi est résumé en info."""
        self.parser.parse("version=2\n[A]\nx=1\n[B]\ny=2")
        self.logger.log_info.assert_called_once_with(
            "Configuration lue : 1 clé(s) hors section, 2 section(s)"
        )

    def test_failure_logged_and_reraised(self):
        """Une erreur est loggée puis propagée."""
        with pytest.raises(ConfigTextError):
            self.parser.parse("oops")
        self.logger.log_error.assert_called_once()
        assert "Ligne 1" in self.logger.log_error.call_args[0][0]
        self.logger.log_info.assert_not_called()

    def test_without_logger(self):
        """Le parseur fonctionne sans logger."""
        assert IniTextParser().parse("a=1") == {"a": 1}
