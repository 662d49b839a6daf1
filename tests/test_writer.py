"""Tests pour la sérialisation des objets de configuration."""

from unittest.mock import MagicMock

import pytest

from sensor_config_utils.iniconf import (
    IniTextWriter,
    parse_config_text,
    stringify_config_object,
)
from sensor_config_utils.iniconf.writer import format_number, format_value
from sensor_config_utils.logging import Logger


class TestFormatValue:
    """Tests pour format_value et format_number."""

    def test_booleans(self):
        """Les booléens sont écrits sans guillemets."""
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_numbers(self):
        """Les nombres sont écrits en décimal."""
        assert format_value(9600) == "9600"
        assert format_value(-40) == "-40"
        assert format_value(0.5) == "0.5"

    def test_large_float_without_exponent(self):
        """Un grand flottant est écrit sans exposant."""
        assert format_number(1e20) == "100000000000000000000.0"

    def test_small_float_without_exponent(self):
        """Un petit flottant est écrit sans exposant."""
        assert format_number(1e-7) == "0.0000001"

    def test_string_verbatim(self):
        """Les chaînes sont écrites telles quelles par défaut."""
        assert format_value("42") == "42"

    def test_none_is_empty(self):
        """None donne une valeur vide."""
        assert format_value(None) == ""

    @pytest.mark.parametrize("text", ["42", "true", "-1.5", '"x"', " a"])
    def test_ambiguous_strings_quoted(self, text):
        """Avec quote_ambiguous, les chaînes ambiguës sont protégées."""
        assert format_value(text, quote_ambiguous=True) == f'"{text}"'

    @pytest.mark.parametrize("text", ["None", "0x40", "℃", "Modbus RTU", ""])
    def test_plain_strings_not_quoted(self, text):
        """Les chaînes non ambiguës ne sont jamais entourées."""
        assert format_value(text, quote_ambiguous=True) == text


class TestStringify:
    """Tests pour stringify_config_object."""

    def test_sectioned(self):
        """Chaque section est suivie d'une ligne vide, sauf la dernière."""
        config = {
            "General": {"unit": "℃", "enable": True},
            "Range": {"min": -40, "max": 125},
        }
        assert stringify_config_object(config) == (
            "[General]\nunit=℃\nenable=true\n\n[Range]\nmin=-40\nmax=125"
        )

    def test_flat(self):
        """Un objet plat n'a pas d'en-tête."""
        assert stringify_config_object({"baudRate": 9600, "parity": "None"}) == (
            "baudRate=9600\nparity=None"
        )

    def test_root_keys_written_first(self):
        """Les clés racine précèdent les sections."""
        config = {"General": {"unit": "Pa"}, "version": 2}
        assert stringify_config_object(config) == (
            "version=2\n\n[General]\nunit=Pa"
        )

    def test_list_entries_skipped(self):
        """Les entrées de type liste sont ignorées."""
        config = {"Tags": ["a", "b"], "General": {"unit": "Pa", "ids": [1]}}
        assert stringify_config_object(config) == "[General]\nunit=Pa"

    def test_empty_section(self):
        """Une section vide garde son en-tête."""
        assert stringify_config_object({"A": {}, "B": {"x": 1}}) == (
            "[A]\n\n[B]\nx=1"
        )

    def test_empty_object(self):
        """Un objet vide donne un texte vide."""
        assert stringify_config_object({}) == ""

    def test_quote_ambiguous_option(self):
        """L'option protège les chaînes numériques."""
        assert stringify_config_object(
            {"code": "42"}, quote_ambiguous=True
        ) == 'code="42"'

    def test_skip_logged(self):
        """Les entrées ignorées sont signalées au logger."""
        logger = MagicMock(spec=Logger)
        IniTextWriter(logger).stringify({"Tags": [1, 2], "a": 1})
        logger.log_warning.assert_called_once()
        assert "Tags" in logger.log_warning.call_args[0][0]


class TestRoundTrip:
    """Tests des propriétés d'aller-retour."""

    @pytest.mark.parametrize("text", [
        "[General]\nunit=℃\nenable=true\n\n[Range]\nmin=-40\nmax=125\n",
        "baudRate=9600\nparity=None\n",
        "; entête\nversion=2\n[A]\nx=1.5\n# c\n[B]\ny=false\n[A]\nz=ok",
        "[Communication]\naddress=0x40\ntimeout=1000\ninterval=500",
        "host = 192.168.1.10 \nport=502\ndescription=",
        "[S]\nnote=a=b\nneg=-0.25\nbig=1.0",
        "v=123456789012345678901234.5",
        "v=100000000000000000000.0",
        "v=0.0000001",
    ])
    def test_parse_stringify_parse(self, text):
        """parse(stringify(parse(t))) == parse(t)."""
        parsed = parse_config_text(text)
        assert parse_config_text(stringify_config_object(parsed)) == parsed

    def test_config_round_trip(self):
        """parse(stringify(cfg)) == cfg pour des valeurs non ambiguës."""
        config = {
            "General": {"unit": "%RH", "protocol": "I2C", "enable": True},
            "Range": {"min": 0, "max": 100, "accuracy": 2},
            "Communication": {"address": "0x40", "timeout": 1000},
        }
        assert parse_config_text(stringify_config_object(config)) == config

    def test_float_types_survive(self):
        """Les flottants restent des flottants."""
        result = parse_config_text(stringify_config_object({"v": 3.0}))
        assert isinstance(result["v"], float)

    @pytest.mark.parametrize("text", [
        "v=123456789012345678901234.5",
        "v=100000000000000000000.0",
        "v=0.0000001",
    ])
    def test_exponent_range_floats_survive(self, text):
        """Les flottants hors notation courte restent des flottants égaux."""
        parsed = parse_config_text(text)
        result = parse_config_text(stringify_config_object(parsed))
        assert isinstance(result["v"], float)
        assert result["v"] == parsed["v"]

    def test_numeric_string_is_lossy_by_default(self):
        """Une chaîne numérique est relue comme un nombre par défaut."""
        parsed = parse_config_text('code="42"')
        assert parse_config_text(stringify_config_object(parsed)) == {
            "code": 42
        }

    def test_numeric_string_kept_with_quoting(self):
        """Avec quote_ambiguous, l'aller-retour est exact."""
        parsed = parse_config_text("code=\"42\"\nflag='true'\nraw='\"x\"'")
        text = stringify_config_object(parsed, quote_ambiguous=True)
        assert parse_config_text(text) == parsed
