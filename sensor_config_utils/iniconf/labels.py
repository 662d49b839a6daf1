"""Libellés lisibles des clés de configuration connues."""

from collections.abc import Mapping
from typing import Optional

from sensor_config_utils.errors.exceptions import ConfigurationError

FRENCH_LABELS: dict[str, str] = {
    # Mesure
    "unit": "Unité",
    "range": "Plage",
    "min": "Valeur minimale",
    "max": "Valeur maximale",
    "accuracy": "Précision",
    # Communication
    "protocol": "Protocole de communication",
    "baudRate": "Débit en bauds",
    "dataBits": "Bits de données",
    "stopBits": "Bits d'arrêt",
    "parity": "Parité",
    "address": "Adresse de l'appareil",
    "timeout": "Délai d'expiration",
    "interval": "Intervalle d'acquisition",
    # Réseau
    "host": "Hôte",
    "ip": "Adresse IP",
    "port": "Port",
    # Capteur
    "sensorModel": "Modèle de capteur",
    "manufacturer": "Fabricant",
    "calibrationDate": "Date d'étalonnage",
    # Divers
    "enable": "Activé",
    "description": "Description",
}

CHINESE_LABELS: dict[str, str] = {
    "unit": "单位",
    "range": "范围",
    "min": "最小值",
    "max": "最大值",
    "accuracy": "精度",
    "protocol": "通讯协议",
    "baudRate": "波特率",
    "dataBits": "数据位",
    "stopBits": "停止位",
    "parity": "校验位",
    "address": "设备地址",
    "timeout": "超时时间",
    "interval": "采集间隔",
    "host": "主机地址",
    "ip": "IP地址",
    "port": "端口号",
    "sensorModel": "传感器型号",
    "manufacturer": "制造商",
    "calibrationDate": "校准日期",
    "enable": "启用状态",
    "description": "描述",
}

LABEL_TABLES: dict[str, dict[str, str]] = {
    "fr": FRENCH_LABELS,
    "zh": CHINESE_LABELS,
}

DEFAULT_LOCALE = "fr"


def get_labels(
    locale: str = DEFAULT_LOCALE,
    overrides: Optional[Mapping[str, str]] = None
) -> dict[str, str]:
    """Retourne la table de libellés d'une langue.

    Args:
        locale: Code de langue ("fr" ou "zh").
        overrides: Libellés prioritaires sur ceux de la table.

    Returns:
        Nouvelle table {clé: libellé}.

    Raises:
        ConfigurationError: Si la langue n'est pas disponible.
    """
    if locale not in LABEL_TABLES:
        raise ConfigurationError(
            f"Langue de libellés inconnue: {locale}. "
            f"Langues disponibles: {sorted(LABEL_TABLES)}"
        )
    labels = dict(LABEL_TABLES[locale])
    if overrides:
        labels.update(overrides)
    return labels


def label_for(key: str, labels: Mapping[str, str] = FRENCH_LABELS) -> str:
    """Libellé d'une clé ; la clé elle-même si elle est inconnue."""
    return labels.get(key) or key
