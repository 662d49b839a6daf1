"""Chargement des paramètres depuis un fichier TOML ou JSON."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

from sensor_config_utils.config.settings import ConverterSettings
from sensor_config_utils.errors.exceptions import FileConfigurationError


class SettingsLoader(ABC):
    """
    Interface abstraite pour le chargement des paramètres.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type[BaseModel] | None = None
    ) -> Union[Dict[str, Any], BaseModel]:
        """
        Charge un fichier de paramètres.

        Args:
            config_path: Chemin vers le fichier
            schema: Modèle Pydantic optionnel. Si fourni, retourne
                une instance du modèle, sinon un dict brut.

        Returns:
            Dictionnaire brut ou instance du schema

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si le format n'est pas supporté
        """
        pass


class FileSettingsLoader(SettingsLoader):
    """
    Chargeur de paramètres depuis fichiers.

    Supporte les formats TOML et JSON, détectés automatiquement
    par l'extension du fichier.
    """

    def load(
        self,
        config_path: Union[str, Path],
        schema: type[BaseModel] | None = None
    ) -> Union[Dict[str, Any], BaseModel]:
        """
        Charge un fichier TOML ou JSON, puis le valide si un schema
        est fourni.

        Args:
            config_path: Chemin vers le fichier
            schema: Modèle Pydantic optionnel

        Returns:
            Dictionnaire brut ou instance du schema

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si l'extension n'est pas supportée
            FileConfigurationError: Si le TOML ou le JSON est invalide
            TypeError: Si schema n'est pas un BaseModel
            pydantic.ValidationError: Si les données sont invalides
        """
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de paramètres non trouvé: {path}"
            )

        suffix = path.suffix.lower()

        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    raw_config = tomllib.load(f)
            elif suffix == ".json":
                with open(path, "r", encoding="utf-8") as f:
                    raw_config = json.load(f)
            else:
                raise ValueError(
                    f"Extension non supportée: {suffix}. "
                    "Utilisez .toml ou .json"
                )
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise FileConfigurationError(
                f"Fichier de paramètres illisible ({path}): {e}"
            ) from e

        if schema is None:
            return raw_config

        if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )

        return schema.model_validate(raw_config)


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    loader: Optional[SettingsLoader] = None
) -> ConverterSettings:
    """
    Charge les paramètres du convertisseur.

    Args:
        config_path: Chemin du fichier. Si None, retourne les
            paramètres par défaut.
        loader: Chargeur injectable (défaut: FileSettingsLoader).

    Returns:
        Paramètres validés.
    """
    if config_path is None:
        return ConverterSettings()
    loader = loader or FileSettingsLoader()
    return loader.load(config_path, schema=ConverterSettings)
