"""
Konfiguracja planszy i ekranu: defaults.yaml + nadpisania.

Konfiguracja silnika leży w data/defaults.yaml:
- board:  parametry generowania planszy (BoardConfig)
- layout: geometria ekranu (HexLayout)

Kolejność:
    1. Sekcja z defaults.yaml daje wartości bazowe
    2. Nadpisania wywołującego (CLI, API) wygrywają, None = brak nadpisania
    3. Dataclass z wyniku waliduje wartości (ValueError)

Przykład:
    defaults.yaml:
        board:
            width: 15
            p_free: 0.92

    >>> loader = ConfigLoader("data/")
    >>> config = loader.load_board_config({"p_free": 1.0})
    >>> config.p_free        # nadpisane
    1.0
    >>> config.width         # z defaults
    15
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
import copy

from .board import BoardConfig
from .layout import HexLayout


class ConfigLoader:
    """
    Buduje BoardConfig i HexLayout z data/defaults.yaml i nadpisań.

    Attributes:
        data_path (Path): Katalog z plikami YAML
        _cache (Dict[str, Dict]): Wczytane pliki, klucz = nazwa pliku
    """

    DEFAULTS_FILE = "defaults.yaml"

    def __init__(self, data_path: str = "data/"):
        """
        Args:
            data_path: Katalog, w którym leży defaults.yaml
        """
        self.data_path = Path(data_path)
        self._cache: Dict[str, Dict] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # PLIKI YAML
    # ─────────────────────────────────────────────────────────────────────────

    def _read(self, filename: str) -> Dict:
        """
        Zwraca zawartość pliku YAML (z cache po pierwszym odczycie).

        Raises:
            FileNotFoundError: Brak pliku w data_path
        """
        if filename not in self._cache:
            with open(self.data_path / filename, 'r', encoding='utf-8') as f:
                self._cache[filename] = yaml.safe_load(f) or {}
        return self._cache[filename]

    def get_defaults(self) -> Dict:
        """Cały defaults.yaml jako słownik."""
        return self._read(self.DEFAULTS_FILE)

    def _get_section(self, name: str) -> Dict:
        defaults = self.get_defaults()
        if name not in defaults:
            raise KeyError(f"Section '{name}' not found in {self.DEFAULTS_FILE}")
        return defaults[name] or {}

    # ─────────────────────────────────────────────────────────────────────────
    # BUDOWANIE KONFIGURACJI
    # ─────────────────────────────────────────────────────────────────────────

    def load_board_config(self, overrides: Optional[Dict[str, Any]] = None) -> BoardConfig:
        """
        Buduje BoardConfig z defaults i nadpisań.

        Args:
            overrides: Wartości nadpisujące sekcję board (None = pomiń klucz)

        Returns:
            BoardConfig: Zwalidowana konfiguracja

        Raises:
            KeyError: Brak sekcji board
            ValueError: Niepoprawne wartości
        """
        data = self._deep_merge(self._get_section("board"), _without_none(overrides))
        return BoardConfig(**data)

    def load_layout(self, overrides: Optional[Dict[str, Any]] = None) -> HexLayout:
        """
        Buduje HexLayout z defaults i nadpisań.

        Raises:
            KeyError: Brak sekcji layout
            ValueError: Niepoprawne wartości
        """
        data = self._deep_merge(self._get_section("layout"), _without_none(overrides))
        return HexLayout(**data)

    # ─────────────────────────────────────────────────────────────────────────
    # HELPERY
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _deep_merge(base: Dict, override: Dict) -> Dict:
        """
        Zwraca kopię base z nałożonym override.

        Pod-słowniki obecne po obu stronach są łączone klucz po kluczu,
        każda inna wartość z override zastępuje wartość z base.
        Żaden z argumentów nie jest modyfikowany.
        """
        merged = copy.deepcopy(base)
        for key, value in override.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = ConfigLoader._deep_merge(current, value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged

    def reload(self) -> None:
        """Zapomina wczytane pliki - następny odczyt idzie z dysku."""
        self._cache.clear()


def _without_none(overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {k: v for k, v in (overrides or {}).items() if v is not None}
