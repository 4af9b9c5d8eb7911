"""
Deterministyczny generator liczb losowych (RNG) dla generowania planszy.

Ten sam seed musi zawsze dawać tę samą planszę. To pozwala na:
- Odtworzenie planszy z logu
- Debugowanie
- Testy jednostkowe

GameRNG opakowuje Pythonowy random.Random.

Jak używać:
    - Każda plansza dostaje WŁASNĄ instancję GameRNG
    - NIE używaj globalnego random - jest współdzielony
    - Bez seeda generator jest inicjalizowany z entropii systemu,
      a wylosowany seed jest zapamiętany (można go zalogować)

Przykład użycia:
    >>> a = GameRNG(seed=12345).roll_chance(0.92)
    >>> b = GameRNG(seed=12345).roll_chance(0.92)
    >>> a == b  # ten sam seed = ten sam wynik
    True
"""

from __future__ import annotations
import random
from typing import Optional


class GameRNG:
    """
    Deterministyczny generator losowości.

    Attributes:
        seed (int): Ziarno użyte do inicjalizacji
        _rng (random.Random): Wewnętrzny generator

    Example:
        >>> rng1 = GameRNG(42)
        >>> rng2 = GameRNG(42)
        >>> rng1.random() == rng2.random()  # ten sam seed = te same wyniki
        True
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Tworzy nowy generator.

        Args:
            seed: Ziarno losowości. None = ziarno z entropii systemu.
        """
        if seed is None:
            seed = random.SystemRandom().randint(0, 2**31 - 1)
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        """Losowa liczba z przedziału [0.0, 1.0)."""
        return self._rng.random()

    def roll_chance(self, chance: float) -> bool:
        """
        Rzuca kością na szansę (0.0 - 1.0).

        Args:
            chance: Szansa na sukces (0.0 = nigdy, 1.0 = zawsze)

        Returns:
            bool: True jeśli sukces
        """
        return self.random() < chance

    def __repr__(self) -> str:
        return f"GameRNG(seed={self.seed})"
