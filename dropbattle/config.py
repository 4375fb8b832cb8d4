# FILE: config.py

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ALGORITHMS = ("minimax", "alphabeta")


class ConfigurationError(ValueError):
    """Exception raised when a search setting is invalid."""
    pass


def _parse_ply(value):
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid ply: {value!r}. Must be a positive integer.")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ConfigurationError(f"Invalid ply: {value!r}. Must be a positive integer.") from None
    if not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"Invalid ply: {value!r}. Must be a positive integer.")
    return value


def _parse_algorithm(name):
    if not isinstance(name, str) or name.strip().lower() not in ALGORITHMS:
        raise ConfigurationError(f"Unknown algorithm: {name!r}. Must be one of {', '.join(ALGORITHMS)}.")
    return name.strip().lower() == "alphabeta"


@dataclass
class SearchConfig:
    ply: int = 4
    use_alpha_beta: bool = True

    def __post_init__(self):
        self.ply = _parse_ply(self.ply)
        if not isinstance(self.use_alpha_beta, bool):
            raise ConfigurationError(f"use_alpha_beta must be a bool, got {self.use_alpha_beta!r}.")

    @property
    def algorithm(self) -> str:
        return "alphabeta" if self.use_alpha_beta else "minimax"

    def set_ply(self, value):
        """Set the search depth. Accepts ints and integer strings."""
        self.ply = _parse_ply(value)
        logger.info(f"Search depth set to {self.ply}")

    def set_algorithm(self, name: str):
        """Select 'minimax' (full tree) or 'alphabeta' (pruned)."""
        self.use_alpha_beta = _parse_algorithm(name)
        logger.info(f"Algorithm selected: {self.algorithm}")

    @staticmethod
    def from_env(environ=None) -> "SearchConfig":
        """Build a config, honouring DROPBATTLE_PLY and DROPBATTLE_ALGORITHM overrides."""
        environ = os.environ if environ is None else environ
        cfg = SearchConfig()
        if environ.get("DROPBATTLE_PLY"):
            cfg.set_ply(environ["DROPBATTLE_PLY"])
        if environ.get("DROPBATTLE_ALGORITHM"):
            cfg.set_algorithm(environ["DROPBATTLE_ALGORITHM"])
        return cfg
