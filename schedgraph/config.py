"""Configuration classes for schedgraph components."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class LoaderConfig:
    """Defaults applied when reading a graph description."""

    # Weight used for edges that omit "w"
    default_weight: int = 1

    # Source vertex used when the description omits "source"
    default_source: int = 0

    # Weight model tag used when the description omits "weight_model"
    default_weight_model: str = "edge"

    # File suffixes picked up when a directory is given to the CLI
    suffixes: Tuple[str, ...] = (".json", ".yaml", ".yml")


@dataclass
class GeneratorConfig:
    """Defaults for reproducible dataset generation."""

    seed: int = 42

    # Inclusive weight range for generated edges
    min_weight: int = 1
    max_weight: int = 10

    # Random edge attempts are capped at edge_count * attempt_multiplier
    attempt_multiplier: int = 10

    weight_model: str = "edge"

    # Vertex count of the single cycle seeded when only one SCC is requested
    single_cycle_len: int = 4

    def weight_range(self) -> Tuple[int, int]:
        """Return the inclusive (low, high) weight bounds."""
        return self.min_weight, self.max_weight


@dataclass
class ReportConfig:
    """Text report layout."""

    rule_width: int = 80
    indent: str = "  "


# Global configuration instances
LOADER_CONFIG = LoaderConfig()
GENERATOR_CONFIG = GeneratorConfig()
REPORT_CONFIG = ReportConfig()
