"""Direction-aware grid index that re-expresses phrases as grid coordinates.

This package exposes the public API surface via:

- ``gridcypher.engine.builder.build_trie``: indexes every reading ray of a grid.
- ``gridcypher.engine.trie.CypherTrie``: search plus greedy and longest-run
  phrase reconstruction.
- ``gridcypher.engine.service.CypherService``: rebuild-on-demand binding that
  renders results as text or records.
- ``gridcypher.data.corpus.load_corpus``: reads a paginated corpus.
"""

from .core.constants import ConstructionMode, DiagonalMode, Direction, all_directions
from .core.models import CypherPart, DisplayOffsets, Location
from .data.corpus import CorpusConfig, load_corpus
from .engine.builder import build_trie
from .engine.grid import CorpusGrid
from .engine.service import CypherService, ServiceConfig
from .engine.trie import CypherTrie

__all__ = [
    "ConstructionMode",
    "CorpusConfig",
    "CorpusGrid",
    "CypherPart",
    "CypherService",
    "CypherTrie",
    "DiagonalMode",
    "Direction",
    "DisplayOffsets",
    "Location",
    "ServiceConfig",
    "all_directions",
    "build_trie",
    "load_corpus",
]

__version__ = "0.1.0"
