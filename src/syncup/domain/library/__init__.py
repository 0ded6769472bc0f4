"""Library domain - the song catalog and its search indexes.

This domain handles:
- Song data model
- Prefix (trie), fuzzy (BK-tree) and genre/artist (taxonomy) indexes
- CSV persistence
- The MusicLibrary catalog that keeps all of the above in step
"""

# Models
from .models import Song, derive_song_id

# Indexes
from .bktree import BKTree, levenshtein
from .taxonomy import TaxonomyTree
from .trie import Trie

# Persistence
from .storage import CSV_HEADER, SEED_SONGS, create_seed_file, iter_songs, write_songs

# Catalog
from .catalog import MusicLibrary

# Helpers
from .normalize import fold_case, fuzzy_key

__all__ = [
    # Models
    "Song",
    "derive_song_id",
    # Indexes
    "BKTree",
    "levenshtein",
    "TaxonomyTree",
    "Trie",
    # Persistence
    "CSV_HEADER",
    "SEED_SONGS",
    "create_seed_file",
    "iter_songs",
    "write_songs",
    # Catalog
    "MusicLibrary",
    # Helpers
    "fold_case",
    "fuzzy_key",
]
