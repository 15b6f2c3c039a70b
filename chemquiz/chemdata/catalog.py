"""
Compound Catalog Indexed by Category Path

A Catalog pairs every compound with its category path (for example
``("Organic", "Alcohols", "Primary Alcohols")``) and answers prefix queries
such as "all compounds under Organic / Alcohols".

Catalogs are usually aggregated from a directory tree where the directory
nesting *is* the category path:

    catalog/
        index.json                  <- manifest, skipped
        Organic/
            Alcohols/
                compounds.json      <- {"compounds": [...]}
        Inorganic/
            Salts/
                compounds.json

Author: ChemQuiz Development Team
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple, Union

from pydantic import ValidationError

from .compounds import Compound, COMPOUND_LIST_ADAPTER

logger = logging.getLogger(__name__)

# Manifest file colocated with the data files; never parsed as compound data
MANIFEST_FILENAME = 'index.json'
PATH_SEPARATOR = ' / '

CategoryPath = Tuple[str, ...]


# =============================================================================
# ERRORS
# =============================================================================

class CatalogError(Exception):
    """Base class for category lookup failures."""


class EmptyPathError(CatalogError):
    def __init__(self):
        super().__init__("category path must contain at least one segment")


class CategoryNotFoundError(CatalogError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"no compounds found for category path: {path}")


class CatalogLoadError(Exception):
    """Base class for failures while aggregating a catalog directory."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        super().__init__(message)


class EmptyCategoryPathError(CatalogLoadError):
    def __init__(self, path: Path):
        super().__init__(path, f"data file has no category directory: {path}")


class ReadError(CatalogLoadError):
    def __init__(self, path: Path, cause: Exception):
        self.cause = cause
        super().__init__(path, f"failed to read {path}: {cause}")


class ParseError(CatalogLoadError):
    def __init__(self, path: Path, cause: Exception):
        self.cause = cause
        super().__init__(path, f"failed to parse {path}: {cause}")


# =============================================================================
# CATALOG
# =============================================================================

@dataclass(frozen=True)
class CatalogEntry:
    """A compound together with the category path it was filed under."""
    compound: Compound
    categories: CategoryPath

    def __post_init__(self):
        object.__setattr__(self, 'categories', tuple(self.categories))

    def category_path(self) -> str:
        return PATH_SEPARATOR.join(self.categories)


class Catalog:
    """
    Read-only collection of catalog entries.

    Duplicate compounds, under the same or different paths, are kept as-is.
    """

    def __init__(self, entries: Sequence[CatalogEntry] = ()):
        self._entries: List[CatalogEntry] = list(entries)

    @classmethod
    def from_directory(cls, root: Union[str, Path]) -> 'Catalog':
        """
        Aggregate every compound data file below ``root``.

        Args:
            root: Catalog root directory

        Returns:
            Catalog with one entry per compound found

        Raises:
            EmptyCategoryPathError: a data file sits directly in ``root``
            ReadError: a directory or file could not be read
            ParseError: a data file is not a valid compound list
        """
        root = Path(root)
        entries: List[CatalogEntry] = []
        _collect_directory(root, [], entries)
        logger.info(f"Loaded {len(entries)} compounds from catalog {root}")
        return cls(entries)

    @property
    def entries(self) -> List[CatalogEntry]:
        return list(self._entries)

    def all_compounds(self) -> List[Compound]:
        return [entry.compound for entry in self._entries]

    def available_paths(self) -> List[CategoryPath]:
        """
        Every distinct category prefix, sorted.

        An entry under ``("Organic", "Alcohols", "Primary Alcohols")``
        contributes ``("Organic",)``, ``("Organic", "Alcohols")`` and the full
        path.
        """
        paths = set()
        for entry in self._entries:
            for depth in range(1, len(entry.categories) + 1):
                paths.add(entry.categories[:depth])
        return sorted(paths)

    def compounds_for(self, path: Sequence[str]) -> List[Compound]:
        """
        Get all compounds filed under ``path`` or any of its subcategories.

        Raises:
            EmptyPathError: ``path`` has no segments
            CategoryNotFoundError: no entry matches ``path``
        """
        prefix = tuple(path)
        if not prefix:
            raise EmptyPathError()

        matches = [entry.compound for entry in self._entries
                   if entry.categories[:len(prefix)] == prefix]

        if not matches:
            raise CategoryNotFoundError(PATH_SEPARATOR.join(prefix))

        return matches

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(list(self._entries))


# =============================================================================
# DIRECTORY AGGREGATION
# =============================================================================

def load_compound_file(path: Union[str, Path]) -> List[Compound]:
    """
    Parse one compound data file of the form ``{"compounds": [...]}``.

    Raises:
        ReadError: the file could not be read
        ParseError: the file is not valid JSON or not a compound list
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ReadError(path, e) from e

    try:
        document = COMPOUND_LIST_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise ParseError(path, e) from e

    return list(document.compounds)


def _collect_directory(directory: Path, categories: List[str], entries: List[CatalogEntry]):
    try:
        children = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ReadError(directory, e) from e

    for child in children:
        if child.is_dir():
            categories.append(child.name)
            _collect_directory(child, categories, entries)
            categories.pop()
            continue

        if child.suffix != '.json' or child.name == MANIFEST_FILENAME:
            continue

        if not categories:
            raise EmptyCategoryPathError(child)

        compounds = load_compound_file(child)
        path = tuple(categories)
        entries.extend(CatalogEntry(compound=compound, categories=path) for compound in compounds)
        logger.debug(f"{child}: {len(compounds)} compounds under {PATH_SEPARATOR.join(path)}")
