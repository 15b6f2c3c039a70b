"""
ChemQuiz Chemical Data Package

Compound records, the category-indexed catalog, the catalog manifest that
describes which dataset files exist, and a small built-in demo dataset.

Author: ChemQuiz Development Team
"""

from .compounds import (
    Compound,
    FunctionalGroup,
    find_by_name,
    find_by_structure,
    find_by_iupac_name,
)

from .catalog import (
    Catalog,
    CatalogEntry,
    CatalogError,
    EmptyPathError,
    CategoryNotFoundError,
    CatalogLoadError,
    EmptyCategoryPathError,
    ReadError,
    ParseError,
    MANIFEST_FILENAME,
    load_compound_file,
)

from .catalog_manifest import (
    CatalogManifest,
    CatalogNode,
    CatalogLeaf,
    ManifestError,
)

from .demo_data import (
    DEMO_OPTION_COUNT,
    demo_compounds,
    demo_catalog,
)

__all__ = [
    # Compounds
    'Compound',
    'FunctionalGroup',
    'find_by_name',
    'find_by_structure',
    'find_by_iupac_name',
    # Catalog
    'Catalog',
    'CatalogEntry',
    'CatalogError',
    'EmptyPathError',
    'CategoryNotFoundError',
    'CatalogLoadError',
    'EmptyCategoryPathError',
    'ReadError',
    'ParseError',
    'MANIFEST_FILENAME',
    'load_compound_file',
    # Manifest
    'CatalogManifest',
    'CatalogNode',
    'CatalogLeaf',
    'ManifestError',
    # Demo data
    'DEMO_OPTION_COUNT',
    'demo_compounds',
    'demo_catalog',
]
