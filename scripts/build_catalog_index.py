#!/usr/bin/env python3
"""Regenerate catalog/index.json from the catalog directory layout."""
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from chemquiz.chemdata.catalog import Catalog, MANIFEST_FILENAME
from chemquiz.chemdata.catalog_manifest import CatalogManifest

CATALOG_DIR = Path(__file__).resolve().parent.parent / "catalog"

logger = logging.getLogger("build_catalog_index")


def main():
    logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else CATALOG_DIR

    # Fails loudly on a malformed data file before the index is written
    catalog = Catalog.from_directory(root)

    manifest = CatalogManifest.from_directory(root)
    manifest.save(root / MANIFEST_FILENAME)

    for leaf in sorted(manifest.leaves(), key=lambda leaf: leaf.path):
        logger.info(f"{' / '.join(leaf.path)} -> {leaf.file}")
    logger.info(f"Wrote {root / MANIFEST_FILENAME} ({len(catalog)} compounds)")


if __name__ == "__main__":
    main()
