"""
Catalog Manifest

The manifest (``index.json`` at the catalog root) describes which category
data files exist before any of them is loaded. It is a forest of nodes:

    {"roots": [
        {"label": "Organic", "slug": "Organic", "file": "Organic/compounds.json",
         "children": [
            {"label": "Primary alcohols", "slug": "Primary_alcohols",
             "file": "Organic/Primary_alcohols/compounds.json"}
         ]}
    ]}

A node with a ``file`` is a selectable leaf even when it also has children.

Author: ChemQuiz Development Team
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .catalog import MANIFEST_FILENAME

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """Raised when a manifest document or catalog directory cannot be read or parsed."""

    def __init__(self, path: Path, cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"invalid catalog manifest {path}: {cause}")


class CatalogNode(BaseModel):
    """One category in the manifest tree."""
    model_config = ConfigDict(frozen=True)

    label: str
    slug: str
    file: Optional[str] = None
    children: List['CatalogNode'] = Field(default_factory=list)


@dataclass(frozen=True)
class CatalogLeaf:
    """A selectable dataset: root-to-node labels and the data file reference."""
    path: Tuple[str, ...]
    file: str

    def to_dict(self) -> Dict[str, Any]:
        return {'path': list(self.path), 'file': self.file}


class CatalogManifest(BaseModel):
    model_config = ConfigDict(frozen=True)

    roots: List[CatalogNode] = Field(default_factory=list)

    def leaves(self) -> List[CatalogLeaf]:
        """
        Flatten the tree into leaves, depth-first pre-order.

        Sibling order is preserved as given; callers wanting a display order
        should sort the result.
        """
        leaves: List[CatalogLeaf] = []
        path: List[str] = []
        for root in self.roots:
            _gather_leaves(root, path, leaves)
        return leaves

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CatalogManifest':
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'CatalogManifest':
        """Read a manifest document from disk."""
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise ManifestError(path, e) from e
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise ManifestError(path, e) from e

    def save(self, path: Union[str, Path]):
        path = Path(path)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
            f.write('\n')

    @classmethod
    def from_directory(cls, root: Union[str, Path]) -> 'CatalogManifest':
        """
        Derive a manifest from a catalog directory.

        Every subdirectory becomes a node labelled with its name (underscores
        shown as spaces). The first data file in a directory, by name, is the
        node's file; paths are relative to ``root`` with '/' separators.
        """
        root = Path(root)
        try:
            roots = [_build_node(directory, root) for directory in _subdirectories(root)]
        except OSError as e:
            raise ManifestError(root, e) from e
        roots.sort(key=lambda node: node.label)
        manifest = cls(roots=roots)
        logger.info(f"Built manifest for {root}: {len(manifest.leaves())} selectable datasets")
        return manifest


def _gather_leaves(node: CatalogNode, path: List[str], leaves: List[CatalogLeaf]):
    path.append(node.label)
    if node.file is not None:
        leaves.append(CatalogLeaf(path=tuple(path), file=node.file))
    for child in node.children:
        _gather_leaves(child, path, leaves)
    path.pop()


def _subdirectories(directory: Path) -> List[Path]:
    return sorted((p for p in directory.iterdir() if p.is_dir()), key=lambda p: p.name)


def _build_node(directory: Path, root: Path) -> CatalogNode:
    children = [_build_node(child, root) for child in _subdirectories(directory)]
    children.sort(key=lambda node: node.label)

    data_files = sorted(
        (p for p in directory.iterdir()
         if p.is_file() and p.suffix == '.json' and p.name != MANIFEST_FILENAME),
        key=lambda p: p.name
    )
    file = data_files[0].relative_to(root).as_posix() if data_files else None

    return CatalogNode(
        label=directory.name.replace('_', ' '),
        slug=directory.name,
        file=file,
        children=children,
    )
