"""
Tests for the catalog manifest: flattening into leaves, parsing and
generation from a directory.
"""

import json
import pytest
import sys
import os
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from chemquiz.chemdata.catalog_manifest import (
    CatalogLeaf,
    CatalogManifest,
    CatalogNode,
    ManifestError,
)

REPO_CATALOG = Path(__file__).resolve().parent.parent / "catalog"


def count_file_nodes(nodes):
    return sum((1 if node.file is not None else 0) + count_file_nodes(node.children)
               for node in nodes)


def nested_manifest():
    return CatalogManifest(roots=[
        CatalogNode(
            label="Organic",
            slug="Organic",
            file="Organic/compounds.json",
            children=[
                CatalogNode(
                    label="Aliphatic compounds",
                    slug="Aliphatic_compounds",
                    file="Organic/Aliphatic_compounds/compounds.json",
                    children=[
                        CatalogNode(
                            label="Alcohols and ethers",
                            slug="Alcohols_and_ethers",
                            file="Organic/Aliphatic_compounds/Alcohols_and_ethers/compounds.json",
                            children=[
                                CatalogNode(
                                    label="Primary alcohols",
                                    slug="Primary_alcohols",
                                    file="Organic/Aliphatic_compounds/Alcohols_and_ethers/Primary_alcohols/compounds.json",
                                ),
                            ],
                        ),
                    ],
                ),
            ],
        ),
    ])


class TestLeaves:
    """CatalogManifest.leaves flattening."""

    def test_nested_file_nodes_each_yield_leaf(self):
        leaves = nested_manifest().leaves()
        assert leaves == [
            CatalogLeaf(("Organic",), "Organic/compounds.json"),
            CatalogLeaf(("Organic", "Aliphatic compounds"),
                        "Organic/Aliphatic_compounds/compounds.json"),
            CatalogLeaf(("Organic", "Aliphatic compounds", "Alcohols and ethers"),
                        "Organic/Aliphatic_compounds/Alcohols_and_ethers/compounds.json"),
            CatalogLeaf(("Organic", "Aliphatic compounds", "Alcohols and ethers", "Primary alcohols"),
                        "Organic/Aliphatic_compounds/Alcohols_and_ethers/Primary_alcohols/compounds.json"),
        ]

    def test_empty_manifest(self):
        assert CatalogManifest().leaves() == []

    def test_no_file_nodes(self):
        manifest = CatalogManifest(roots=[
            CatalogNode(label="Organic", slug="organic", children=[
                CatalogNode(label="Alcohols", slug="alcohols"),
            ]),
        ])
        assert manifest.leaves() == []

    def test_branch_without_file_is_skipped(self):
        manifest = CatalogManifest(roots=[
            CatalogNode(label="Inorganic", slug="inorganic", children=[
                CatalogNode(label="Salts", slug="salts", file="Inorganic/Salts/compounds.json"),
            ]),
        ])
        assert manifest.leaves() == [
            CatalogLeaf(("Inorganic", "Salts"), "Inorganic/Salts/compounds.json"),
        ]

    def test_paths_do_not_leak_across_siblings(self):
        manifest = CatalogManifest(roots=[
            CatalogNode(label="Organic", slug="organic", children=[
                CatalogNode(label="Alcohols", slug="alcohols", file="a.json", children=[
                    CatalogNode(label="Primary", slug="primary", file="b.json"),
                ]),
                CatalogNode(label="Arenes", slug="arenes", file="c.json"),
            ]),
            CatalogNode(label="Inorganic", slug="inorganic", file="d.json"),
        ])
        assert [leaf.path for leaf in manifest.leaves()] == [
            ("Organic", "Alcohols"),
            ("Organic", "Alcohols", "Primary"),
            ("Organic", "Arenes"),
            ("Inorganic",),
        ]

    def test_sibling_order_preserved(self):
        manifest = CatalogManifest(roots=[
            CatalogNode(label="Zeta", slug="zeta", file="z.json"),
            CatalogNode(label="Alpha", slug="alpha", file="a.json"),
        ])
        assert [leaf.file for leaf in manifest.leaves()] == ["z.json", "a.json"]

    def test_leaf_count_matches_file_nodes(self):
        for manifest in (nested_manifest(), CatalogManifest(),
                         CatalogManifest.load(REPO_CATALOG / "index.json")):
            assert len(manifest.leaves()) == count_file_nodes(manifest.roots)

    def test_leaf_to_dict(self):
        leaf = CatalogLeaf(("Organic", "Arenes"), "Organic/Arenes/compounds.json")
        assert leaf.to_dict() == {
            "path": ["Organic", "Arenes"],
            "file": "Organic/Arenes/compounds.json",
        }


class TestManifestDocuments:
    """Reading and writing manifest documents."""

    def test_dict_round_trip(self):
        manifest = CatalogManifest(roots=[
            CatalogNode(label="Inorganic", slug="inorganic", file="Inorganic/compounds.json"),
        ])
        assert CatalogManifest.from_dict(manifest.to_dict()) == manifest

    def test_optional_fields_default(self):
        manifest = CatalogManifest.from_dict({
            "roots": [{"label": "Organic", "slug": "organic"}]
        })
        assert manifest.roots[0].file is None
        assert manifest.roots[0].children == []

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "index.json"
        nested_manifest().save(path)
        assert CatalogManifest.load(path) == nested_manifest()

    def test_malformed_document(self, tmp_path):
        path = tmp_path / "index.json"
        path.write_text(json.dumps({"roots": [{"label": "Organic"}]}), encoding="utf-8")
        with pytest.raises(ManifestError) as excinfo:
            CatalogManifest.load(path)
        assert excinfo.value.path == path

    def test_missing_document(self, tmp_path):
        with pytest.raises(ManifestError):
            CatalogManifest.load(tmp_path / "index.json")


class TestFromDirectory:
    """CatalogManifest.from_directory."""

    def test_builds_nodes_from_directories(self, tmp_path):
        (tmp_path / "Organic" / "Primary_alcohols").mkdir(parents=True)
        (tmp_path / "Organic" / "Primary_alcohols" / "compounds.json").write_text(
            '{"compounds": []}', encoding="utf-8")
        (tmp_path / "Inorganic").mkdir()
        (tmp_path / "Inorganic" / "compounds.json").write_text('{"compounds": []}', encoding="utf-8")
        (tmp_path / "Inorganic" / "index.json").write_text('{"roots": []}', encoding="utf-8")

        manifest = CatalogManifest.from_directory(tmp_path)

        assert [root.label for root in manifest.roots] == ["Inorganic", "Organic"]
        organic = manifest.roots[1]
        assert organic.file is None
        assert organic.children[0].label == "Primary alcohols"
        assert organic.children[0].slug == "Primary_alcohols"
        assert manifest.leaves() == [
            CatalogLeaf(("Inorganic",), "Inorganic/compounds.json"),
            CatalogLeaf(("Organic", "Primary alcohols"), "Organic/Primary_alcohols/compounds.json"),
        ]

    def test_missing_root(self, tmp_path):
        missing = tmp_path / "missing"
        with pytest.raises(ManifestError) as excinfo:
            CatalogManifest.from_directory(missing)
        assert excinfo.value.path == missing
        assert isinstance(excinfo.value.cause, FileNotFoundError)

    def test_repository_index_is_current(self):
        """catalog/index.json matches what the build script would write."""
        assert CatalogManifest.load(REPO_CATALOG / "index.json") == \
            CatalogManifest.from_directory(REPO_CATALOG)
