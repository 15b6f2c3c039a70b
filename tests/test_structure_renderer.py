"""
Structure depiction tests (RDKit).
"""

import pytest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from chemquiz.chemdata.compounds import Compound
from chemquiz.structure_renderer import StructureRenderError, render_compound_svg, render_svg


class TestRenderSvg:

    def test_renders_ethanol(self):
        svg = render_svg("CCO")
        assert "<svg" in svg
        assert "</svg>" in svg

    def test_custom_size(self):
        svg = render_svg("c1ccccc1", size=(120, 90))
        assert "120" in svg

    def test_invalid_smiles(self):
        with pytest.raises(StructureRenderError):
            render_svg("C1CC")

    def test_empty_smiles(self):
        with pytest.raises(StructureRenderError):
            render_svg("")


class TestRenderCompound:

    def test_compound_with_smiles(self):
        compound = Compound(iupac_name="benzene", skeletal_formula="C6H6",
                            molecular_formula="C6H6", smiles="c1ccccc1")
        assert "<svg" in render_compound_svg(compound)

    def test_compound_without_smiles(self):
        compound = Compound(iupac_name="phenol", skeletal_formula="C6H5-OH", molecular_formula="C6H6O")
        with pytest.raises(StructureRenderError) as excinfo:
            render_compound_svg(compound)
        assert "phenol" in str(excinfo.value)
