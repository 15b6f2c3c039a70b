"""
Structure depiction for quiz compounds.

Turns a compound's SMILES into a 2D SVG drawing with RDKit.
"""

import logging
from typing import Tuple

from rdkit import Chem
from rdkit.Chem import rdDepictor
from rdkit.Chem.Draw import rdMolDraw2D

from chemquiz.chemdata.compounds import Compound

logger = logging.getLogger(__name__)

DEFAULT_SIZE = (300, 220)


class StructureRenderError(Exception):
    """Raised when a structure cannot be drawn."""


def render_svg(smiles: str, size: Tuple[int, int] = DEFAULT_SIZE) -> str:
    """
    Render a SMILES string as an SVG document.

    Args:
        smiles: SMILES notation
        size: (width, height) in pixels

    Returns:
        SVG markup

    Raises:
        StructureRenderError: SMILES could not be parsed
    """
    mol = Chem.MolFromSmiles(smiles)
    if mol is None or mol.GetNumAtoms() == 0:
        raise StructureRenderError(f"Invalid SMILES: {smiles}")

    rdDepictor.SetPreferCoordGen(True)
    rdDepictor.Compute2DCoords(mol)

    drawer = rdMolDraw2D.MolDraw2DSVG(size[0], size[1])
    opts = drawer.drawOptions()
    opts.bondLineWidth = 2
    opts.padding = 0.08
    opts.clearBackground = False  # inherit page theme

    drawer.DrawMolecule(mol)
    drawer.FinishDrawing()
    return drawer.GetDrawingText()


def render_compound_svg(compound: Compound, size: Tuple[int, int] = DEFAULT_SIZE) -> str:
    """Render ``compound``; raises StructureRenderError when it has no SMILES."""
    if not compound.smiles:
        raise StructureRenderError(f"No SMILES available for '{compound.iupac_name}'")
    logger.debug(f"Rendering {compound.iupac_name} from {compound.smiles}")
    return render_svg(compound.smiles, size)
