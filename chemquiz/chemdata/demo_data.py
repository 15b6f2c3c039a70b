"""
Built-in demo dataset.

Used when no catalog directory is configured so the quiz still has
something to ask about.
"""

from typing import List, Optional, Tuple

from .catalog import Catalog, CatalogEntry
from .compounds import Compound

DEMO_OPTION_COUNT = 4

_ALCOHOLS = ('Organic', 'Aliphatic_compounds', 'Alcohols_and_ethers')
_ACIDS = ('Organic', 'Aliphatic_compounds', 'Carboxylic_acids_and_esters', 'Carboxylic_acids')
_HYDROCARBONS = ('Organic', 'Aliphatic_compounds', 'Hydrocarbons')
_AROMATICS = ('Organic', 'Aromatic_compounds', 'Aromatic_hydrocarbons')


def _compound(iupac_name: str, common_name: Optional[str], local_name: Optional[str],
              skeletal_formula: str, molecular_formula: str, smiles: Optional[str]) -> Compound:
    return Compound(
        iupac_name=iupac_name,
        common_name=common_name,
        local_name=local_name,
        skeletal_formula=skeletal_formula,
        molecular_formula=molecular_formula,
        smiles=smiles,
    )


def _demo_entries() -> List[Tuple[Compound, Tuple[str, ...]]]:
    return [
        (_compound('methanol', 'methyl alcohol', 'メタノール', 'CH3OH', 'CH4O', 'CO'),
         _ALCOHOLS + ('Primary_alcohols',)),
        (_compound('ethanol', 'ethyl alcohol', 'エタノール', 'CH3-CH2-OH', 'C2H6O', 'CCO'),
         _ALCOHOLS + ('Primary_alcohols',)),
        (_compound('propan-2-ol', 'isopropyl alcohol', 'イソプロパノール', '(CH3)2CHOH', 'C3H8O', 'CC(O)C'),
         _ALCOHOLS + ('Secondary_alcohols',)),
        (_compound('ethanoic acid', 'acetic acid', '酢酸', 'CH3COOH', 'C2H4O2', 'CC(=O)O'),
         _ACIDS),
        (_compound('propanoic acid', 'propionic acid', 'プロピオン酸', 'CH3-CH2-COOH', 'C3H6O2', 'CCC(=O)O'),
         _ACIDS),
        (_compound('benzene', None, 'ベンゼン', 'C6H6', 'C6H6', 'c1ccccc1'),
         _AROMATICS),
        (_compound('methylbenzene', 'toluene', 'トルエン', 'C6H5-CH3', 'C7H8', 'Cc1ccccc1'),
         _AROMATICS),
        (_compound('ethyne', 'acetylene', 'アセチレン', 'HC≡CH', 'C2H2', 'C#C'),
         _HYDROCARBONS + ('Alkynes',)),
        (_compound('but-2-yne', 'dimethylacetylene', '2-ブチン', 'CH3-C≡C-CH3', 'C4H6', 'CC#CC'),
         _HYDROCARBONS + ('Alkynes',)),
        (_compound('2-methylpropane', 'isobutane', 'イソブタン', '(CH3)2CH-CH3', 'C4H10', 'CC(C)C'),
         _HYDROCARBONS + ('Alkanes',)),
        (_compound('hexane', None, 'ヘキサン', 'CH3-(CH2)4-CH3', 'C6H14', 'CCCCCC'),
         _HYDROCARBONS + ('Alkanes',)),
        (_compound('propane-1,2,3-triol', 'glycerol', 'グリセリン', 'HO-CH2-CH(OH)-CH2-OH', 'C3H8O3', 'OCC(O)CO'),
         _ALCOHOLS + ('Polyols',)),
        (_compound('sodium chloride', 'table salt', '塩化ナトリウム', 'NaCl', 'NaCl', 'Cl[Na]'),
         ('Inorganic', 'Salts', 'Halides')),
        (_compound('calcium carbonate', 'calcite', '炭酸カルシウム', 'CaCO3', 'CaCO3', '[Ca+2].[O-]C(=O)[O-]'),
         ('Inorganic', 'Salts', 'Carbonates')),
    ]


def demo_compounds() -> List[Compound]:
    return [compound for compound, _ in _demo_entries()]


def demo_catalog() -> Catalog:
    return Catalog([CatalogEntry(compound=compound, categories=categories)
                    for compound, categories in _demo_entries()])
