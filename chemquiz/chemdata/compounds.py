"""
Compound records for the quiz catalog.

A Compound carries the names and formulas a learner is quizzed on, plus the
optional SMILES string used to draw its structure. The display helpers below
are used as deduplication keys by the quiz engine, so they must stay pure
functions of the record's fields.

Author: ChemQuiz Development Team
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import TypeAdapter


@dataclass(frozen=True)
class FunctionalGroup:
    """A functional group shown alongside a compound."""
    name_en: str
    name_ja: str
    pattern: str  # formula fragment, e.g. "-OH" or "NH4^+"


@dataclass(frozen=True)
class Compound:
    """
    Represents a chemical compound used for quiz questions.
    """
    iupac_name: str
    skeletal_formula: str
    molecular_formula: str
    common_name: Optional[str] = None
    local_name: Optional[str] = None
    series_general_formula: Optional[str] = None
    functional_groups: Tuple[FunctionalGroup, ...] = field(default_factory=tuple)
    notes: Optional[str] = None
    smiles: Optional[str] = None

    def english_label(self) -> str:
        """IUPAC name, with the common name in parentheses when it differs."""
        if self.common_name is not None and self.common_name != self.iupac_name:
            return f"{self.iupac_name} ({self.common_name})"
        return self.iupac_name

    def display_name(self) -> str:
        """English label followed by the local name, e.g. 'ethanol (ethyl alcohol) / エタノール'."""
        parts = [self.english_label()]
        if self.local_name is not None:
            parts.append(f"/ {self.local_name}")
        return " ".join(parts)

    def display_structure(self) -> str:
        return f"{self.skeletal_formula} ({self.molecular_formula})"

    def hint(self) -> Optional[str]:
        """
        Return a short hint about the compound.

        The series formula is preferred, then the functional groups, then the
        free-form notes and finally the molecular formula.
        """
        if self.series_general_formula is not None:
            return f"Series formula: {self.series_general_formula}"

        if self.functional_groups:
            groups = [f"{group.name_en} ({group.pattern})" for group in self.functional_groups]
            return f"Functional groups: {', '.join(groups)}"

        if self.notes is not None:
            return self.notes

        if self.molecular_formula:
            return f"Molecular formula: {self.molecular_formula}"

        return None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['functional_groups'] = list(data['functional_groups'])
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Compound':
        """Build a Compound from parsed JSON; raises pydantic.ValidationError on bad data."""
        return _COMPOUND_ADAPTER.validate_python(data)

    def __str__(self) -> str:
        return f"{self.display_name()}: {self.display_structure()}"


@dataclass(frozen=True)
class CompoundList:
    """Shape of a compound data file: {"compounds": [...]}."""
    compounds: Tuple[Compound, ...]


_COMPOUND_ADAPTER = TypeAdapter(Compound)
COMPOUND_LIST_ADAPTER = TypeAdapter(CompoundList)


# =============================================================================
# LOOKUP HELPERS
# =============================================================================

def find_by_name(compounds: Iterable[Compound], label: str) -> Optional[Compound]:
    """Find the first compound whose display name equals ``label``."""
    for compound in compounds:
        if compound.display_name() == label:
            return compound
    return None


def find_by_structure(compounds: Iterable[Compound], label: str) -> Optional[Compound]:
    """Find the first compound whose structure string equals ``label``."""
    for compound in compounds:
        if compound.display_structure() == label:
            return compound
    return None


def find_by_iupac_name(compounds: Iterable[Compound], iupac_name: str) -> Optional[Compound]:
    for compound in compounds:
        if compound.iupac_name == iupac_name:
            return compound
    return None


def compounds_to_dicts(compounds: Iterable[Compound]) -> List[Dict[str, Any]]:
    return [compound.to_dict() for compound in compounds]
