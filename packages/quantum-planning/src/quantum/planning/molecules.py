"""
Molecule identification and size estimation.

The planners only need a rough heavy-atom count. Molecule lookup is a
collaborator behind the :class:`MoleculeProvider` protocol; the bundled
:class:`CommonMoleculeProvider` resolves a small table of common molecules
by name and accepts raw SMILES strings.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Optional, Protocol

from .models.core_models import MoleculeInfo

logger = logging.getLogger(__name__)

COMMON_MOLECULES: Dict[str, str] = {
    "water": "O",
    "methane": "C",
    "benzene": "c1ccccc1",
    "ethanol": "CCO",
    "acetone": "CC(=O)C",
    "caffeine": "CN1C=NC2=C1C(=O)N(C(=O)N2C)C",
    "glucose": "C([C@@H]1[C@H]([C@@H]([C@H]([C@H](O1)O)O)O)O)O",
    "glycine": "NCC(=O)O",
    "alanine": "C[C@@H](C(=O)O)N",
    "adenine": "c1nc(c2c(n1)n(cn2)[H])N",
    "guanine": "c1[nH]c(nc2c1ncn2[H])N",
    "cytosine": "c1c(nc(n1[H])N)O",
    "thymine": "Cc1c[nH]c(=O)[nH]c1=O",
    "dmso": "CS(=O)C",
    "acetonitrile": "CC#N",
    "dichloromethane": "ClCCl",
    "chloroform": "C(Cl)(Cl)Cl",
    "toluene": "Cc1ccccc1",
}

_SMILES_PATTERN = re.compile(r"(?:\[[^\]]+\]|Br|Cl|[BCNOPSFI*]|[bcnops]|%\d{2}|\d|[-=#$:/\\.()])+")
_HEAVY_ATOM_PATTERN = re.compile(r"\[([^\]]+)\]|Br|Cl|[BCNOPSFI]|[bcnops]")
_BRACKET_ELEMENT_PATTERN = re.compile(r"^\d*([A-Z][a-z]?|[a-z]{1,2})")
_MOLECULE_NAME_PATTERN = re.compile(r"(?:of|for)\s+([a-zA-Z0-9\-\+\[\]()=]+)", re.IGNORECASE)


class MoleculeProvider(Protocol):
    """Resolves a user query (name or SMILES) to a molecule description."""

    def identify(self, query: str) -> Optional[MoleculeInfo]:
        ...


def looks_like_smiles(text: str) -> bool:
    """
    Check whether a string could be SMILES rather than a plain name.

    The whole string must split into SMILES tokens (atoms, bonds, branches
    and ring closures), so capitalized names such as "Aspirin" are rejected.
    """
    if not text or _SMILES_PATTERN.fullmatch(text) is None:
        return False
    # lowercase words are names, not aromatic SMILES
    return not (text.isalpha() and text.islower())


def count_heavy_atoms(smiles: str) -> int:
    """
    Count non-hydrogen atoms in a SMILES string.

    Bracket atoms are counted once unless they are hydrogen; two-letter
    organic-subset halogens (Cl, Br) are matched before single letters.

    Args:
        smiles: SMILES string

    Returns:
        Number of heavy atoms
    """
    count = 0
    for match in _HEAVY_ATOM_PATTERN.finditer(smiles):
        bracket = match.group(1)
        if bracket is None:
            count += 1
            continue
        element = _BRACKET_ELEMENT_PATTERN.match(bracket)
        if element and element.group(1) not in ("H", "h"):
            count += 1
    return count


def estimate_molecule_size(
    molecule_info: Optional[MoleculeInfo], default: int = 10
) -> float:
    """
    Estimated heavy-atom count used by the estimators.

    Falls back from the declared estimate to the atom count, then to a
    SMILES-based count, and finally to ``default``.
    """
    if molecule_info is None:
        return default
    if molecule_info.estimated_size:
        return molecule_info.estimated_size
    if molecule_info.n_atoms:
        return molecule_info.n_atoms
    if molecule_info.smiles:
        heavy_atoms = count_heavy_atoms(molecule_info.smiles)
        if heavy_atoms:
            return heavy_atoms
    logger.debug(f"No size information for {molecule_info.name}, assuming {default} heavy atoms")
    return default


def extract_molecule_name(request_text: str) -> Optional[str]:
    """Pull the molecule out of phrases like 'spectrum of benzene'."""
    match = _MOLECULE_NAME_PATTERN.search(request_text)
    if not match:
        return None
    return match.group(1)


class CommonMoleculeProvider:
    """
    Table-backed molecule provider.

    Resolves common molecule names (case-insensitive) and raw SMILES
    strings. Holds no per-query state, so long-running workflows do not
    accumulate memory across queries.
    """

    def __init__(self, molecules: Optional[Dict[str, str]] = None):
        """
        Initialize the provider.

        Args:
            molecules: Mapping of lowercase names to SMILES; defaults to
                the bundled common-molecule table
        """
        self.molecules = dict(molecules) if molecules is not None else dict(COMMON_MOLECULES)

    def identify(self, query: str) -> Optional[MoleculeInfo]:
        query = query.strip()
        smiles = self.molecules.get(query.lower())
        if smiles is not None:
            info = self._build_info(query.lower(), smiles)
        elif looks_like_smiles(query) and count_heavy_atoms(query) > 0:
            info = self._build_info(self.name_for_smiles(query), query)
        else:
            logger.warning(f"Could not identify molecule: {query}")
            info = None
        return info

    def name_for_smiles(self, smiles: str) -> str:
        for name, known in self.molecules.items():
            if known == smiles:
                return name
        return f"Molecule ({smiles})"

    @staticmethod
    def _build_info(name: str, smiles: str) -> MoleculeInfo:
        return MoleculeInfo(name=name, smiles=smiles, estimated_size=count_heavy_atoms(smiles))
