"""
Tests for molecule identification and size estimation.
"""

import pytest

from quantum.planning import (
    COMMON_MOLECULES,
    CommonMoleculeProvider,
    MoleculeInfo,
    count_heavy_atoms,
    estimate_molecule_size,
    extract_molecule_name,
)
from quantum.planning.molecules import looks_like_smiles


class TestHeavyAtomCount:
    """Test SMILES heavy-atom counting."""

    @pytest.mark.parametrize(
        "smiles,count",
        [
            ("c1ccccc1", 6),
            ("CCO", 3),
            ("O", 1),
            ("ClCCl", 3),
            ("C(Cl)(Cl)Cl", 4),
            ("CBr", 2),
            ("[NH4+]", 1),
            ("[H][H]", 0),
            ("c1nc(c2c(n1)n(cn2)[H])N", 10),
        ],
    )
    def test_count(self, smiles, count):
        assert count_heavy_atoms(smiles) == count

    def test_caffeine(self):
        assert count_heavy_atoms(COMMON_MOLECULES["caffeine"]) == 14

    def test_stereo_brackets(self):
        """Bracket atoms with chirality marks count once."""
        assert count_heavy_atoms(COMMON_MOLECULES["alanine"]) == 6


class TestSizeEstimate:
    """Test molecule size fallbacks."""

    def test_declared_size_wins(self):
        info = MoleculeInfo(name="x", smiles="CCO", estimated_size=20, n_atoms=9)
        assert estimate_molecule_size(info) == 20

    def test_zero_size_falls_through(self):
        info = MoleculeInfo(name="x", smiles="CCO", estimated_size=0)
        assert estimate_molecule_size(info) == 3

    def test_default(self):
        assert estimate_molecule_size(None) == 10
        assert estimate_molecule_size(MoleculeInfo(name="x"), default=7) == 7


class TestSmilesDetection:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("CCO", True),
            ("c1ccccc1", True),
            ("C(Cl)(Cl)Cl", True),
            ("[NH4+]", True),
            ("C%10CCCCC%10", True),
            ("benzene", False),
            ("Aspirin", False),
            ("Naphthalene", False),
            ("Benzene", False),
            ("my dye", False),
            ("", False),
        ],
    )
    def test_looks_like_smiles(self, text, expected):
        assert looks_like_smiles(text) is expected


class TestNameExtraction:
    @pytest.mark.parametrize(
        "text,name",
        [
            ("absorption spectrum of benzene", "benzene"),
            ("Run a geometry optimization for CCO please", "CCO"),
            ("What is the HOMO-LUMO gap of water?", "water"),
            ("optimize it", None),
        ],
    )
    def test_extract(self, text, name):
        assert extract_molecule_name(text) == name


class TestCommonMoleculeProvider:
    """Test the bundled molecule provider."""

    def test_lookup_by_name(self):
        info = CommonMoleculeProvider().identify("Benzene")
        assert info.name == "benzene"
        assert info.smiles == "c1ccccc1"
        assert info.estimated_size == 6

    def test_known_smiles_gets_name(self):
        info = CommonMoleculeProvider().identify("CCO")
        assert info.name == "ethanol"
        assert info.estimated_size == 3

    def test_unknown_smiles(self):
        info = CommonMoleculeProvider().identify("CCCCCCCC")
        assert info.name == "Molecule (CCCCCCCC)"
        assert info.estimated_size == 8

    def test_unknown_name(self):
        assert CommonMoleculeProvider().identify("unobtainium") is None

    def test_custom_table(self):
        provider = CommonMoleculeProvider({"dye": "c1ccc2ccccc2c1"})
        assert provider.identify("dye").estimated_size == 10
        assert provider.identify("benzene") is None

    @pytest.mark.parametrize("name", ["Aspirin", "Naphthalene", "Ibuprofen"])
    def test_capitalized_unknown_name(self, name):
        """Capitalized names outside the table are not mistaken for SMILES."""
        assert CommonMoleculeProvider().identify(name) is None

    def test_repeated_lookups_hold_no_state(self):
        """Many distinct queries leave the provider unchanged."""
        provider = CommonMoleculeProvider()
        for index in range(500):
            provider.identify("C" * (index % 20 + 1) + "O")
            provider.identify(f"unknown-{index}")

        assert set(vars(provider)) == {"molecules"}
        assert provider.identify("water") == provider.identify("water")
