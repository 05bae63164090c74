"""
Software capability profiles and execution-plan text tables.
"""

from typing import Dict, List

from ..models.core_models import (
    CalculationType,
    LicenseClass,
    PerformanceRating,
    SoftwareName,
    SoftwareProfile,
    SoftwareSupport,
)

_EXCELLENT = PerformanceRating.EXCELLENT
_GOOD = PerformanceRating.GOOD
_FAIR = PerformanceRating.FAIR
_POOR = PerformanceRating.POOR


def _support(supported: bool, recommended: bool, performance: PerformanceRating) -> SoftwareSupport:
    return SoftwareSupport(supported=supported, recommended=recommended, performance=performance)


def default_software_profiles() -> Dict[SoftwareName, SoftwareProfile]:
    """Capability profiles of the supported packages."""
    return {
        SoftwareName.PSI4: SoftwareProfile(
            software=SoftwareName.PSI4,
            display_name="Psi4",
            license_class=LicenseClass.OPEN_SOURCE,
            license="LGPL",
            strengths=["TD-DFT", "coupled_cluster", "MP2", "DFT"],
            weaknesses=["limited_basis_sets"],
            calculation_types={
                CalculationType.ABSORPTION_SPECTRUM: _support(True, True, _GOOD),
                CalculationType.EMISSION_SPECTRUM: _support(True, True, _GOOD),
                CalculationType.GEOMETRY_OPTIMIZATION: _support(True, True, _EXCELLENT),
                CalculationType.FREQUENCY_ANALYSIS: _support(True, True, _GOOD),
                CalculationType.HOMO_LUMO: _support(True, True, _EXCELLENT),
                CalculationType.NMR_PREDICTION: _support(True, False, _FAIR),
                CalculationType.REACTION_ENERGY: _support(True, True, _GOOD),
            },
            max_atoms=100,
            memory_efficient=True,
            install_command="conda install -c conda-forge psi4",
        ),
        SoftwareName.ORCA: SoftwareProfile(
            software=SoftwareName.ORCA,
            display_name="ORCA",
            license_class=LicenseClass.FREE_ACADEMIC,
            license="Academic use only",
            strengths=["TD-DFT", "coupled_cluster", "multireference", "large_basis_sets"],
            weaknesses=["manual_installation"],
            calculation_types={
                calculation_type: _support(True, True, _EXCELLENT)
                for calculation_type in CalculationType
            },
            max_atoms=500,
            memory_efficient=True,
            manual_install=True,
            install_command="Manual download from ORCA forum required",
        ),
        SoftwareName.XTB: SoftwareProfile(
            software=SoftwareName.XTB,
            display_name="xTB",
            license_class=LicenseClass.OPEN_SOURCE,
            license="LGPL",
            strengths=["very_fast", "large_molecules", "conformer_search"],
            weaknesses=["semi_empirical", "limited_properties"],
            calculation_types={
                CalculationType.ABSORPTION_SPECTRUM: _support(False, False, _POOR),
                CalculationType.EMISSION_SPECTRUM: _support(False, False, _POOR),
                CalculationType.GEOMETRY_OPTIMIZATION: _support(True, True, _EXCELLENT),
                CalculationType.FREQUENCY_ANALYSIS: _support(True, True, _GOOD),
                CalculationType.HOMO_LUMO: _support(True, True, _GOOD),
                CalculationType.NMR_PREDICTION: _support(False, False, _POOR),
                CalculationType.REACTION_ENERGY: _support(True, False, _FAIR),
            },
            max_atoms=10000,
            memory_efficient=True,
            install_command="conda install -c conda-forge xtb",
        ),
        SoftwareName.PYSCF: SoftwareProfile(
            software=SoftwareName.PYSCF,
            display_name="PySCF",
            license_class=LicenseClass.OPEN_SOURCE,
            license="Apache 2.0",
            strengths=["python_integration", "customizable", "TD-DFT"],
            weaknesses=["steep_learning_curve", "less_user_friendly"],
            calculation_types={
                CalculationType.ABSORPTION_SPECTRUM: _support(True, True, _GOOD),
                CalculationType.EMISSION_SPECTRUM: _support(True, False, _FAIR),
                CalculationType.GEOMETRY_OPTIMIZATION: _support(True, False, _FAIR),
                CalculationType.FREQUENCY_ANALYSIS: _support(False, False, _POOR),
                CalculationType.HOMO_LUMO: _support(True, True, _EXCELLENT),
                CalculationType.NMR_PREDICTION: _support(True, False, _FAIR),
                CalculationType.REACTION_ENERGY: _support(True, False, _FAIR),
            },
            max_atoms=200,
            memory_efficient=False,
            install_command="conda install -c conda-forge pyscf",
        ),
    }


def default_method_software_mapping() -> Dict[str, List[SoftwareName]]:
    """Packages implementing each electronic-structure method."""
    return {
        "TD-DFT": [SoftwareName.PSI4, SoftwareName.ORCA, SoftwareName.PYSCF],
        "DFT": [SoftwareName.PSI4, SoftwareName.ORCA, SoftwareName.PYSCF, SoftwareName.XTB],
        "HF": [SoftwareName.PSI4, SoftwareName.ORCA, SoftwareName.PYSCF],
        "MP2": [SoftwareName.PSI4, SoftwareName.ORCA],
        "coupled_cluster": [SoftwareName.PSI4, SoftwareName.ORCA],
        "xTB": [SoftwareName.XTB],
    }


def default_strength_labels() -> Dict[str, str]:
    return {
        "very_fast": "Extremely fast calculations",
        "TD-DFT": "Excellent TD-DFT implementation",
        "large_basis_sets": "Comprehensive basis set library",
        "python_integration": "Easy Python integration",
        "customizable": "Highly customizable",
        "large_molecules": "Handles large molecular systems",
    }


def default_weakness_labels() -> Dict[str, str]:
    return {
        "manual_installation": "Requires manual installation",
        "steep_learning_curve": "Difficult to learn",
        "limited_basis_sets": "Limited basis set selection",
        "semi_empirical": "Lower accuracy (semi-empirical)",
        "limited_properties": "Limited property calculations",
    }


def default_expected_accuracy() -> Dict[SoftwareName, Dict[CalculationType, str]]:
    """Typical accuracy statements per package and calculation type."""
    return {
        SoftwareName.PSI4: {
            CalculationType.ABSORPTION_SPECTRUM: "±0.2-0.4 eV",
            CalculationType.GEOMETRY_OPTIMIZATION: "±0.01 Å bond lengths",
        },
        SoftwareName.ORCA: {
            CalculationType.ABSORPTION_SPECTRUM: "±0.15-0.3 eV",
            CalculationType.GEOMETRY_OPTIMIZATION: "±0.005 Å bond lengths",
        },
    }


def default_comparison_methods() -> Dict[CalculationType, List[str]]:
    return {
        CalculationType.ABSORPTION_SPECTRUM: [
            "Experimental UV-Vis spectra",
            "Higher-level methods (EOM-CCSD)",
            "Alternative functionals",
        ],
        CalculationType.GEOMETRY_OPTIMIZATION: [
            "X-ray crystallography",
            "Microwave spectroscopy",
            "Higher basis sets",
        ],
    }


def default_functional_benchmarks() -> Dict[CalculationType, Dict[str, str]]:
    """Literature accuracy notes per calculation type and functional."""
    return {
        CalculationType.ABSORPTION_SPECTRUM: {
            "B3LYP": "Mean absolute error ~0.3 eV for organic molecules",
            "CAM-B3LYP": "Mean absolute error ~0.2 eV for charge-transfer systems",
        },
    }
