"""
Reference data for calculation types: methods, keywords and plan text.
"""

from typing import Dict

from ..models.core_models import CalculationType, CalculationTypeInfo

DEFAULT_FUNCTIONAL = "B3LYP"


def default_calculation_types() -> Dict[CalculationType, CalculationTypeInfo]:
    """Calculation-type table, keyed in classification order."""
    return {
        CalculationType.ABSORPTION_SPECTRUM: CalculationTypeInfo(
            name="UV-Vis Absorption Spectrum",
            description="Time-dependent density functional theory for electronic excitations",
            methods=["TD-DFT", "CIS", "EOM-CCSD"],
            required_steps=["geometry_optimization", "frequency_analysis", "td_dft"],
            keywords=["absorption", "uv-vis", "spectrum", "excitation", "electronic transition"],
            theory=(
                "Time-dependent density functional theory (TD-DFT) calculates electronic "
                "excitation energies by solving the time-dependent Schrödinger equation in "
                "the linear response regime."
            ),
            references=[
                "Runge, E.; Gross, E. K. U. Phys. Rev. Lett. 1984, 52, 997.",
                "Dreuw, A.; Head-Gordon, M. Chem. Rev. 2005, 105, 4009.",
            ],
            expected_results=[
                "UV-Vis absorption spectrum with peak positions and intensities",
                "Electronic transition energies and oscillator strengths",
                "Assignment of electronic transitions",
            ],
            limitations=[
                "TD-DFT may have issues with charge transfer states",
                "Double excitations are not included",
                "{functional} functional limitations for excited states",
            ],
        ),
        CalculationType.EMISSION_SPECTRUM: CalculationTypeInfo(
            name="Fluorescence/Phosphorescence Spectrum",
            description="Excited state optimization followed by TD-DFT",
            methods=["TD-DFT", "excited_state_optimization"],
            required_steps=["geometry_optimization", "excited_state_optimization", "td_dft"],
            keywords=["emission", "fluorescence", "phosphorescence", "excited state"],
            theory=(
                "Emission spectra require optimization of excited state geometries followed "
                "by TD-DFT calculations from the relaxed excited state."
            ),
            references=[
                "Adamo, C.; Jacquemin, D. Chem. Soc. Rev. 2013, 42, 845.",
                "Laurent, A. D.; Jacquemin, D. Int. J. Quantum Chem. 2013, 113, 2019.",
            ],
            expected_results=[
                "Fluorescence/phosphorescence emission spectrum",
                "Stokes shift calculation",
                "Excited state lifetimes (if calculated)",
            ],
            limitations=[
                "Assumes vertical emission approximation if geometry not optimized",
                "Solvent effects may not be fully captured",
                "Spin-orbit coupling effects not included",
            ],
        ),
        CalculationType.GEOMETRY_OPTIMIZATION: CalculationTypeInfo(
            name="Molecular Geometry Optimization",
            description="Find minimum energy molecular structure",
            methods=["DFT", "HF", "MP2", "xTB"],
            required_steps=["geometry_optimization"],
            keywords=["optimize", "geometry", "structure", "minimum", "equilibrium"],
            theory=(
                "Molecular geometry optimization finds stationary points on the potential "
                "energy surface using gradient-based algorithms."
            ),
            references=[
                "Schlegel, H. B. J. Comput. Chem. 2003, 24, 1514.",
                "Peng, C.; Schlegel, H. B. Isr. J. Chem. 1993, 33, 449.",
            ],
            expected_results=[
                "Optimized molecular geometry",
                "Final energy and gradient norm",
                "Structural parameters (bond lengths, angles)",
            ],
        ),
        CalculationType.FREQUENCY_ANALYSIS: CalculationTypeInfo(
            name="Vibrational Frequency Analysis",
            description="Calculate vibrational frequencies and IR spectrum",
            methods=["DFT", "HF", "xTB"],
            required_steps=["geometry_optimization", "frequency_analysis"],
            keywords=["frequency", "vibration", "ir", "infrared", "spectrum"],
            theory=(
                "Harmonic frequency analysis involves computing the second derivatives of "
                "the energy with respect to nuclear coordinates."
            ),
            expected_results=[
                "IR spectrum with peak positions and intensities",
                "Thermodynamic properties (enthalpy, entropy, Gibbs energy)",
                "Zero-point energy correction",
            ],
        ),
        CalculationType.HOMO_LUMO: CalculationTypeInfo(
            name="HOMO-LUMO Gap Analysis",
            description="Calculate frontier molecular orbital energies",
            methods=["DFT", "HF"],
            required_steps=["geometry_optimization", "single_point"],
            keywords=["homo", "lumo", "gap", "frontier", "orbital", "energy"],
            theory=(
                "Frontier molecular orbital theory relates electronic properties to the "
                "highest occupied (HOMO) and lowest unoccupied (LUMO) molecular orbitals."
            ),
        ),
        CalculationType.NMR_PREDICTION: CalculationTypeInfo(
            name="NMR Chemical Shift Prediction",
            description="Calculate NMR chemical shifts using gauge-including atomic orbitals",
            methods=["DFT_NMR", "GIAO"],
            required_steps=["geometry_optimization", "nmr_calculation"],
            keywords=["nmr", "chemical shift", "1h", "13c", "proton", "carbon"],
            theory=(
                "NMR chemical shifts are calculated using gauge-including atomic orbitals "
                "(GIAO) to ensure gauge-origin independence."
            ),
        ),
        CalculationType.REACTION_ENERGY: CalculationTypeInfo(
            name="Reaction Energy Calculation",
            description="Calculate reaction energies and barriers",
            methods=["DFT", "composite_methods"],
            required_steps=["geometry_optimization", "frequency_analysis", "thermochemistry"],
            keywords=["reaction", "energy", "barrier", "transition", "state", "thermodynamics"],
            theory=(
                "Reaction energetics involve calculating energy differences between "
                "reactants, products, and transition states."
            ),
        ),
    }


def default_functionals() -> Dict[CalculationType, str]:
    """Recommended functional per calculation type."""
    return {
        CalculationType.ABSORPTION_SPECTRUM: "CAM-B3LYP",
        CalculationType.EMISSION_SPECTRUM: "CAM-B3LYP",
        CalculationType.GEOMETRY_OPTIMIZATION: DEFAULT_FUNCTIONAL,
        CalculationType.FREQUENCY_ANALYSIS: DEFAULT_FUNCTIONAL,
        CalculationType.REACTION_ENERGY: "M06-2X",
        CalculationType.NMR_PREDICTION: DEFAULT_FUNCTIONAL,
        CalculationType.HOMO_LUMO: DEFAULT_FUNCTIONAL,
    }


def default_step_descriptions() -> Dict[str, str]:
    return {
        "geometry_optimization": "Optimize molecular geometry to find minimum energy structure",
        "frequency_analysis": "Calculate vibrational frequencies to confirm stationary point",
        "td_dft": "Perform time-dependent DFT calculation for excited states",
        "excited_state_optimization": "Optimize geometry in excited state",
        "single_point": "Single point energy calculation at optimized geometry",
        "nmr_calculation": "Calculate NMR chemical shifts using GIAO method",
        "thermochemistry": "Calculate thermodynamic properties from frequencies",
    }


def default_method_notes() -> Dict[str, Dict[str, str]]:
    """Advantages and disadvantages of alternative methods."""
    return {
        "TD-DFT": {
            "advantages": "Good balance of accuracy and computational cost",
            "disadvantages": "Issues with charge transfer and Rydberg states",
        },
        "CIS": {
            "advantages": "Fast and suitable for large molecules",
            "disadvantages": "Less accurate than TD-DFT",
        },
        "EOM-CCSD": {
            "advantages": "High accuracy for excited states",
            "disadvantages": "Computationally expensive",
        },
        "xTB": {
            "advantages": "Very fast, suitable for large systems",
            "disadvantages": "Lower accuracy, semi-empirical",
        },
    }
