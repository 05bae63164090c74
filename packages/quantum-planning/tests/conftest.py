"""
Shared test fixtures for quantum-planning package tests.
"""

import pytest

from quantum.planning import (
    CalculationPlanningWorkflow,
    CalculationType,
    ExecutionPlanner,
    MoleculeInfo,
    PlannerConfig,
    PrecisionCalculator,
    ResearchPlanner,
    TheoryLevel,
    load_reference_tables,
)
from quantum.planning.estimators import AccuracyEstimator, TimeEstimator


@pytest.fixture
def tables():
    """Default reference tables."""
    return load_reference_tables()


@pytest.fixture
def config():
    """Default planner configuration."""
    return PlannerConfig()


@pytest.fixture
def benzene_info():
    """Benzene with six heavy atoms."""
    return MoleculeInfo(name="benzene", smiles="c1ccccc1", formula="C6H6", estimated_size=6)


@pytest.fixture
def large_molecule_info():
    """A 150 heavy-atom molecule, beyond the Psi4 size ceiling."""
    return MoleculeInfo(name="large_protein_fragment", estimated_size=150)


@pytest.fixture
def absorption_theory():
    """CAM-B3LYP theory level used for absorption spectra."""
    return TheoryLevel(
        functional="CAM-B3LYP", basis_set="def2-QZVP", methods=["TD-DFT", "CIS", "EOM-CCSD"]
    )


@pytest.fixture
def geometry_theory():
    """B3LYP theory level used for geometry optimizations."""
    return TheoryLevel(
        functional="B3LYP", basis_set="def2-SVP", methods=["DFT", "HF", "MP2", "xTB"]
    )


@pytest.fixture
def research_planner(tables, config):
    return ResearchPlanner(tables, config)


@pytest.fixture
def execution_planner(tables, config):
    return ExecutionPlanner(tables, config)


@pytest.fixture
def time_estimator(tables, config):
    return TimeEstimator(tables, config)


@pytest.fixture
def accuracy_estimator(tables, config):
    return AccuracyEstimator(tables, config)


@pytest.fixture
def precision_calculator(tables, config):
    return PrecisionCalculator(tables, config)


@pytest.fixture
def benzene_absorption_options(precision_calculator, benzene_info, absorption_theory):
    """Precision options for the benzene absorption spectrum on Psi4."""
    return precision_calculator.calculate_precision_options(
        CalculationType.ABSORPTION_SPECTRUM, benzene_info, absorption_theory, "psi4"
    )


@pytest.fixture
def workflow(tables, config):
    """Planning workflow with default components."""
    return CalculationPlanningWorkflow(tables, config)
