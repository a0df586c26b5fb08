from src.simulation_engine.batch_simulator import (
    BatchSimulator,
    CatalogNotLoadedError,
    EmptyTeamError,
    InvalidTrialCountError,
    NoOpponentConfigsError,
    PreconditionNotMet,
    SimulationCancelled,
    SimulationError,
)
from src.simulation_engine.models import (
    OpponentConfiguration,
    SimulationSettings,
    WinRateMatrix,
)
from src.simulation_engine.opponents import (
    configs_from_settings,
    create_opponent_configs,
    override_opponent_config,
)
from src.simulation_engine.outcome import (
    OutcomeSampler,
    RandomSource,
    RandomSourceError,
    SeededRandomSource,
    win_probability,
)
from src.simulation_engine.strength import StrengthCalculator

__all__ = [
    "BatchSimulator",
    "CatalogNotLoadedError",
    "EmptyTeamError",
    "InvalidTrialCountError",
    "NoOpponentConfigsError",
    "OpponentConfiguration",
    "OutcomeSampler",
    "PreconditionNotMet",
    "RandomSource",
    "RandomSourceError",
    "SeededRandomSource",
    "SimulationCancelled",
    "SimulationError",
    "SimulationSettings",
    "StrengthCalculator",
    "WinRateMatrix",
    "configs_from_settings",
    "create_opponent_configs",
    "override_opponent_config",
    "win_probability",
]
