"""Release-date generators, one per institution.

Example:
    >>> from src.ingestion.generators import available_generators, get_generator
    >>> available_generators()[:3]
    ['fed', 'ecb', 'boe']
    >>> get_generator("bls").SOURCE_NAME
    'bls'
"""

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.bls_generator import BLSGenerator
from src.ingestion.generators.boc_generator import BoCGenerator
from src.ingestion.generators.boe_generator import BoEGenerator
from src.ingestion.generators.census_generator import CensusGenerator
from src.ingestion.generators.ecb_generator import ECBGenerator
from src.ingestion.generators.eia_generator import EIAGenerator
from src.ingestion.generators.fed_events_generator import FedEventsGenerator
from src.ingestion.generators.fed_generator import FedGenerator
from src.ingestion.generators.holidays_generator import HolidayGenerator
from src.ingestion.generators.ism_generator import ISMGenerator
from src.ingestion.generators.nar_generator import NARGenerator
from src.ingestion.generators.rba_generator import RBAGenerator
from src.ingestion.generators.rbnz_generator import RBNZGenerator
from src.ingestion.generators.treasury_generator import TreasuryGenerator
from src.ingestion.generators.umich_generator import UMichGenerator

# Registry order is the aggregation tie-break order.
GENERATORS: dict[str, type[BaseGenerator]] = {
    cls.SOURCE_NAME: cls
    for cls in (
        FedGenerator,
        ECBGenerator,
        BoEGenerator,
        BoCGenerator,
        RBAGenerator,
        RBNZGenerator,
        BLSGenerator,
        CensusGenerator,
        TreasuryGenerator,
        ISMGenerator,
        UMichGenerator,
        NARGenerator,
        FedEventsGenerator,
        EIAGenerator,
        HolidayGenerator,
    )
}


def available_generators() -> list[str]:
    return list(GENERATORS)


def get_generator(name: str, **kwargs) -> BaseGenerator:
    """Instantiate the generator registered under ``name``.

    Raises:
        KeyError: If no generator has that name.
    """
    try:
        cls = GENERATORS[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown generator '{name}'. Available: {', '.join(available_generators())}"
        ) from None
    return cls(**kwargs)


def all_generators(fetch_live: bool = True) -> list[BaseGenerator]:
    """One instance of every generator, in registry order."""
    return [
        cls(fetch_live=fetch_live) if cls is FedGenerator else cls()
        for cls in GENERATORS.values()
    ]


__all__ = [
    "BaseGenerator",
    "Release",
    "GENERATORS",
    "available_generators",
    "get_generator",
    "all_generators",
    "BLSGenerator",
    "BoCGenerator",
    "BoEGenerator",
    "CensusGenerator",
    "ECBGenerator",
    "EIAGenerator",
    "FedEventsGenerator",
    "FedGenerator",
    "HolidayGenerator",
    "ISMGenerator",
    "NARGenerator",
    "RBAGenerator",
    "RBNZGenerator",
    "TreasuryGenerator",
    "UMichGenerator",
]
