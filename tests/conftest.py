"""Shared fixtures: the sample Yangon network and services built on it."""

from pathlib import Path

import pytest

from ybs_resolver.adapters.nlp import RuleBasedEndpointExtractor
from ybs_resolver.adapters.transit import BreadthFirstPathSolver, JsonTransitRepository
from ybs_resolver.config import AppConfig, DataConfig, NLPConfig, SearchConfig
from ybs_resolver.domain.models import TransitSnapshot
from ybs_resolver.services import TransitService

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def make_service(
    snapshot: TransitSnapshot,
    search: SearchConfig = None,
    nlp: NLPConfig = None,
) -> TransitService:
    search = search or SearchConfig()
    nlp = nlp or NLPConfig()
    config = AppConfig(data=DataConfig(data_dir=DATA_DIR), search=search, nlp=nlp)
    return TransitService(
        snapshot=snapshot,
        solver=BreadthFirstPathSolver(search),
        extractor=RuleBasedEndpointExtractor(nlp),
        config=config,
    )


@pytest.fixture
def data_config() -> DataConfig:
    return DataConfig(data_dir=DATA_DIR)


@pytest.fixture
def yangon_snapshot(data_config) -> TransitSnapshot:
    return JsonTransitRepository(data_config).load_snapshot_sync()


@pytest.fixture
def transit_service(yangon_snapshot) -> TransitService:
    return make_service(yangon_snapshot)


@pytest.fixture
def service_factory():
    """Build a TransitService with custom search or NLP settings."""
    return make_service
