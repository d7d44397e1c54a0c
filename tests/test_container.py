import pytest

from roadgraph.adapters.export import FoliumMapRenderer, KmlPathExporter
from roadgraph.adapters.network import StreetCsvRepository, TextNetworkRepository
from roadgraph.config import AppConfig, RoadmapConfig
from roadgraph.container import Container, get_container, reset_container
from roadgraph.services import RoadmapService


@pytest.fixture
def config(tmp_path):
    return AppConfig(roadmap=RoadmapConfig(data_dir=tmp_path))


def test_default_bindings(config):
    container = Container.create_default(config)

    for port_type in (
        TextNetworkRepository,
        StreetCsvRepository,
        KmlPathExporter,
        FoliumMapRenderer,
    ):
        assert container.is_registered(port_type)

    repository = container.resolve(TextNetworkRepository)
    assert repository.config is config.roadmap


def test_singletons_are_reused_until_cleared(config):
    container = Container.create_default(config)

    first = container.resolve(KmlPathExporter)
    assert container.resolve(KmlPathExporter) is first

    container.clear_singletons()
    assert container.resolve(KmlPathExporter) is not first


def test_transient_registration(config):
    container = Container(config=config)
    container.register(KmlPathExporter, KmlPathExporter, singleton=False)

    assert container.resolve(KmlPathExporter) is not container.resolve(
        KmlPathExporter
    )


def test_reregistering_replaces_cached_instance(config):
    container = Container.create_default(config)
    container.resolve(KmlPathExporter)

    replacement = KmlPathExporter(document_name="Other")
    container.register(KmlPathExporter, lambda: replacement)

    assert container.resolve(KmlPathExporter) is replacement


def test_unregistered_type_raises(config):
    with pytest.raises(KeyError):
        Container(config=config).resolve(KmlPathExporter)


def test_roadmap_service_wires_ports(config):
    container = Container.create_default(config)

    service = container.roadmap_service(TextNetworkRepository)

    assert isinstance(service, RoadmapService)
    assert service.repository is container.resolve(TextNetworkRepository)
    assert service.exporter is container.resolve(KmlPathExporter)
    assert service.map_renderer is container.resolve(FoliumMapRenderer)


def test_roadmap_service_without_map_renderer(config):
    container = Container(config=config)
    container.register(
        TextNetworkRepository, lambda: TextNetworkRepository(config.roadmap)
    )
    container.register(KmlPathExporter, KmlPathExporter)

    assert container.roadmap_service(TextNetworkRepository).map_renderer is None


def test_clear_all(config):
    container = Container.create_default(config)
    container.clear_all()

    assert not container.is_registered(KmlPathExporter)


def test_global_container_is_shared_until_reset():
    reset_container()
    try:
        first = get_container()
        assert get_container() is first
        reset_container()
        assert get_container() is not first
    finally:
        reset_container()
