"""
Test suite for the dependency injection container.

System role: Verification of service wiring from settings
"""

from fastapi.testclient import TestClient

from smartdocs.api.deps import ServiceCache, build_orchestrator
from smartdocs.api.main import create_app
from smartdocs.boundary.storage import InMemoryBlobStore, LocalDirectoryBlobStore
from smartdocs.configs import Settings
from smartdocs.configs.blob_storage import BlobStorageSettings
from smartdocs.configs.chunk_retrieval import ChunkRetrievalSettings


def _settings(**retrieval) -> Settings:
    return Settings(
        blob_storage=BlobStorageSettings(backend="memory", secondary_backend="memory"),
        chunk_retrieval=ChunkRetrievalSettings(**retrieval),
    )


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_builds_and_caches_service(self) -> None:
        # Arrange
        cache = ServiceCache(_settings())

        # Act
        first = cache.chunk_content_service
        second = cache.chunk_content_service

        # Assert
        assert first is second
        assert first.orchestrator is cache.orchestrator
        assert isinstance(cache.blob_store, InMemoryBlobStore)
        assert isinstance(cache.secondary_blob_store, InMemoryBlobStore)

    def test_clear_drops_instances(self) -> None:
        cache = ServiceCache(_settings())
        service = cache.chunk_content_service

        cache.clear()

        assert cache.chunk_content_service is not service


class TestBuildOrchestrator:
    """Test suite for build_orchestrator."""

    def test_resolver_uses_configured_conventions(self) -> None:
        # Arrange
        settings = _settings(chunks_prefix="chunks/", legacy_disambiguators=[9])

        # Act
        orchestrator = build_orchestrator(settings, InMemoryBlobStore())

        # Assert
        paths = [c.path for c in orchestrator.resolver.candidate_paths("w", "d", "s")]
        assert paths[:2] == ["chunks/w_d_s_chunks.json", "chunks/w_d_s_chunks (9).json"]


class TestCreateAppWiring:
    """Test suite for settings passed to create_app reaching the service cache."""

    def test_app_serves_from_configured_store(
        self, tmp_path, artifact_factory, canonical_path
    ) -> None:
        # Arrange
        artifact = tmp_path / canonical_path
        artifact.parent.mkdir(parents=True)
        artifact.write_bytes(artifact_factory(3))
        settings = Settings(
            blob_storage=BlobStorageSettings(backend="local", local_root=str(tmp_path)),
        )
        app = create_app(settings)

        # Act
        with TestClient(app) as client:
            response = client.get(
                "/api/v1/documents/doc1/chunks",
                params={"workspace_id": "ws1", "ingestion_source_id": "src1"},
            )
            cache = app.state.service_cache

            # Assert
            assert response.status_code == 200
            assert response.json()["data"]["total_chunks"] == 3
            assert cache.settings is settings
            assert isinstance(cache.blob_store, LocalDirectoryBlobStore)
