from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient

from src.showdesk.api.deps import get_distance_normalizer, get_request_context, get_show_repository
from src.showdesk.main import create_app
from src.showdesk.models.domain import Role
from tests._helpers.fakes import FakeShowRepository, make_context


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Build a test client with the session, repository and normalizer swapped out."""

    def _make(
        role: Optional[Role] = None,
        repository: Optional[FakeShowRepository] = None,
        normalizer: Optional[Callable] = None,
    ) -> TestClient:
        app = create_app()
        if role is not None:
            context = make_context(role)
            app.dependency_overrides[get_request_context] = lambda: context
        if repository is not None:
            app.dependency_overrides[get_show_repository] = lambda: repository
        if normalizer is not None:
            app.dependency_overrides[get_distance_normalizer] = lambda: normalizer
        return TestClient(app)

    return _make
