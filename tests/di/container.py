"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from stackit.util.di import PROVIDERS, Component, get_provider


def _components() -> set[str]:
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every component is mocked unless unmocked.

    Settings come from the environment defaults set in tests/conftest.py.

    Examples:
        # Unit and E2E tests - in-memory repositories
        container = build_test_container()

        # Integration tests - PostgreSQL at DATABASE__URL
        container = build_test_container(unmock={"persistence"})

    Raises:
        ValueError: If an unknown component is requested
    """
    unmock = unmock or set()
    unknown = unmock - _components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=base.__mock_component__ is not None
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    # FastapiProvider lets the same container serve a TestClient
    return make_async_container(*providers, FastapiProvider())
