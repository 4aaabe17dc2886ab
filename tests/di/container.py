"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from flashcastr.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables (see conftest.py).

    Args:
        unmock: Components to use production implementations for.
                All others use mocks.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__mock_component__", None)
        if not base.__subclasses__() or component_name is None:
            provider_class = get_provider(base, use_mock=False)
        else:
            provider_class = get_provider(base, use_mock=component_name not in unmock)
        provider_instances.append(provider_class())

    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    all_components = {
        p.__mock_component__ for p in PROVIDERS if p.__mock_component__ is not None
    }
    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
