"""Container for tests: in-memory by default, real components on request."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from pawprint.util.di import PROVIDERS, Component, get_provider


def _swappable_components() -> set[str]:
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every swappable component is mocked.

    Settings still come from the environment, so an integration run picks
    up ``DATABASE__URL`` the same way the app does.

    Args:
        unmock: Components that should use their production implementation,
            e.g. ``{"persistence"}`` for tests against PostgreSQL

    Raises:
        ValueError: If ``unmock`` names a component nothing provides
    """
    unmock = unmock or set()
    unknown = unmock - _swappable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(base, use_mock=base.__mock_component__ not in unmock)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
