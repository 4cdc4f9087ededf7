"""Container construction."""

from collections.abc import Collection

from dishka import Container, make_container

from forum.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: Collection[Component] = ()) -> Container:
    """Build the dependency container.

    Production providers are used for every component not named in
    ``mocked``. Mock providers must have been imported (they register
    themselves as subclasses of their component base).

    Args:
        mocked: Components to replace with their mock providers

    Returns:
        Synchronous dishka container
    """
    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_container(*providers)
