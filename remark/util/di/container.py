"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from remark.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container the API runs with.

    The object store is the S3 one; settings (bucket, auth secret, comment
    limits) are read from the environment when first resolved.
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # Lets routes resolve request-scoped services through FromDishka
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app; one REQUEST scope is opened per HTTP request."""
    setup_dishka(container, app)
