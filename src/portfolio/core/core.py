from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, cast

from portfolio.config import Config
from portfolio.core.store import MemoryStore

if TYPE_CHECKING:
    from portfolio.core.modules.access.service import AccessService
    from portfolio.core.modules.blog.service import BlogService
    from portfolio.core.modules.contact.service import ContactService
    from portfolio.core.modules.session.service import SessionService
    from portfolio.core.modules.user.service import UserService


class Service:
    """Base class for services sharing the in-memory store."""

    def __init__(self, store: MemoryStore) -> None:
        self.store = store
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry that automatically discovers and initializes services."""

    user: UserService
    session: SessionService
    access: AccessService
    blog: BlogService
    contact: ContactService

    def __init__(self, store: MemoryStore) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []

        # Service configuration: (attribute_name, module_path, class_name)
        # Order matters for startup - the admin user is seeded before anything else
        service_configs = [
            ("user", "portfolio.core.modules.user.service", "UserService"),
            ("session", "portfolio.core.modules.session.service", "SessionService"),
            ("access", "portfolio.core.modules.access.service", "AccessService"),
            ("blog", "portfolio.core.modules.blog.service", "BlogService"),
            ("contact", "portfolio.core.modules.contact.service", "ContactService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(store)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        """Start all services that have startup logic."""
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        """Stop all services that have cleanup logic."""
        for service in reversed(self._services):
            await service.on_stop()


class Core:
    """Container providing config, the entity store, and all service instances."""

    config: Config
    store: MemoryStore
    services: Services

    def __init__(self, config: Config) -> None:
        """Initialize core with config, a fresh store, and auto-register services."""
        self.config = config
        self.store = MemoryStore()
        self.services = Services(self.store)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        """Start all services on application startup."""
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop services on shutdown."""
        await self.services.stop_all()
