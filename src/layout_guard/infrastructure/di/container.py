from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, cast

from layout_guard.domain.config import ConfigurationLoader
from layout_guard.domain.constants import LAYOUT_GUARD_PREFIX
from layout_guard.infrastructure.config_file_loader import ConfigFileLoader
from layout_guard.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from layout_guard.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway
from layout_guard.infrastructure.reporters import JsonStyleReporter, TerminalStyleReporter
from layout_guard.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from layout_guard.domain.protocols import (
        FileSystemProtocol,
        ParserGatewayProtocol,
        ReporterProtocol,
        TelemetryPort,
    )


class LayoutGuardContainer:
    """Dependency Injection Container for layout-guard."""

    _instance: Optional["LayoutGuardContainer"] = None

    def __init__(self, config_root: Path | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_root)

    def _register_defaults(self, config_root: Path | None) -> None:
        """Register default implementations for protocols."""
        config_dict = ConfigFileLoader.load_config(config_root)
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))
        self.register_singleton(
            "TelemetryPort",
            ProjectTelemetry(LAYOUT_GUARD_PREFIX.upper(), "cyan", "Layout Guard on watch"),
        )
        self.register_singleton("ParserGateway", TreeSitterGateway())
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("TerminalReporter", TerminalStyleReporter())
        self.register_singleton("JsonReporter", JsonStyleReporter())

    # Any: the container holds every kind of service
    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_parser_gateway(self) -> "ParserGatewayProtocol":
        """Return the tree-sitter parser gateway."""
        return cast("ParserGatewayProtocol", self.get("ParserGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_terminal_reporter(self) -> "ReporterProtocol":
        return cast("ReporterProtocol", self.get("TerminalReporter"))

    def get_json_reporter(self) -> "ReporterProtocol":
        return cast("ReporterProtocol", self.get("JsonReporter"))

    @classmethod
    def get_instance(cls) -> "LayoutGuardContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = LayoutGuardContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
