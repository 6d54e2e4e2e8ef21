"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging

from layout_guard.infrastructure.di.container import LayoutGuardContainer
from layout_guard.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    container = LayoutGuardContainer.get_instance()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        parser=container.get_parser_gateway(),
        filesystem=container.get_filesystem_gateway(),
        terminal_reporter=container.get_terminal_reporter(),
        json_reporter=container.get_json_reporter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
