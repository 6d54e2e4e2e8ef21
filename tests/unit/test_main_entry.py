from unittest.mock import MagicMock, patch

from layout_guard import __main__ as entry


def test_main_wires_container_into_app() -> None:
    app = MagicMock()
    with patch.object(entry, "LayoutGuardContainer") as mock_container, \
         patch.object(entry.CLIAppFactory, "create_app", return_value=app) as mock_create:
        entry.main()

    mock_container.get_instance.assert_called_once_with()
    container = mock_container.get_instance.return_value
    deps = mock_create.call_args.args[0]
    assert deps.telemetry is container.get_telemetry_port.return_value
    assert deps.parser is container.get_parser_gateway.return_value
    assert deps.json_reporter is container.get_json_reporter.return_value
    app.assert_called_once_with()
