from unittest.mock import MagicMock

from pydaglp.cli.rendering import TyperRenderer
from pydaglp.common.messaging.bus import MessageBus, MessageStore


def test_store_loads_english_messages():
    store = MessageStore(locale="en")
    assert "cycle" in store.get("engine.error.cycle")
    assert store.get("no.such.message") == "<no.such.message>"


def test_every_locale_defines_the_same_messages():
    en = MessageStore(locale="en")._messages
    zh = MessageStore(locale="zh")._messages
    assert en.keys() == zh.keys()


def test_unknown_locale_yields_placeholders():
    store = MessageStore(locale="xx")
    assert store.get("engine.error.cycle") == "<engine.error.cycle>"


def test_bus_formats_and_routes_to_renderer():
    renderer = MagicMock()
    bus = MessageBus(MessageStore(locale="en"))
    bus.set_renderer(renderer)

    bus.error("common.error.cannotOpen", path="history.txt", reason="No such file or directory")
    renderer.error.assert_called_once_with("❌ history.txt: No such file or directory")

    bus.data("C1 100")
    renderer.data.assert_called_once_with("C1 100")


def test_bus_tolerates_missing_format_keys():
    renderer = MagicMock()
    bus = MessageBus(MessageStore(locale="en"))
    bus.set_renderer(renderer)

    bus.info("longest.info.emptyInput")
    assert "{source}" in renderer.info.call_args.args[0]


def test_bus_without_renderer_drops_messages(caplog):
    bus = MessageBus(MessageStore(locale="en"))
    bus.info("longest.info.emptyInput", source="x")
    assert "renderer not configured" in caplog.text


def test_typer_renderer_separates_streams(capsys):
    renderer = TyperRenderer()
    renderer.data("A 100")
    renderer.error("boom")

    captured = capsys.readouterr()
    assert captured.out == "A 100\n"
    assert "boom" in captured.err


def test_status_levels_go_to_stderr(capsys):
    renderer = TyperRenderer()
    bus = MessageBus(MessageStore(locale="en"))
    bus.set_renderer(renderer)

    bus.info("longest.info.emptyInput", source="<stdin>")
    bus.success("longest.success.summary", count=2, length=1, start="a", end="b")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "<stdin>" in captured.err
    assert "2 commits" in captured.err
