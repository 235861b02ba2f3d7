import io

import pytest

from debugwarmups.app import (
    DEFAULT_CONFIG,
    AppConfig,
    Handler,
    MenuOption,
    console_main,
    main,
)


def _scripted(answers):
    remaining = list(answers)

    def fake_input(prompt=""):
        return remaining.pop(0)

    return fake_input


def test_default_title_from_config():
    config = AppConfig()
    assert config.title == "Welcome to C++!"
    assert DEFAULT_CONFIG.title == config.title


def test_demo_order_starts_with_testing_file():
    config = AppConfig()
    order = config.demo_file_order
    assert config.file_index("TestingGUI.cpp") == 0
    assert order[0] == "TestingGUI.cpp"
    assert order[1:] == config.menu_order


def test_file_index_unknown_is_past_end():
    config = AppConfig()
    assert config.file_index("Missing.cpp") == len(config.demo_file_order)
    assert config.file_index("StackOverflowGUI.cpp") == 2


def test_compare_files():
    config = AppConfig()
    assert config.compare_files("CallStackStorytellingGUI.cpp", "FireGUI.cpp") == -1
    assert config.compare_files("FireGUI.cpp", "CallStackStorytellingGUI.cpp") == 1
    assert config.compare_files("a.cpp", "b.cpp") == -1
    assert config.compare_files("FireGUI.cpp", "FireGUI.cpp") == 0


def test_is_public_uses_file_tail():
    config = AppConfig()
    assert config.is_public("Demos/FireGUI.cpp")
    assert not config.is_public("Demos/Secret.cpp")


def test_sort_handlers_by_file_then_line():
    config = AppConfig()
    noop = lambda: None
    handlers = [
        Handler("FireGUI.cpp", 5, "b", noop),
        Handler("StackOverflowGUI.cpp", 9, "a", noop),
        Handler("FireGUI.cpp", 2, "c", noop),
    ]
    names = [h.name for h in config.sort_handlers(handlers)]
    assert names == ["a", "c", "b"]


def test_menu_options_skip_private_handlers():
    config = AppConfig()
    noop = lambda: None
    handlers = [
        Handler("Hidden.cpp", 1, "Hidden", noop),
        Handler("StackOverflowGUI.cpp", 1, "Visible", noop),
    ]
    assert [o.name for o in config.menu_options(handlers)] == ["Visible"]


def test_menu_options_apply_barrier():
    seen = []

    def barrier(files, callback):
        def guarded():
            seen.append(files)
            callback()

        return guarded

    calls = []
    config = AppConfig(barrier=barrier)
    options = config.menu_options(
        [Handler("FireGUI.cpp", 1, "Fire", lambda: calls.append("fire"))]
    )
    options[0].callback()
    assert seen == [frozenset({"Fire.cpp"})]
    assert calls == ["fire"]


def test_initial_demo_absent_by_default():
    handler = Handler("FireGUI.cpp", 1, "Fire", lambda: None)
    assert DEFAULT_CONFIG.initial_demo([handler]) is None


def test_console_main_runs_choice_and_quits():
    calls = []
    options = [MenuOption("Demo", lambda: calls.append(1))]
    out = io.StringIO()
    console_main(options, None, _scripted(["", "0", "y", "1"]), out)
    assert calls == [1]
    text = out.getvalue()
    assert "0 Demo" in text
    assert "1 Quit" in text
    assert text.rstrip().endswith("Exiting...")


def test_console_main_initial_demo_without_options_exits():
    calls = []
    out = io.StringIO()
    console_main([], lambda: calls.append("init"), _scripted([""]), out)
    assert calls == ["init"]
    assert "Exiting..." in out.getvalue()


def test_main_quit(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _scripted(["", "2"]))
    assert main(["--name", "Tester"]) == 0
    assert "Exiting..." in capsys.readouterr().out


def test_main_tells_story(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _scripted(["", "0", "", "n"]))
    assert main(["--name", "Tester"]) == 0
    assert "THE END!" in capsys.readouterr().out


def test_main_requires_name(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _scripted(["", "0", ""]))
    assert main([]) == 1
    assert "--name" in capsys.readouterr().err


def test_main_stack_overflow(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _scripted(["", "1", "y"]))
    assert main(["--name", "Tester"]) == 1
    assert "The cycle is" in capsys.readouterr().err


@pytest.mark.parametrize("answers", [["", "0", "maybe", "n"]])
def test_console_main_reprompts_yes_no(answers):
    out = io.StringIO()
    console_main([MenuOption("Demo", lambda: None)], None, _scripted(answers), out)
    assert "starts with 'Y' or 'N'" in out.getvalue()