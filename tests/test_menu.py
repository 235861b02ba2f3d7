import io

import pytest

from debugwarmups.menu import make_file_selection, make_selection_from


def scripted(*answers):
    replies = iter(answers)
    prompts = []

    def input_fn(prompt):
        prompts.append(prompt)
        return next(replies)

    input_fn.prompts = prompts
    return input_fn


def test_valid_choice_returned():
    out = io.StringIO()
    assert make_selection_from("Pick:", ["a", "b", "c"], scripted("1"), out) == 1
    lines = out.getvalue().splitlines()
    assert lines[0] == "Pick:"
    assert lines[1:4] == ["0 a", "1 b", "2 c"]


def test_prompt_text():
    input_fn = scripted("0")
    make_selection_from("T", ["only"], input_fn, io.StringIO())
    assert input_fn.prompts == ["Your choice: "]


def test_out_of_range_reprompts():
    out = io.StringIO()
    input_fn = scripted("5", "-1", "2")
    assert make_selection_from("T", ["a", "b", "c"], input_fn, out) == 2
    assert out.getvalue().count("Please enter a number between 0 and 2") == 2
    assert len(input_fn.prompts) == 3


def test_non_integer_reprompts():
    out = io.StringIO()
    input_fn = scripted("abc", " 0 ")
    assert make_selection_from("T", ["a"], input_fn, out) == 0
    assert len(input_fn.prompts) == 2


def test_empty_options_raises():
    with pytest.raises(ValueError):
        make_selection_from("T", [], scripted("0"), io.StringIO())


def test_file_selection_filters_and_joins(tmp_path):
    for name in ("b.txt", "a.txt", "c.png"):
        (tmp_path / name).write_text("")
    out = io.StringIO()
    result = make_file_selection(".txt", str(tmp_path), scripted("1"), out)
    assert result == str(tmp_path) + "/b.txt"
    assert "c.png" not in out.getvalue()
    assert "Please choose a demo file from this list:" in out.getvalue()


def test_file_selection_keeps_trailing_slash(tmp_path):
    (tmp_path / "x.dat").write_text("")
    directory = str(tmp_path) + "/"
    result = make_file_selection(".dat", directory, scripted("0"), io.StringIO())
    assert result == directory + "x.dat"


def test_file_selection_with_no_matches_raises(tmp_path):
    (tmp_path / "x.dat").write_text("")
    with pytest.raises(ValueError):
        make_file_selection(".txt", str(tmp_path), scripted("0"), io.StringIO())


def test_file_selection_empty_directory_means_current(tmp_path, monkeypatch):
    (tmp_path / "demo.txt").write_text("")
    monkeypatch.chdir(tmp_path)
    assert make_file_selection(".txt", "", scripted("0"), io.StringIO()) == "./demo.txt"