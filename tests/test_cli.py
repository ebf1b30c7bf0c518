from fdlines.cli import main


def test_prints_line_in_blue(tmp_path, capsys):
    path = tmp_path / "one.txt"
    path.write_text("hello\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "\033[34mhello\033[0m\n"


def test_prints_every_line_in_order(tmp_path, capsys):
    lines = ["first", "", "third line", "last"]
    path = tmp_path / "many.txt"
    path.write_text("\n".join(lines))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == len(lines)
    for printed, original in zip(out, lines):
        assert printed.startswith("\033[34m")
        assert printed.endswith("\033[0m")
        assert printed[len("\033[34m"):-len("\033[0m")] == original


def test_empty_file_prints_nothing(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_missing_file_prints_nothing(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 0
    assert capsys.readouterr().out == ""


def test_no_argument_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_directory_prints_nothing(tmp_path, capsys):
    assert main([str(tmp_path)]) == 0
    assert capsys.readouterr().out == ""