import pytest

from sysprac.tail import main, tail_bytes, tail_file


def test_last_line():
    assert tail_bytes(b"a\nb\nc\n", 1) == b"c\n"


def test_last_two_lines():
    assert tail_bytes(b"a\nb\nc\n", 2) == b"b\nc\n"


def test_unterminated_last_line_joins_previous():
    assert tail_bytes(b"a\nb\nc", 1) == b"b\nc"


def test_more_lines_than_file_gives_everything():
    data = b"one\ntwo\nthree\n"
    assert tail_bytes(data, 50) == data


def test_zero_lines_is_empty():
    assert tail_bytes(b"a\nb\n", 0) == b""


@pytest.mark.parametrize(
    "count, expected",
    [
        (0, b""),
        (1, b"delta\n"),
        (2, b"gamma\ndelta\n"),
        (3, b"beta\ngamma\ndelta\n"),
        (4, b"alpha\nbeta\ngamma\ndelta\n"),
        (5, b"alpha\nbeta\ngamma\ndelta\n"),
    ],
)
def test_result_is_suffix(count, expected):
    data = b"alpha\nbeta\ngamma\ndelta\n"
    result = tail_bytes(data, count)
    assert result == expected
    assert data[len(data) - len(result):] == result


def test_empty_input_fails():
    with pytest.raises(OSError):
        tail_bytes(b"", 1)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        tail_bytes(b"x\n", -1)


def test_tail_file(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"1\n2\n3\n4\n")
    assert tail_file(str(path), 3) == b"2\n3\n4\n"


def test_main_prints_tail(tmp_path, capsysbinary):
    path = tmp_path / "f.txt"
    path.write_bytes(b"x\ny\nz\n")
    assert main(["-2", str(path)]) == 0
    assert capsysbinary.readouterr().out == b"y\nz\n"


@pytest.mark.parametrize("args", [["5", "f"], ["-", "f"], ["-1"]])
def test_main_usage(args, capsys):
    assert main(args) == 1
    assert capsys.readouterr().err.startswith("Usage:")


def test_main_missing_file(tmp_path, capsys):
    assert main(["-1", str(tmp_path / "nothing")]) == 1
    assert "mytail:" in capsys.readouterr().err