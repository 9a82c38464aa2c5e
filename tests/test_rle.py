import pytest

from sysprac.rle import compress, decompress, encode_runs, wunzip_main, wzip_main


def test_record_format():
    assert compress([b"aaab"]) == b"\x03\x00\x00\x00a\x01\x00\x00\x00b"


def test_encode_runs_groups_equal_bytes():
    runs = list(encode_runs([b"xxyzz"]))
    assert [bytes([b]) for _, b in runs] == [b"x", b"y", b"z"]
    assert sum(count for count, _ in runs) == len(b"xxyzz")


def test_runs_span_chunks():
    assert compress([b"aa", b"ab", b"b"]) == compress([b"aaabb"])


def test_empty_input():
    assert compress([]) == b""
    assert decompress(b"") == b""


@pytest.mark.parametrize(
    "data",
    [b"a", b"hello world", b"\x00\x00\x01\xff\xff", b"z" * 1000 + b"y"],
)
def test_round_trip(data):
    packed = compress([data])
    assert len(packed) % 5 == 0
    assert decompress(packed) == data


def test_trailing_partial_record_ignored():
    packed = compress([b"abc"])
    assert decompress(packed + b"\x02\x00") == b"abc"


def test_wzip_and_wunzip_main(tmp_path, capsysbinary):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_bytes(b"aaab")
    second.write_bytes(b"bbcc\n")
    assert wzip_main([str(first), str(second)]) == 0
    packed = capsysbinary.readouterr().out
    assert packed == compress([b"aaab", b"bbcc\n"])

    archive = tmp_path / "out.z"
    archive.write_bytes(packed)
    assert wunzip_main([str(archive)]) == 0
    assert capsysbinary.readouterr().out == b"aaabbbcc\n"


def test_wzip_usage(capsysbinary):
    assert wzip_main([]) == 1
    assert capsysbinary.readouterr().out == b"wzip: file1 [file2 ...]\n"


def test_wunzip_missing_file(tmp_path, capsysbinary):
    assert wunzip_main([str(tmp_path / "missing")]) == 1
    assert capsysbinary.readouterr().out == b"wunzip: cannot open file\n"


def test_wzip_missing_file(tmp_path, capsysbinary):
    assert wzip_main([str(tmp_path / "missing")]) == 1
    assert capsysbinary.readouterr().out.endswith(b"wzip: cannot open file\n")