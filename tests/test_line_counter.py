import pytest

from linecounter.services.line_counter import LineCountResult, count_lines_in_file


def _write(tmp_path, data: bytes, name="sample.txt"):
    path = tmp_path / name
    path.write_bytes(data)
    return path


def test_empty_file_has_zero_lines(tmp_path):
    result = count_lines_in_file(_write(tmp_path, b""))
    assert result.ok
    assert result.count == 0


def test_single_terminated_line_counts_once(tmp_path):
    assert count_lines_in_file(_write(tmp_path, b"hello\n")).count == 1


@pytest.mark.parametrize("n", [1, 2, 10, 1000])
def test_n_terminated_lines(tmp_path, n):
    data = b"".join(b"line %d\n" % i for i in range(n))
    assert count_lines_in_file(_write(tmp_path, data)).count == n


def test_unterminated_trailing_content_counts_as_a_line(tmp_path):
    assert count_lines_in_file(_write(tmp_path, b"first\nsecond")).count == 2


@pytest.mark.parametrize("content, delta", [
    (b"", 1),            # a lone newline is one empty line
    (b"abc", 0),         # the newline only terminates the existing line
    (b"abc\n", 1),       # a second newline adds an empty line
    (b"a\nb\nc", 0),
])
def test_extra_trailing_newline(tmp_path, content, delta):
    without = count_lines_in_file(_write(tmp_path, content, "a.txt")).count
    with_newline = count_lines_in_file(_write(tmp_path, content + b"\n", "b.txt")).count
    assert with_newline - without == delta


def test_single_newline_is_one_line(tmp_path):
    assert count_lines_in_file(_write(tmp_path, b"\n")).count == 1


def test_crlf_endings_count_once(tmp_path):
    assert count_lines_in_file(_write(tmp_path, b"a\r\nb\r\nc\r\n")).count == 3


def test_lone_carriage_return_is_not_a_boundary(tmp_path):
    assert count_lines_in_file(_write(tmp_path, b"a\rb\rc")).count == 1


def test_mixed_line_endings(tmp_path):
    assert count_lines_in_file(_write(tmp_path, b"a\r\nb\nc")).count == 3


def test_non_utf8_content_is_counted(tmp_path):
    assert count_lines_in_file(_write(tmp_path, b"\xff\xfe\x00\n\x80\x81\n")).count == 2


def test_lines_spanning_chunk_boundaries(tmp_path, monkeypatch):
    monkeypatch.setattr("linecounter.services.line_counter.CHUNK_SIZE", 4)
    data = b"abcdefgh\nij\n\nklmnopq"
    assert count_lines_in_file(_write(tmp_path, data)).count == 4


def test_chunk_ending_on_newline_before_eof(tmp_path, monkeypatch):
    monkeypatch.setattr("linecounter.services.line_counter.CHUNK_SIZE", 4)
    assert count_lines_in_file(_write(tmp_path, b"abc\nde")).count == 2


def test_missing_file_is_a_failure(tmp_path):
    result = count_lines_in_file(tmp_path / "missing.txt")
    assert not result.ok
    assert result.count is None
    assert "No such file" in result.error


def test_directory_is_a_failure(tmp_path):
    result = count_lines_in_file(tmp_path)
    assert not result.ok
    assert result.error


def test_accepts_string_paths(tmp_path):
    path = _write(tmp_path, b"x\ny\n")
    assert count_lines_in_file(str(path)).count == 2


def test_result_constructors():
    assert LineCountResult.success(3) == LineCountResult(count=3)
    assert LineCountResult.failure("boom").error == "boom"
    assert not LineCountResult.failure("boom").ok


def test_path_with_nul_byte_is_a_failure():
    result = count_lines_in_file("/tmp/a\x00b.txt")
    assert not result.ok
    assert result.count is None
    assert "null" in result.error
