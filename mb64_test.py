import io
import os
import sys

import pytest

import llog
import mb64

def _stdin(monkeypatch, data):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

def test_encode_stdin_to_stdout(monkeypatch, capsys):
    _stdin(monkeypatch, b"crypto{ASCII_pr1nt4bl3}")

    assert mb64.main([]) == 0
    assert capsys.readouterr().out == "Y3J5cHRve0FTQ0lJX3ByMW50NGJsM30=\n"

def test_encode_empty(monkeypatch, capsys):
    _stdin(monkeypatch, b"")

    assert mb64.main([]) == 0
    assert capsys.readouterr().out == "\n"

def test_decode_file_to_file(tmp_path):
    src = tmp_path / "in.b64"
    dst = tmp_path / "out.bin"
    src.write_bytes(b"AQID\n")

    assert mb64.main(["-d", "-i", str(src), "-o", str(dst)]) == 0
    assert dst.read_bytes() == bytes([1, 2, 3])

def test_encode_file_to_file(tmp_path):
    src = tmp_path / "in.bin"
    dst = tmp_path / "out.b64"
    src.write_bytes(bytes([1, 2]))

    assert mb64.main(["-i", str(src), "-o", str(dst)]) == 0
    assert dst.read_bytes() == b"AQI="

def test_decode_stdin_to_stdout(monkeypatch, capsysbinary):
    _stdin(monkeypatch, b"  AQ==  \n")

    assert mb64.main(["-d"]) == 0
    assert capsysbinary.readouterr().out == bytes([1])

@pytest.mark.parametrize("data", [b"ABCDE", b"AB#=", b"AQ==AQID", b"AQ\xc3\xa9"])
def test_decode_malformed_exits_nonzero(tmp_path, data):
    src = tmp_path / "in.b64"
    dst = tmp_path / "out.bin"
    src.write_bytes(data)

    assert mb64.main(["-d", "-i", str(src), "-o", str(dst)]) == 1
    assert not dst.exists()

def test_decode_reports_length_before_ascii(tmp_path, caplog):
    src = tmp_path / "in.b64"
    src.write_bytes("é".encode())

    assert mb64.main(["-d", "-i", str(src)]) == 1
    assert "Invalid base64 length [2]" in caplog.text

def test_decode_not_ascii_position_is_byte_offset(tmp_path, caplog):
    src = tmp_path / "in.b64"
    src.write_bytes(b"AQ\xc3\xa9")

    assert mb64.main(["-d", "-i", str(src)]) == 1
    assert "position [2] is not ASCII" in caplog.text

def test_missing_input_file(tmp_path, caplog):
    assert mb64.main(["-i", str(tmp_path / "missing.bin")]) == 1
    assert "mb64 I/O threw" in caplog.text
    assert "FileNotFoundError" in caplog.text

LOGCONF = """[loggers]
keys=root

[handlers]
keys=fileHandler

[formatters]
keys=plain

[logger_root]
level=DEBUG
handlers=fileHandler

[handler_fileHandler]
class=FileHandler
level=DEBUG
formatter=plain
args=({!r}, "w")

[formatter_plain]
format=%(levelname)s %(message)s
"""

def test_alternate_logging_config(tmp_path):
    log_file = tmp_path / "mb64.log"
    conf = tmp_path / "alt.ini"
    conf.write_text(LOGCONF.format(str(log_file)))

    src = tmp_path / "in.bin"
    dst = tmp_path / "out.b64"
    src.write_bytes(bytes([1, 2, 3]))

    try:
        assert mb64.main(\
            ["-l", str(conf), "-i", str(src), "-o", str(dst)]) == 0
    finally:
        llog.init(os.path.join(os.path.dirname(llog.__file__), "logging.ini"))

    assert dst.read_bytes() == b"AQID"
    assert "INFO Encoding [3] bytes." in log_file.read_text()
