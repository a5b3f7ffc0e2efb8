import pytest

from squeezer.cli import main, run_compression, run_decompression
from squeezer.huffman import Huffman
from squeezer.lzw import LZW

SAMPLE = b"this is a test for huffman coding" * 20


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(SAMPLE)
    return path


@pytest.mark.parametrize("algo", ["huffman", "lzw", "LZW", "Huffman"])
def test_main_round_trip(tmp_path, sample_file, algo):
    packed = tmp_path / "packed.bin"
    restored = tmp_path / "restored.txt"
    assert main(["-c", "-i", str(sample_file), "-o", str(packed), "-a", algo]) == 0
    assert main(["--decompress", "--input", str(packed), "--output", str(restored), "--algo", algo]) == 0
    assert restored.read_bytes() == SAMPLE


def test_default_algorithm_is_huffman(tmp_path, sample_file):
    packed = tmp_path / "packed.bin"
    assert main(["-c", "-i", str(sample_file), "-o", str(packed)]) == 0
    assert packed.read_bytes() == Huffman().compress_bytes(SAMPLE)


def test_run_compression_writes_compressed_data(tmp_path, sample_file, capsys):
    packed = tmp_path / "packed.bin"
    run_compression(str(sample_file), str(packed), "lzw")
    assert packed.read_bytes() == LZW().compress_bytes(SAMPLE)
    out = capsys.readouterr().out
    assert f"Original Size: {len(SAMPLE)} bytes" in out
    assert f"Compressed Size: {packed.stat().st_size} bytes" in out
    assert "Compression finished!" in out
    assert "Running LZW Algorithm" in out


def test_run_decompression_restores_data(tmp_path, capsys):
    packed = tmp_path / "packed.bin"
    packed.write_bytes(Huffman().compress_bytes(SAMPLE))
    restored = tmp_path / "restored.txt"
    run_decompression(str(packed), str(restored), "huffman")
    assert restored.read_bytes() == SAMPLE
    assert "Decompression finished!" in capsys.readouterr().out


def test_header_is_printed(tmp_path, sample_file, capsys):
    packed = tmp_path / "packed.bin"
    assert main(["-c", "-i", str(sample_file), "-o", str(packed)]) == 0
    assert "=== FILE COMPRESSION TOOL ===" in capsys.readouterr().out


def test_both_modes_rejected(tmp_path, sample_file, capsys):
    assert main(["-c", "-d", "-i", str(sample_file), "-o", str(tmp_path / "o")]) == 1
    assert "Please specify either --compress (-c) or --decompress (-d)" in capsys.readouterr().out


def test_no_mode_rejected(tmp_path, sample_file, capsys):
    assert main(["-i", str(sample_file), "-o", str(tmp_path / "o")]) == 1
    assert "Please specify either" in capsys.readouterr().out


def test_missing_output_rejected(sample_file, capsys):
    assert main(["-c", "-i", str(sample_file)]) == 1
    assert "Input and output files are required." in capsys.readouterr().out


def test_unknown_algorithm_reported(tmp_path, sample_file, capsys):
    assert main(["-c", "-i", str(sample_file), "-o", str(tmp_path / "o"), "-a", "zip"]) == 1
    assert "Unknown compression algorithm: zip" in capsys.readouterr().out


def test_missing_input_file_reported(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main(["-c", "-i", str(missing), "-o", str(tmp_path / "o")]) == 1
    assert f"Cannot open input file: {missing}" in capsys.readouterr().out


def test_corrupt_lzw_input_reported(tmp_path, capsys):
    packed = tmp_path / "bad.bin"
    packed.write_bytes(b"\x41\x00\xff\xff")
    assert main(["-d", "-i", str(packed), "-o", str(tmp_path / "o"), "-a", "lzw"]) == 1
    assert "LZW decompress: invalid code" in capsys.readouterr().out


def test_help_exits_cleanly(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "--compress" in out
    assert "Algorithm (huffman/lzw)" in out


def test_unknown_option_reported(capsys):
    assert main(["--bogus"]) == 1
    assert "[!] Error:" in capsys.readouterr().out


def test_run_compression_unknown_algorithm_raises(tmp_path, sample_file):
    with pytest.raises(ValueError, match="Unknown compression algorithm"):
        run_compression(str(sample_file), str(tmp_path / "o"), "rle")


def test_run_decompression_missing_input_raises(tmp_path):
    with pytest.raises(OSError, match="Cannot open input file"):
        run_decompression(str(tmp_path / "absent"), str(tmp_path / "o"), "lzw")