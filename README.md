# squeezer

A small file compression tool with two lossless algorithms:

- **Huffman**: a frequency-based prefix code. The output starts with a header that holds the frequency of every byte value and the total input length, so the same code tree can be rebuilt when decompressing. Empty input gives empty output.
- **LZW**: a dictionary coder. It writes each code as a 16-bit little-endian integer. The dictionary starts with the 256 single bytes and grows by one entry per code written until code 65534 has been assigned; after that it stays fixed.

The package depends only on the standard library.

## Installation

```
pip install .
```

## Command line

Compress a file (Huffman is the default):

```
squeezer --compress --input notes.txt --output notes.huf
```

Compress with LZW:

```
squeezer -c -i notes.txt -o notes.lzw -a lzw
```

Decompress a file. Pass the algorithm that was used to compress it; the compressed files do not record it:

```
squeezer -d -i notes.lzw -o notes.txt -a lzw
```

Options:

| Option | Meaning |
| --- | --- |
| `-c`, `--compress` | compress the input |
| `-d`, `--decompress` | decompress the input |
| `-i`, `--input` | input file (required) |
| `-o`, `--output` | output file (required) |
| `-a`, `--algo` | `huffman` (default) or `lzw`; the name is not case-sensitive |
| `-h`, `--help` | print usage |

Give exactly one of `--compress` and `--decompress`. While working, the tool shows an animated progress bar. After compressing it reports the original size, the compressed size, the space saved and the time taken; after decompressing it reports the time taken. Any error is printed as a message and the command exits with status 1.

## Library use

```python
from squeezer.factory import create_compressor, supported_algorithms

print(supported_algorithms())          # ['Huffman', 'LZW']

codec = create_compressor("huffman")
packed = codec.compress_bytes(b"this is a test for huffman coding")
assert codec.decompress_bytes(packed) == b"this is a test for huffman coding"
```

Each compressor (`squeezer.huffman.Huffman`, `squeezer.lzw.LZW`, both subclasses of `squeezer.base.Compressor`) also works on binary file objects through `compress(source, sink)` and `decompress(source, sink)`. It reads the whole source into memory and writes the result to the sink.

`squeezer.huffman.build_codes(frequencies)` returns the bit string given to each byte value for a mapping of byte values to counts; a lone symbol gets the code `"0"`.

Errors:

- An unknown algorithm name raises `ValueError`.
- If an LZW stream holds a code it has not yet defined, decompression raises `squeezer.lzw.LZWError` (a subclass of `ValueError`).
- A Huffman stream whose header is cut short raises `ValueError`.

The coloured console messages used by the command are available from `squeezer.log` as `info`, `success`, `error` and `header`; each takes an optional text stream and writes to standard output otherwise.

The bit-level helpers `squeezer.bitstream.BitWriter` and `BitReader` pack bits from the most significant bit down. `BitReader.read_bit()` returns `None` at the end of the stream, and iterating over a reader yields its bits:

```python
import io
from squeezer.bitstream import BitWriter, BitReader

buf = io.BytesIO()
with BitWriter(buf) as out:
    out.write_bits(7, 3)       # padded with zeros on exit: 0xE0
buf.seek(0)
assert BitReader(buf).read_byte() == 0xE0
```

## Limits

- Compressed files carry no magic number or algorithm tag; decompressing with the wrong algorithm is not detected.
- Whole files are held in memory while they are compressed or decompressed.