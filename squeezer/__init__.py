"""Lossless file compression with Huffman and LZW coders and a command line."""

__version__ = "1.0.0"
__all__ = ["base", "bitstream", "cli", "factory", "huffman", "log", "lzw"]