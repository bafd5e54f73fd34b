"""Small teaching programs: Huffman compression, IQ signals, design patterns and console apps."""

__version__ = "0.1.0"