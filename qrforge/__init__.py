"""QR code generation: encoding, Reed-Solomon error correction, layout and text rendering."""

__version__ = "0.1.0"