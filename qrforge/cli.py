"""Command line entry point that prints a QR code for the given text."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from qrforge.ec import EcLevel
from qrforge.encoding import Encoding, EncodingError
from qrforge.mask import MaskPattern
from qrforge.preprocessor import Preprocessor

_DEFAULT_DATA = "https://example.com https://example.com https://example.com"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a QR code for some text.")
    parser.add_argument("data", nargs="?", default=_DEFAULT_DATA, help="text to encode")
    parser.add_argument(
        "--encoding",
        choices=[e.name.lower() for e in Encoding],
        default=Encoding.BYTE.name.lower(),
    )
    parser.add_argument(
        "--ec-level",
        choices=[level.name for level in EcLevel],
        default=EcLevel.H.name,
    )
    parser.add_argument(
        "--mask",
        choices=[m.name.lower() for m in MaskPattern],
        default=MaskPattern.DIAGONAL.name.lower(),
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Encode the text given on the command line and print the symbol."""
    args = _parser().parse_args(argv)
    try:
        pre = Preprocessor(
            args.data,
            Encoding[args.encoding.upper()],
            EcLevel[args.ec_level],
            MaskPattern[args.mask.upper()],
        )
        code = pre.generate_qrcode()
    except (EncodingError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(code)
    return 0


if __name__ == "__main__":
    sys.exit(main())