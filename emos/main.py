"""Second-stage entry point: greets and demonstrates formatted output."""

from __future__ import annotations

import argparse
import sys

from emos.stdio import printf, puts


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="emos",
        description="Print the second-stage greeting and formatting samples.",
    )
    parser.parse_args(argv)

    puts("Hello world from C!\r\n")
    printf("Formatted %% %c %s\r\n", "a", "string")
    printf(
        "Formatted %d %i %x %p %o %hd %hi %hhu %hhd\r\n",
        1234, -5678, 0xDEAD, 0xBEEF, 0o12345, 27, -42, 20, -10,
    )
    printf(
        "Formatted %ld %lx %lld %llx\r\n",
        -100000000, 0xDEADBEEF, 10200300400, 0xDEADBEEFFEEBDAED,
    )
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())