"""Command line entry: read a JSON request document on stdin, answer on stdout."""

from __future__ import annotations

import argparse
import sys

from .catalogue import TransportCatalogue
from .jsonnode import dump
from .json_reader import JsonReader
from .transport_router import TransportRouter

__all__ = ["main"]


def main(argv: list[str] | None = None) -> int:
    """Build the catalogue from stdin and print the responses to stdout."""
    parser = argparse.ArgumentParser(
        prog="transit-catalogue",
        description="Read base and stat requests as JSON on stdin and print the answers as JSON.",
    )
    parser.parse_args(argv)

    try:
        reader = JsonReader(sys.stdin)
        catalogue = TransportCatalogue()
        reader.make_catalogue(catalogue)
        router = TransportRouter(catalogue, reader.route_settings())
        document = reader.request_document(catalogue, router)
    except (KeyError, TypeError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    dump(document, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())