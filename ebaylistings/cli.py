"""CLI entry point for ebaylistings."""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import replace

import click

from ebaylistings.config import Config, parse_max_items
from ebaylistings.errors import ListingsError
from ebaylistings.fetcher import collect_listings
from ebaylistings.models import Snapshot
from ebaylistings.writer import write_snapshot


@click.command()
@click.option("--seller", "-s", default=None, help="eBay seller to query (overrides EBAY_SELLER)")
@click.option("--max-items", "-n", default=None, help="Maximum number of listings (overrides MAX_ITEMS)")
@click.option("--output", "-o", default=None, help="Snapshot path (overrides EBAY_OUTPUT)")
@click.option("--verbose", "-v", is_flag=True, help="Log each page fetched")
def main(
    seller: str | None,
    max_items: str | None,
    output: str | None,
    verbose: bool,
) -> None:
    """ebay-listings — write a seller's active eBay listings to a JSON snapshot."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = Config.from_env()

        overrides: dict[str, object] = {}
        if seller:
            overrides["seller"] = seller
        if max_items is not None:
            overrides["max_items"] = parse_max_items(max_items)
        if output:
            overrides["output_path"] = output
        if overrides:
            config = replace(config, **overrides)

        records = asyncio.run(collect_listings(config))
    except ListingsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    snapshot = Snapshot(seller=config.seller, items=records)
    path = write_snapshot(snapshot, config.output_path)
    click.echo(f"Wrote {len(records)} items to {path.as_posix()}")


if __name__ == "__main__":
    main()
