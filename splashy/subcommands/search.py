"""
splashy search

This module defines the 'search' subcommand. The query is sent to Unsplash untouched and the
results are printed in the order Unsplash ranked them.
"""

import click

from splashy.config import SplashyConfig
from splashy.unsplash_handler import PhotoApiClient
from splashy.cli_utils.decorators import catch_errors
from splashy.cli_utils.decorators import coroutine
from splashy.cli_utils.utils import print_photos


@click.command(name="search")
@click.argument("query")
@click.option("--page", "-p", type=int, default=1, show_default=True, help="Page of results to fetch.")
@click.option(
    "--per-page",
    "-n",
    "per_page",
    type=int,
    default=10,
    show_default=True,
    help="Number of photos per page. Unsplash enforces its own maximum.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the raw JSON results.")
@click.pass_obj
@catch_errors
@coroutine
async def cli(config: SplashyConfig, query: str, page: int, per_page: int, as_json: bool):
    """
    Search Unsplash for photos matching QUERY, e.g. splashy search "northern lights"
    """

    async with PhotoApiClient(
        access_key=config.UNSPLASH_ACCESS_KEY, base_url=config.UNSPLASH_API_URL
    ) as client:
        photos = await client.search_photos(query, page=page, per_page=per_page)

    print_photos(photos, as_json=as_json, title=f"'{query}', page {page}")
