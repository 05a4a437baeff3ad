"""
splashy Decorators

Use these decorators for converting the coroutines that talk to Unsplash into properly formed
click subcommands. A subcommand body is written as an ordinary `async def` that awaits the
client and prints whatever it got back; the decorators take care of running it on an event
loop and of turning any exception into a formatted error message and a non-zero exit code.

Here's a sample of how this looks for a command that prints the ids of the latest photos:

    @click.command(name="ids")
    @click.pass_obj
    @catch_errors
    @coroutine
    async def cli(config: SplashyConfig):
        '''Print latest photo ids'''

        async with PhotoApiClient(config.UNSPLASH_ACCESS_KEY) as client:
            for photo in await client.list_photos():
                describe(photo["id"])

Order matters: catch_errors must wrap coroutine so that errors raised inside the event loop
are caught once asyncio.run has re-raised them.
"""

import asyncio
from sys import exit
from functools import wraps

import httpx

from splashy.cli_utils.console import fail


def coroutine(func):
    """
    Take a coroutine function and convert it into a plain function that runs it to completion
    on a fresh event loop and returns its result.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        return asyncio.run(func(*args, **kwargs))

    return wrapper


def catch_errors(func):
    """
    Catch and format errors with the "fail" console template and gracefully
    exit the application with an error code.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except httpx.HTTPStatusError as error:
            fail(
                f"Unsplash answered {error.request.method} {error.request.url.path} "
                f"with status code {error.response.status_code}"
            )
            exit(1)
        except Exception as error:
            fail(str(error) or type(error).__name__)
            exit(1)

    return wrapper
