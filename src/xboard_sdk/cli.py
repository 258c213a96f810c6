"""
Command-line interface for XBoard SDK.

All commands read their configuration from XBoardSettings (XBOARD_*
environment variables or a .env file) and use async operations under the hood.

Available commands:
- login: Log in with email and password and store the token
- logout: Clear the stored token
- whoami: Show the logged-in user's account info
- token-status: Show whether a token is stored
- subscribe-url: Print the subscription link
"""

import asyncio
import logging
import sys

import click

from xboard_sdk.config import XBoardSettings
from xboard_sdk.exceptions import ApiException
from xboard_sdk.exceptions import XBoardError
from xboard_sdk.logging_middleware import LoggingMiddleware
from xboard_sdk.retry import network_retrying
from xboard_sdk.sdk import XBoardSDK

logger = logging.getLogger("xboard_sdk.cli")


async def _open_sdk(verbose: bool) -> XBoardSDK:
    middlewares = [LoggingMiddleware()] if verbose else []
    return await XBoardSDK.from_settings(XBoardSettings(), middlewares=middlewares)


def _fail(message: str):
    click.echo(message, err=True)
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP traffic")
@click.pass_context
def cli(ctx, verbose):
    """XBoard SDK CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.option("--email", required=True, help="Account email")
@click.password_option(confirmation_prompt=False, help="Account password")
@click.pass_context
def login(ctx, email, password):
    """Log in and store the token."""

    async def _run():
        sdk = await _open_sdk(ctx.obj["verbose"])
        try:
            return await sdk.login_with_credentials(email, password)
        finally:
            await sdk.aclose()

    try:
        success = asyncio.run(_run())
    except XBoardError as exc:
        _fail(f"Login failed: {exc}")
    if not success:
        _fail("Login failed")
    click.echo("Logged in")


@cli.command()
@click.pass_context
def logout(ctx):
    """Clear the stored token."""

    async def _run():
        sdk = await _open_sdk(ctx.obj["verbose"])
        try:
            await sdk.logout()
        finally:
            await sdk.aclose()

    try:
        asyncio.run(_run())
    except XBoardError as exc:
        _fail(f"Logout failed: {exc}")
    click.echo("Logged out")


@cli.command()
@click.pass_context
def whoami(ctx):
    """Show the logged-in user's account info."""

    async def _run():
        sdk = await _open_sdk(ctx.obj["verbose"])
        try:
            async for attempt in network_retrying(attempts=3):
                with attempt:
                    return await sdk.user_info.get_user_info()
        finally:
            await sdk.aclose()

    try:
        response = asyncio.run(_run())
    except ApiException as exc:
        if exc.is_unauthorized:
            _fail("Not logged in or token revoked. Run 'xboard login'.")
        _fail(f"Request failed: {exc}")
    except XBoardError as exc:
        _fail(f"Request failed: {exc}")

    info = response.data
    if info is None:
        _fail(response.message or "No user info returned")
    click.echo(f"Email: {info.email}")
    click.echo(f"UUID: {info.uuid}")
    click.echo(f"Plan: {info.plan_id}")
    click.echo(f"Balance: {info.balance}")


@cli.command("token-status")
@click.pass_context
def token_status(ctx):
    """Show whether a token is stored."""

    async def _run():
        sdk = await _open_sdk(ctx.obj["verbose"])
        try:
            return sdk.auth_state, await sdk.get_token()
        finally:
            await sdk.aclose()

    try:
        state, token = asyncio.run(_run())
    except XBoardError as exc:
        _fail(f"Failed to read token: {exc}")
    click.echo(f"State: {state.value}")
    if token:
        click.echo(f"Token prefix: {token[:15]}...")


@cli.command("subscribe-url")
@click.pass_context
def subscribe_url(ctx):
    """Print the subscription link."""

    async def _run():
        sdk = await _open_sdk(ctx.obj["verbose"])
        try:
            return await sdk.user_info.get_subscription_link()
        finally:
            await sdk.aclose()

    try:
        response = asyncio.run(_run())
    except XBoardError as exc:
        _fail(f"Request failed: {exc}")
    if not response.data:
        _fail("No subscription link returned")
    click.echo(response.data)


if __name__ == "__main__":
    cli()
