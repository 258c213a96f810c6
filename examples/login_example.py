"""
Example usage of the XBoard SDK: login, auth state listening and typed
error handling.

Run with:
    XBOARD_EMAIL=... XBOARD_PASSWORD=... python examples/login_example.py https://your-panel
"""

import asyncio
import logging
import os
import sys

from xboard_sdk import ApiException
from xboard_sdk import HttpConfig
from xboard_sdk import MemoryTokenStore
from xboard_sdk import NetworkError
from xboard_sdk import XBoardSDK
from xboard_sdk.logging_middleware import LoggingMiddleware

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def watch_auth_state(sdk: XBoardSDK):
    async for state in sdk.auth_state_stream():
        logger.info(f"Auth state changed: {state.value}")


async def main(base_url: str):
    sdk = await XBoardSDK.create(
        base_url,
        http_config=HttpConfig.production(user_agent="xboard-sdk-example/1.0"),
        token_store=MemoryTokenStore(),
        middlewares=[LoggingMiddleware()],
    )
    watcher = asyncio.create_task(watch_auth_state(sdk))

    try:
        if not await sdk.login_with_credentials(
            os.environ["XBOARD_EMAIL"], os.environ["XBOARD_PASSWORD"]
        ):
            logger.error("Login failed")
            return

        info = await sdk.user_info.get_user_info()
        logger.info(f"Logged in as {info.data.email}")

        try:
            link = await sdk.user_info.get_subscription_link()
            logger.info(f"Subscription link: {link.data}")
        except ApiException as e:
            if e.is_rate_limited:
                logger.warning("Rate limited, try again later")
            else:
                raise

        await sdk.logout()
    except NetworkError as e:
        logger.error(f"Panel unreachable: {e}")
    finally:
        await sdk.aclose()
        await watcher


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1]))
