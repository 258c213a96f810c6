# token_store.py

import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger("xboard_sdk.token_store")

TOKEN_KEY = "token"


class TokenStore:
    """Abstract interface for bearer token storage."""

    async def save(self, value: str):
        raise NotImplementedError

    async def read(self) -> str | None:
        raise NotImplementedError

    async def clear(self):
        """Removes the stored token"""
        raise NotImplementedError

    async def has(self) -> bool:
        return await self.read() is not None


class MemoryTokenStore(TokenStore):
    """Keeps the token in process memory. Nothing survives a restart."""

    def __init__(self, value: str | None = None):
        self._value = value

    async def save(self, value: str):
        self._value = value

    async def read(self) -> str | None:
        return self._value

    async def clear(self):
        self._value = None


class FileTokenStore(TokenStore):
    """
    Persists the token as ``{"token": "Bearer ..."}`` in a JSON file.

    Writes go to a temporary file in the same directory which is then
    renamed into place, so a crash never leaves a half-written token behind.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    async def read(self) -> str | None:
        logger.debug(f"Attempting to load token from: {self.path}")
        if not self.path.exists():
            logger.debug("Token file does not exist")
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.debug(f"Failed to load token file: {e}")
            return None
        if not isinstance(data, dict):
            logger.debug("Token file content is invalid")
            return None
        value = data.get(TOKEN_KEY)
        if isinstance(value, str) and value:
            return value
        logger.debug("Token file has no token")
        return None

    async def save(self, value: str):
        text = json.dumps({TOKEN_KEY: value})
        logger.debug(f"Saving token to: {self.path}")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            os.chmod(tmp_path, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.debug("Token saved successfully")

    async def clear(self):
        """Removes the token file; a missing file is not an error"""
        try:
            self.path.unlink()
            logger.debug("Token file cleared")
        except FileNotFoundError:
            logger.debug("Token file already absent")
