"""
workforce/session_store.py
Durable storage for the authenticated session of one browser.

Each browser gets its own JSON file, named after the opaque id kept in its
cookie.  The file has two named slots:
  token    — the bearer token of the stored session
  session  — the full session record, read at startup to rehydrate the
             Auth Context
"""

import json
import logging
import os
import re
import tempfile

from workforce.models import Session

logger = logging.getLogger(__name__)

TOKEN_SLOT   = "token"
SESSION_SLOT = "session"

_BROWSER_ID = re.compile(r"[0-9a-f]{32}")


def is_browser_id(value) -> bool:
    """True for a 32-digit lowercase hex id, the only shape ever issued."""
    return isinstance(value, str) and _BROWSER_ID.fullmatch(value) is not None


def session_path(directory: str, browser_id: str) -> str:
    """
    Return the session file belonging to one browser.

    Raises ValueError for anything but an issued id, so a forged cookie can
    never name a file outside directory.
    """
    if not is_browser_id(browser_id):
        raise ValueError(f"Invalid browser id: {browser_id!r}")
    return os.path.join(directory, f"{browser_id}.json")


class SessionStore:
    """File-backed session slot for a single browser."""

    def __init__(self, path: str):
        self.path = path

    # ─── Private helpers ─────────────────────────────────────────────────────

    def _read(self) -> dict | None:
        """
        Return the decoded file contents, or None when absent or unusable.

        A missing file is the normal logged-out state and is not logged.
        Anything else that stops us reading an object is logged once as a
        warning and treated the same as a missing file.
        """
        try:
            with open(self.path, encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as error:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, error)
            return None

        if not isinstance(data, dict):
            logger.warning("Ignoring session file %s: not a JSON object", self.path)
            return None
        return data

    # ─── Contract ────────────────────────────────────────────────────────────

    def save(self, session: Session) -> None:
        """
        Persist the session, replacing whatever was stored before.

        Written to a temporary file in the same directory and moved into place
        with os.replace, so load() never observes a partial write.
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        payload = {
            TOKEN_SLOT:   session.token,
            SESSION_SLOT: session.to_record(),
        }
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".session-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def load(self) -> Session | None:
        """Return the stored session, or None if there is none or it is corrupt."""
        data = self._read()
        if data is None:
            return None
        try:
            return Session.from_record(data.get(SESSION_SLOT))
        except ValueError as error:
            logger.warning("Ignoring malformed session record in %s: %s", self.path, error)
            return None

    def token(self) -> str | None:
        """Return the stored bearer token, or None."""
        data = self._read()
        if data is None:
            return None
        token = data.get(TOKEN_SLOT)
        if isinstance(token, str) and token:
            return token
        return None

    def clear(self) -> None:
        """Remove the stored session.  Clearing an empty store is not an error."""
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
