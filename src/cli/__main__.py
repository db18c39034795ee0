"""
Interactive phone book.
Run: python -m cli [path/to/contacts.json] (from repo root, with .env or env vars set).
"""
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/cli/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from cli.flow_loader import get_flow
from cli.shell import PhoneBookShell
from phonebook.application import PhoneBookService
from phonebook.infrastructure import ContactDecodeError, JsonFileContactRepository


def get_log_level(value: str | None) -> int:
    """Numeric level for a LOG_LEVEL name. Unknown or empty names mean WARNING."""
    level = logging.getLevelName((value or "").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=get_log_level(os.environ.get("LOG_LEVEL")),
)
logger = logging.getLogger(__name__)

DEFAULT_PHONEBOOK_FILE = "contacts.json"


def get_phonebook_path(argv: list[str]) -> Path:
    """Data file: first argument, else PHONEBOOK_FILE, else contacts.json in the current dir."""
    if argv:
        return Path(argv[0])
    return Path(os.environ.get("PHONEBOOK_FILE", "").strip() or DEFAULT_PHONEBOOK_FILE)


def main(argv: list[str] | None = None) -> int:
    path = get_phonebook_path(sys.argv[1:] if argv is None else argv)
    service = PhoneBookService(JsonFileContactRepository(path))
    try:
        service.load()
    except ContactDecodeError as exc:
        print(f"Cannot load {path}: {exc}", file=sys.stderr)
        return 1
    shell = PhoneBookShell(service, get_flow())
    try:
        shell.run()
    except (EOFError, KeyboardInterrupt):
        # Only 'exit' saves; anything else ends the session without writing.
        logger.warning("Session ended without 'exit'; changes since load were not saved")
    return 0


if __name__ == "__main__":
    sys.exit(main())
