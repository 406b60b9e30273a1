"""Allow ``python -m vault2anki``."""

from vault2anki.cli import run

run()
