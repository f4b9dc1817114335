"""CLI module exports."""

from whodied.cli.askwiki import main as askwiki_main
from whodied.cli.whodied import main as whodied_main

__all__ = ["whodied_main", "askwiki_main"]
