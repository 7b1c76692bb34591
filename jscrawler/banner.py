"""Startup banner and version line."""
from __future__ import annotations

import click

from jscrawler import __version__

VERSION = f"v{__version__}"

_BANNER = r"""
       _                                     __
      (_)_____ _____ _____ ____ _ _      __ / /___   _____
     / // ___// ___// ___// __  /| | /| / // // _ \ / ___/
    / /(__  )/ /__ / /   / /_/ / | |/ |/ // //  __// /
 __/ //____/ \___//_/    \__,_/  |__/|__//_/ \___//_/
/___/
"""


def version_line() -> str:
    return f"Current jscrawler version {VERSION}"


def print_version() -> None:
    click.echo(version_line())


def print_banner() -> None:
    click.secho(_BANNER, fg="cyan")
    click.echo(f"{version_line():>60}\n")
