"""Interactive session state shared by the shell commands."""

from __future__ import annotations

from dataclasses import dataclass

import click

from shop.application.shop import Shop


@dataclass
class Session:
    shop: Shop
    running: bool = True


pass_session = click.make_pass_decorator(Session)
