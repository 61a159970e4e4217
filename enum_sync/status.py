"""Single-line, colorized status output for generation runs."""

from __future__ import annotations

import click


def success(message: str) -> None:
    """[✓] message"""
    click.echo(f"[{click.style('✓', fg='yellow')}] {click.style(message, fg='green')}")


def ignored(message: str) -> None:
    """[-] message"""
    click.echo(f"[{click.style('-', fg='bright_black')}] {click.style(message, fg='yellow')}")


def success_generation(enum_name: str) -> None:
    success(f"{enum_name} has been generated")


def ignore_generation(subject: str) -> None:
    ignored(f"Generation of {subject} was ignored")
