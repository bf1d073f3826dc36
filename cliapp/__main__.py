#!/usr/bin/env python3
"""Allows `python -m cliapp`."""

from cliapp.menu import cli

if __name__ == "__main__":
    cli()
