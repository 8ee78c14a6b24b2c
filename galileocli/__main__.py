"""
Invokable Module for CLI

python -m galileocli
"""

from galileocli.cli.main import cli

if __name__ == "__main__":
    # NOTE: click.command(cls=...) takes care of parsing arguments from sys.argv
    cli(prog_name="galileo")
