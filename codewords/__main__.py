"""Run the codewords CLI."""
from codewords.cli import cli

if __name__ == "__main__":
    cli()
