from hexworld.cli import cli

cli()
