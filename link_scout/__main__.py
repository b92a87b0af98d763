from link_scout.cli import cli

cli()
