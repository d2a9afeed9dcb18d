from subid_patterns.cli.main import cli

cli()
