"""``python -m starlight`` runs the CLI."""

from starlight.cli import main

main()
