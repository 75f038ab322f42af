"""Allow ``python -m scrum_skill``."""

from .cli.main import cli

if __name__ == "__main__":
    cli()
