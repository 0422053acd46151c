"""Run the boxdoc CLI with ``python -m boxdoc``."""

from boxdoc.cli import app

if __name__ == "__main__":
    app()
