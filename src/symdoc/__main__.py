"""Allow ``python -m symdoc``."""

from symdoc.cli import app

if __name__ == "__main__":
    app()
