"""Allow running minerlog as a module: python -m minerlog"""

from minerlog.cli import app

if __name__ == "__main__":
    app()
