"""Entry point for running envseed as a module: python -m envseed"""

from envseed.cli import app

if __name__ == "__main__":
    app()
