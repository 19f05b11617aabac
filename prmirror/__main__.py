"""
Run the mirror command directly.

Usage:
    python -m prmirror -n 123 -o myorg -r myrepo
"""

from .main import cli


if __name__ == "__main__":
    cli(prog_name="prmirror")
