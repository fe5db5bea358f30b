"""
Monke entry point
Single entry point (main)
"""

from monke.cli import run


if __name__ == "__main__":
    run()
