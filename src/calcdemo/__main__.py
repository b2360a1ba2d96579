"""
calcdemo entry point.

Run with: python -m calcdemo "2 + 3 * 4"
"""

from calcdemo.cli import run

if __name__ == "__main__":
    run()
