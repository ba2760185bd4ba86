"""
Main.

Usage: python main.py [in.txt] [out.txt] [--on-error skip] [--debug] [--repl]
"""
import sys

from expresser.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
