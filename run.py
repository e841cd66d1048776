"""
Entry Point Script (Bootstrap)
==============================
Starts the desktop preview straight from a source checkout.

It is located outside the 'src' package and puts 'src' on sys.path so that
'habitrings' imports resolve without installing the project.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from habitrings.app.main import main

if __name__ == "__main__":
    sys.exit(main())
