"""
Entry Point Script (Bootstrap)
==============================
Runs the demo straight from a source checkout, without installing the package.

It lives outside the 'src' package and puts 'src' on 'sys.path' so that
'from fieldcalc...' resolves.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from fieldcalc.main import main

if __name__ == "__main__":
    main()
