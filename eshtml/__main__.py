"""
# EsHTML: __main__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Entry point for `python -m eshtml`.
"""

from eshtml.cli import main

main()
