"""
Package entry point.

Allows running the application via:

    python -m academicportal

This simply forwards execution to academicportal.cli.main().
"""

from academicportal.cli import main

if __name__ == "__main__":
    main()
