"""
__main__.py

This file adds support for running splashy as a python module instead of invoking the "splashy"
command line entrypoint, e.g. `python -m splashy latest`.
"""


from splashy.cli import main


if __name__ == "__main__":
    main()
