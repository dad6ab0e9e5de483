# db_bootstrap/__main__.py

"""Entry point for executing db_bootstrap as a module.

This file allows the db_bootstrap package to be executed as a script
using `python -m db_bootstrap`.
"""

from .main import main

if __name__ == "__main__":
    main()
