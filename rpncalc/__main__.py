"""Main execution script for the module.

Makes ``python -m rpncalc`` behave like the ``rpncalc`` command.
"""

from rpncalc.cli import main

if __name__ == "__main__":
    main()
