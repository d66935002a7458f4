"""
Script entrypoint; the CLI itself lives in smog_check.cli.
"""

from smog_check.cli import main

if __name__ == "__main__":
    main()
