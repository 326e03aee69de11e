"""Module entrypoint for ``python -m treeprompt``.

All argument parsing and runtime setup happen in ``treeprompt.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
