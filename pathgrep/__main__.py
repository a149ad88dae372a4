"""Module entrypoint for ``python -m pathgrep``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and option resolution happen in ``pathgrep.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
