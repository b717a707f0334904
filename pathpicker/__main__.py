"""Module entrypoint for ``python -m pathpicker``.

All argument parsing happens in ``pathpicker.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
