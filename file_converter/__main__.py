"""Package entry point for ``python -m file_converter``.

WHY: Users run the converter as ``python -m file_converter convert -i data.json
-f csv`` without installing the console script.

HOW: Delegates straight to the CLI's main() function.
"""

from file_converter.cli import main

if __name__ == "__main__":
    main()
