"""Package entry point for ``python -m dst_merger``.

WHY: Users run the merger as ``python -m dst_merger HELLO`` without
installing the console script.

HOW: Delegates straight to the CLI's main() function.
"""

from dst_merger.cli import main

if __name__ == "__main__":
    main()
