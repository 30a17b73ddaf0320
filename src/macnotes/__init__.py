# SPDX-License-Identifier: MIT

from macnotes.cleanup import register_cleanup
from macnotes.initialize import initialize
from macnotes.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
