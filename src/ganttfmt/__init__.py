# SPDX-License-Identifier: MIT

from ganttfmt.cleanup import register_cleanup
from ganttfmt.initialize import initialize
from ganttfmt.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
