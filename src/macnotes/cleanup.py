# SPDX-License-Identifier: MIT

import atexit

from macnotes.repository.configuration import CONFIGURATION_REPO
from macnotes.store import NOTE_STORE


def flush() -> None:
    CONFIGURATION_REPO.flush()

    # A save still waiting on the debounce timer would be lost with the
    # daemon timer thread.
    NOTE_STORE.flush()


def register_cleanup() -> None:
    atexit.register(flush)
