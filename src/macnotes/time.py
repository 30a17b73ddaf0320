# SPDX-License-Identifier: MIT

import os
from typing import Optional

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_from_timestamp(timestamp: float) -> pendulum.DateTime:
    return pendulum.from_timestamp(timestamp, tz="UTC")


def datetime_to_timestamp(datetime: pendulum.DateTime) -> float:
    return datetime.timestamp()


def file_times(stat_result: os.stat_result) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Return (created, updated) for a file.

    Birth time is only reported by some platforms (macOS, BSD); elsewhere the
    modification time stands in for it. The pair always satisfies
    created <= updated.
    """
    modified = datetime_from_timestamp(stat_result.st_mtime)
    birth_time: Optional[float] = getattr(stat_result, "st_birthtime", None)
    if birth_time is None:
        return modified, modified
    created = datetime_from_timestamp(birth_time)
    if created > modified:
        created = modified
    return created, modified


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_relative_str(datetime: pendulum.DateTime) -> str:
    return datetime.diff_for_humans()
