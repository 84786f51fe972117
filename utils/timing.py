"""
Blocking sleeps. These are the only suspension points of the toolkit;
they block the calling thread and cannot be interrupted early.
"""

import time


def wait_for_seconds(seconds: float):
    time.sleep(seconds)


def wait_for_millis(milliseconds: float):
    time.sleep(milliseconds / 1000)


def wait_for_micros(microseconds: float):
    time.sleep(microseconds / 1_000_000)
