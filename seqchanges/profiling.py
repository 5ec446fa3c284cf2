"""Timing of named sections of the change computation.

The table of the edit script engine grows with the product of the
input lengths. When a diff is slow, the section timer shows whether
the time goes to the table or to the move reduction:

    $ python -m seqchanges.profiling old.txt new.txt --unit char
    ...
    Section          Calls     Seconds    Seconds/call
    -------------  -------  ----------  --------------
    changes table        1  2.31416         2.31416
    reduce moves         1  0.000317        0.000317

More sections can be added while investigating:

    from seqchanges.profiling import timer
    with timer.time('my section'):
        ...

The timer is disabled unless enabled with `timer.enable()`, so the
sections cost next to nothing in normal use.
"""

import contextlib
import functools
import sys
import time

from tabulate import tabulate


class SectionStats(object):
    __slots__ = ('calls', 'seconds')

    def __init__(self):
        self.calls = 0
        self.seconds = 0.0


class SectionTimer(object):
    """Accumulates call counts and wall time per section name."""

    def __init__(self, enabled=True):
        self.enabled = enabled
        self.stats = {}

    @contextlib.contextmanager
    def time(self, section):
        if not self.enabled:
            yield
            return
        start = time.perf_counter()
        try:
            yield
        finally:
            stats = self.stats.setdefault(section, SectionStats())
            stats.calls += 1
            stats.seconds += time.perf_counter() - start

    def profile(self, section=None):
        "Decorator timing each call of a function, by default under its name."
        def decorator(function):
            name = section or function.__name__

            @functools.wraps(function)
            def timed(*args, **kwargs):
                with self.time(name):
                    return function(*args, **kwargs)
            return timed
        return decorator

    @contextlib.contextmanager
    def _enabled_as(self, enabled):
        previous = self.enabled
        self.enabled = enabled
        try:
            yield self
        finally:
            self.enabled = previous

    def enable(self):
        return self._enabled_as(True)

    def disable(self):
        return self._enabled_as(False)

    def reset(self):
        self.stats = {}

    def report(self):
        rows = [(section, s.calls, s.seconds, s.seconds / s.calls)
                for section, s in self.stats.items()]
        rows.sort(key=lambda row: row[2], reverse=True)
        return tabulate(rows, headers=['Section', 'Calls', 'Seconds', 'Seconds/call'])

    __str__ = report


timer = SectionTimer(enabled=False)


def profile_diff_paths(args=None):
    """Run `seqchanges diff` with the timer enabled and print the report."""
    # Under `python -m` this module is __main__, not the one the engine imports
    from seqchanges.profiling import timer
    from seqchanges.seqdiffapp import main
    with timer.enable():
        try:
            return main(args)
        finally:
            print(timer.report())


if __name__ == "__main__":
    sys.exit(profile_diff_paths())
