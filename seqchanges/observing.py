# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Notify an observer of the changes of a sequence value.

Typical usage is keeping a view of a list in sync with the list:

    class ListViewObserver(ChangeObserver):
        def did_occur_change(self, observable, change):
            view.apply(change)

    items = ObservableSequence([1, 2, 3], observer=ListViewObserver())
    items.current_value = [1, 3, 2]
"""

from .diffing import diff_sequence
from .log import debug


class ChangeObserver(object):
    """Base class for observers of an ObservableSequence.

    All hooks are no-ops by default, override the ones you need.
    """

    def will_begin_changes(self, observable):
        pass

    def did_occur_change(self, observable, change):
        pass

    def did_end_changes(self, observable):
        pass


class ObservableSequence(object):
    """Holds a sequence value and reports its changes to an observer.

    Each time current_value is replaced, the observer gets
    will_begin_changes, then did_occur_change for each change
    in the order computed by diff_sequence, then did_end_changes.
    The changes are only computed when an observer is set.
    """

    def __init__(self, initial_value, observer=None, reduced=True):
        self._current_value = initial_value
        self.observer = observer
        self.reduced = reduced

    @property
    def current_value(self):
        return self._current_value

    @current_value.setter
    def current_value(self, value):
        observer = self.observer
        if observer is not None:
            observer.will_begin_changes(self)

        old_value = self._current_value
        self._current_value = value

        if observer is not None:
            changes = diff_sequence(old_value, value, reduced=self.reduced)
            debug("Notifying observer of %d changes", len(changes))
            for change in changes:
                observer.did_occur_change(self, change)
            observer.did_end_changes(self)
