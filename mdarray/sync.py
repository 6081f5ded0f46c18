"""Locks for arrays shared between threads or processes.

A synchronizer hands out one lock per array name. Arrays without a name
share the lock ``DEFAULT_KEY``. An operation that touches two arrays, such
as :meth:`mdarray.core.DenseArray.copy_from`, holds both locks through
:func:`hold_locks`. That function takes each distinct lock once and always
in the same order, so two copies running in opposite directions cannot
deadlock.
"""
import os
import re
from collections import defaultdict
from contextlib import ExitStack, contextmanager
from threading import Lock

DEFAULT_KEY = '.mdarray'

# characters allowed in a lock file name
_unsafe = re.compile(r'[^A-Za-z0-9._-]')


class ThreadSynchronizer(object):
    """Provides synchronization between the threads of one process, with a
    `threading.Lock` per array name."""

    def __init__(self):
        self.mutex = Lock()
        self.locks = defaultdict(Lock)

    def __getitem__(self, key):
        with self.mutex:
            return self.locks[key]

    def lock_id(self, key):
        """Identity of the lock for `key`, equal for equal locks."""
        return 'thread:{}:{}'.format(id(self), key)

    def __getstate__(self):
        return True

    def __setstate__(self, *args):
        # locks are not picklable, start afresh
        self.__init__()


class ProcessSynchronizer(object):
    """Provides synchronization between processes using file locks via the
    `fasteners <https://fasteners.readthedocs.io/en/latest/api/inter_process/>`_
    package.

    Parameters
    ----------
    path : string
        Directory on a file system shared by all processes. Each array name
        gets a lock file ``<name>.lock`` there, with any character outside
        ``[A-Za-z0-9._-]`` replaced by ``_``.

    """

    def __init__(self, path):
        self.path = path

    def lock_path(self, key):
        return os.path.join(self.path, _unsafe.sub('_', key) + '.lock')

    def __getitem__(self, key):
        import fasteners

        return fasteners.InterProcessLock(self.lock_path(key))

    def lock_id(self, key):
        return 'process:' + os.path.abspath(self.lock_path(key))

    # pickling and unpickling should be handled automatically


@contextmanager
def hold_locks(*arrays):
    """Hold the locks of all `arrays` for the duration of the block.

    Arrays without a synchronizer take no lock. Arrays that map to the same
    lock (the same array twice, or two arrays with one name on one
    synchronizer) take it only once.
    """
    locks = {}
    for array in arrays:
        synchronizer = array.synchronizer
        if synchronizer is None:
            continue
        key = array.lock_key
        locks.setdefault(synchronizer.lock_id(key), (synchronizer, key))

    with ExitStack() as stack:
        for lock_id in sorted(locks):
            synchronizer, key = locks[lock_id]
            stack.enter_context(synchronizer[key])
        yield
