# One user's key generator session.
# Generation runs on a worker thread and only one may be in flight at a time;
# a second request while busy is dropped, not queued.

import logging
import threading

from pgp_errors import KeyGenError
from pgp_genkey import generate_key_pair
from pgp_outcome import package, console_observer

logger = logging.getLogger(__name__)


class KeyGenSession:

    def __init__(self, primitive=None, observer=None, on_keys=None):
        self.primitive = primitive
        self.observer = observer or console_observer
        self.on_keys = on_keys
        # latest generated key pair, replaced on every successful request
        self.keys = None
        self._busy = threading.Lock()
        self._worker = None

    @property
    def busy(self):
        return self._busy.locked()

    def submit(self, request):
        """Start generating in the background.

        Returns the worker thread, or None when a generation is already
        running for this session.
        """
        if not self._busy.acquire(blocking=False):
            logger.warning("Key generation already in progress, ignoring request")
            return None
        worker = threading.Thread(target=self._run, args=(request,),
                                  name='pgpchan-keygen', daemon=True)
        try:
            worker.start()
        except BaseException:
            self._busy.release()
            raise
        self._worker = worker
        return worker

    def wait(self, timeout=None):
        worker = self._worker
        if worker is not None:
            worker.join(timeout)
        return not self.busy

    def _run(self, request):
        try:
            try:
                outcome = generate_key_pair(request, self.primitive)
            except KeyGenError as e:
                outcome = e
            keys, event = package(outcome)
            if keys is not None:
                self.keys = keys
            logger.info("Key generation finished: %s", event.kind.value)
            # the outcome is announced even when the key consumer fails
            try:
                if keys is not None and self.on_keys is not None:
                    self.on_keys(keys)
            finally:
                self.observer(event)
        finally:
            self._busy.release()
