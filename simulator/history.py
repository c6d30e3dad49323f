class History:
    """Every transition a run produced, in order.

    Listeners are called synchronously as `listener(transition, count)` right
    after a transition is stored, `count` being the number of stored records.

    `offset` and `follow` describe the scroll position of a viewer: while
    following, the newest records are shown; scrolling up detaches the view,
    scrolling down past the last record re-attaches it.
    """

    def __init__(self, storage=None):
        self._storage = list(storage or [])
        self._listeners = []
        self.offset = 0
        self.follow = True

    def add_listener(self, listener):
        self._listeners.append(listener)

    def add(self, transition):
        self._storage.append(transition)
        self.notify(transition)

    def notify(self, transition):
        for listener in self._listeners:
            listener(transition, len(self._storage))

    def scroll_up(self):
        if self.follow:
            self.follow = False
            self.offset = max(0, len(self._storage) - 2)
        else:
            self.offset = max(0, self.offset - 1)

    def scroll_down(self):
        if not self._storage:
            return
        offset = min(self.offset + 1, len(self._storage) - 1)
        if not self.follow and self.offset == offset:
            self.follow = True
        self.offset = offset

    def window(self, capacity):
        """Return (index of first record, records) visible in a viewport of `capacity` records."""
        if self.follow:
            start = max(0, len(self._storage) - capacity)
        else:
            start = min(self.offset, len(self._storage))
        return start, self._storage[start:start + capacity]

    def __len__(self):
        return len(self._storage)

    def __iter__(self):
        return iter(self._storage)

    def __getitem__(self, index):
        return self._storage[index]
