# This code is under MIT licence, you can find the complete file here: https://github.com/ivanovrvl/pg_tasks/blob/main/LICENSE

class RingItem:

    def __init__(self):
        self.next = self.prev = self.ring = None

    def in_ring(self) -> bool:
        return self.ring is not None

    def get_next(self):
        if self.ring is not None:
            return self.next

    def get_prev(self):
        if self.ring is not None:
            return self.prev

    def remove(self):
        if self.ring is not None:
            self.ring.remove(self)

class Ring:
    """
    Circular doubly-linked list. `first` is the anchor, the last item is `first.prev`.
    """

    def __init__(self):
        self.first = None
        self.count = 0

    def get_last(self) -> RingItem:
        if self.first is not None:
            return self.first.prev

    def __link(self, item: RingItem, before: RingItem = None):
        if item.ring is not None:
            raise ValueError("item is already in a ring")
        if before is not None and before.ring is not self:
            raise ValueError("anchor item is not in this ring")
        if before is None:
            before = self.first
        if before is None:
            item.next = item
            item.prev = item
        else:
            item.next = before
            item.prev = before.prev
            before.prev.next = item
            before.prev = item
        item.ring = self
        self.count += 1

    def append(self, item: RingItem):
        self.__link(item)
        if self.first is None:
            self.first = item

    def prepend(self, item: RingItem):
        self.__link(item)
        self.first = item

    def insert_before(self, before: RingItem, item: RingItem):
        self.__link(item, before)
        if before is self.first:
            self.first = item

    def item_at(self, index: int) -> RingItem:
        if index < 0 or index >= self.count: return None
        if index <= self.count // 2:
            Result = self.first
            for _ in range(index):
                Result = Result.next
        else:
            Result = self.first.prev
            for _ in range(self.count - 1 - index):
                Result = Result.prev
        return Result

    def removed(self, item: RingItem):
        pass

    def remove(self, item: RingItem):
        if item.ring is not self: return
        if item.next is item:
            self.first = None
        else:
            item.prev.next = item.next
            item.next.prev = item.prev
            if item is self.first:
                self.first = item.next
        self.count -= 1
        item.ring = None
        item.prev = None
        item.next = None
        self.removed(item)

    def pop_first(self) -> RingItem:
        Result = self.first
        if Result is None: return None
        self.remove(Result)
        return Result

    def pop_last(self) -> RingItem:
        Result = self.get_last()
        if Result is None: return None
        self.remove(Result)
        return Result

    def clear(self):
        p = self.first
        for _ in range(self.count):
            p2 = p
            p = p.next
            p2.prev = None
            p2.next = None
            p2.ring = None
            self.removed(p2)
        self.first = None
        self.count = 0

    def forward(self):
        p = self.first
        for _ in range(self.count):
            yield p
            p = p.next

    def backward(self):
        if self.first is None: return
        p = self.first.prev
        for _ in range(self.count):
            yield p
            p = p.prev

    def __iter__(self):
        return self.forward()

    def __len__(self):
        return self.count

    def check(self):
        """
        Walks the ring both ways and asserts the ring invariants
        """
        if self.count == 0:
            assert self.first is None, "empty ring has an anchor"
            return
        assert self.first is not None, "non-empty ring has no anchor"
        p = self.first
        for i in range(self.count):
            assert i == 0 or p is not self.first, "count exceeds ring length"
            assert p.ring is self, "foreign item in ring"
            assert p.next.prev is p, "next.prev mismatch"
            assert p.prev.next is p, "prev.next mismatch"
            p = p.next
        assert p is self.first, "ring not closed by next"
        for _ in range(self.count):
            p = p.prev
        assert p is self.first, "ring not closed by prev"
        if self.count == 1:
            assert self.first.next is self.first and self.first.prev is self.first, "broken self-loop"
