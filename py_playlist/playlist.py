# This code is under MIT licence, you can find the complete file here: https://github.com/ivanovrvl/pg_tasks/blob/main/LICENSE

from config import Messages
from py_playlist.ring import Ring, RingItem

class PlaylistError(Exception):
    pass

class EmptyCollection(PlaylistError):
    pass

class OutOfRange(PlaylistError, IndexError):
    pass

class InvalidArgument(PlaylistError, ValueError):
    pass

class Episode(RingItem):

    def __init__(self, title: str, duration: float, messages=Messages):
        if not duration >= 0:
            raise InvalidArgument(messages.NEGATIVE_DURATION.format(duration))
        super().__init__()
        self.title = title
        self.duration = duration

    def matches(self, title: str) -> bool:
        return self.title.casefold() == title.casefold()

    def __str__(self):
        return "({}|{:.1f}MIN)".format(self.title, self.duration)

    def __repr__(self):
        return "Episode({!r}, {!r})".format(self.title, self.duration)

class Playlist(Ring):
    """
    Podcast episodes in a circular doubly-linked ring.

    `first` is the anchor (the episode shown first), `first.prev` is the last episode.
    `count` is kept by every mutation and never recomputed.
    """

    messages = Messages

    def is_empty(self) -> bool:
        return self.count == 0

    def size(self) -> int:
        return self.count

    def total_duration(self) -> float:
        return sum(e.duration for e in self.forward())

    def display_forward(self) -> str:
        if self.count == 0:
            return self.messages.EMPTY_PLAYLIST
        return "[BEGIN] " + " -> ".join(str(e) for e in self.forward()) + " [END]"

    def display_backward(self) -> str:
        if self.count == 0:
            return self.messages.EMPTY_PLAYLIST
        return "[END] " + " -> ".join(str(e) for e in self.backward()) + " [BEGIN]"

    def find(self, title: str) -> Episode:
        """
        Case-insensitive lookup, at most one pass around the ring. None if absent
        """
        p = self.first
        for _ in range(self.count):
            if p.matches(title):
                return p
            p = p.next
        return None

    def index_of(self, episode: Episode) -> int:
        for i, e in enumerate(self.forward()):
            if e is episode:
                return i
        return -1

    def add_first(self, title: str, duration: float) -> Episode:
        episode = Episode(title, duration, self.messages)
        self.prepend(episode)
        return episode

    def add_last(self, title: str, duration: float) -> Episode:
        if self.count == 0:
            return self.add_first(title, duration)
        episode = Episode(title, duration, self.messages)
        self.append(episode)
        return episode

    def insert_at(self, title: str, duration: float, index: int) -> Episode:
        """
        Inserts so the new episode ends up at position `index` in forward order.

        0 <= index <= size(). index == size() appends. index == 0 puts the episode
        in front of the anchor and makes it the new anchor, exactly like add_first.
        """
        if index < 0 or index > self.count:
            raise OutOfRange(self.messages.OUT_OF_RANGE.format(index, self.count))
        if index == self.count:
            return self.add_last(title, duration)
        if index == 0:
            return self.add_first(title, duration)
        episode = Episode(title, duration, self.messages)
        self.insert_before(self.item_at(index), episode)
        return episode

    def delete_first(self) -> Episode:
        if self.count == 0:
            raise EmptyCollection(self.messages.EMPTY_DELETE)
        return self.pop_first()

    def delete_last(self) -> Episode:
        if self.count == 0:
            raise EmptyCollection(self.messages.EMPTY_DELETE)
        return self.pop_last()

    def delete_by_title(self, title: str) -> Episode:
        """
        Removes the first episode whose title matches ignoring case.
        Returns None when nothing matches, the playlist is left untouched then.
        """
        episode = self.find(title)
        if episode is None:
            return None
        if episode is self.first:
            return self.delete_first()
        if episode is self.first.prev:
            return self.delete_last()
        episode.remove()
        return episode

    def eliminate_every_mth(self, m: int) -> Episode:
        """
        Josephus elimination: counting from the anchor, removes every m-th episode
        until one is left, counting restarts at the successor of each removed one.
        The survivor stays in the playlist as its anchor and is returned.
        """
        if m <= 0:
            raise InvalidArgument(self.messages.NOT_POSITIVE.format(m))
        if self.count == 0:
            raise EmptyCollection(self.messages.EMPTY_DELETE)
        current = self.first
        while self.count > 1:
            for _ in range((m - 1) % self.count):
                current = current.next
            successor = current.next
            self.remove(current)
            self.first = successor
            current = successor
        return self.first
