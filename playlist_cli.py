# This code is under MIT licence, you can find the complete file here: https://github.com/ivanovrvl/pg_tasks/blob/main/LICENSE
import sys
import shlex
from config import get_config, get_messages
from py_playlist.playlist import Playlist, PlaylistError

class AttrDict(dict):
    def __transform__(value):
        if isinstance(value, AttrDict):
            return value
        if isinstance(value, dict):
            return AttrDict(value)
        return value
    def __init__(self, *args, **kwargs):
        super(AttrDict, self).__init__(*args, **kwargs)
        self.__dict__ = self
    def __setitem__(self, name, value):
        dict.__setitem__(self, name, AttrDict.__transform__(value))

class TracedPlaylist(Playlist):
    """
    Playlist reporting every removed episode through its shell
    """

    def __init__(self, shell):
        super().__init__()
        self.shell = shell
        self.messages = shell.messages

    def removed(self, item):
        if self.shell.config.debug:
            self.shell.info(self.messages.REMOVED.format(item))

class PlaylistShell:
    """
    Line oriented front end for a Playlist.
    execute() returns the text to show, run() feeds it lines from a script or stdin.
    """

    def __init__(self, config: AttrDict = None):
        if config is None:
            config = AttrDict(get_config())
        self.config = config
        self.messages = get_messages(config.language)
        self.playlist = TracedPlaylist(self)
        self.commands = {
            "addfirst": self.cmd_add_first,
            "addlast": self.cmd_add_last,
            "insert": self.cmd_insert,
            "deletefirst": self.cmd_delete_first,
            "deletelast": self.cmd_delete_last,
            "delete": self.cmd_delete,
            "eliminate": self.cmd_eliminate,
            "forward": self.cmd_forward,
            "backward": self.cmd_backward,
            "size": self.cmd_size,
            "total": self.cmd_total,
            "find": self.cmd_find,
            "next": self.cmd_next,
            "prev": self.cmd_prev,
            "clear": self.cmd_clear,
            "help": self.cmd_help,
        }

    def info(self, msg: str):
        if msg is not None:
            print(msg)

    def error(self, msg: str):
        if msg is not None:
            print('ERROR', msg)

    def cmd_add_first(self, title, duration):
        return self.messages.ADDED.format(self.playlist.add_first(title, float(duration)))

    def cmd_add_last(self, title, duration):
        return self.messages.ADDED.format(self.playlist.add_last(title, float(duration)))

    def cmd_insert(self, title, duration, index):
        return self.messages.ADDED.format(self.playlist.insert_at(title, float(duration), int(index)))

    def cmd_delete_first(self):
        return self.messages.REMOVED.format(self.playlist.delete_first())

    def cmd_delete_last(self):
        return self.messages.REMOVED.format(self.playlist.delete_last())

    def cmd_delete(self, title):
        episode = self.playlist.delete_by_title(title)
        if episode is None:
            return self.messages.NOT_FOUND.format(title)
        return self.messages.REMOVED.format(episode)

    def cmd_eliminate(self, m):
        return self.messages.SURVIVOR.format(self.playlist.eliminate_every_mth(int(m)))

    def cmd_forward(self):
        return self.playlist.display_forward()

    def cmd_backward(self):
        return self.playlist.display_backward()

    def cmd_size(self):
        return self.messages.SIZE.format(self.playlist.size())

    def cmd_total(self):
        return self.messages.TOTAL.format(self.playlist.total_duration())

    def cmd_find(self, title):
        episode = self.playlist.find(title)
        if episode is None:
            return self.messages.NOT_FOUND.format(title)
        return self.messages.FOUND.format(episode, self.playlist.index_of(episode))

    def cmd_next(self, title):
        episode = self.playlist.find(title)
        if episode is None:
            return self.messages.NOT_FOUND.format(title)
        return self.messages.NEXT.format(episode, episode.get_next())

    def cmd_prev(self, title):
        episode = self.playlist.find(title)
        if episode is None:
            return self.messages.NOT_FOUND.format(title)
        return self.messages.PREV.format(episode, episode.get_prev())

    def cmd_clear(self):
        self.playlist.clear()
        return self.messages.CLEARED

    def cmd_help(self):
        return self.messages.HELP

    def execute(self, line: str) -> str:
        line = line.strip()
        if not line or line.startswith('#'):
            return None
        try:
            args = shlex.split(line)
        except ValueError as e:
            raise PlaylistError(self.messages.BAD_ARGUMENTS.format(line, e)) from e
        name = args[0].lower()
        cmd = self.commands.get(name)
        if cmd is None:
            raise PlaylistError(self.messages.UNKNOWN_COMMAND.format(name))
        try:
            return cmd(*args[1:])
        except PlaylistError:
            raise
        except (TypeError, ValueError) as e:
            raise PlaylistError(self.messages.BAD_ARGUMENTS.format(name, ' '.join(args[1:]))) from e

    def run(self, lines):
        for line in lines:
            try:
                self.info(self.execute(line))
            except PlaylistError as e:
                if self.config.debug: raise e
                self.error(e)

def run():
    shell = PlaylistShell()
    if shell.config.script is None:
        shell.run(sys.stdin)
    else:
        with open(shell.config.script, 'r') as f:
            shell.run(f)

if __name__ == '__main__':

    run()
