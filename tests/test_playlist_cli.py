import pytest

from config import Messages, Messages_rus
from playlist_cli import AttrDict, PlaylistShell
from py_playlist.playlist import PlaylistError


def make_shell(debug=False, language="eng"):
    return PlaylistShell(AttrDict({"debug": debug, "language": language, "script": None}))


def test_commands_build_and_show_playlist():
    shell = make_shell()
    assert shell.execute("addlast PlanetMoney 26") == "Added (PlanetMoney|26.0MIN)"
    shell.execute("addlast HowIBuiltThis 10")
    shell.execute("addfirst 'Radio Lab' 25.5")
    assert shell.execute("forward") == \
        "[BEGIN] (Radio Lab|25.5MIN) -> (PlanetMoney|26.0MIN) -> (HowIBuiltThis|10.0MIN) [END]"
    assert shell.execute("backward") == \
        "[END] (HowIBuiltThis|10.0MIN) -> (PlanetMoney|26.0MIN) -> (Radio Lab|25.5MIN) [BEGIN]"
    assert shell.execute("size") == "Size: 3"
    assert shell.execute("total") == "Total: 61.5MIN"
    assert shell.execute("find planetmoney") == "Found (PlanetMoney|26.0MIN) at 1"


def test_delete_commands():
    shell = make_shell()
    for name in ("A", "B", "C", "D"):
        shell.execute("addlast %s 1" % name)
    assert shell.execute("deletefirst") == "Removed (A|1.0MIN)"
    assert shell.execute("deletelast") == "Removed (D|1.0MIN)"
    assert shell.execute("delete b") == "Removed (B|1.0MIN)"
    assert shell.execute("delete nope") == Messages.NOT_FOUND.format("nope")
    assert shell.execute("size") == "Size: 1"


def test_eliminate_and_insert_commands():
    shell = make_shell()
    for name in ("1", "2", "4", "5"):
        shell.execute("addlast %s 1" % name)
    shell.execute("insert 3 1 2")
    assert shell.execute("eliminate 2") == "Survivor (3|1.0MIN)"


def test_next_and_prev_navigate_around_the_ring():
    shell = make_shell()
    for name in ("A", "B", "C"):
        shell.execute("addlast %s 1" % name)
    assert shell.execute("next c") == "After (C|1.0MIN) comes (A|1.0MIN)"
    assert shell.execute("prev a") == "Before (A|1.0MIN) comes (C|1.0MIN)"
    assert shell.execute("next b") == "After (B|1.0MIN) comes (C|1.0MIN)"
    assert shell.execute("prev x") == Messages.NOT_FOUND.format("x")


def test_blank_and_comment_lines_are_ignored():
    shell = make_shell()
    assert shell.execute("") is None
    assert shell.execute("   # a comment") is None


@pytest.mark.parametrize("line", ["bogus", "addlast OnlyTitle", "addlast A notanumber",
                                  "insert A 1 5", "deletefirst", "eliminate 0", "addlast 'A 1"])
def test_bad_commands_raise_playlist_error(line):
    shell = make_shell()
    with pytest.raises(PlaylistError):
        shell.execute(line)
    shell.playlist.check()


def test_run_prints_output_and_errors(capsys):
    shell = make_shell()
    shell.run(["addlast A 1", "deletelast", "deletelast", "forward"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Added (A|1.0MIN)",
        "Removed (A|1.0MIN)",
        "ERROR " + Messages.EMPTY_DELETE,
        Messages.EMPTY_PLAYLIST,
    ]


def test_run_reraises_in_debug_mode():
    shell = make_shell(debug=True)
    with pytest.raises(PlaylistError):
        shell.run(["deletefirst"])


def test_debug_mode_traces_removals(capsys):
    shell = make_shell(debug=True)
    shell.run(["addlast A 1", "addlast B 1", "addlast C 1", "eliminate 1"])
    out = capsys.readouterr().out.splitlines()
    assert out[-3:] == ["Removed (A|1.0MIN)", "Removed (B|1.0MIN)", "Survivor (C|1.0MIN)"]


def test_russian_messages():
    shell = make_shell(language="rus")
    assert shell.execute("forward") == Messages_rus.EMPTY_PLAYLIST
    assert shell.execute("size") == Messages_rus.SIZE.format(0)
