"""Every argument the program recognises."""

from __future__ import annotations

from .args import Args
from .parser import Arg, TakesValue

_FORBIDDEN = TakesValue.FORBIDDEN
_NECESSARY = TakesValue.NECESSARY

COLOURS = ("always", "auto", "never")
SORTS = (
    "name", "Name", "size", "extension",
    "Extension", "modified", "changed", "accessed",
    "created", "inode", "type", "none",
)
TIMES = ("modified", "changed", "accessed", "created")
TIME_STYLES = ("default", "long-iso", "full-iso", "iso")

# meta options
VERSION = Arg("v", "version", _FORBIDDEN)
HELP = Arg("?", "help", _FORBIDDEN)

# display options
ONE_LINE = Arg("1", "oneline", _FORBIDDEN)
LONG = Arg("l", "long", _FORBIDDEN)
GRID = Arg("G", "grid", _FORBIDDEN)
ACROSS = Arg("x", "across", _FORBIDDEN)
RECURSE = Arg("R", "recurse", _FORBIDDEN)
TREE = Arg("T", "tree", _FORBIDDEN)
CLASSIFY = Arg("F", "classify", _FORBIDDEN)

COLOR = Arg(None, "color", _NECESSARY, COLOURS)
COLOUR = Arg(None, "colour", _NECESSARY, COLOURS)

COLOR_SCALE = Arg(None, "color-scale", _FORBIDDEN)
COLOUR_SCALE = Arg(None, "colour-scale", _FORBIDDEN)

# filtering and sorting options
ALL = Arg("a", "all", _FORBIDDEN)
LIST_DIRS = Arg("d", "list-dirs", _FORBIDDEN)
LEVEL = Arg("L", "level", _NECESSARY)
REVERSE = Arg("r", "reverse", _FORBIDDEN)
SORT = Arg("s", "sort", _NECESSARY, SORTS)
IGNORE_GLOB = Arg("I", "ignore-glob", _NECESSARY)
GIT_IGNORE = Arg(None, "git-ignore", _FORBIDDEN)
DIRS_FIRST = Arg(None, "group-directories-first", _FORBIDDEN)
ONLY_DIRS = Arg("D", "only-dirs", _FORBIDDEN)

# long view options
BINARY = Arg("b", "binary", _FORBIDDEN)
BYTES = Arg("B", "bytes", _FORBIDDEN)
GROUP = Arg("g", "group", _FORBIDDEN)
NUMERIC = Arg("n", "numeric", _FORBIDDEN)
HEADER = Arg("h", "header", _FORBIDDEN)
ICONS = Arg(None, "icons", _FORBIDDEN)
INODE = Arg("i", "inode", _FORBIDDEN)
LINKS = Arg("H", "links", _FORBIDDEN)
MODIFIED = Arg("m", "modified", _FORBIDDEN)
CHANGED = Arg(None, "changed", _FORBIDDEN)
BLOCKS = Arg("S", "blocks", _FORBIDDEN)
TIME = Arg("t", "time", _NECESSARY, TIMES)
ACCESSED = Arg("u", "accessed", _FORBIDDEN)
CREATED = Arg("U", "created", _FORBIDDEN)
TIME_STYLE = Arg(None, "time-style", _NECESSARY, TIME_STYLES)

# suppressing columns
NO_PERMISSIONS = Arg(None, "no-permissions", _FORBIDDEN)
NO_FILESIZE = Arg(None, "no-filesize", _FORBIDDEN)
NO_USER = Arg(None, "no-user", _FORBIDDEN)
NO_TIME = Arg(None, "no-time", _FORBIDDEN)
NO_ICONS = Arg(None, "no-icons", _FORBIDDEN)

# optional feature options
GIT = Arg(None, "git", _FORBIDDEN)
EXTENDED = Arg("@", "extended", _FORBIDDEN)
OCTAL = Arg(None, "octal-permissions", _FORBIDDEN)


ALL_ARGS = Args((
    VERSION, HELP,

    ONE_LINE, LONG, GRID, ACROSS, RECURSE, TREE, CLASSIFY,
    COLOR, COLOUR, COLOR_SCALE, COLOUR_SCALE,

    ALL, LIST_DIRS, LEVEL, REVERSE, SORT, DIRS_FIRST,
    IGNORE_GLOB, GIT_IGNORE, ONLY_DIRS,

    BINARY, BYTES, GROUP, NUMERIC, HEADER, ICONS, INODE, LINKS, MODIFIED, CHANGED,
    BLOCKS, TIME, ACCESSED, CREATED, TIME_STYLE,
    NO_PERMISSIONS, NO_FILESIZE, NO_USER, NO_TIME, NO_ICONS,

    GIT, EXTENDED, OCTAL,
))