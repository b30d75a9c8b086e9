# lsopts

`lsopts` parses the command-line arguments of a directory-listing tool and
turns some of them into checked, structured settings: what to do with
directories, how to render file names, when to use colour, and whether to
show the version.

## The argument parser

`lsopts.args.Args` parses a list of strings against a set of
`lsopts.parser.Arg` definitions. It understands:

- long options: `--inode`, `--grid`
- long options with values: `--sort size`, `--level=4`
- short options, alone or clustered: `-i`, `-lG`
- short options with values: `-ssize`, `-L=4`, `-L 4`
- a lone `-`, which is a free string
- `--`, after which every string is a free string

`lsopts.flags.ALL_ARGS` holds every argument the tool recognises, and each
one is also available on its own (`flags.LONG`, `flags.SORT`, `flags.LEVEL`,
and so on).

```python
from lsopts import flags
from lsopts.parser import Strictness

matches = flags.ALL_ARGS.parse(["-l", "--sort=size", "some_dir"],
                               Strictness.USE_LAST_ARGUMENTS)

matches.frees                     # ["some_dir"]
matches.flags.has(flags.LONG)     # True
matches.flags.get(flags.SORT)     # "size"
matches.flags.count(flags.ALL)    # 0
```

Input that cannot be parsed raises a `lsopts.parser.ParseError` subclass:
`NeedsValue`, `ForbiddenValue`, `UnknownShortArgument` or `UnknownArgument`.

## Later arguments win, unless strict

`MatchedFlags` answers `has`, `has_where`, `has_where_any`, `get`,
`get_where` and `count` queries. With `Strictness.USE_LAST_ARGUMENTS`, when
an option is given more than once the one nearest the end takes effect, so a
shell alias can set defaults that the command line overrides:
`--sort=Name --sort=size` gives `"size"`.

With `Strictness.COMPLAIN_ABOUT_REDUNDANT_ARGUMENTS`, giving an option twice
raises `lsopts.error.Duplicate`, and the deduction functions also report
conflicting or useless combinations. The caller picks the strictness; the
`lsopts.vars.EXA_STRICT` constant names the variable meant to switch it on,
but nothing in the package reads it by itself.

## Deducing settings

Each takes the `MatchedFlags` from a parse:

- `lsopts.dir_action.deduce_dir_action(matches, can_tree)` returns
  `DirAction.LIST`, `DirAction.AS_FILE`, or a `RecurseOptions` with `tree`
  and `max_depth` taken from `--recurse`, `--tree` and `--level`.
  `deduce_recurse_options(matches, tree)` reads `--level` alone.
- `lsopts.file_name.deduce_file_name_options(matches, vars)` returns a
  `FileNameOptions` built from `deduce_classify` (`--classify`) and
  `deduce_show_icons` (`--icons`, `--no-icons` and the `EXA_ICON_SPACING`
  variable, default spacing 1).
- `lsopts.theme.deduce_theme_options(matches, vars)` returns a
  `ThemeOptions` built from `deduce_use_colours` (`--color` / `--colour`:
  `always`, `auto`, `automatic`, `never`), `deduce_colour_scale`
  (`--color-scale` / `--colour-scale`) and `deduce_definitions` (the
  `LS_COLORS` and `EXA_COLORS` variables, skipped when colours are never used).
- `lsopts.version.deduce_version(matches)` returns a `VersionString` when
  `--version` was given, and `None` otherwise.

Functions that read the environment take a `Vars` object:
`lsopts.vars.EnvironmentVars()` reads the process environment, and
`MappingVars({...})` reads a plain dictionary, which is handy in tests.

```python
from lsopts.file_name import deduce_file_name_options
from lsopts.vars import MappingVars

matches = flags.ALL_ARGS.parse(["--icons"], Strictness.USE_LAST_ARGUMENTS)
deduce_file_name_options(matches.flags, MappingVars({"EXA_ICON_SPACING": "2"}))
# FileNameOptions(classify=Classify.JUST_FILENAMES, show_icons=ShowIcons(spacing=2))
```

## Errors

Invalid combinations raise subclasses of `lsopts.error.OptionsError`:
`BadArgument`, `Duplicate`, `Conflict`, `Useless`, `Useless2`, `TreeAllAll`,
`FailedParse`, `FailedGlobPattern`, `Unsupported`, and `ParseFailure`, which
wraps a `ParseError`. Their `str()` is a message for the user, and
`suggestion()` offers a hint for two common mistakes (`--time r`, and `-t`
with no value).

## What it does not do

The package stops at the pieces above. It has no single entry point that
turns a whole command line into a complete option set, no help text, and no
deduction of the view (grid, lines, details), of sorting and filtering, or of
the long-view columns and time formats. It lists no files and has no command
to run.