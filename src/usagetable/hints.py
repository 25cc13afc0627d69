"""usagetable hints for the log_lib output system.

Hints are tips written to stderr after a command, at most once per session.
Import this module to register them.
"""

from usagetable.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='render.two_up',
        message='  Tip: --layout two-up fits twice as many short options per screen.',
        context={'result'},
        min_level=1,
        category='render',
    ),
    Hint(
        id='render.hidden',
        message='  Note: {count} hidden option(s) were left out of the table.',
        context={'verbose'},
        min_level=1,
        category='render',
    ),
    Hint(
        id='config.remember',
        message=('  Tip: settings saved in .usagetable.json are picked up by '
                 'every later render in this directory.'),
        context={'result'},
        min_level=1,
        category='config',
    ),
    Hint(
        id='table.column_spec',
        message=('  Column spec syntax: WIDTH[:INDENT[:OVERFLOW]], comma separated; '
                 'OVERFLOW is wrap, span or truncate.'),
        context={'error'},
        min_level=0,
        category='table',
    ),
)
