"""usagetable channel definitions for the log_lib output system.

Keeps log_lib itself application-agnostic: this module names the channels
usagetable emits on and installs them at startup.
"""

from usagetable.lib.log_lib import configure_channels


UT_CHANNELS = {
    'config',       # Settings files and their resolution
    'declaration',  # Loading option declaration files
    'layout',       # Table layout: formatters, hidden options, continuation rows
    'wrap',         # Per-line wrap and spill decisions
    'general',      # Default channel
    'hint',         # Contextual tips
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

UT_CHANNEL_DESCRIPTIONS = {
    'config':      'Settings files and their resolution',
    'declaration': 'Loading option declaration files',
    'layout':      'Table layout decisions',
    'wrap':        'Line wrap and column spill details',
    'general':     'General output',
    'hint':        'Contextual tips and suggestions',
    'error':       'Error messages',
    'trace':       'Function call tracing',
}

UT_OPT_IN_CHANNELS = {
    'trace',
}


def configure_ut_channels():
    """Install the usagetable channel set. Call once before init_output()."""
    configure_channels(UT_CHANNELS, UT_CHANNEL_DESCRIPTIONS, UT_OPT_IN_CHANNELS)
