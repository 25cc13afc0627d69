"""
Tests for usagetable.lib.log_lib - verbosity system with named channels.

Tests the verbosity axis, per-channel overrides, opt-in channels,
channel_active gating, channel spec parsing, channel configuration and
format_channel_list.

Complements test_output.py which tests core OutputManager emit/hint/trace.
"""

import io
import pytest

from usagetable.channels import UT_CHANNELS, UT_OPT_IN_CHANNELS, configure_ut_channels
from usagetable.lib.log_lib import (
    OutputManager,
    init_output,
)
from usagetable.lib.log_lib import channels as _channels_mod
from usagetable.lib.log_lib.channels import (
    parse_channel_spec,
    format_channel_list,
    configure_channels,
)
from usagetable.lib.log_lib.levels import (
    DEBUG, LAYOUT, INFO, NORMAL, MINIMAL, WARNING, ERROR, SILENT,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def out(buf):
    """An OutputManager writing to a buffer (verbosity=0)."""
    return OutputManager(verbosity=0, file=buf)


# =============================================================================
# Level Constants
# =============================================================================

class TestLevelConstants:
    """Verify level constants have correct values."""

    def test_level_ordering(self):
        """Levels are ordered: SILENT < ERROR < WARNING < MINIMAL < NORMAL < INFO < LAYOUT < DEBUG."""
        assert SILENT < ERROR < WARNING < MINIMAL < NORMAL < INFO < LAYOUT < DEBUG

    def test_specific_values(self):
        """Spot check key values."""
        assert NORMAL == 0
        assert SILENT == -4
        assert ERROR == -3
        assert LAYOUT == 2
        assert DEBUG == 3


# =============================================================================
# Emit - Per-Channel Overrides
# =============================================================================

class TestPerChannelOverrides:
    """Test per-channel threshold overrides."""

    def test_channel_override_shows_message(self, buf):
        """Message shown when channel override threshold >= level."""
        out = OutputManager(verbosity=0, channel_overrides={'layout': 2}, file=buf)
        out.emit(2, "layout detail", channel='layout')
        assert "layout detail" in buf.getvalue()

    def test_channel_override_hides_message(self, buf):
        """Message hidden when channel override threshold < level."""
        out = OutputManager(verbosity=2, channel_overrides={'layout': 0}, file=buf)
        out.emit(1, "hidden layout", channel='layout')
        assert buf.getvalue() == ""

    def test_global_threshold_used_when_no_override(self, buf):
        """Global verbosity used for channels without override."""
        out = OutputManager(verbosity=1, channel_overrides={'layout': 2}, file=buf)
        out.emit(1, "general msg", channel='general')
        assert "general msg" in buf.getvalue()

    def test_channel_override_beats_global_hard_wall(self, buf):
        """A channel override applies even when the global level is -4."""
        out = OutputManager(verbosity=-4, channel_overrides={'wrap': 3}, file=buf)
        out.emit(3, "should show", channel='wrap')
        assert "should show" in buf.getvalue()

    def test_hard_wall_on_channel(self, buf):
        """Channel set to -4 (hard wall) silences it."""
        out = OutputManager(verbosity=2, channel_overrides={'error': -4}, file=buf)
        out.error("even errors")
        assert buf.getvalue() == ""


# =============================================================================
# Composition (verbose - quiet)
# =============================================================================

class TestVerbosityComposition:
    """Test verbose/quiet composition."""

    def test_vv_Q_gives_1(self, buf):
        """-vv -Q = verbosity 1."""
        out = OutputManager(verbosity=1, file=buf)  # 2 - 1 = 1
        out.emit(1, "level 1 visible")
        out.emit(2, "level 2 hidden")
        assert "level 1 visible" in buf.getvalue()
        assert "level 2 hidden" not in buf.getvalue()

    def test_negative_verbosity_hides_level_0(self, buf):
        out = OutputManager(verbosity=-1, file=buf)
        out.emit(0, "hidden")
        assert buf.getvalue() == ""

    def test_negative_verbosity_shows_errors(self, buf):
        out = OutputManager(verbosity=-1, file=buf)
        out.error("visible error")
        assert "visible error" in buf.getvalue()

    def test_hard_wall_blocks_everything(self, buf):
        out = OutputManager(verbosity=-4, file=buf)
        out.error("blocked error")
        assert buf.getvalue() == ""


# =============================================================================
# Channel Active
# =============================================================================

class TestChannelActive:
    """Test channel_active() gating."""

    def test_default_channel_active_at_v0(self, out):
        assert out.channel_active('general') is True

    def test_opt_in_channel_inactive_by_default(self):
        mgr = init_output(verbosity=0)
        assert mgr.channel_active('trace') is False

    def test_opt_in_channel_active_when_enabled(self):
        mgr = init_output(verbosity=0, channels=['trace'])
        assert mgr.channel_active('trace') is True

    def test_channel_active_false_at_negative(self, buf):
        out = OutputManager(verbosity=-1, file=buf)
        assert out.channel_active('general') is False

    def test_channel_active_with_override(self, buf):
        out = OutputManager(verbosity=-1, channel_overrides={'config': 1}, file=buf)
        assert out.channel_active('config') is True
        assert out.channel_active('general') is False

    def test_channel_active_hard_wall(self, buf):
        out = OutputManager(verbosity=0, channel_overrides={'config': -4}, file=buf)
        assert out.channel_active('config') is False


# =============================================================================
# Channel Spec Parsing
# =============================================================================

class TestParseChannelSpec:
    """Test parse_channel_spec()."""

    def test_name_only(self):
        """Bare channel name gets default level 0."""
        cfg = parse_channel_spec("layout")
        assert cfg.name == "layout"
        assert cfg.level == 0

    def test_name_and_level(self):
        cfg = parse_channel_spec("wrap:3")
        assert cfg.name == "wrap"
        assert cfg.level == 3

    def test_negative_level(self):
        cfg = parse_channel_spec("error:-3")
        assert cfg.level == -3

    def test_empty_level_uses_default(self):
        """Empty level slot uses default 0."""
        cfg = parse_channel_spec("config::file")
        assert cfg.level == 0
        assert cfg.destination == "file"

    def test_full_spec(self):
        """All 5 positions parse correctly."""
        cfg = parse_channel_spec("layout:2:file:/tmp/out.log:json")
        assert cfg.name == "layout"
        assert cfg.level == 2
        assert cfg.destination == "file"
        assert cfg.location == "/tmp/out.log"
        assert cfg.format == "json"

    def test_windows_drive_letter(self):
        """Windows drive letter in location is rejoined."""
        cfg = parse_channel_spec("layout:2:file:C:\\logs\\out.log")
        assert cfg.location == "C:\\logs\\out.log"

    def test_non_integer_level(self):
        with pytest.raises(ValueError):
            parse_channel_spec("layout:loud")


# =============================================================================
# Channel Configuration
# =============================================================================

class TestChannelConfiguration:
    """Test configure_channels() and the usagetable channel set."""

    def test_configure_replaces_channel_set(self):
        configure_channels({'a', 'b'}, {'a': 'Alpha', 'b': 'Beta'}, {'b'})
        assert _channels_mod.KNOWN_CHANNELS == {'a', 'b'}
        listing = format_channel_list()
        assert "Alpha" in listing
        assert "b  Beta (opt-in)" in listing

    def test_opt_in_read_at_init(self):
        """init_output uses the opt-in set installed by configure_channels."""
        configure_channels({'a', 'b'}, {}, {'b'})
        mgr = init_output()
        assert mgr.channel_overrides == {'b': -1}

    def test_usagetable_channels(self):
        configure_ut_channels()
        assert _channels_mod.KNOWN_CHANNELS == UT_CHANNELS
        assert _channels_mod.OPT_IN_CHANNELS == UT_OPT_IN_CHANNELS

    def test_all_channels_have_descriptions(self):
        configure_ut_channels()
        for ch in _channels_mod.KNOWN_CHANNELS:
            assert ch in _channels_mod.CHANNEL_DESCRIPTIONS, f"Missing description for '{ch}'"

    def test_opt_in_subset_of_known(self):
        assert UT_OPT_IN_CHANNELS <= UT_CHANNELS

    def test_format_channel_list_includes_all(self):
        configure_ut_channels()
        listing = format_channel_list()
        for ch in UT_CHANNELS:
            assert ch in listing


# =============================================================================
# Init Output with Channels
# =============================================================================

class TestInitOutputChannels:
    """Test init_output with channel specs."""

    def test_channels_parsed_into_overrides(self):
        mgr = init_output(verbosity=0, channels=['layout:2', 'wrap:1'])
        assert mgr.channel_overrides.get('layout') == 2
        assert mgr.channel_overrides.get('wrap') == 1

    def test_opt_in_defaults_applied(self):
        """Opt-in channels get default -1 override."""
        mgr = init_output(verbosity=0)
        assert mgr.channel_overrides.get('trace') == -1

    def test_explicit_overrides_win(self):
        """Explicit --show overrides opt-in default."""
        mgr = init_output(verbosity=0, channels=['trace:3'])
        assert mgr.channel_overrides.get('trace') == 3

    def test_file_defaults_to_stderr(self, capsys):
        mgr = init_output()
        mgr.emit(0, "to stderr")
        assert capsys.readouterr().err == "to stderr\n"
