# test_models.py
#
# Tests:
# - Every kind maps to exactly one of stdout / stderr
# - Mapping is stable across lookups
# - Info/success/debug go to stdout; warning/error/fatal go to stderr
# - Stream.resolve follows the current sys.stdout / sys.stderr
# - Label.plain and Label.styled formats
# - Label rejects an unknown colour

import io
import sys

import pytest

from idioma.models import Label, MessageKind, Stream


# ---------------------------------------------------------------------------
# Kind-to-stream mapping
# ---------------------------------------------------------------------------

class TestKindMapping:
    @pytest.mark.parametrize("kind", list(MessageKind))
    def test_every_kind_has_one_stream(self, kind):
        assert kind.stream in (Stream.STDOUT, Stream.STDERR)

    @pytest.mark.parametrize("kind", list(MessageKind))
    def test_mapping_is_stable(self, kind):
        assert kind.stream is kind.stream
        assert MessageKind[kind.name].stream is kind.stream

    def test_stdout_kinds(self):
        for kind in (MessageKind.SUCCESS, MessageKind.INFO, MessageKind.DEBUG):
            assert kind.stream is Stream.STDOUT

    def test_stderr_kinds(self):
        for kind in (MessageKind.WARNING, MessageKind.ERROR, MessageKind.FATAL):
            assert kind.stream is Stream.STDERR

    def test_prefixes_are_distinct(self):
        prefixes = [kind.prefix for kind in MessageKind]
        assert len(set(prefixes)) == len(prefixes)

    def test_error_prefix(self):
        assert MessageKind.ERROR.prefix == "error"
        assert MessageKind.WARNING.prefix == "warning"


# ---------------------------------------------------------------------------
# Stream
# ---------------------------------------------------------------------------

class TestStream:
    def test_err_flag(self):
        assert Stream.STDERR.err
        assert not Stream.STDOUT.err

    def test_resolve_follows_redirection(self, monkeypatch):
        fake_out, fake_err = io.StringIO(), io.StringIO()
        monkeypatch.setattr(sys, "stdout", fake_out)
        monkeypatch.setattr(sys, "stderr", fake_err)
        assert Stream.STDOUT.resolve() is fake_out
        assert Stream.STDERR.resolve() is fake_err


# ---------------------------------------------------------------------------
# Label
# ---------------------------------------------------------------------------

class TestLabel:
    def test_plain(self):
        assert Label("lol", "cyan").plain() == "lol:"

    def test_styled_contains_ansi(self):
        styled = Label("lol", "cyan").styled()
        assert "lol" in styled
        assert "\x1b[" in styled

    def test_unknown_colour_rejected(self):
        with pytest.raises(TypeError):
            Label("lol", "not-a-colour")

    def test_default_stream_is_stdout(self):
        assert Label("note").stream is Stream.STDOUT
