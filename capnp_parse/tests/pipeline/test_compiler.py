"""
Tests for the schema compiler runner.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from capnp_parse.pipeline.compiler import SchemaCompiler
from capnp_parse.pipeline.config import ExtractorConfig
from capnp_parse.pipeline.errors import CompilerError


@pytest.fixture
def compiler():
    return SchemaCompiler(ExtractorConfig(compiler_path="/opt/capnp", compiler_timeout=3, import_paths=["/opt/include"]))


class TestSchemaCompiler:
    def test_build_command(self, compiler):
        cmd = compiler.build_command([Path("a.capnp"), Path("sub/b.capnp")])

        assert cmd == ["/opt/capnp", "compile", "-o", "-", "--import-path=/opt/include", "a.capnp", "sub/b.capnp"]

    def test_returns_stdout_bytes(self, compiler, monkeypatch):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return subprocess.CompletedProcess(cmd, 0, stdout=b"\x00\x01message", stderr=b"")

        monkeypatch.setattr(subprocess, "run", fake_run)

        assert compiler.compile([Path("a.capnp")]) == b"\x00\x01message"
        assert calls[0][1]["capture_output"] is True
        assert calls[0][1]["timeout"] == 3

    def test_no_files_is_an_error(self, compiler):
        with pytest.raises(CompilerError, match="No schema files"):
            compiler.compile([])

    def test_nonzero_exit_reports_stderr(self, compiler, monkeypatch):
        monkeypatch.setattr(
            subprocess,
            "run",
            lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1, stdout=b"", stderr=b"a.capnp:3:1: error: Parse error.\n"),
        )

        with pytest.raises(CompilerError, match="Parse error") as exc_info:
            compiler.compile([Path("a.capnp")])

        assert "status 1" in str(exc_info.value)

    def test_missing_binary(self, compiler, monkeypatch):
        def fake_run(cmd, **kwargs):
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(subprocess, "run", fake_run)

        with pytest.raises(CompilerError, match="not found: /opt/capnp"):
            compiler.compile([Path("a.capnp")])

    def test_timeout(self, compiler, monkeypatch):
        def fake_run(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(subprocess, "run", fake_run)

        with pytest.raises(CompilerError, match="timed out"):
            compiler.compile([Path("a.capnp")])
