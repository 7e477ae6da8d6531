#!/usr/bin/env python3

import click
import pytest
from click.testing import CliRunner

from capnp_parse.capnp_parse import capnp_parse
from capnp_parse.cli_utils import reconstruct_command_line


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        result = reconstruct_command_line(capnp_parse)
        assert result == "capnp_parse"

    def test_reconstruct_command_line_with_context(self):
        """Test that options, repeated options and flags are rebuilt"""

        @click.command()
        @click.option("--glob", "-g", default=None)
        @click.option("--exclude", "-e", multiple=True)
        @click.option("--verbose", "-v", is_flag=True, default=False)
        @click.option("--no-overwrite", is_flag=True, default=False)
        def command(glob, exclude, verbose, no_overwrite):
            click.echo(reconstruct_command_line(command))

        result = CliRunner().invoke(command, ["-g", "s/*.capnp", "-e", "a.capnp", "-e", "b.capnp", "-v"])

        assert result.exit_code == 0
        assert result.output.strip() == "capnp_parse --glob s/*.capnp --exclude a.capnp --exclude b.capnp --verbose"


if __name__ == "__main__":
    pytest.main([__file__])
