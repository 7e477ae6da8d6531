import json

import click

from .cli_utils import configure_logging, reconstruct_command_line
from .pipeline import ExtractionError, ExtractorConfig, OutputFormat, OutputMode, PipelineExtractor


def build_config(config_path, glob, output, exclude, compiler, import_path, output_format, no_overwrite) -> ExtractorConfig:
    """Load the config file (if any) and apply command line overrides."""
    if config_path is not None:
        with open(config_path) as f:
            config = ExtractorConfig.from_dict(json.load(f))
    else:
        config = ExtractorConfig()

    if glob is not None:
        config.glob = glob
    if output is not None:
        config.output.path = output
    if exclude:
        config.excludes = list(exclude)
    if compiler is not None:
        config.compiler_path = compiler
    if import_path:
        config.import_paths = list(import_path)
    if output_format is not None:
        config.output.format = OutputFormat(output_format)
    if no_overwrite:
        config.output.mode = OutputMode.ERROR_IF_EXISTS
    return config


@click.command()
@click.option("--glob", "-g", default=None, type=str, help="Glob scoped to .capnp schemas [default: ./**/*.capnp]")
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True), help="Filepath for the output document [default: ./output.json]")
@click.option("--exclude", "-e", multiple=True, type=str, help="File name to exclude (repeatable)")
@click.option("--config", "-c", "config_path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--compiler", default=None, type=str, help="Schema compiler binary [default: /usr/local/bin/capnp]")
@click.option("--import-path", "-I", multiple=True, type=str, help="Extra import directory (repeatable)")
@click.option("--format", "-f", "output_format", default=None, type=click.Choice([f.value for f in OutputFormat]))
@click.option("--no-overwrite", is_flag=True, default=False, help="Fail instead of replacing an existing output file")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every node and member")
def capnp_parse(glob, output, exclude, config_path, compiler, import_path, output_format, no_overwrite, verbose):
    """Extract fields, enumerants, methods and annotations from Cap'n Proto schemas."""
    configure_logging(verbose)

    try:
        config = build_config(config_path, glob, output, exclude, compiler, import_path, output_format, no_overwrite)
    except ValueError as e:
        raise click.ClickException(f"Invalid config file: {e}") from e
    extractor = PipelineExtractor(config)

    try:
        path = extractor.run(command_line=reconstruct_command_line(capnp_parse))
    except (ExtractionError, OSError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(str(path))
