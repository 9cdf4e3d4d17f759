import logging

import click

from .cli_utils import reconstruct_command_line
from .errors import GenerationError
from .pipeline import FilterConfig, PipelineGenerator, load_document_file


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True), help="Filter specification (JSON or YAML)")
@click.option("--language", "-l", default="rust", type=click.Choice(["rust", "python"]))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log the filtering and ordering decisions")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def openapi_slim_types(config, language, verbose, path, output):
    """Generate type declarations for the schemas of PATH selected by the filter into OUTPUT."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        document = load_document_file(path)
        filter_config = FilterConfig.from_file(config) if config is not None else FilterConfig()

        codegen = PipelineGenerator(document, filter_config, language, command_line=reconstruct_command_line(openapi_slim_types))
        codegen.write(output)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e
