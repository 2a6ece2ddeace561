"""CLI entry point for api-spec-tools."""

import json
from fnmatch import fnmatch
from pathlib import Path

import click

from api_spec_tools.assistant import MAX_TOOL_ROUNDS, ApiAssistant
from api_spec_tools.errors import ApiSpecToolsError
from api_spec_tools.logging_config import DEFAULT_LOG_LEVEL, configure_logging
from api_spec_tools.parser.auth import detect_auth
from api_spec_tools.parser.base import CONTRACTS, EndpointInfo, json_schema, validate_output
from api_spec_tools.parser.loader import load_document, parse_text
from api_spec_tools.parser.swagger import get_endpoint_by_id, list_endpoints

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _load(doc_path: Path) -> dict:
    try:
        return load_document(doc_path)
    except ApiSpecToolsError as e:
        raise click.ClickException(str(e)) from e


def _echo_json(ctx: click.Context, data) -> None:
    click.echo(json.dumps(data, indent=ctx.obj["indent"], ensure_ascii=False))


def _filter_endpoints(endpoints: list[EndpointInfo], filters: tuple[str, ...]) -> list[EndpointInfo]:
    """Keep endpoints matching any "METHOD /path" or "/path" glob pattern."""
    if not filters:
        return endpoints

    result = []
    for ep in endpoints:
        for pattern in filters:
            method, _, path_pattern = pattern.strip().rpartition(" ")
            if method and method.upper() != ep.method:
                continue
            if fnmatch(ep.path, path_pattern):
                result.append(ep)
                break
    return result


@click.group()
@click.option("--log-level", default=DEFAULT_LOG_LEVEL, envvar="API_SPEC_TOOLS_LOG_LEVEL", type=click.Choice(LOG_LEVELS, case_sensitive=False), help="Logging level (logs go to stderr).")
@click.option("--indent", default=2, type=int, help="Indentation of JSON output.")
@click.pass_context
def main(ctx: click.Context, log_level: str, indent: int):
    """API Spec Tools: auth, endpoint index and endpoint details from OpenAPI documents."""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["indent"] = indent


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def auth(ctx: click.Context, doc_path: Path):
    """Show authentication schemes and global security requirements."""
    document = _load(doc_path)
    _echo_json(ctx, detect_auth(document).to_dict())


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-f", "--filter", "filters", multiple=True, help='Only endpoints matching "METHOD /path" or a "/path/*" glob. Repeatable.')
@click.pass_context
def endpoints(ctx: click.Context, doc_path: Path, filters: tuple[str, ...]):
    """List all endpoints with their identifiers."""
    document = _load(doc_path)
    result = _filter_endpoints(list_endpoints(document), filters)
    _echo_json(ctx, [ep.to_dict() for ep in result])


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("endpoint_id")
@click.pass_context
def endpoint(ctx: click.Context, doc_path: Path, endpoint_id: str):
    """Show full details of one endpoint, e.g. GET__pet__petId."""
    document = _load(doc_path)
    details = get_endpoint_by_id(document, endpoint_id)
    if details is None:
        raise click.ClickException(f"No endpoint with id '{endpoint_id}'")
    _echo_json(ctx, details.to_dict())


@main.command()
@click.argument("kind", type=click.Choice(list(CONTRACTS)))
@click.pass_context
def schema(ctx: click.Context, kind: str):
    """Print the JSON Schema of an output contract."""
    _echo_json(ctx, json_schema(kind))


@main.command()
@click.argument("kind", type=click.Choice(list(CONTRACTS)))
@click.argument("data_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(kind: str, data_path: Path):
    """Check a JSON/YAML file against an output contract."""
    data = _load_data(data_path)
    try:
        validate_output(kind, data)
    except ApiSpecToolsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{data_path} is a valid {kind}")


def _load_data(data_path: Path):
    try:
        return parse_text(data_path.read_text(encoding="utf-8"), data_path)
    except OSError as e:
        raise click.ClickException(f"Cannot read {data_path}: {e}") from e
    except ApiSpecToolsError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("question")
@click.option("--model", default=None, envvar="API_SPEC_TOOLS_MODEL", help="LLM model to use.")
@click.option("--max-rounds", default=MAX_TOOL_ROUNDS, type=int, help="Maximum tool-calling rounds.")
def ask(doc_path: Path, question: str, model: str | None, max_rounds: int):
    """Answer a question about the API with an LLM that calls the tools."""
    document = _load(doc_path)
    assistant = ApiAssistant(document, model=model, max_rounds=max_rounds)
    try:
        answer = assistant.ask(question)
    except ApiSpecToolsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(answer)
