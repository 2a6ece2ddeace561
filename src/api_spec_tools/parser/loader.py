"""Load an OpenAPI document from a YAML or JSON file."""

import json
import logging
from pathlib import Path

import yaml

from api_spec_tools.errors import DocumentError

logger = logging.getLogger(__name__)


def load_document(file_path: Path) -> dict:
    """Read a YAML/JSON file into a plain mapping.

    ``$ref`` entries are left as they are.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentError(f"Cannot read {file_path}: {e}") from e

    data = parse_text(text, file_path)
    if not isinstance(data, dict):
        raise DocumentError(f"{file_path} does not contain a mapping at the top level")

    if "openapi" not in data and "swagger" not in data:
        logger.warning("%s has no 'openapi' or 'swagger' field, reading it anyway", file_path)
    else:
        logger.debug("Loaded %s (version %s)", file_path, data.get("openapi") or data.get("swagger"))
    return data


def parse_text(text: str, file_path: Path):
    """Parse YAML, or JSON that YAML rejects. Raises DocumentError."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as yaml_error:
        # Some JSON (tabs for indentation) is not valid YAML
        try:
            return json.loads(text)
        except ValueError:
            raise DocumentError(f"Cannot parse {file_path}: {yaml_error}") from yaml_error
