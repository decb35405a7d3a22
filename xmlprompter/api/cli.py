"""
Command-line adapter for XMLPrompter.

Architectural role:
- Exposes rendering, validation and the enrichment instruction table to the
  terminal, and starts the HTTP server.
- Delegates all prompt logic to `xmlprompter.prompting`.

Commands:
- `models`: list the model registry.
- `render`: render form fields for one model and print the prompt.
- `validate`: validate form fields for one model; exit status 1 when invalid.
- `instruction`: print the enrichment instruction nearest to a level.
- `serve`: run the FastAPI app under uvicorn.

Input behavior:
- Form fields come from `--input <file.json>` and/or individual flags; flags
  override values read from the file.
- An unknown model on `render` is reported through `argparse` errors
  (exit status 2).

Response formatting:
- `--json` prints the camelCase result dicts used by the HTTP adapter.
- Otherwise plain text is printed for operator use.
"""

from dotenv import load_dotenv

load_dotenv()

import argparse
import json
import sys

from xmlprompter.api.http_api import ServerConfig, run
from xmlprompter.prompting.enrichment_levels import (
    DEFAULT_ENRICHMENT_LEVEL,
    generate_enrichment_instruction,
)
from xmlprompter.prompting.generator import ConfigurationError, generate_prompt
from xmlprompter.prompting.model_registry import DEFAULT_MODEL, list_models
from xmlprompter.prompting.prompt_types import FormData
from xmlprompter.prompting.validator import validate_prompt


FORM_FIELDS = ("role", "task", "context", "requirements", "style", "output")


# =========================================================
# INPUT
# =========================================================

def _add_form_arguments(parser):
    parser.add_argument("--model", default=DEFAULT_MODEL, help="Model id from `models`")
    parser.add_argument("--input", default=None, help="JSON file with form fields")
    for name in FORM_FIELDS:
        parser.add_argument(f"--{name}", default=None)
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")


def load_form_data(args) -> FormData:
    """Merge `--input` JSON with individual field flags."""
    values = {}
    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"{args.input} must contain a JSON object")
        values.update(loaded)

    for name in FORM_FIELDS:
        value = getattr(args, name)
        if value is not None:
            values[name] = value

    return FormData.from_mapping(values)


def _print_json(data):
    print(json.dumps(data, indent=2, ensure_ascii=False))


# =========================================================
# COMMANDS
# =========================================================

def cmd_models(args, parser):
    models = list_models()
    if args.json:
        _print_json([model.to_summary() for model in models])
        return 0

    for model in models:
        marker = " (default)" if model.id == DEFAULT_MODEL else ""
        print(f"{model.id:<20} {model.name:<22} {model.provider:<10} {model.preferred_format.value}{marker}")
    return 0


def cmd_render(args, parser):
    try:
        form = load_form_data(args)
        result = generate_prompt(form, args.model, args.format)
    except (ConfigurationError, ValueError, OSError) as err:
        parser.error(str(err))

    if args.json:
        _print_json(result.to_dict())
    else:
        print(result.prompt)
    return 0


def cmd_validate(args, parser):
    try:
        form = load_form_data(args)
    except (ValueError, OSError) as err:
        parser.error(str(err))

    result = validate_prompt(form, args.model)

    if args.json:
        _print_json(result.to_dict())
    else:
        print("valid" if result.is_valid else "invalid")
        for error in result.errors:
            print(f"error: {error}")
        for warning in result.warnings or []:
            print(f"warning: {warning}")
        if result.complexity:
            print(f"complexity: {result.complexity}")
        if result.recommended_format:
            print(f"recommended format: {result.recommended_format.value}")

    return 0 if result.is_valid else 1


def cmd_instruction(args, parser):
    print(generate_enrichment_instruction(args.level))
    return 0


def cmd_serve(args, parser):
    defaults = ServerConfig()
    run(ServerConfig(
        host=args.host or defaults.host,
        port=args.port or defaults.port,
        debug=args.debug or defaults.debug,
    ))
    return 0


# =========================================================
# MAIN
# =========================================================

def build_parser():
    parser = argparse.ArgumentParser(prog="xmlprompter", description="Model-optimised prompt builder")
    subparsers = parser.add_subparsers(dest="command", required=True)

    models = subparsers.add_parser("models", help="List supported models")
    models.add_argument("--json", action="store_true")
    models.set_defaults(handler=cmd_models)

    render = subparsers.add_parser("render", help="Render a prompt")
    _add_form_arguments(render)
    render.add_argument("--format", default=None, help="xml | json | markdown | plain | yaml | structured")
    render.set_defaults(handler=cmd_render)

    validate = subparsers.add_parser("validate", help="Validate prompt fields")
    _add_form_arguments(validate)
    validate.set_defaults(handler=cmd_validate)

    instruction = subparsers.add_parser("instruction", help="Show the enrichment instruction for a level")
    instruction.add_argument("level", nargs="?", type=float, default=DEFAULT_ENRICHMENT_LEVEL)
    instruction.set_defaults(handler=cmd_instruction)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--debug", action="store_true")
    serve.set_defaults(handler=cmd_serve)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.handler(args, parser)


if __name__ == "__main__":
    sys.exit(main())
