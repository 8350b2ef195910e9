"""
Ask the inference service one question from the terminal.

Usage:
  python -m src.cli.ask_cli --question "¿Qué opina de X?" --profile cdmx_c-d+_18-25

Environment:
  INFERENCE_BASE_URL (required)
  INFERENCE_ASK_PATH (default /ask)
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import pydantic

from schemas.query import Profile, QueryResult
from src.config.log_setup import configure_logging
from src.config.settings import get_settings
from src.inference.client import InferenceClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ask the inference service as a respondent profile.")
    parser.add_argument("--question", required=True, help="Question to ask")
    parser.add_argument(
        "--profile",
        required=True,
        choices=[p.value for p in Profile],
        help="Respondent profile",
    )
    parser.add_argument("--raw", action="store_true", help="Print the full transcript instead of the answer")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except pydantic.ValidationError as exc:
        missing = ", ".join(str(err["loc"][0]) for err in exc.errors())
        print(f"Error: invalid configuration ({missing})", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)

    client = InferenceClient.from_settings(settings)
    outcome = client.submit(args.question, args.profile)
    if not isinstance(outcome, QueryResult):
        print(f"Error: {outcome.message}", file=sys.stderr)
        return 1

    print(outcome.raw_text if args.raw else outcome.extracted_answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
