"""Command line entry point for the sentiment dashboard."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable, Sequence

from .classifier import (
    HTTPSentimentClassifier,
    HuggingFaceSentimentClassifier,
    KeywordSentimentClassifier,
    SentimentClassifier,
)
from .dashboard import SentimentDashboard
from .profiles import (
    DEFAULT_PROFILE_NAME,
    apply_profile_defaults,
    describe_classifier_profiles,
    get_classifier_profile,
    list_classifier_profiles,
)

PROMPT = "Enter a sentence to analyze... "

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def build_classifier(args: argparse.Namespace) -> SentimentClassifier:
    if args.debug:
        return KeywordSentimentClassifier()
    profile = get_classifier_profile(args.profile)
    if profile.backend == "http":
        return HTTPSentimentClassifier(
            args.endpoint,
            api_key=args.api_key,
            language_code=args.language,
        )
    return HuggingFaceSentimentClassifier(
        args.model_id,
        label_map=profile.label_map,
        device=args.device,
    )


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=LOG_LEVELS.get(level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _emit_board(dashboard: SentimentDashboard, *, use_color: bool) -> None:
    if dashboard.last_error:
        print(dashboard.last_error)
        return
    print(dashboard.render(use_color=use_color))


def run_interactive(
    dashboard: SentimentDashboard,
    *,
    use_color: bool = False,
    read_line: Callable[[str], str] = input,
) -> None:
    """Prompt for sentences until a blank line, EOF or Ctrl+C."""

    while True:
        try:
            text = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not text.strip():
            return
        print("Analyzing...")
        dashboard.analyze(text)
        _emit_board(dashboard, use_color=use_color)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sentiment analysis dashboard")
    parser.add_argument("text", nargs="*", help="Sentences to analyze")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Keep prompting for sentences and re-rank the board after each one",
    )
    parser.add_argument(
        "--profile",
        choices=list_classifier_profiles(),
        default=os.environ.get("SENTIMENT_PROFILE", DEFAULT_PROFILE_NAME),
        help="Preconfigured classifier backend to use",
    )
    parser.add_argument(
        "--list-classifier-profiles",
        action="store_true",
        help="Print the available classifier profiles and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Use the offline keyword classifier instead of a model or service",
    )
    parser.add_argument(
        "--model-id",
        default=None,
        help="Hugging Face model identifier overriding the profile",
    )
    parser.add_argument(
        "--device",
        default=None,
        help="Device for model inference (e.g. cpu, cuda:0)",
    )
    parser.add_argument(
        "--endpoint",
        default=os.environ.get("SENTIMENT_ENDPOINT"),
        help="URL of the cloud sentiment endpoint for the remote profile",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for the cloud sentiment endpoint (defaults to SENTIMENT_API_KEY)",
    )
    parser.add_argument(
        "--language",
        default="en",
        help="Language code sent to the cloud sentiment endpoint",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in the rendered board",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(LOG_LEVELS),
        default=os.environ.get("SENTIMENT_LOG_LEVEL", "WARNING"),
        help="Logging level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    if args.list_classifier_profiles:
        for line in describe_classifier_profiles():
            print(line)
        return

    if not args.text and not args.interactive:
        parser.error("Provide text to analyze or --interactive")

    try:
        profile = get_classifier_profile(args.profile)
        apply_profile_defaults(args, profile, ("model_id", "endpoint"))
        classifier = build_classifier(args)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    dashboard = SentimentDashboard(classifier)
    use_color = not args.no_color and sys.stdout.isatty()

    for text in args.text:
        dashboard.analyze(text)
        if dashboard.last_error:
            print(dashboard.last_error)
    if args.text:
        print(dashboard.render(use_color=use_color))

    if args.interactive:
        run_interactive(dashboard, use_color=use_color)


if __name__ == "__main__":  # pragma: no cover
    main()
