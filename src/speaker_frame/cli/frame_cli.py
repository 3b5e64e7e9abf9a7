"""Command-line interface for playing the speaker frame in a terminal.

The terminal stands in for the frame transport: it keeps the session as
serialized JSON between round trips, prints every view and turns the
viewer's keystrokes into interactions.
"""

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from speaker_frame.config import FrameConfig, load_config
from speaker_frame.domain.models import Interaction, Session
from speaker_frame.infrastructure.api.speaker_client import SpeakerDirectoryClient
from speaker_frame.infrastructure.exceptions.api_exceptions import UpstreamError
from speaker_frame.infrastructure.exceptions.storage_exceptions import StoreError
from speaker_frame.infrastructure.storage.kv_store import JsonFileKeyValueStore
from speaker_frame.infrastructure.storage.score_store import ScoreStore
from speaker_frame.services.frame_service import (
    ControlKind,
    FrameRequest,
    FrameService,
    FrameView,
    ViewKind,
)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

QUIT_COMMANDS = {"q", "quit", "exit"}


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration.

    Args:
        verbose: If True, set log level to DEBUG, otherwise WARNING so log
            lines do not interleave with the frame output
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns
    -------
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Page through past speakers and suggest who should return"
    )

    parser.add_argument(
        "--store",
        type=str,
        default=".frame_store.json",
        help="JSON file holding scores and suggestions (default: .frame_store.json)",
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Optional JSON file with frame settings",
    )

    parser.add_argument(
        "--show-suggestions",
        action="store_true",
        help="Print the stored free-text suggestions and exit",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_service(config: FrameConfig, store_path: str | Path) -> FrameService:
    """Wire a FrameService against the live directory and a JSON file store."""
    scores = ScoreStore(JsonFileKeyValueStore(store_path), config.suggestions_key)
    return FrameService(config, SpeakerDirectoryClient(config), scores)


def format_view(view: FrameView) -> str:
    """Render a view as plain text."""
    lines = ["", f"== {view.image.heading} =="]

    if view.speaker is not None:
        lines.append(f"   avatar: {view.image.avatar_url}")
        if view.image.description:
            lines.append(f"   {view.image.description}")
        lines.append(
            f"   suggested {view.speaker.suggested_count} of "
            f"{view.speaker.appeared_count} times"
        )

    buttons = [c for c in view.controls if c.kind is ControlKind.BUTTON]
    for number, control in enumerate(buttons, start=1):
        lines.append(f"   {number}) {control.label}")

    for control in view.controls:
        if control.kind is ControlKind.LINK:
            lines.append(f"   [{control.label}] {control.href}")

    return "\n".join(lines)


def read_interaction(view: FrameView, input_fn: InputFn) -> Interaction | None:
    """Ask the viewer for the next interaction.

    Returns
    -------
        The interaction, or None when the viewer quits
    """
    if view.image.kind is ViewKind.THANKS:
        text_input = next(c for c in view.controls if c.kind is ControlKind.TEXT_INPUT)
        text = input_fn(f"{text_input.label} (empty to finish): ")
        if text.strip().lower() in QUIT_COMMANDS or not text.strip():
            return None
        return Interaction(input_text=text)

    buttons = [c for c in view.controls if c.kind is ControlKind.BUTTON]
    while True:
        choice = input_fn("Choose an option (q to quit): ").strip().lower()
        if choice in QUIT_COMMANDS:
            return None
        if choice.isdigit() and 1 <= int(choice) <= len(buttons):
            return Interaction(button_value=buttons[int(choice) - 1].value)


def run(
    service: FrameService,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> Session:
    """Play the frame until the viewer quits.

    The session crosses every round trip as JSON, the way a frame transport
    would carry it.

    Returns
    -------
        The last session state
    """
    view = service.render(FrameRequest(initial=True))
    encoded_state = json.dumps(view.state.to_dict())

    while True:
        output_fn(format_view(view))
        interaction = read_interaction(view, input_fn)
        if interaction is None:
            return Session.from_dict(json.loads(encoded_state))

        prior = Session.from_dict(json.loads(encoded_state))
        view = service.render(FrameRequest(state=prior, interaction=interaction))
        encoded_state = json.dumps(view.state.to_dict())

        if interaction.input_text is not None:
            output_fn("Suggestion recorded.")
            # The submit control resets the frame to a new session
            view = service.render(FrameRequest(initial=True))
            encoded_state = json.dumps(view.state.to_dict())


def main(argv: list[str] | None = None) -> int:
    """Run the speaker frame in the terminal."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    try:
        config = load_config(args.config)
        service = build_service(config, args.store)

        if args.show_suggestions:
            for suggestion in service.scores.get_suggestions():
                print(suggestion)
            return 0

        run(service)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
    except EOFError:
        pass
    except (UpstreamError, StoreError, ValueError) as e:
        logger.error(f"Frame failed: {e}", exc_info=args.verbose)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
