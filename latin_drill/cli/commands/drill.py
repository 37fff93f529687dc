"""CLI command for running an interactive drill session."""

from latin_drill.exceptions import LatinDrillException
from latin_drill.orchestration import ConsoleSessionRunner, SessionEngine
from latin_drill.presenters import ConsolePresenter, ConsoleSessionListener
from latin_drill.services import ManualTicker, SeededRandomSource

from .common import create_vocabulary_service, load_config


def drill_command(args) -> int:
    """Execute the drill subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    overrides = {}
    if args.seed is not None:
        overrides["random_seed"] = args.seed

    presenter = ConsolePresenter()
    try:
        config = load_config(args, **overrides)
    except LatinDrillException as e:
        presenter.show_error(f"Invalid configuration: {e}")
        return 1

    presenter.show_info("Latin Drill - Timed Vocabulary Practice")
    presenter.show_info("=" * 50)

    # Load vocabulary
    vocabulary = create_vocabulary_service(config)
    try:
        vocabulary.load()
    except LatinDrillException as e:
        presenter.show_error(str(e))
        return 1

    words = vocabulary.filter_words(
        declensions=args.declension,
        genders=args.gender,
        search_text=args.search,
    )
    if not words:
        presenter.show_error("No words match the selected filters")
        return 1

    minutes = args.minutes if args.minutes is not None else config.default_duration_minutes
    drill_types = args.types or config.default_drill_types

    try:
        engine = SessionEngine(
            words,
            drill_types,
            minutes,
            config=config,
            listener=ConsoleSessionListener(config.low_time_warning_seconds),
            random_source=SeededRandomSource(config.random_seed),
            ticker=ManualTicker(),
        )
    except LatinDrillException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(f"{len(words)} words loaded, {minutes} minute session")
    if minutes not in config.allowed_durations:
        allowed = ", ".join(str(m) for m in config.allowed_durations)
        presenter.show_warning(f"Unusual session length; the usual choices are {allowed} minutes")
    presenter.show_info("Type the number of your choice, 's' to skip or 'q' to quit.")

    runner = ConsoleSessionRunner(engine, presenter)
    try:
        runner.run()
    except LatinDrillException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    return 0
