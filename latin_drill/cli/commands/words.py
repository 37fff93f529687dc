"""CLI command for listing and searching the vocabulary."""

from latin_drill.exceptions import LatinDrillException
from latin_drill.presenters import ConsolePresenter
from latin_drill.services import VocabularyService

from .common import create_vocabulary_service, load_config


def words_command(args) -> int:
    """Execute the words subcommand.

    With --search the results are ranked by relevance; otherwise words are
    listed in vocabulary order. --stats prints counts for the whole
    vocabulary instead.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    try:
        config = load_config(args)
        vocabulary = create_vocabulary_service(config)
        vocabulary.load()
    except LatinDrillException as e:
        presenter.show_error(str(e))
        return 1

    if args.stats:
        _show_statistics(presenter, vocabulary)
        return 0

    if args.search:
        ranked = vocabulary.search_words(args.search)
        allowed = {w.id for w in vocabulary.filter_words(args.declension, args.gender)}
        words = [w for w in ranked if w.id in allowed]
    else:
        words = vocabulary.filter_words(args.declension, args.gender)

    if args.limit is not None:
        words = words[: args.limit]

    if not words:
        presenter.show_warning("No matching words")
        return 1

    for word in words:
        presenter.show_info(
            f"{word.headword:30s} {word.gender.label:10s} {word.declension.label:16s} "
            f"{', '.join(word.all_meanings)}"
        )
    presenter.show_info(f"\n{len(words)} words")
    return 0


def _show_statistics(presenter: ConsolePresenter, vocabulary: VocabularyService) -> None:
    stats = vocabulary.get_statistics()
    presenter.show_info(f"{stats.total_words} words")
    for declension, count in stats.by_declension.items():
        presenter.show_info(f"  {declension.label:16s} {count}")
    for gender, count in stats.by_gender.items():
        presenter.show_info(f"  {gender.label:16s} {count}")
    presenter.show_info(f"  {'Extra meanings':16s} {stats.with_additional_meanings}")
