"""
Main entry point for the Igo Study command line tool.
"""
import argparse
import os
import sys

from igo_study.core import outline
from igo_study.core.errors import IgoStudyError
from igo_study.core.session import ProblemSession, answer_options
from igo_study.io import note_loader
from igo_study.io.save_sgf import save_sgf
from igo_study.io.settings import load_settings
from igo_study.utils import sgf_utils
from igo_study.utils.debugger import Debugger


def print_board(board: str, sgf_content: str, move_number: int):
    """Renderer used on the command line: show the viewer block."""
    print(board)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Study Go problems stored in markdown notes')
    parser.add_argument('--settings', '-s', help='JSON settings file')
    parser.add_argument('--default-answer', help='Accepted answer for notes without one')
    parser.add_argument('--debug', '-d', action='store_true', help='Save board snapshots')
    parser.add_argument('--debug-dir', default='debug', help='Directory for board snapshots')

    subparsers = parser.add_subparsers(dest='command', required=True)

    problem = subparsers.add_parser('problem', help='Open a problem note and submit an answer')
    problem.add_argument('note', help='Path to the problem note')
    answer = problem.add_mutually_exclusive_group()
    answer.add_argument('--click', nargs=4, type=float, metavar=('X', 'Y', 'WIDTH', 'HEIGHT'),
                        help='Click position and canvas size in pixels')
    answer.add_argument('--select', help='Answer as chosen from the dropdown, e.g. C7 or pd')
    problem.add_argument('--save-trial', help='Write the SGF with the trial move to this file')

    listing = subparsers.add_parser('list', help='List the problem notes of a directory')
    listing.add_argument('directory', help='Directory holding the notes')
    listing.add_argument('--tag', help='Tag filter, defaults to the problem_tag setting')

    menu = subparsers.add_parser('menu', help='List the exercise items of a menu note')
    menu.add_argument('note', help='Path to the menu note')
    menu.add_argument('--marker', default=outline.EXERCISE_MARKER, help='Heading text marking exercises')

    return parser


def run_problem(args, settings) -> int:
    session = ProblemSession(settings, renderer=print_board)
    page, text = note_loader.read_note(args.note)
    record = session.open_problem(page, text)

    print(f"Problem: {page.name}")
    if session.prompt:
        print(session.prompt)
    options = answer_options(page)
    if options:
        print(f"Options: {', '.join(options)}")

    if args.click:
        feedback = session.submit_click(*args.click)
    elif args.select is not None:
        feedback = session.submit_selection(args.select)
    else:
        return 0

    # Human label belongs on the verdict line, before any Result line
    verdict, _, details = feedback.message.partition('\n')
    print(f"{verdict} [{sgf_utils.sgf_to_human(feedback.coord, record.board_size)}]")
    if details:
        print(details)
    if args.save_trial:
        save_sgf(feedback.sgf, args.save_trial)
    return 0 if feedback.correct else 1


def run_list(args, settings) -> int:
    filter_tag = settings.problem_tag if args.tag is None else args.tag
    pages = note_loader.list_problems(args.directory, filter_tag)
    if not pages:
        print(f'No problems found for "{filter_tag}". Check the tags or the igo_problem property.')
        return 0
    for page in pages:
        print(f"[{'x' if page.completed else ' '}] {page.name}")
    print(f"Completed: {note_loader.completion_percentage(pages)}%")
    return 0


def run_menu(args) -> int:
    with open(args.note, encoding='utf-8') as f:
        text = f.read()
    items = outline.exercise_items(text, args.marker)
    for item in items:
        print(item.text)
    if not items:
        print("No exercises found.")
    return 0


def main(argv=None) -> int:
    """Main function of the command line tool."""
    args = build_parser().parse_args(argv)

    settings = load_settings(args.settings)
    if args.default_answer:
        settings.default_answer = args.default_answer

    if args.debug:
        Debugger.enable(os.path.join(os.getcwd(), args.debug_dir))
    else:
        Debugger.disable()

    try:
        if args.command == 'problem':
            return run_problem(args, settings)
        if args.command == 'list':
            return run_list(args, settings)
        return run_menu(args)
    except IgoStudyError as e:
        print(f"Error: {e}")
        return 2
    except OSError as e:
        print(f"Error reading {e.filename}: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
