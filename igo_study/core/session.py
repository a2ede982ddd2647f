"""
Problem session: opening a problem, judging submissions and producing the
board to show after each one.
"""
from typing import Callable, Iterable, List, Optional, Tuple, Union

from igo_study.core import appender, judge, parser
from igo_study.core.errors import EmptyAnswerSelection, NoFragmentFound, RendererUnavailable
from igo_study.io import note_loader, save_sgf
from igo_study.io.settings import Settings
from igo_study.utils import draw_utils, sgf_utils
from igo_study.utils.debugger import Debugger

# Renderer callback: (board markdown, sgf content, move number)
Renderer = Callable[[str, str, int], None]

LISTING = 'listing'
PROBLEM_SHOWN = 'problem_shown'
AWAITING_ANSWER = 'awaiting_answer'
FEEDBACK_SHOWN = 'feedback_shown'


class Submission:
    """One answer attempt: what was entered, its SGF coordinate and the verdict."""

    def __init__(self, raw_input: Union[str, Tuple[float, float]], coord: str, correct: bool):
        self.raw_input = raw_input
        self.coord = coord
        self.correct = correct

    def __repr__(self):
        return f'Submission({self.raw_input!r}, coord={self.coord!r}, correct={self.correct})'


class Feedback:
    """Result of a submission and the trial position to display."""

    def __init__(self, submission: Submission, message: str, sgf: str, move_number: int, board: str):
        self.submission = submission
        self.message = message
        self.sgf = sgf
        self.move_number = move_number
        self.board = board

    @property
    def correct(self) -> bool:
        return self.submission.correct

    @property
    def coord(self) -> str:
        return self.submission.coord


def answer_options(page: note_loader.NotePage) -> List[str]:
    """Dropdown candidates from the note's comma separated question field."""
    return judge.split_answers(page.question)


def feedback_message(correct: bool, coord: str, result: str = '') -> str:
    if correct:
        return f'Correct! ({coord})'
    message = f'Incorrect. ({coord})'
    if result:
        message += f'\nResult: {result}'
    return message


class ProblemSession:
    """State of one problem view.

    Moves between LISTING, PROBLEM_SHOWN, AWAITING_ANSWER and FEEDBACK_SHOWN.
    Every submission is judged against the problem as it was opened; trial
    moves never build on each other.
    """

    def __init__(self, settings: Settings, renderer: Optional[Renderer],
                 fence_tags: Iterable[str] = parser.DEFAULT_FENCE_TAGS):
        """Initialize the session.

        Args:
            settings: Shared study settings
            renderer: Board renderer callback, required to show problems
            fence_tags: Info strings of the SGF block in problem notes

        Raises:
            RendererUnavailable: If no renderer is given
        """
        if renderer is None:
            raise RendererUnavailable()
        self.settings = settings
        self.renderer = renderer
        self.fence_tags = tuple(fence_tags)
        self.debugger = Debugger.get_instance()

        self.state = LISTING
        self.page: Optional[note_loader.NotePage] = None
        self.record: Optional[parser.ProblemRecord] = None
        self.last_feedback: Optional[Feedback] = None

    @property
    def prompt(self) -> str:
        return self.record.comment if self.record else ''

    def open_problem(self, page: note_loader.NotePage, note_text: str) -> parser.ProblemRecord:
        """Parse a problem note and render its initial position.

        Raises:
            NoFragmentFound: If the note has no SGF block
        """
        print('open_problem...')

        record = parser.load_problem(note_text, self.fence_tags)
        if record is None:
            raise NoFragmentFound(page.name)

        accepted = judge.normalize_answers(page.answer, record.board_size, self.settings.default_answer)
        self.record = record.with_answers(accepted)
        self.page = page
        self.last_feedback = None
        print(f"DEBUG: Opened {self.record}, accepted answers: {sorted(accepted)}")

        self.state = PROBLEM_SHOWN
        self._render(self._initial_board(), self.record.fragment, self.record.move_count)

        self.state = AWAITING_ANSWER
        return self.record

    def submit_click(self, x: float, y: float, width: float, height: float) -> Feedback:
        """Judge a click on the rendered board canvas."""
        self._require_problem()
        coord = sgf_utils.convert_click_to_sgf(x, y, width, height, self.record.board_size)
        return self._submit((x, y), coord)

    def submit_selection(self, value: Optional[str]) -> Feedback:
        """Judge an answer chosen from the dropdown.

        Raises:
            EmptyAnswerSelection: If nothing was selected
        """
        self._require_problem()
        if not value or not value.strip():
            raise EmptyAnswerSelection()
        coord = judge.normalize_answer(value, self.record.board_size)
        return self._submit(value, coord)

    def retry(self):
        """Show the original position again and wait for the next answer."""
        self._require_problem()
        self._render(self._initial_board(), self.record.fragment, self.record.move_count)
        self.state = AWAITING_ANSWER

    def back(self):
        """Discard the open problem and return to the problem list."""
        self.page = None
        self.record = None
        self.last_feedback = None
        self.state = LISTING

    def _require_problem(self):
        if self.record is None:
            raise RuntimeError("No problem is open")

    def _initial_board(self) -> str:
        companion = note_loader.find_companion_sgf(self.page)
        if companion:
            return save_sgf.embed_link(companion, self.record.move_count)
        return save_sgf.board_block(self.record.fragment, self.record.move_count)

    def _submit(self, raw_input, coord: str) -> Feedback:
        record = self.record
        correct = judge.judge(coord, record.accepted_answers, record.moves, record.board_size)
        updated, move_number = appender.append_move(record.fragment, record.moves, coord)

        board = save_sgf.board_block(updated, move_number)
        feedback = Feedback(Submission(raw_input, coord, correct),
                            feedback_message(correct, coord, record.result),
                            updated, move_number, board)
        print(f"DEBUG: Submitted {coord}, correct: {correct}")

        self._render(board, updated, move_number, mark=(coord, correct))
        self.last_feedback = feedback
        self.state = FEEDBACK_SHOWN
        return feedback

    def _render(self, board: str, sgf_content: str, move_number: int, mark=None):
        self.renderer(board, sgf_content, move_number)

        if self.debugger:
            image = draw_utils.render_position(self.record.board_size, parser.parse_moves(sgf_content),
                                               move_number, mark)
            self.debugger.save_snapshot(image, f"move_{move_number}")
