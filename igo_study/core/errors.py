"""
Exceptions raised while studying a problem.
"""


class IgoStudyError(Exception):
    """Base class for errors shown to the user instead of a board."""


class NoFragmentFound(IgoStudyError):
    """The note does not contain an SGF block."""

    def __init__(self, note_name: str = ''):
        self.note_name = note_name
        message = 'No SGF data found.'
        if note_name:
            message = f'No SGF data found in {note_name}.'
        super().__init__(message)


class EmptyAnswerSelection(IgoStudyError, ValueError):
    """An answer was submitted from the dropdown without choosing a value."""

    def __init__(self):
        super().__init__('Please select an answer.')


class RendererUnavailable(IgoStudyError, RuntimeError):
    """No board renderer is available, so problems cannot be shown."""

    def __init__(self):
        super().__init__('The board viewer is not available. Enable a board renderer to browse problems.')
