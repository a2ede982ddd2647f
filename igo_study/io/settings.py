"""
Study settings and their JSON file.
"""
import json
import os
from typing import Optional

DEFAULT_SETTINGS = {
    'problem_tag': 'igo-problem',
    'default_answer': 'pd',
}


class Settings:
    """Configuration shared by every problem session.

    Attributes:
        problem_tag: Tag that marks problem notes
        default_answer: Accepted answer for problems whose note has none
    """

    def __init__(self, problem_tag: str = DEFAULT_SETTINGS['problem_tag'],
                 default_answer: str = DEFAULT_SETTINGS['default_answer']):
        self.problem_tag = problem_tag
        self.default_answer = default_answer

    def to_dict(self):
        return {'problem_tag': self.problem_tag, 'default_answer': self.default_answer}

    def __eq__(self, other):
        return isinstance(other, Settings) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return f'Settings(problem_tag={self.problem_tag!r}, default_answer={self.default_answer!r})'


def load_settings(filename: Optional[str] = None) -> Settings:
    """Load settings, filling anything missing from the defaults.

    Args:
        filename: JSON file with saved settings; a missing file gives defaults

    Returns:
        Settings instance
    """
    data = dict(DEFAULT_SETTINGS)
    if filename and os.path.exists(filename):
        with open(filename, encoding='utf-8') as f:
            saved = json.load(f)
        if not isinstance(saved, dict):
            raise ValueError(f"Settings file must contain a JSON object: {filename}")
        data.update({key: str(saved[key]) for key in DEFAULT_SETTINGS if saved.get(key) is not None})
    return Settings(**data)


def save_settings(settings: Settings, filename: str):
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(settings.to_dict(), f, indent=2, ensure_ascii=False)
