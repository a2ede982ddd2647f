"""
Igo Study - judge Go problem answers against SGF stored in notes
"""

from igo_study.core.parser import ProblemRecord, load_problem, parse_fragment
from igo_study.core.session import ProblemSession
from igo_study.io.settings import Settings

__version__ = '0.1.0'
