"""linegrep - streaming line filter with grep-style context handling"""

from linegrep.__version__ import __version__
from linegrep.engine import FilterStats, filter_lines
from linegrep.matcher import InvalidPatternError, compile_matcher
from linegrep.models import FilterOptions

__all__ = ['FilterOptions', 'FilterStats', 'InvalidPatternError', '__version__', 'compile_matcher', 'filter_lines']
