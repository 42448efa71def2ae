from .build import build
from .builders import builders
from .check import check
from .expand import expand
from .known import known
from .parse import parse

__all__ = ["build", "builders", "check", "expand", "known", "parse"]
