import json
from typing import Any, Dict, List, Optional

from .template_engine import load_variables


def parse_var_assignments(assignments: Optional[List[str]]) -> Dict[str, str]:
    """
    Converte `--var name=value` em dict. O valor pode conter '='.
    """
    variables: Dict[str, str] = {}
    for assignment in assignments or []:
        name, sep, value = assignment.partition("=")
        if not sep or not name:
            raise ValueError(f"Invalid variable assignment {assignment!r}: expected name=value")
        variables[name] = value
    return variables


def build_variables(
    vars_path: Optional[str] = None,
    overrides: Optional[str] = None,
    assignments: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """
    Junta as variáveis de expansão.

    ordem: arquivo < JSON de overrides < --var (o último ganha)
    """
    variables: Dict[str, Any] = {}

    if vars_path:
        variables.update(load_variables(vars_path))

    if overrides:
        data = json.loads(overrides)
        if not isinstance(data, dict):
            raise ValueError("Overrides must be a JSON object")
        variables.update({str(k): str(v) for k, v in data.items()})

    variables.update(parse_var_assignments(assignments))
    return variables
