from pathlib import Path
from typing import Any, Dict

import yaml

from .arn import ResourceName
from .models import Identifier


def load_variables(path: str | Path) -> Dict[str, str]:
    """
    Lê um arquivo de variáveis para expansão de ARNs.

    Espera um mapeamento simples no topo:
    {
        "user_name": "alice",
        "bucket": "my-bucket"
    }

    Suporta YAML e JSON (YAML já é superset). Arquivo vazio = sem variáveis.
    """
    content = Path(path).read_text(encoding="utf-8")
    data = yaml.safe_load(content)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Variables file {str(path)!r} must contain a mapping, got {type(data).__name__}")

    variables: Dict[str, str] = {}
    for key, value in data.items():
        if isinstance(value, (dict, list)) or value is None:
            raise ValueError(f"Variable {key!r} in {str(path)!r} must be a scalar value")
        # YAML transforma 123 em int; a variável continua sendo texto
        variables[str(key)] = str(value)
    return variables


def expand_arn(template: str, variables: Dict[str, Any]) -> ResourceName:
    """
    Faz o parse de um ARN com `${name}` no resource e expande as variáveis.
    """
    arn = ResourceName.parse(template)
    bindings = {
        key: value if isinstance(value, Identifier) else str(value)
        for key, value in variables.items()
    }
    return arn.expand(bindings)
