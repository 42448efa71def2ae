from importlib.metadata import PackageNotFoundError, version

import typer


def get_version() -> str:
    """
    Retorna a versão instalada do arnkit, ou "unknown" rodando direto do src/.
    """
    try:
        return version("arnkit")
    except PackageNotFoundError:
        return "unknown"


def version_callback(value: bool) -> None:
    if value:
        print(get_version())
        raise typer.Exit()
