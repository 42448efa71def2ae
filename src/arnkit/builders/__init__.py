import importlib
import pkgutil
from typing import Optional

from .base import BaseServiceBuilder
from ..arn import ResourceName

_loaded = False


def load_builders() -> None:
    """
    Garante que todos os módulos em arnkit.builders.* foram importados,
    para que o __init_subclass__ do BaseServiceBuilder tenha rodado
    e populado o registry.
    """
    global _loaded
    if _loaded:
        return

    package_name = __name__  # "arnkit.builders"

    for finder, name, ispkg in pkgutil.iter_modules(__path__, package_name + "."):
        if name.endswith(".base"):
            continue
        importlib.import_module(name)

    _loaded = True


def get_builder_for_arn(arn: ResourceName) -> Optional[type[BaseServiceBuilder]]:
    """
    Resolve o builder do serviço do ARN, ou None se nenhum estiver registrado.
    """
    load_builders()

    for builder_cls in BaseServiceBuilder.registry:
        if builder_cls.supports(arn):
            return builder_cls

    return None


def get_builder_for_service(service: str) -> type[BaseServiceBuilder]:
    load_builders()

    service = service.lower()
    for builder_cls in BaseServiceBuilder.registry:
        if builder_cls.service == service:
            return builder_cls

    raise ValueError(f"No builder registered for service '{service}'.")
