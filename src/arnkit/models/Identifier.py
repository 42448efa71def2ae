import string
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import FrozenSet, Type, TypeVar

from .ArnError import ArnError, InvalidIdentifierError

T = TypeVar("T", bound="IdentifierLike")

# Alfabeto aceito em partition, service, region e nos segmentos literais do resource.
IDENTIFIER_CHARS: FrozenSet[str] = frozenset(string.ascii_letters + string.digits + "_.-")


@dataclass(frozen=True, order=True)
class IdentifierLike(ABC):
    """
    Base comum dos identificadores validados.

    O construtor (`cls(value)` ou `cls.parse(value)`) é o único ponto de validação;
    `new_unchecked` pula a validação e só deve ser usado com valores já conhecidos
    (ex.: constantes de `arnkit.known`), nunca com input externo.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"{type(self).__name__} expects str, got {type(self.value).__name__}")
        if type(self.value) is not str:
            # subclasses de str (ex.: enums de arnkit.known) viram str puro
            object.__setattr__(self, "value", str.__str__(self.value))
        self.validate(self.value)

    @classmethod
    @abstractmethod
    def validate(cls, s: str) -> None:
        """
        Levanta o ArnError do tipo se `s` não for válido.
        """

    @classmethod
    def parse(cls: Type[T], s: str) -> T:
        return cls(s)

    @classmethod
    def new_unchecked(cls: Type[T], s: str) -> T:
        obj = object.__new__(cls)
        object.__setattr__(obj, "value", s)
        return obj

    @classmethod
    def is_valid(cls, s: str) -> bool:
        try:
            cls.validate(s)
        except ArnError:
            return False
        return True

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Identifier(IdentifierLike):
    """
    Nome de partition, service, region ou segmento de resource.

    Não vazio; apenas letras ASCII, dígitos ASCII, '_', '.' e '-'.
    """

    @classmethod
    def validate(cls, s: str) -> None:
        if not s:
            raise InvalidIdentifierError(s)
        # uma passada só, falha no primeiro caractere inválido
        for position, char in enumerate(s):
            if char not in IDENTIFIER_CHARS:
                raise InvalidIdentifierError(s, position, char)
