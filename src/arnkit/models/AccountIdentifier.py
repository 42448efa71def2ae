from dataclasses import dataclass

from .ArnError import InvalidAccountIdError
from .Identifier import IdentifierLike

ACCOUNT_ID_LENGTH = 12


@dataclass(frozen=True, order=True)
class AccountIdentifier(IdentifierLike):
    """
    Account ID de 12 dígitos, ou o sentinela vazio (`any()`), que significa
    "qualquer conta / não especificada".

    Não herda de `Identifier`: um account id nunca é aceito onde se espera
    um Identifier, e vice-versa.
    """

    @classmethod
    def validate(cls, s: str) -> None:
        if not s:
            return
        for position, char in enumerate(s):
            if not ("0" <= char <= "9"):
                raise InvalidAccountIdError(s, position, char)
        if len(s) != ACCOUNT_ID_LENGTH:
            raise InvalidAccountIdError(
                s, reason=f"expected exactly {ACCOUNT_ID_LENGTH} digits, got {len(s)}"
            )

    @classmethod
    def any(cls) -> "AccountIdentifier":
        return cls.new_unchecked("")

    def is_any(self) -> bool:
        return self.value == ""
