from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Mapping, Sequence, Tuple, Union

from .ArnError import InvalidIdentifierError, InvalidResourceError, UnboundVariableError
from .Identifier import Identifier

VARIABLE_OPEN = "${"
VARIABLE_CLOSE = "}"


class Separator(str, Enum):
    PATH = "/"
    QUALIFIER = ":"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LiteralSegment:
    identifier: Identifier

    def __str__(self) -> str:
        return str(self.identifier)


@dataclass(frozen=True)
class VariableSegment:
    """Placeholder `${name}`, substituído por `ResourceIdentifier.expand`."""

    name: Identifier

    def __str__(self) -> str:
        return f"{VARIABLE_OPEN}{self.name}{VARIABLE_CLOSE}"


Segment = Union[LiteralSegment, VariableSegment, Separator]

_SEPARATORS = {s.value: s for s in Separator}


def _tokenize(s: str, checked: bool = True) -> List[Segment]:
    """
    Quebra o resource em segmentos numa única passada da esquerda para a direita.

    Literais são validados como Identifier; posições de erro são relativas a `s`.
    Com `checked=False` nada é validado (caminho do new_unchecked).
    """
    segments: List[Segment] = []
    literal_start = None
    i = 0

    def flush(end: int) -> None:
        nonlocal literal_start
        if literal_start is None:
            return
        text = s[literal_start:end]
        if checked:
            try:
                Identifier.validate(text)
            except InvalidIdentifierError as e:
                raise InvalidResourceError(s, literal_start + e.position, e.char) from e
        segments.append(LiteralSegment(Identifier.new_unchecked(text)))
        literal_start = None

    while i < len(s):
        char = s[i]

        if char in _SEPARATORS:
            flush(i)
            if checked and (not segments or isinstance(segments[-1], Separator)):
                raise InvalidResourceError(s, i, reason=f"empty segment before {char!r}")
            segments.append(_SEPARATORS[char])
            i += 1
            continue

        if s.startswith(VARIABLE_OPEN, i):
            flush(i)
            name_start = i + len(VARIABLE_OPEN)
            end = s.find(VARIABLE_CLOSE, name_start)
            if end == -1:
                if checked:
                    raise InvalidResourceError(s, i, reason="unterminated variable")
                end = len(s)
            name = s[name_start:end]
            if checked:
                try:
                    Identifier.validate(name)
                except InvalidIdentifierError as e:
                    if e.char is None:
                        raise InvalidResourceError(s, i, reason="empty variable name") from e
                    raise InvalidResourceError(s, name_start + e.position, e.char) from e
            segments.append(VariableSegment(Identifier.new_unchecked(name)))
            i = end + len(VARIABLE_CLOSE)
            continue

        if literal_start is None:
            literal_start = i
        i += 1

    flush(len(s))

    if checked and segments and isinstance(segments[-1], Separator):
        raise InvalidResourceError(s, len(s) - 1, reason="resource must not end with a separator")

    return segments


def _check_structure(segments: Sequence[Segment]) -> None:
    rendered = "".join(str(seg) for seg in segments)
    if not segments:
        raise InvalidResourceError(rendered, reason="resource must not be empty")
    previous = None
    for index, seg in enumerate(segments):
        if isinstance(seg, LiteralSegment):
            if not isinstance(seg.identifier, Identifier):
                raise TypeError(f"LiteralSegment expects Identifier, got {type(seg.identifier).__name__}")
            if isinstance(previous, LiteralSegment):
                raise InvalidResourceError(rendered, reason=f"adjacent literal segments at index {index}")
        elif isinstance(seg, VariableSegment):
            if not isinstance(seg.name, Identifier):
                raise TypeError(f"VariableSegment expects Identifier, got {type(seg.name).__name__}")
        elif isinstance(seg, Separator):
            if previous is None or isinstance(previous, Separator):
                raise InvalidResourceError(rendered, reason=f"empty segment before {seg.value!r}")
        else:
            raise TypeError(f"Unexpected resource segment type: {type(seg).__name__}")
        previous = seg
    if isinstance(previous, Separator):
        raise InvalidResourceError(rendered, reason="resource must not end with a separator")


def _merge_literals(segments: Iterable[Segment]) -> List[Segment]:
    merged: List[Segment] = []
    for seg in segments:
        if isinstance(seg, LiteralSegment) and merged and isinstance(merged[-1], LiteralSegment):
            joined = str(merged[-1].identifier) + str(seg.identifier)
            merged[-1] = LiteralSegment(Identifier.new_unchecked(joined))
        else:
            merged.append(seg)
    return merged


@dataclass(frozen=True)
class ResourceIdentifier:
    """
    Parte `resource` do ARN como sequência de segmentos.

    Cada segmento é um literal (Identifier), um separador de path ('/'),
    um separador de qualifier (':') ou uma variável `${name}`. A identidade
    dos separadores é preservada, então `str(ResourceIdentifier.parse(s)) == s`.

    Ex:
    mythings/thing-1             -> literal / literal
    layer:my-layer:3             -> literal : literal : literal
    user/${user_name}            -> literal / variável
    """

    segments: Tuple[Segment, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))
        _check_structure(self.segments)

    @classmethod
    def parse(cls, s: str) -> "ResourceIdentifier":
        if not isinstance(s, str):
            raise TypeError(f"ResourceIdentifier expects str, got {type(s).__name__}")
        if not s:
            raise InvalidResourceError(s, reason="resource must not be empty")
        return cls(tuple(_tokenize(s)))

    @classmethod
    def new_unchecked(cls, s: str) -> "ResourceIdentifier":
        obj = object.__new__(cls)
        object.__setattr__(obj, "segments", tuple(_tokenize(s, checked=False)))
        return obj

    @classmethod
    def is_valid(cls, s: str) -> bool:
        try:
            cls.parse(s)
        except InvalidResourceError:
            return False
        return True

    @classmethod
    def from_identifier(cls, identifier: Identifier) -> "ResourceIdentifier":
        return cls((LiteralSegment(identifier),))

    @classmethod
    def variable(cls, name: Identifier) -> "ResourceIdentifier":
        return cls((VariableSegment(name),))

    @classmethod
    def _join(cls, parts: Sequence["ResourceIdentifier"], separator: Separator) -> "ResourceIdentifier":
        segments: List[Segment] = []
        for part in parts:
            if segments:
                segments.append(separator)
            segments.extend(part.segments)
        return cls(tuple(segments))

    @classmethod
    def from_id_path(cls, path: Sequence[Identifier]) -> "ResourceIdentifier":
        return cls._join([cls.from_identifier(i) for i in path], Separator.PATH)

    @classmethod
    def from_qualified_id(cls, qualified: Sequence[Identifier]) -> "ResourceIdentifier":
        return cls._join([cls.from_identifier(i) for i in qualified], Separator.QUALIFIER)

    @classmethod
    def from_path(cls, path: Sequence["ResourceIdentifier"]) -> "ResourceIdentifier":
        return cls._join(path, Separator.PATH)

    @classmethod
    def from_qualified(cls, qualified: Sequence["ResourceIdentifier"]) -> "ResourceIdentifier":
        return cls._join(qualified, Separator.QUALIFIER)

    def format(self) -> str:
        return "".join(str(seg) for seg in self.segments)

    def __str__(self) -> str:
        return self.format()

    def contains_path(self) -> bool:
        return Separator.PATH in self.segments

    def contains_qualified(self) -> bool:
        return Separator.QUALIFIER in self.segments

    def _split(self, separator: Separator) -> List["ResourceIdentifier"]:
        parts: List[List[Segment]] = [[]]
        for seg in self.segments:
            if seg is separator:
                parts.append([])
            else:
                parts[-1].append(seg)
        return [ResourceIdentifier(tuple(p)) for p in parts]

    def path_split(self) -> List["ResourceIdentifier"]:
        return self._split(Separator.PATH)

    def qualifier_split(self) -> List["ResourceIdentifier"]:
        return self._split(Separator.QUALIFIER)

    def has_variables(self) -> bool:
        return any(isinstance(seg, VariableSegment) for seg in self.segments)

    def variable_names(self) -> Tuple[str, ...]:
        names: List[str] = []
        for seg in self.segments:
            if isinstance(seg, VariableSegment) and str(seg.name) not in names:
                names.append(str(seg.name))
        return tuple(names)

    def expand(self, variables: Mapping[str, Union[str, Identifier]]) -> "ResourceIdentifier":
        """
        Substitui todas as variáveis pelos valores de `variables`.

        Tudo ou nada: se alguma variável não tiver valor, levanta
        UnboundVariableError e nenhum resultado parcial é produzido.
        Cada valor precisa ser um Identifier válido.
        """
        bindings = {str(k): v for k, v in variables.items()}

        missing = [name for name in self.variable_names() if name not in bindings]
        if missing:
            raise UnboundVariableError(missing, value=self.format())

        segments: List[Segment] = []
        for seg in self.segments:
            if isinstance(seg, VariableSegment):
                value = bindings[str(seg.name)]
                if not isinstance(value, Identifier):
                    try:
                        value = Identifier.parse(str(value))
                    except InvalidIdentifierError as e:
                        raise InvalidIdentifierError(
                            e.value,
                            e.position,
                            e.char,
                            reason=f"value for variable {str(seg.name)!r} must be a valid identifier: {e.reason}",
                        ) from e
                seg = LiteralSegment(value)
            segments.append(seg)

        return ResourceIdentifier(tuple(_merge_literals(segments)))
