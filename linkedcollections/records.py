"""Simple record types: students, grades and people."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Aluno:
    """A student identified by a number, with a name."""

    numero: int = 0
    nome: str = ""

    def __str__(self) -> str:
        return f"Aluno #{self.numero}: {self.nome}"


@dataclass(frozen=True)
class Nota:
    """A grade value belonging to the student with the given number."""

    numero_aluno: int = 0
    valor: float = 0.0


@dataclass(eq=False)
class Pessoa:
    """A person; equality, ordering and hashing use the name only."""

    name: str = ""
    age: int = 0
    gender: str = " "

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pessoa):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pessoa):
            return NotImplemented
        return self.name < other.name

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Pessoa):
            return NotImplemented
        return self.name > other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"Nome: {self.name}\nIdade: {self.age}\nGenero: {self.gender}"