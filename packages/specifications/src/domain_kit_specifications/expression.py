"""
Predicate expression trees.

A specification keeps its condition as a small immutable tree rather
than as an opaque function, so composition only ever builds new nodes
over existing ones::

    AndAlso(Predicate(is_adult), OrElse(Predicate(in_us), Predicate(in_ca)))

Every node evaluates against the same candidate value, so no parameter
rebinding is needed when two trees are joined.

Compilation flattens the tree into a linear program of calls, negations
and conditional jumps. The jumps carry the short-circuit of ``and`` /
``or``, and neither compiling nor running the program recurses, so chains
of any depth are supported.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")

CompiledPredicate = Callable[[T], bool]

# Program opcodes.
CALL = "call"
NEGATE = "negate"
JUMP_IF_FALSE = "jump_if_false"
JUMP_IF_TRUE = "jump_if_true"

Instruction = tuple[str, Any]


class PredicateExpression(ABC, Generic[T]):
    """Node of a predicate tree."""

    __slots__ = ()

    @property
    @abstractmethod
    def children(self) -> tuple[PredicateExpression[T], ...]: ...

    @abstractmethod
    def _describe(self, conditions: list[dict[str, Any]]) -> dict[str, Any]:
        """Dict for this node given its children's dicts."""
        ...

    @abstractmethod
    def _emit(self, program: list[Instruction], pending: list[Any]) -> None:
        """Append this node's code, scheduling children on *pending*."""
        ...

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def fold(self, combine: Callable[[PredicateExpression[T], list[R]], R]) -> R:
        """Post-order reduction of the tree without recursion."""
        done: dict[int, R] = {}
        stack: list[tuple[PredicateExpression[T], bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if id(node) in done:
                continue
            if expanded or not node.children:
                done[id(node)] = combine(node, [done[id(c)] for c in node.children])
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in node.children)
        return done[id(self)]

    @property
    def depth(self) -> int:
        return self.fold(lambda _, depths: 1 + max(depths, default=0))

    def to_dict(self) -> dict[str, Any]:
        return self.fold(lambda node, conditions: node._describe(conditions))

    def compile(self) -> CompiledPredicate[T]:
        """Build the executable form of this tree."""
        program: list[Instruction] = []
        pending: list[Any] = [self]
        while pending:
            task = pending.pop()
            if isinstance(task, PredicateExpression):
                task._emit(program, pending)
            else:
                task()
        return _Program(tuple(program))

    def __repr__(self) -> str:
        def render(node: PredicateExpression[T], parts: list[str]) -> str:
            if not node.children:
                return repr(node)
            return f"{type(node).__name__}({', '.join(parts)})"

        return self.fold(render)


class _Program:
    """Executable form produced by :meth:`PredicateExpression.compile`."""

    __slots__ = ("instructions",)

    def __init__(self, instructions: tuple[Instruction, ...]) -> None:
        self.instructions = instructions

    def __call__(self, candidate: Any) -> bool:
        instructions = self.instructions
        end = len(instructions)
        value = False
        pc = 0
        while pc < end:
            op, arg = instructions[pc]
            if op == CALL:
                value = bool(arg(candidate))
            elif op == NEGATE:
                value = not value
            elif (op == JUMP_IF_FALSE and not value) or (
                op == JUMP_IF_TRUE and value
            ):
                pc = arg
                continue
            pc += 1
        return value

    def __len__(self) -> int:
        return len(self.instructions)


class Predicate(PredicateExpression[T]):
    """Leaf wrapping a plain ``T -> bool`` callable."""

    __slots__ = ("function",)

    function: Callable[[T], Any]

    def __init__(self, function: Callable[[T], Any]) -> None:
        object.__setattr__(self, "function", function)

    @property
    def children(self) -> tuple[PredicateExpression[T], ...]:
        return ()

    def _describe(self, conditions: list[dict[str, Any]]) -> dict[str, Any]:
        name = getattr(self.function, "__qualname__", None) or repr(self.function)
        return {"op": "predicate", "name": name}

    def _emit(self, program: list[Instruction], pending: list[Any]) -> None:
        program.append((CALL, self.function))

    def __repr__(self) -> str:
        return f"Predicate({self._describe([])['name']})"


class _Binary(PredicateExpression[T]):
    __slots__ = ("left", "right")

    op: str
    jump: str

    left: PredicateExpression[T]
    right: PredicateExpression[T]

    def __init__(
        self, left: PredicateExpression[T], right: PredicateExpression[T]
    ) -> None:
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)

    @property
    def children(self) -> tuple[PredicateExpression[T], ...]:
        return (self.left, self.right)

    def _describe(self, conditions: list[dict[str, Any]]) -> dict[str, Any]:
        return {"op": self.op, "conditions": conditions}

    def _emit(self, program: list[Instruction], pending: list[Any]) -> None:
        # left; jump past right when left already decides; right
        def branch() -> None:
            index = len(program)
            program.append((self.jump, None))
            pending.append(
                lambda: program.__setitem__(index, (self.jump, len(program)))
            )
            pending.append(self.right)

        pending.append(branch)
        pending.append(self.left)


class AndAlso(_Binary[T]):
    """Logical AND; the right side only runs when the left side holds."""

    __slots__ = ()
    op = "and"
    jump = JUMP_IF_FALSE


class OrElse(_Binary[T]):
    """Logical OR; the right side only runs when the left side fails."""

    __slots__ = ()
    op = "or"
    jump = JUMP_IF_TRUE


class Negation(PredicateExpression[T]):
    """Logical NOT."""

    __slots__ = ("operand",)

    operand: PredicateExpression[T]

    def __init__(self, operand: PredicateExpression[T]) -> None:
        object.__setattr__(self, "operand", operand)

    @property
    def children(self) -> tuple[PredicateExpression[T], ...]:
        return (self.operand,)

    def _describe(self, conditions: list[dict[str, Any]]) -> dict[str, Any]:
        return {"op": "not", "conditions": conditions}

    def _emit(self, program: list[Instruction], pending: list[Any]) -> None:
        pending.append(lambda: program.append((NEGATE, None)))
        pending.append(self.operand)
