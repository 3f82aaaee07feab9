"""Total ordering of expressions used to find common subexpressions.

Two instructions compare equal under this ordering exactly when they compute
the same expression: the same opcode applied to the same operands. The
commutative operators ``add``, ``mul``, ``fadd`` and ``fmul`` are ordered
with a constant operand before a non-constant one, so ``x + 1`` and
``1 + x`` are the same expression. Constants are compared by value, other
operands by identity.
"""

from .constants import ConstantFloat, ConstantInt
from .opcodes import OpID

_COMMUTATIVE = frozenset({OpID.add, OpID.mul, OpID.fadd, OpID.fmul})

_INT_CONST = 1
_FLOAT_CONST = 2
_OTHER = 3


def const_expr_numbering(value):
    """Rank an operand: 1 for integer constants, 2 for float constants, 3 otherwise."""
    if isinstance(value, ConstantInt):
        return _INT_CONST
    if isinstance(value, ConstantFloat):
        return _FLOAT_CONST
    return _OTHER


def _operand_key(value):
    """Numbering of ``value`` followed by what it is compared on within that rank."""
    numbering = const_expr_numbering(value)
    if numbering == _OTHER:
        return numbering, id(value)
    return numbering, value.value


def expr_sort_key(inst):
    """A key whose ordering matches :func:`expr_less`.

    Binary instructions give ``(op, left rank, right rank, left, right)``,
    address computations give ``(op, ((rank, operand), ...))`` so that a
    shorter index list sorts before a longer one with the same prefix, and
    all other instructions are keyed on their first operand.
    """
    op = inst.op_id
    if inst.is_binary():
        left = _operand_key(inst.get_operand(0))
        right = _operand_key(inst.get_operand(1))
        if op in _COMMUTATIVE and left[0] > right[0]:
            left, right = right, left
        return (op, left[0], right[0], left[1], right[1])
    if inst.is_gep():
        return (op, tuple(_operand_key(operand) for operand in inst.operands))
    return (op, *_operand_key(inst.get_operand(0)))


def expr_less(a, b):
    """Whether expression ``a`` orders strictly before expression ``b``."""
    return expr_sort_key(a) < expr_sort_key(b)