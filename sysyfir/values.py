"""Values, users of values and their use lists."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Use:
    """``user`` holds the value as its operand number ``arg_no``."""

    user: "User"
    arg_no: int


class Value:
    """Anything that can appear as an operand."""

    sigil = "%"

    def __init__(self, type, name=""):
        self.type = type
        self.name = name
        self.use_list = []

    def set_name(self, name):
        """Name the value if it has no name yet; return whether it was named."""
        if self.name:
            return False
        self.name = name
        return True

    def add_use(self, user, arg_no):
        self.use_list.append(Use(user, arg_no))

    def remove_use(self, user):
        self.use_list = [use for use in self.use_list if use.user is not user]

    def replace_all_use_with(self, new_value):
        for use in list(self.use_list):
            use.user.set_operand(use.arg_no, new_value)

    def as_operand(self):
        """Text of this value when it appears as an operand."""
        return f"{self.sigil}{self.name}"

    def print(self):
        return self.as_operand()

    def __repr__(self):
        return f"<{type(self).__name__} {self.as_operand()}>"


class User(Value):
    """A value that refers to other values through its operands."""

    def __init__(self, type, name="", num_ops=0):
        super().__init__(type, name)
        self._operands = [None] * num_ops

    @property
    def operands(self):
        return tuple(self._operands)

    @property
    def num_operands(self):
        return len(self._operands)

    def get_operand(self, index):
        return self._operands[index]

    def set_operand(self, index, value):
        if not 0 <= index < len(self._operands):
            raise IndexError(f"operand index {index} out of range")
        self._operands[index] = value
        value.add_use(self, index)

    def add_operand(self, value):
        self._operands.append(value)
        value.add_use(self, len(self._operands) - 1)

    def remove_use_of_ops(self):
        for operand in self._operands:
            if operand is not None:
                operand.remove_use(self)

    def remove_operands(self, first, last):
        """Drop operands ``first`` to ``last`` inclusive."""
        for operand in self._operands[first:last + 1]:
            if operand is not None:
                operand.remove_use(self)
        del self._operands[first:last + 1]


def print_as_op(value, print_ty=False):
    """Render ``value`` as an instruction operand, optionally with its type."""
    text = value.as_operand()
    if print_ty:
        return f"{value.type.print()} {text}"
    return text