"""Module-level variables."""

from .types import PointerType
from .values import User


class GlobalVariable(User):
    """A global whose value is a pointer to storage of the given type."""

    sigil = "@"

    def __init__(self, name, module, type, is_const, init_val=None):
        super().__init__(PointerType.get(type), name, 0 if init_val is None else 1)
        self.module = module
        self.is_const = is_const
        self.init = init_val
        module.add_global_variable(self)
        if init_val is not None:
            self.set_operand(0, init_val)

    def print(self):
        if self.init is None:
            raise ValueError(f"global @{self.name} has no initializer")
        kind = "constant" if self.is_const else "global"
        pointee = self.type.pointer_element_type.print()
        return f"{self.as_operand()} = {kind} {pointee} {self.init.print()}"