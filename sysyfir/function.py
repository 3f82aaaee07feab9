"""Functions, their arguments and the basic blocks that make up their bodies."""

from .opcodes import OpID
from .values import Value, print_as_op

_TERMINATORS = (OpID.ret, OpID.br)
_PREDS_PREFIX = " " * 48 + "; preds = "


class Function(Value):
    """A function of a module; without basic blocks it is a declaration."""

    sigil = "@"

    def __init__(self, type, name, module):
        super().__init__(type, name)
        self.module = module
        self.basic_blocks = []
        self._seq_cnt = 0
        module.add_function(self)
        self.arguments = [
            Argument(type.param_type(index), "", self, index)
            for index in range(type.num_of_args)
        ]

    @property
    def function_type(self):
        return self.type

    @property
    def return_type(self):
        return self.type.return_type

    @property
    def num_of_args(self):
        return self.type.num_of_args

    @property
    def num_basic_blocks(self):
        return len(self.basic_blocks)

    def is_declaration(self):
        return not self.basic_blocks

    @property
    def entry_block(self):
        """The first basic block, or None for a declaration."""
        return self.basic_blocks[0] if self.basic_blocks else None

    def add_basic_block(self, bb):
        self.basic_blocks.append(bb)

    def remove(self, bb):
        """Drop ``bb`` from the body and unlink it from its neighbours."""
        self.basic_blocks = [block for block in self.basic_blocks if block is not bb]
        for pre in bb.pre_basic_blocks:
            pre.remove_succ_basic_block(bb)
        for succ in bb.succ_basic_blocks:
            succ.remove_pre_basic_block(bb)

    def set_instr_name(self):
        """Name unnamed arguments, blocks and value-producing instructions."""
        seq = {}

        def assign(value, prefix):
            if value in seq:
                return
            number = len(seq) + self._seq_cnt
            if value.set_name(f"{prefix}{number}"):
                seq[value] = number

        for argument in self.arguments:
            assign(argument, "arg")
        for bb in self.basic_blocks:
            assign(bb, "label")
            for instr in bb.instructions:
                if not instr.is_void():
                    assign(instr, "op")
        self._seq_cnt += len(seq)

    def print(self):
        self.set_instr_name()
        declaration = self.is_declaration()
        head = "declare" if declaration else "define"
        if declaration:
            params = ", ".join(ty.print() for ty in self.type.params)
        else:
            params = ", ".join(arg.print() for arg in self.arguments)
        text = f"{head} {self.return_type.print()} {print_as_op(self)}({params})"
        if declaration:
            return text + "\n"
        body = "".join(bb.print() for bb in self.basic_blocks)
        return f"{text} {{\n{body}}}"


class Argument(Value):
    """A formal parameter of a function."""

    def __init__(self, type, name, parent, arg_no):
        super().__init__(type, name)
        self.parent = parent
        self.arg_no = arg_no

    def print(self):
        return f"{self.type.print()} %{self.name}"


class BasicBlock(Value):
    """A straight-line sequence of instructions with its CFG edges."""

    def __init__(self, module, name="", parent=None):
        super().__init__(module.label_type, name)
        self.parent = parent
        self.instructions = []
        self.pre_basic_blocks = []
        self.succ_basic_blocks = []
        if parent is not None:
            parent.add_basic_block(self)

    @property
    def module(self):
        return self.parent.module

    def add_instruction(self, instr):
        self.instructions.append(instr)

    def insert_instruction(self, index, instr):
        self.instructions.insert(index, instr)

    def add_instr_begin(self, instr):
        self.instructions.insert(0, instr)

    def find_instruction(self, instr):
        """Position of ``instr``; raises ValueError when it is not here."""
        for index, candidate in enumerate(self.instructions):
            if candidate is instr:
                return index
        raise ValueError(f"{instr!r} is not in block {self.name!r}")

    def delete_instr(self, instr):
        self.instructions = [i for i in self.instructions if i is not instr]
        instr.remove_use_of_ops()

    @property
    def terminator(self):
        """The closing ret or br, or None when the block is open."""
        if self.instructions and self.instructions[-1].op_id in _TERMINATORS:
            return self.instructions[-1]
        return None

    def add_pre_basic_block(self, bb):
        self.pre_basic_blocks.append(bb)

    def add_succ_basic_block(self, bb):
        self.succ_basic_blocks.append(bb)

    def remove_pre_basic_block(self, bb):
        self.pre_basic_blocks = [b for b in self.pre_basic_blocks if b is not bb]

    def remove_succ_basic_block(self, bb):
        self.succ_basic_blocks = [b for b in self.succ_basic_blocks if b is not bb]

    def erase_from_parent(self):
        self.parent.remove(self)

    def print(self):
        parts = [f"{self.name}:"]
        if self.pre_basic_blocks:
            parts.append(_PREDS_PREFIX)
            first = self.pre_basic_blocks[0]
            for pre in self.pre_basic_blocks:
                if pre is not first:
                    parts.append(", ")
                parts.append(print_as_op(pre))
        if self.parent is None:
            parts.append("\n; Error: Block without parent!")
        parts.append("\n")
        parts.extend(f"  {instr.print()}\n" for instr in self.instructions)
        return "".join(parts)